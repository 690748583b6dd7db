"""
Input values and the "unset" convention.

Callers hand the calculators floats, ints, None or raw strings. Anything
that does not parse as a number becomes NaN, which every calculator reads
as "this quantity is not known". No calculator raises on bad input.
"""

import math
from typing import Optional, Union

import numpy as np

Number = Union[float, int, str, None]

UNSET = float('nan')


def to_float(value: Number) -> float:
    """Parse a caller value into a float, NaN when unset or unparseable."""
    if value is None:
        return UNSET
    if isinstance(value, bool):
        return UNSET
    if isinstance(value, (int, float, np.floating, np.integer)):
        return float(value)
    text = str(value).strip()
    if not text:
        return UNSET
    try:
        return float(text)
    except ValueError:
        return UNSET


def is_set(value: float) -> bool:
    """True when the value carries a number (NaN means unset)."""
    return not math.isnan(value)


def is_nonzero(value: float) -> bool:
    """True when the value is set and not zero, the usual 'required' guard."""
    return is_set(value) and value != 0


def scale(value: Number, factor: float = 1.0) -> float:
    """Parse and apply a unit factor, e.g. scale('4.7', 1e3) → 4700.0 Ω."""
    return to_float(value) * factor


def finite_or_none(value: float) -> Optional[float]:
    """Map inf/NaN to None for renderers and JSON encoders."""
    if value is None or not math.isfinite(value):
        return None
    return float(value)


def ieee() -> np.errstate:
    """
    Context in which numpy arithmetic follows IEEE-754 silently:
    x/0 → ±inf, 0/0 and sqrt(-x) → NaN, without warnings.
    """
    return np.errstate(divide='ignore', invalid='ignore', over='ignore')
