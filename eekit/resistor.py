"""
Resistor color-code encoding and decoding.

Reading a resistor (bands → value):
    ohms = (concatenated significant digits) × 10^multiplier

    4-band: digit, digit, multiplier, tolerance
    5-band: digit, digit, digit, multiplier, tolerance

Marking a resistor (value → bands) normalizes the value into the
significant-digit window [10, 100) for 4-band or [100, 1000) for 5-band,
tracking the power-of-ten shift, and rounds to the nearest integer. A
rounding carry out of the window (99.6 → 100) is folded back into the
multiplier.

Multiplier IDs -1 and -2 are Gold (×0.1) and Silver (×0.01). Tolerances are
percentages; 5 % and 10 % are drawn Gold and Silver but keep their
percentage meaning.
"""

import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Sequence

from eekit.components import format_ohms, number_text
from eekit.tables import (
    COLOR_HEX,
    COLOR_NAMES,
    DIGIT_COLORS,
    MULTIPLIER_COLORS,
    TOLERANCE_COLORS,
    TOLERANCES,
)
from eekit.values import Number, to_float

logger = logging.getLogger(__name__)

# Significant-digit window per band count: (lower bound, upper bound)
_DIGIT_WINDOW = {
    4: (10, 100),
    5: (100, 1000),
}


@dataclass
class ResistorBands:
    """Band values of a resistor. b3 is 0 and unused for 4-band parts."""
    b1: int
    b2: int
    b3: int
    multiplier: int
    tolerance: float
    bands: int = 4

    @property
    def digits(self) -> List[int]:
        if self.bands == 5:
            return [self.b1, self.b2, self.b3]
        return [self.b1, self.b2]

    @property
    def color_ids(self) -> List[int]:
        """Color ID per band, in reading order."""
        return self.digits + [self.multiplier, tolerance_color(self.tolerance)]

    @property
    def ohms(self) -> float:
        return bands_to_value(self.digits, self.multiplier)


@dataclass
class ResistorReading:
    """Value read from a set of bands."""
    ohms: float
    display: str
    tolerance: str


def tolerance_color(tolerance: float) -> int:
    """
    Color ID of the tolerance band.

    5 % → Gold (-1), 10 % → Silver (-2); the precision tolerances use the
    standard colors (1 % Brown, 2 % Red, 0.5 % Green, 0.25 % Blue,
    0.1 % Violet, 0.05 % Gray). These are the IEC band colors, not the
    tolerance value reused as a color ID.
    """
    if tolerance not in TOLERANCE_COLORS:
        raise ValueError(f"Unknown tolerance {tolerance}%. Must be one of: {TOLERANCES}")
    return TOLERANCE_COLORS[tolerance]


def color_name(color_id: int) -> str:
    """Name of a color ID, e.g. 4 → 'Yellow', -1 → 'Gold'."""
    if color_id not in COLOR_NAMES:
        raise ValueError(f"Unknown color ID {color_id}")
    return COLOR_NAMES[color_id]


def color_hex(color_id: int) -> str:
    if color_id not in COLOR_HEX:
        raise ValueError(f"Unknown color ID {color_id}")
    return COLOR_HEX[color_id]


def valid_colors(role: str) -> List[float]:
    """Allowed IDs for a band role: 'digit', 'multiplier' or 'tolerance'."""
    if role == 'digit':
        return list(DIGIT_COLORS)
    if role == 'multiplier':
        return list(MULTIPLIER_COLORS)
    if role == 'tolerance':
        return list(TOLERANCES)
    raise ValueError(f"Unknown band role '{role}'. Must be one of: digit, multiplier, tolerance")


def band_colors(bands: ResistorBands) -> List[Optional[str]]:
    """
    Color names for every band, in reading order. A multiplier outside
    Silver..White (very large or very small values) has no color and
    comes back as None.
    """
    return [COLOR_NAMES.get(c) for c in bands.color_ids]


def bands_to_value(digits: Sequence[int], multiplier: int) -> float:
    """
    Ohm value from significant digits and a multiplier exponent.

    Examples:
        bands_to_value([4, 7], 2)     → 4700.0
        bands_to_value([1, 0, 0], -1) → 10.0
    """
    significant = 0
    for d in digits:
        significant = significant * 10 + d
    # Divide for negative exponents: 47 / 10 is exact where 47 * 0.1 is not
    if multiplier >= 0:
        return float(significant * 10 ** multiplier)
    return significant / 10 ** -multiplier


def _reading(digits: Sequence[int], multiplier: int, tolerance: float) -> ResistorReading:
    ohms = bands_to_value(digits, multiplier)
    return ResistorReading(
        ohms=ohms,
        display=format_ohms(ohms),
        tolerance=f"±{number_text(tolerance)}%",
    )


def calculate_4band(b1: int, b2: int, multiplier: int, tolerance: float) -> ResistorReading:
    """Read a 4-band resistor."""
    return _reading([b1, b2], multiplier, tolerance)


def calculate_5band(b1: int, b2: int, b3: int, multiplier: int, tolerance: float) -> ResistorReading:
    """Read a 5-band resistor."""
    return _reading([b1, b2, b3], multiplier, tolerance)


def _round_half_up(x: float) -> int:
    # round() would send 12.5 to 12; band digits round halves up
    return int(math.floor(x + 0.5))


def value_to_bands(ohms: Number, bands: int = 4, tolerance: float = 5) -> Optional[ResistorBands]:
    """
    Find the color bands for a resistance.

    Args:
        ohms: Resistance in ohms.
        bands: 4 or 5.
        tolerance: Tolerance in percent, carried through to the result.

    Returns:
        ResistorBands, or None when the value is unset or not positive.

    Example:
        value_to_bands(4700, 4) → b1=4, b2=7, multiplier=2 (Yellow Violet Red)
        value_to_bands(999.6, 4) → b1=1, b2=0, multiplier=2 (1 kΩ)
    """
    if bands not in _DIGIT_WINDOW:
        raise ValueError(f"Band count must be 4 or 5, got {bands}")

    value = to_float(ohms)
    if not math.isfinite(value) or value <= 0:
        logger.debug("No color code for non-positive resistance %s", ohms)
        return None

    lower, upper = _DIGIT_WINDOW[bands]

    multiplier = 0
    normalized = value
    while normalized < lower:
        normalized *= 10
        multiplier -= 1
    while normalized >= upper:
        normalized /= 10
        multiplier += 1

    significant = _round_half_up(normalized)

    # Rounding carry: 99.6 → 100 leaves the window, becomes 10 × 10^(m+1)
    if significant >= upper:
        return ResistorBands(
            b1=1, b2=0, b3=0,
            multiplier=multiplier + 1,
            tolerance=tolerance,
            bands=bands,
        )

    digits = [int(ch) for ch in str(significant)]
    return ResistorBands(
        b1=digits[0],
        b2=digits[1],
        b3=digits[2] if bands == 5 else 0,
        multiplier=multiplier,
        tolerance=tolerance,
        bands=bands,
    )
