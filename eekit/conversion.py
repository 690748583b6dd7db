"""
Unit and number-base conversion.

    convert_prefix     SI prefixes, area (→ m²) and volume (→ m³)
    convert_imperial   length, weight, volume, area via a base unit per
                       category; temperature via Celsius
    convert_base       one integer viewed in binary, octal, decimal and hex
"""

import logging
from dataclasses import dataclass
from typing import Optional

from eekit.tables import IMPERIAL_CATEGORIES, RADIX_DIGITS, TEMPERATURE_UNITS, UNIT_MULTIPLIERS
from eekit.values import Number, is_set, to_float

logger = logging.getLogger(__name__)


def convert_prefix(value: Number, from_unit: str, to_unit: str) -> Optional[float]:
    """
    value × multiplier(from) / multiplier(to).

    Keys come from UNIT_MULTIPLIERS ('prefix_1e3', 'area_1e-4',
    'volume_1e-3', ...). Families are not checked against each other;
    converting kilo to cm² is plain arithmetic on the two factors.

    Example:
        convert_prefix(1, 'prefix_1e3', 'prefix_1e-3') → 1000000.0
    """
    v = to_float(value)
    if from_unit not in UNIT_MULTIPLIERS or to_unit not in UNIT_MULTIPLIERS:
        logger.debug("Unknown unit key %s → %s", from_unit, to_unit)
        return None
    if not is_set(v):
        return None
    return v * UNIT_MULTIPLIERS[from_unit] / UNIT_MULTIPLIERS[to_unit]


def format_prefix_result(value: float) -> str:
    """
    Exponential notation (4 decimals) outside [1e-3, 1e4], otherwise six
    significant digits with trailing zeros removed.

    Examples:
        format_prefix_result(1e6)    → '1.0000e+6'
        format_prefix_result(0.25)   → '0.25'
        format_prefix_result(1200.0) → '1200'
    """
    if value != 0 and (abs(value) < 1e-3 or abs(value) > 1e4):
        mantissa, exponent = f"{value:.4e}".split('e')
        return f"{mantissa}e{int(exponent):+d}"
    text = f"{value:.6g}" if value != 0 else '0'
    if 'e' not in text and '.' in text:
        text = text.rstrip('0').rstrip('.')
    return text


def convert_temperature(value: Number, from_unit: str, to_unit: str) -> float:
    """
    Affine temperature conversion through Celsius.

        F → C: (v - 32)·5/9        K → C: v - 273.15
        C → F: c·9/5 + 32          C → K: c + 273.15
    """
    for unit in (from_unit, to_unit):
        if unit not in TEMPERATURE_UNITS:
            raise ValueError(f"Unknown temperature unit '{unit}'. Must be one of: {list(TEMPERATURE_UNITS)}")

    v = to_float(value)
    if from_unit == 'F':
        celsius = (v - 32) * 5 / 9
    elif from_unit == 'K':
        celsius = v - 273.15
    else:
        celsius = v

    if to_unit == 'F':
        return celsius * 9 / 5 + 32
    if to_unit == 'K':
        return celsius + 273.15
    return celsius


def convert_imperial(value: Number, from_unit: str, to_unit: str, category: str) -> Optional[float]:
    """
    Convert within one physical category.

    Categories: 'length' (→ m), 'weight' (→ kg), 'volume' (→ L),
    'area' (→ m²), 'temperature' (via °C).

    Returns None when the value is unset.
    """
    v = to_float(value)
    if not is_set(v):
        return None

    if category == 'temperature':
        return convert_temperature(v, from_unit, to_unit)

    if category not in IMPERIAL_CATEGORIES:
        raise ValueError(
            f"Unknown category '{category}'. Must be one of: "
            f"{list(IMPERIAL_CATEGORIES.keys()) + ['temperature']}"
        )
    units = IMPERIAL_CATEGORIES[category]
    for unit in (from_unit, to_unit):
        if unit not in units:
            raise ValueError(f"Unknown {category} unit '{unit}'. Must be one of: {list(units.keys())}")

    return v * units[from_unit] / units[to_unit]


@dataclass
class NumberSystemValue:
    """One non-negative integer in four radix views; all empty when cleared."""
    decimal: str = ''
    binary: str = ''
    octal: str = ''
    hexadecimal: str = ''

    @property
    def value(self) -> Optional[int]:
        return int(self.decimal) if self.decimal else None

    @classmethod
    def from_int(cls, n: int) -> 'NumberSystemValue':
        if n < 0:
            raise ValueError(f"Number systems hold non-negative integers, got {n}")
        return cls(
            decimal=str(n),
            binary=format(n, 'b'),
            octal=format(n, 'o'),
            hexadecimal=format(n, 'X'),
        )


def clean_digits(text: str, base: int) -> str:
    """Drop every character that is not a digit of `base`."""
    if base not in RADIX_DIGITS:
        raise ValueError(f"Base must be one of {list(RADIX_DIGITS.keys())}, got {base}")
    allowed = RADIX_DIGITS[base]
    return ''.join(ch for ch in (text or '') if ch in allowed)


def convert_base(text: str, base: int) -> NumberSystemValue:
    """
    Parse one radix view and recompute all four.

    Invalid characters for the base are stripped first ('1021' in binary
    reads as '101'). An empty result clears every view.

    Example:
        convert_base('ff', 16) → decimal '255', binary '11111111',
                                 octal '377', hexadecimal 'FF'
    """
    clean = clean_digits(text, base)
    if not clean:
        return NumberSystemValue()
    return NumberSystemValue.from_int(int(clean, base))
