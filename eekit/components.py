"""
Standard component values and display formatting.

Provides the E12 standard-value search used by the LED calculator, and the
fixed display formats for resistances and capacitor codes.
"""

import math
from typing import Optional

from eekit.tables import E12_DECADE

# SI prefix table
_SI_PREFIXES = [
    (1e-12, 'p'),
    (1e-9,  'n'),
    (1e-6,  'µ'),
    (1e-3,  'm'),
    (1e0,   ''),
    (1e3,   'k'),
    (1e6,   'M'),
    (1e9,   'G'),
]


def next_e12_value(value: float) -> Optional[float]:
    """
    Smallest E12 value that is greater than or equal to `value`.

    The value is first normalized into the [10, 100) two-digit window to find
    its decade; candidates are the twelve E12 values of that decade plus the
    first value of the next one, so the result never falls below the request.

    Examples:
        next_e12_value(450.0) → 470.0
        next_e12_value(470.0) → 470.0
        next_e12_value(85.0)  → 100.0

    Returns None for non-positive or non-finite values.
    """
    if not math.isfinite(value) or value <= 0:
        return None

    multiplier = 1.0
    mantissa = value
    while mantissa >= 100:
        mantissa /= 10
        multiplier *= 10
    while mantissa < 10:
        mantissa *= 10
        multiplier /= 10

    for base in E12_DECADE + [100]:
        candidate = base * multiplier
        # Relative slack absorbs the rounding of the repeated ×/÷10 above
        if candidate >= value * (1 - 1e-12):
            return candidate
    return None


def number_text(value: float) -> str:
    """Shortest text for a float: integral values drop the '.0'."""
    if math.isfinite(value) and value == int(value):
        return str(int(value))
    return repr(float(value))


def format_ohms(value: float) -> str:
    """
    Resistance display: plain ohms below 1 kΩ, two decimals above.

    Examples:
        format_ohms(470)     → '470 Ω'
        format_ohms(4700)    → '4.70 kΩ'
        format_ohms(2.2e6)   → '2.20 MΩ'
    """
    if value >= 1e6:
        return f"{value / 1e6:.2f} MΩ"
    if value >= 1e3:
        return f"{value / 1e3:.2f} kΩ"
    return f"{number_text(value)} Ω"


def format_picofarads(value_pf: float) -> str:
    """
    Capacitor display from picofarads, switching to nF at 1000 pF and to µF
    at 1e6 pF.
    """
    if value_pf >= 1e6:
        return f"{value_pf / 1e6:.2f} µF"
    if value_pf >= 1e3:
        return f"{value_pf / 1e3:.2f} nF"
    return f"{number_text(value_pf)} pF"


def engineering_notation(value: float, unit: str = '', precision: int = 3) -> str:
    """
    Format a value in engineering notation with SI prefix.

    Examples:
        engineering_notation(1000, 'Ω')      → '1kΩ'
        engineering_notation(0.0047, 's')    → '4.7ms'
        engineering_notation(159.15, 'Hz')   → '159Hz'
    """
    if not math.isfinite(value):
        return f"{value}{unit}"
    if value == 0:
        return f"0{unit}"

    abs_value = abs(value)
    sign = '-' if value < 0 else ''

    for scale, prefix in reversed(_SI_PREFIXES):
        if abs_value >= scale:
            scaled = abs_value / scale
            if scaled == int(scaled):
                return f"{sign}{int(scaled)}{prefix}{unit}"
            return f"{sign}{scaled:.{precision}g}{prefix}{unit}"

    return f"{value:.{precision}g}{unit}"
