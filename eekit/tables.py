"""
Fixed lookup tables shared by the calculators.

Color codes follow IEC 60062 (resistor marking), the E12 decade follows
IEC 60063. Unit tables map every caller-facing unit onto one SI base unit
per family; the keys are the identifiers callers pass as selectors.
"""

from typing import Dict, List


# --- Resistor color codes ---

# Color ID → name. IDs 0-9 are digit/multiplier colors, -1/-2 are the
# Gold (×0.1) and Silver (×0.01) multiplier sentinels.
COLOR_NAMES: Dict[int, str] = {
    0: 'Black',
    1: 'Brown',
    2: 'Red',
    3: 'Orange',
    4: 'Yellow',
    5: 'Green',
    6: 'Blue',
    7: 'Violet',
    8: 'Gray',
    9: 'White',
    -1: 'Gold',
    -2: 'Silver',
}

COLOR_HEX: Dict[int, str] = {
    0: '#000000',
    1: '#8B4513',
    2: '#FF0000',
    3: '#FFA500',
    4: '#FFFF00',
    5: '#008000',
    6: '#0000FF',
    7: '#8B00FF',
    8: '#808080',
    9: '#FFFFFF',
    -1: '#FFD700',
    -2: '#C0C0C0',
}

GOLD = -1
SILVER = -2

DIGIT_COLORS: List[int] = list(range(10))
MULTIPLIER_COLORS: List[int] = DIGIT_COLORS + [GOLD, SILVER]

# Tolerance (percent) → color ID of the tolerance band
TOLERANCE_COLORS: Dict[float, int] = {
    1: 1,       # Brown
    2: 2,       # Red
    0.5: 5,     # Green
    0.25: 6,    # Blue
    0.1: 7,     # Violet
    0.05: 8,    # Gray
    5: GOLD,
    10: SILVER,
}

TOLERANCES: List[float] = [1, 2, 0.5, 0.25, 0.1, 0.05, 5, 10]


# --- Standard values ---

# E12 decade expressed as two significant digits (10..82)
E12_DECADE = [10, 12, 15, 18, 22, 27, 33, 39, 47, 56, 68, 82]

# Typical LED forward voltages (V) by color
LED_FORWARD_VOLTAGES: Dict[str, float] = {
    'red': 2.0,
    'green': 3.0,
    'blue': 3.2,
    'white': 3.4,
}


# --- Component unit scales (→ Ω, F, A, Ah) ---

RESISTANCE_UNITS: Dict[str, float] = {
    'Ω': 1.0,
    'kΩ': 1e3,
    'MΩ': 1e6,
}

CAPACITANCE_UNITS: Dict[str, float] = {
    'µF': 1e-6,
    'nF': 1e-9,
    'pF': 1e-12,
}

# Battery-life inputs are kept in mA / mAh; the Ah and A options scale up
CHARGE_UNITS: Dict[str, float] = {
    'mAh': 1.0,
    'Ah': 1000.0,
}

CURRENT_UNITS: Dict[str, float] = {
    'mA': 1.0,
    'A': 1000.0,
}

# Motor power → W
MOTOR_POWER_UNITS: Dict[str, float] = {
    'w': 1.0,
    'kw': 1000.0,
    'hp': 746.0,
}

# Inverter rating → W
INVERTER_POWER_UNITS: Dict[str, float] = {
    'w': 1.0,
    'kw': 1000.0,
}


# --- Electrical multipliers ---

# Motor starting current as a multiple of full-load current
MOTOR_START_MULTIPLIERS: Dict[str, float] = {
    'dol': 6.0,
    'star-delta': 2.0,
    'soft': 3.0,
    'vfd': 1.0,
}

# Transformer oversizing by load type (nonlinear covers harmonic heating)
LOAD_TYPE_MULTIPLIERS: Dict[str, float] = {
    'resistive': 1.0,
    'motor': 1.25,
    'nonlinear': 1.35,
}

MOTOR_ASSUMED_RPM = 1500.0
WATTS_PER_HP = 746.0

# Inverter sizing band relative to array power
INVERTER_BAND = {
    'low': 0.8,
    'center': 1.0,
    'max': 1.2,
}

# IPC-2221 trace constant per layer
IPC2221_K: Dict[str, float] = {
    'external': 0.048,
    'internal': 0.024,
}


# --- Converter tables ---

# SI prefix (linear), area (→ m²) and volume (→ m³) multipliers.
# Families share one table but use distinct key namespaces.
UNIT_MULTIPLIERS: Dict[str, float] = {
    'prefix_1e-12': 1e-12,
    'prefix_1e-9': 1e-9,
    'prefix_1e-6': 1e-6,
    'prefix_1e-3': 1e-3,
    'prefix_1': 1,
    'prefix_1e3': 1e3,
    'prefix_1e6': 1e6,

    'area_1e-6': 1e-6,   # mm²
    'area_1e-4': 1e-4,   # cm²
    'area_1': 1,         # m²
    'area_1e6': 1e6,     # km²

    'volume_1e-9': 1e-9,  # mm³
    'volume_1e-6': 1e-6,  # cm³
    'volume_1e-3': 1e-3,  # L
    'volume_1': 1,        # m³
}

# Imperial/SI maps, each to its category's base unit
LENGTH_UNITS: Dict[str, float] = {
    'm': 1, 'cm': 0.01, 'mm': 0.001, 'km': 1000,
    'in': 0.0254, 'ft': 0.3048, 'yd': 0.9144, 'mi': 1609.34,
}

WEIGHT_UNITS: Dict[str, float] = {
    'g': 0.001, 'kg': 1,
    'lb': 0.453592, 'oz': 0.0283495, 'st': 6.35029,
}

VOLUME_UNITS: Dict[str, float] = {
    'L': 1, 'mL': 0.001, 'm3': 1000, 'cm3': 0.001, 'mm3': 1e-6,
    'gal': 3.78541, 'qt': 0.946353, 'pt': 0.473176, 'floz': 0.0295735,
}

AREA_UNITS: Dict[str, float] = {
    'm2': 1, 'ha': 10000,
    'ft2': 0.092903, 'acre': 4046.86,
}

TEMPERATURE_UNITS = ('C', 'F', 'K')

IMPERIAL_CATEGORIES: Dict[str, Dict[str, float]] = {
    'length': LENGTH_UNITS,
    'weight': WEIGHT_UNITS,
    'volume': VOLUME_UNITS,
    'area': AREA_UNITS,
}

# Characters accepted per radix by the base converter
RADIX_DIGITS: Dict[int, str] = {
    2: '01',
    8: '01234567',
    10: '0123456789',
    16: '0123456789abcdefABCDEF',
}
