"""
EEKit Calculation Engine

Electrical and electronics engineering formulas: Ohm's law, resistor color
codes, LED/divider/555/RC/filter math, three-phase power, transformer,
motor and power-factor-correction sizing, solar array/inverter/battery
sizing, and unit/number-base conversion.

Every function is pure: inputs in, result out, None when the inputs are
insufficient. Nothing here touches storage or presentation.
"""

from eekit.ohms_law import OhmsLawResult, solve_ohms_law
from eekit.resistor import (
    ResistorBands,
    ResistorReading,
    band_colors,
    bands_to_value,
    calculate_4band,
    calculate_5band,
    color_name,
    tolerance_color,
    valid_colors,
    value_to_bands,
)
from eekit.electronics import (
    battery_life,
    capacitor_code,
    comparator_output,
    led_forward_voltage,
    led_resistor,
    opamp_gain,
    pcb_trace_width,
    rc_filter,
    rc_time_constant,
    timer_555,
    voltage_divider,
)
from eekit.electrical import (
    motor_sizing,
    power_factor_correction,
    star_delta_transform,
    three_phase_power,
    transformer_sizing,
)
from eekit.solar import battery_bank, inverter_count, monthly_consumption, solar_array
from eekit.conversion import (
    NumberSystemValue,
    convert_base,
    convert_imperial,
    convert_prefix,
    convert_temperature,
    format_prefix_result,
)
from eekit.components import engineering_notation, format_ohms, format_picofarads, next_e12_value

__version__ = "0.1.0"
