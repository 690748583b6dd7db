"""
Off-grid / grid-tie solar system sizing.

The array is sized from daily consumption, peak sun hours and system
losses; inverter and battery bank sizing build on the array result.

    gross energy (kWh/day) = consumption / efficiency / (1 - losses)
    array power (kW)       = gross energy / irradiation (peak sun hours)
    panels                 = ceil(array W / panel W)
"""

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence

from eekit.tables import INVERTER_BAND, INVERTER_POWER_UNITS
from eekit.values import Number, is_nonzero, is_set, to_float

DAYS_PER_MONTH = 30


@dataclass
class SolarResult:
    daily_energy_needed: float   # kWh/day
    energy_with_losses: float    # kWh/day the array must produce
    array_power_kw: float
    array_power_w: float
    panel_count: int
    inverter_low: float          # kW
    inverter_center: float       # kW
    inverter_max: float          # kW


def solar_array(
    energy_consumption: Number,
    irradiation: Number,
    efficiency: Number,
    panel_power: Number,
    system_losses: Number = 0,
) -> Optional[SolarResult]:
    """
    Size a PV array.

    Args:
        energy_consumption: Daily consumption (kWh/day)
        irradiation: Peak sun hours (kWh/m²/day)
        efficiency: System efficiency (%)
        panel_power: Rating of one panel (W)
        system_losses: Additional losses (%), wiring, soiling, temperature

    Returns:
        SolarResult with the inverter sizing band at 80/100/120 % of array
        power, or None when a required input is missing.
    """
    consumption = to_float(energy_consumption)
    sun_hours = to_float(irradiation)
    eff = to_float(efficiency) / 100
    panel = to_float(panel_power)
    losses = to_float(system_losses)
    losses = losses / 100 if is_set(losses) else 0.0

    if not all(is_nonzero(x) for x in (consumption, sun_hours, eff, panel)):
        return None
    if losses >= 1:
        return None

    gross = consumption / eff / (1 - losses)
    array_kw = gross / sun_hours
    array_w = array_kw * 1000

    return SolarResult(
        daily_energy_needed=consumption,
        energy_with_losses=gross,
        array_power_kw=array_kw,
        array_power_w=array_w,
        panel_count=math.ceil(array_w / panel),
        inverter_low=array_kw * INVERTER_BAND['low'],
        inverter_center=array_kw * INVERTER_BAND['center'],
        inverter_max=array_kw * INVERTER_BAND['max'],
    )


@dataclass
class InverterResult:
    inverter_kw: float
    count_low: int
    count_center: int
    count_max: int


def inverter_count(array: SolarResult, max_power: Number, unit: str = 'w') -> Optional[InverterResult]:
    """Number of inverters of a given rating needed across the sizing band."""
    if unit not in INVERTER_POWER_UNITS:
        raise ValueError(f"Unknown inverter unit '{unit}'. Must be one of: {list(INVERTER_POWER_UNITS.keys())}")

    rating = to_float(max_power)
    if array is None or not is_nonzero(rating) or rating < 0:
        return None

    size_kw = rating * INVERTER_POWER_UNITS[unit] / 1000
    return InverterResult(
        inverter_kw=size_kw,
        count_low=math.ceil(array.inverter_low / size_kw),
        count_center=math.ceil(array.inverter_center / size_kw),
        count_max=math.ceil(array.inverter_max / size_kw),
    )


@dataclass
class BatteryBankResult:
    total_energy_kwh: float   # load over the autonomy period
    capacity_kwh: float       # after depth-of-discharge derating
    total_ah: float           # at system voltage
    battery_count: int


def battery_bank(
    daily_load: Number,
    autonomy_days: Number,
    dod: Number,
    system_voltage: Number,
    battery_ah: Number,
) -> Optional[BatteryBankResult]:
    """
    Battery bank for a number of days without sun.

        Ah    = (daily load · days / DoD) · 1000 / system voltage
        count = ceil(Ah / single battery Ah)

    Args:
        daily_load: kWh/day
        autonomy_days: days
        dod: usable depth of discharge (%)
        system_voltage: 12, 24 or 48 V typically
        battery_ah: capacity of one battery (Ah)
    """
    load, days, depth, volts, ah = (
        to_float(x) for x in (daily_load, autonomy_days, dod, system_voltage, battery_ah)
    )
    if not all(is_nonzero(x) for x in (load, days, depth, volts, ah)):
        return None

    energy = load * days
    capacity = energy / (depth / 100)
    total_ah = capacity * 1000 / volts
    return BatteryBankResult(
        total_energy_kwh=energy,
        capacity_kwh=capacity,
        total_ah=total_ah,
        battery_count=math.ceil(total_ah / ah),
    )


@dataclass
class MonthlyConsumption:
    months_used: int
    total_usage: float         # kWh over the valid months
    average_monthly: float     # kWh/month
    average_daily: float       # kWh/day, feeds solar_array()
    average_tariff: float      # cost per kWh, usage weighted
    annual_cost: float


def monthly_consumption(usage: Sequence[Number], tariff: Sequence[Number]) -> Optional[MonthlyConsumption]:
    """
    Average consumption from up to twelve monthly bills.

    Only months with both a positive usage (kWh) and a positive tariff are
    counted. The daily figure assumes 30-day months.
    """
    total_usage = 0.0
    total_cost = 0.0
    valid = 0
    for use, price in zip(_numbers(usage), _numbers(tariff)):
        if use > 0 and price > 0:
            total_usage += use
            total_cost += use * price
            valid += 1

    if valid == 0:
        return None

    average_monthly = total_usage / valid
    average_tariff = total_cost / total_usage
    return MonthlyConsumption(
        months_used=valid,
        total_usage=total_usage,
        average_monthly=average_monthly,
        average_daily=average_monthly / DAYS_PER_MONTH,
        average_tariff=average_tariff,
        annual_cost=average_monthly * 12 * average_tariff,
    )


def _numbers(values: Sequence[Number]) -> List[float]:
    # NaN compares False against 0, so unset months drop out of the totals
    return [to_float(v) for v in values]
