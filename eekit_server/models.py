"""Pydantic models for EEKit API requests and responses."""

from __future__ import annotations

import dataclasses
import math
from enum import Enum
from typing import Any, Literal, Optional

from pydantic import BaseModel, Field


# --- Enums ---

class LedColor(str, Enum):
    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    WHITE = "white"


class TimerMode(str, Enum):
    ASTABLE_NO_DIODE = "astable-no-diode"
    ASTABLE_WITH_DIODE = "astable-with-diode"
    MONOSTABLE = "monostable"


class OpAmpConfig(str, Enum):
    NON_INVERTING = "non-inverting"
    INVERTING = "inverting"
    DIFFERENTIAL = "differential"
    VOLTAGE_FOLLOWER = "voltage-follower"


class FilterType(str, Enum):
    LOWPASS = "lowpass"
    HIGHPASS = "highpass"
    BANDPASS = "bandpass"


class Layer(str, Enum):
    EXTERNAL = "external"
    INTERNAL = "internal"


class Connection(str, Enum):
    STAR = "star"
    DELTA = "delta"


class Phase(str, Enum):
    SINGLE = "single"
    THREE = "three"


class StarDeltaDirection(str, Enum):
    DELTA_TO_STAR = "delta-to-star"
    STAR_TO_DELTA = "star-to-delta"


class LoadUnit(str, Enum):
    KW = "kw"
    KVA = "kva"


class LoadType(str, Enum):
    RESISTIVE = "resistive"
    MOTOR = "motor"
    NONLINEAR = "nonlinear"


class MotorPowerUnit(str, Enum):
    W = "w"
    KW = "kw"
    HP = "hp"


class StartingMethod(str, Enum):
    DOL = "dol"
    STAR_DELTA = "star-delta"
    SOFT = "soft"
    VFD = "vfd"


class InverterUnit(str, Enum):
    W = "w"
    KW = "kw"


class ImperialCategory(str, Enum):
    LENGTH = "length"
    WEIGHT = "weight"
    VOLUME = "volume"
    AREA = "area"
    TEMPERATURE = "temperature"


# --- Response envelope ---

def _finite(value: Any) -> Any:
    """Recursively replace inf/NaN floats with None so the payload is valid JSON."""
    if isinstance(value, float):
        return float(value) if math.isfinite(value) else None
    if isinstance(value, dict):
        return {k: _finite(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_finite(v) for v in value]
    return value


class CalculationResponse(BaseModel):
    """A calculator result; `result` is null when the inputs were insufficient."""
    result: Optional[dict[str, Any]] = None
    display: Optional[str] = None

    @classmethod
    def from_result(cls, result: Any, display: Optional[str] = None) -> "CalculationResponse":
        if result is None:
            return cls(result=None)
        if dataclasses.is_dataclass(result):
            payload = dataclasses.asdict(result)
        elif isinstance(result, dict):
            payload = dict(result)
        else:
            payload = {'value': result}
        return cls(result=_finite(payload), display=display)


# --- Electronics ---

class OhmsLawRequest(BaseModel):
    voltage: Optional[float] = Field(None, description="Voltage (V)")
    current: Optional[float] = Field(None, description="Current (A)")
    resistance: Optional[float] = Field(None, description="Resistance (Ω)")
    power: Optional[float] = Field(None, description="Power (W)")


class LedRequest(BaseModel):
    supply_v: Optional[float] = Field(None, description="Supply voltage (V)")
    forward_v: Optional[float] = Field(None, description="LED forward voltage (V); overrides color")
    color: Optional[LedColor] = Field(None, description="LED color preset")
    current_ma: Optional[float] = Field(20.0, description="LED current (mA)")


class DividerRequest(BaseModel):
    vin: Optional[float] = Field(None, description="Input voltage (V)")
    r1: Optional[float] = None
    r1_unit: float = Field(1e3, gt=0, description="R1 unit factor (1, 1e3, 1e6)")
    r2: Optional[float] = None
    r2_unit: float = Field(1e3, gt=0, description="R2 unit factor (1, 1e3, 1e6)")


class CapacitorCodeRequest(BaseModel):
    code: str = Field(..., max_length=8, description="3-digit capacitor marking, e.g. 104")


class Timer555Request(BaseModel):
    mode: TimerMode = TimerMode.ASTABLE_NO_DIODE
    r1: Optional[float] = None
    r1_unit: float = Field(1e3, gt=0)
    r2: Optional[float] = None
    r2_unit: float = Field(1e3, gt=0)
    c: Optional[float] = None
    c_unit: float = Field(1e-6, gt=0, description="Capacitance unit factor (1e-6, 1e-9)")


class BatteryLifeRequest(BaseModel):
    capacity: Optional[float] = Field(None, description="Capacity (mAh, or Ah with unit 1000)")
    capacity_unit: float = Field(1.0, gt=0)
    current: Optional[float] = Field(None, description="Load current (mA, or A with unit 1000)")
    current_unit: float = Field(1.0, gt=0)
    efficiency: Optional[float] = Field(85.0, description="Efficiency (%)")


class RCTimeRequest(BaseModel):
    r: Optional[float] = None
    r_unit: float = Field(1e3, gt=0)
    c: Optional[float] = None
    c_unit: float = Field(1e-6, gt=0)


class OpAmpRequest(BaseModel):
    config: OpAmpConfig = OpAmpConfig.NON_INVERTING
    r1: Optional[float] = None
    r1_unit: float = Field(1e3, gt=0)
    r2: Optional[float] = None
    r2_unit: float = Field(1e3, gt=0)
    v1: Optional[float] = Field(None, description="Differential input V1 (V)")
    v2: Optional[float] = Field(None, description="Differential input V2 (V)")


class ComparatorRequest(BaseModel):
    v_plus: Optional[float] = None
    v_minus: Optional[float] = None
    vcc: Optional[float] = 12.0
    vee: Optional[float] = 0.0


class FilterRequest(BaseModel):
    filter_type: FilterType = FilterType.LOWPASS
    r: Optional[float] = None
    r_unit: float = Field(1e3, gt=0)
    c: Optional[float] = None
    c_unit: float = Field(1e-6, gt=0)
    r2: Optional[float] = Field(None, description="Band-pass low-pass stage resistor")
    r2_unit: float = Field(1e3, gt=0)
    c2: Optional[float] = Field(None, description="Band-pass low-pass stage capacitor")
    c2_unit: float = Field(1e-6, gt=0)


class PcbTraceRequest(BaseModel):
    current: Optional[float] = Field(None, description="Trace current (A)")
    temp_rise: float = Field(10.0, gt=0, description="Allowed temperature rise (°C)")
    thickness_mm: float = Field(0.035, gt=0, description="Copper thickness (mm), 0.035 = 1 oz")
    layer: Layer = Layer.EXTERNAL


# --- Electrical ---

class ThreePhaseRequest(BaseModel):
    voltage: Optional[float] = Field(None, description="Line voltage (V)")
    current: Optional[float] = Field(None, description="Line current (A)")
    pf: Optional[float] = Field(0.85, description="Power factor")
    efficiency: Optional[float] = Field(95.0, description="Efficiency (%)")
    connection: Connection = Connection.STAR


class StarDeltaRequest(BaseModel):
    direction: StarDeltaDirection = StarDeltaDirection.DELTA_TO_STAR
    r1: Optional[float] = None
    r2: Optional[float] = None
    r3: Optional[float] = None


class TransformerRequest(BaseModel):
    phase: Phase = Phase.THREE
    load: Optional[float] = None
    load_unit: LoadUnit = LoadUnit.KW
    primary_v: Optional[float] = None
    secondary_v: Optional[float] = None
    pf: Optional[float] = 0.8
    load_type: LoadType = LoadType.RESISTIVE


class MotorRequest(BaseModel):
    power: Optional[float] = None
    unit: MotorPowerUnit = MotorPowerUnit.KW
    voltage: Optional[float] = None
    phase: Phase = Phase.THREE
    pf: Optional[float] = 0.85
    efficiency: Optional[float] = Field(90.0, description="Efficiency (%)")
    start: StartingMethod = StartingMethod.DOL


class PowerFactorRequest(BaseModel):
    power_kw: Optional[float] = None
    old_pf: Optional[float] = None
    new_pf: Optional[float] = None
    voltage: Optional[float] = None
    frequency: float = Field(50.0, gt=0, description="Supply frequency (Hz)")
    phase: Phase = Phase.THREE


# --- Solar ---

class SolarArrayRequest(BaseModel):
    energy_consumption: Optional[float] = Field(None, description="Daily consumption (kWh)")
    irradiation: Optional[float] = Field(None, description="Peak sun hours (kWh/m²/day)")
    efficiency: Optional[float] = Field(80.0, description="System efficiency (%)")
    panel_power: Optional[float] = Field(None, description="Panel rating (W)")
    system_losses: Optional[float] = Field(0.0, ge=0, description="System losses (%)")


class InverterRequest(BaseModel):
    array: SolarArrayRequest
    max_power: Optional[float] = Field(None, description="Inverter rating")
    unit: InverterUnit = InverterUnit.W


class BatteryBankRequest(BaseModel):
    daily_load: Optional[float] = Field(None, description="Daily load (kWh)")
    autonomy_days: Optional[float] = None
    dod: Optional[float] = Field(50.0, description="Depth of discharge (%)")
    system_voltage: float = Field(12.0, gt=0, description="Bank voltage (12, 24, 48 V)")
    battery_ah: Optional[float] = Field(100.0, description="Single battery capacity (Ah)")


class MonthlyRequest(BaseModel):
    usage: list[Optional[float]] = Field(..., max_length=12, description="Monthly usage (kWh)")
    tariff: list[Optional[float]] = Field(..., max_length=12, description="Monthly tariff (per kWh)")


# --- Resistor ---

class ResistorDecodeRequest(BaseModel):
    """Bands → value."""
    b1: int = Field(..., ge=0, le=9)
    b2: int = Field(..., ge=0, le=9)
    b3: Optional[int] = Field(None, ge=0, le=9, description="Third digit, 5-band only")
    multiplier: int = Field(..., ge=-2, le=9)
    tolerance: float = 5.0


class ResistorEncodeRequest(BaseModel):
    """Value → bands."""
    value: Optional[float] = None
    unit: float = Field(1.0, gt=0, description="Unit factor (1, 1e3, 1e6)")
    bands: int = Field(4, ge=4, le=5)
    tolerance: float = 5.0


class ResistorBandsResponse(BaseModel):
    b1: int
    b2: int
    b3: int
    multiplier: int
    tolerance: float
    bands: int
    ohms: float
    display: str
    colors: list[Optional[str]]


class ResistorEncodeResponse(BaseModel):
    result: Optional[ResistorBandsResponse] = None


# --- Converters ---

class PrefixRequest(BaseModel):
    value: Optional[float] = None
    from_unit: str = Field(..., description="e.g. prefix_1e3, area_1e-4, volume_1e-3")
    to_unit: str


class ImperialRequest(BaseModel):
    value: Optional[float] = None
    from_unit: str
    to_unit: str
    category: ImperialCategory


class BaseConversionRequest(BaseModel):
    text: str = Field("", max_length=256)
    base: Literal[2, 8, 10, 16] = 10
