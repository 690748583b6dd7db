"""
Small-signal electronics calculators.

LED series resistor, voltage divider, ceramic capacitor codes, 555 timer,
battery runtime, RC time constant, op-amp gain, comparator output, RC
filters and IPC-2221 PCB trace width.

Every calculator parses and scales its inputs first (resistances to Ω,
capacitances to F) and returns None when a required input is unset or
zero. Unit factors default to the form defaults: kΩ for resistors and µF
for capacitors.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from eekit.components import engineering_notation, format_picofarads, next_e12_value
from eekit.tables import IPC2221_K, LED_FORWARD_VOLTAGES
from eekit.values import Number, UNSET, ieee, is_nonzero, is_set, scale, to_float

logger = logging.getLogger(__name__)

TIMER_MODES = ('astable-no-diode', 'astable-with-diode', 'monostable')
OPAMP_CONFIGS = ('non-inverting', 'inverting', 'differential', 'voltage-follower')
FILTER_TYPES = ('lowpass', 'highpass', 'bandpass')

# 555 charge/discharge constants: ln(2) for astable, ln(3) for monostable
_LN2 = 0.693
_LN3 = 1.1

# Comparator output swing reached in practice, as a fraction of the rail
_RAIL_FRACTION = 0.85


# --- LED resistor ---

@dataclass
class LedResult:
    resistance: float   # Ω, exact requirement
    power: float        # W dissipated in the resistor
    nearest: float      # Ω, next E12 value at or above the requirement


def led_forward_voltage(color: str) -> float:
    """Typical forward voltage for an LED color ('red', 'green', 'blue', 'white')."""
    key = color.lower()
    if key not in LED_FORWARD_VOLTAGES:
        raise ValueError(
            f"Unknown LED color '{color}'. Must be one of: {list(LED_FORWARD_VOLTAGES.keys())}"
        )
    return LED_FORWARD_VOLTAGES[key]


def led_resistor(supply_v: Number, forward_v: Number, current_ma: Number) -> Optional[LedResult]:
    """
    Series resistor for an LED.

        R = (Vsupply - Vforward) / I

    Args:
        supply_v: Supply voltage (V)
        forward_v: LED forward voltage (V)
        current_ma: LED current (mA)

    Returns:
        LedResult, or None when the supply does not exceed the forward
        voltage or the current is missing.
    """
    supply = to_float(supply_v)
    forward = to_float(forward_v)
    current = to_float(current_ma) / 1000  # mA → A

    if not (is_set(supply) and is_set(forward) and is_set(current)):
        return None
    if supply <= forward or current <= 0:
        logger.debug("LED resistor rejected: supply=%s forward=%s current=%s", supply, forward, current)
        return None

    drop = supply - forward
    resistance = drop / current
    return LedResult(
        resistance=resistance,
        power=drop * current,
        nearest=next_e12_value(resistance),
    )


# --- Voltage divider ---

@dataclass
class DividerResult:
    vout: float      # V
    current: float   # A through the divider


def voltage_divider(
    vin: Number,
    r1: Number,
    r2: Number,
    r1_unit: float = 1e3,
    r2_unit: float = 1e3,
) -> Optional[DividerResult]:
    """Unloaded divider output, Vout = Vin · R2 / (R1 + R2)."""
    V = to_float(vin)
    R1 = scale(r1, r1_unit)
    R2 = scale(r2, r2_unit)
    if not (is_nonzero(V) and is_nonzero(R1) and is_nonzero(R2)):
        return None

    total = R1 + R2
    with ieee():
        vout = np.float64(V) * R2 / total
        current = np.float64(V) / total
    return DividerResult(vout=float(vout), current=float(current))


# --- Capacitor code ---

@dataclass
class CapacitorCode:
    value_pf: float
    display: str

    @property
    def farads(self) -> float:
        return self.value_pf * 1e-12


def capacitor_code(code: str) -> Optional[CapacitorCode]:
    """
    Decode a 3-digit ceramic capacitor marking.

        value(pF) = (10·d1 + d2) × 10^d3

    Example:
        capacitor_code('104') → 100000 pF, '100.00 nF'
    """
    code = (code or '').strip()
    if len(code) != 3 or not code.isdigit():
        return None

    d1, d2, exponent = (int(ch) for ch in code)
    value_pf = float((d1 * 10 + d2) * 10 ** exponent)
    return CapacitorCode(value_pf=value_pf, display=format_picofarads(value_pf))


# --- 555 timer ---

@dataclass
class Timer555Result:
    mode: str
    t_high: float = UNSET     # s
    t_low: float = UNSET      # s
    period: float = UNSET     # s
    frequency: float = UNSET  # Hz
    duty: float = UNSET       # %
    pulse: float = UNSET      # s, monostable only

    @property
    def description(self) -> str:
        if self.mode == 'monostable':
            return f"Pulse width {engineering_notation(self.pulse, 's')}"
        return (
            f"{engineering_notation(self.frequency, 'Hz')} at "
            f"{self.duty:.1f}% duty cycle"
        )


def timer_555(
    mode: str,
    r1: Number,
    r2: Number,
    c: Number,
    r1_unit: float = 1e3,
    r2_unit: float = 1e3,
    c_unit: float = 1e-6,
) -> Optional[Timer555Result]:
    """
    NE555 timing.

    Astable, no diode:     t_high = 0.693·(R1+R2)·C,  t_low = 0.693·R2·C
    Astable, with diode:   t_high = 0.693·R1·C,       t_low = 0.693·R2·C
    Monostable:            pulse  = 1.1·R1·C

    Frequency = 1/(t_high + t_low), duty = t_high/(t_high + t_low) in percent.
    """
    if mode not in TIMER_MODES:
        raise ValueError(f"Unknown 555 mode '{mode}'. Must be one of: {list(TIMER_MODES)}")

    R1 = scale(r1, r1_unit)
    R2 = scale(r2, r2_unit)
    C = scale(c, c_unit)
    if not (is_nonzero(R1) and is_nonzero(C)):
        return None

    if mode == 'monostable':
        return Timer555Result(mode=mode, pulse=_LN3 * R1 * C)

    if not is_nonzero(R2):
        return None

    if mode == 'astable-no-diode':
        t_high = _LN2 * (R1 + R2) * C
    else:
        t_high = _LN2 * R1 * C
    t_low = _LN2 * R2 * C

    period = np.float64(t_high + t_low)
    with ieee():
        frequency = 1 / period
        duty = t_high / period * 100
    return Timer555Result(
        mode=mode,
        t_high=t_high,
        t_low=t_low,
        period=float(period),
        frequency=float(frequency),
        duty=float(duty),
    )


# --- Battery life ---

def battery_life(
    capacity: Number,
    current: Number,
    efficiency: Number = 85,
    capacity_unit: float = 1.0,
    current_unit: float = 1.0,
) -> Optional[float]:
    """
    Runtime in hours, capacity · efficiency / load current.

    Capacity is in mAh and current in mA by default; pass 1000 as the unit
    factor for Ah or A.
    """
    cap = scale(capacity, capacity_unit)
    load = scale(current, current_unit)
    eff = to_float(efficiency) / 100
    if not (is_nonzero(cap) and is_nonzero(load) and is_set(eff)):
        return None
    return cap * eff / load


# --- RC time constant ---

@dataclass
class RCResult:
    tau: float        # s
    five_tau: float   # s, ~99.3% charged


def rc_time_constant(
    r: Number,
    c: Number,
    r_unit: float = 1e3,
    c_unit: float = 1e-6,
) -> Optional[RCResult]:
    """τ = R·C."""
    R = scale(r, r_unit)
    C = scale(c, c_unit)
    if not (is_nonzero(R) and is_nonzero(C)):
        return None
    tau = R * C
    return RCResult(tau=tau, five_tau=5 * tau)


# --- Op-amp ---

@dataclass
class OpAmpResult:
    config: str
    gain: float
    vout: Optional[float] = None  # differential only


def opamp_gain(
    config: str,
    r1: Number = None,
    r2: Number = None,
    r1_unit: float = 1e3,
    r2_unit: float = 1e3,
    v1: Number = None,
    v2: Number = None,
) -> Optional[OpAmpResult]:
    """
    Ideal op-amp closed-loop gain.

        non-inverting:      G = 1 + R2/R1
        inverting:          G = -R2/R1
        voltage-follower:   G = 1
        differential:       Vout = (R2/R1)·(V2 - V1), unset V1/V2 read as 0 V
    """
    if config not in OPAMP_CONFIGS:
        raise ValueError(f"Unknown op-amp configuration '{config}'. Must be one of: {list(OPAMP_CONFIGS)}")

    if config == 'voltage-follower':
        return OpAmpResult(config=config, gain=1.0)

    R1 = scale(r1, r1_unit)
    R2 = scale(r2, r2_unit)
    if not (is_nonzero(R1) and is_set(R2)):
        return None

    ratio = R2 / R1
    if config == 'non-inverting':
        return OpAmpResult(config=config, gain=1 + ratio)
    if config == 'inverting':
        return OpAmpResult(config=config, gain=-ratio)

    V1 = to_float(v1)
    V2 = to_float(v2)
    V1 = V1 if is_set(V1) else 0.0
    V2 = V2 if is_set(V2) else 0.0
    return OpAmpResult(config=config, gain=ratio, vout=ratio * (V2 - V1))


@dataclass
class ComparatorResult:
    state: str        # 'high', 'low' or 'equal'
    ideal: float      # V, rail-to-rail output
    practical: float  # V, typical non rail-to-rail swing


def comparator_output(
    v_plus: Number,
    v_minus: Number,
    vcc: Number = 12,
    vee: Number = 0,
) -> Optional[ComparatorResult]:
    """Open-loop comparator: Vcc when V+ > V-, Vee when V+ < V-, 0 when equal."""
    vp, vm, hi, lo = (to_float(x) for x in (v_plus, v_minus, vcc, vee))
    if not all(is_set(x) for x in (vp, vm, hi, lo)):
        return None

    if vp == vm:
        return ComparatorResult(state='equal', ideal=0.0, practical=0.0)
    if vp > vm:
        return ComparatorResult(state='high', ideal=hi, practical=hi * _RAIL_FRACTION)
    return ComparatorResult(state='low', ideal=lo, practical=lo * _RAIL_FRACTION)


# --- RC filters ---

@dataclass
class FilterResult:
    filter_type: str
    fc: float = UNSET          # Hz, low/high-pass cutoff
    omega: float = UNSET       # rad/s
    f_low: float = UNSET       # Hz, band-pass high-pass stage
    f_high: float = UNSET      # Hz, band-pass low-pass stage
    center: float = UNSET      # Hz
    bandwidth: float = UNSET   # Hz
    q: float = UNSET
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _cutoff(R: float, C: float) -> float:
    return float(1.0 / (2 * np.pi * R * C))


def rc_filter(
    filter_type: str,
    r: Number,
    c: Number,
    r_unit: float = 1e3,
    c_unit: float = 1e-6,
    r2: Number = None,
    c2: Number = None,
    r2_unit: float = 1e3,
    c2_unit: float = 1e-6,
) -> Optional[FilterResult]:
    """
    First-order RC filter cutoff, or a two-stage band-pass.

    Low/high-pass:  fc = 1/(2πRC)
    Band-pass:      stage 1 (R, C) is the high-pass giving f_low,
                    stage 2 (R2, C2) is the low-pass giving f_high;
                    center = √(f_low·f_high), bandwidth = f_high - f_low,
                    Q = center/bandwidth.

    A band-pass whose f_low is not below f_high comes back with `error` set
    instead of a negative bandwidth.
    """
    if filter_type not in FILTER_TYPES:
        raise ValueError(f"Unknown filter type '{filter_type}'. Must be one of: {list(FILTER_TYPES)}")

    R = scale(r, r_unit)
    C = scale(c, c_unit)
    if not (is_nonzero(R) and is_nonzero(C)):
        return None

    if filter_type != 'bandpass':
        fc = _cutoff(R, C)
        return FilterResult(filter_type=filter_type, fc=fc, omega=float(2 * np.pi * fc))

    R2 = scale(r2, r2_unit)
    C2 = scale(c2, c2_unit)
    if not (is_nonzero(R2) and is_nonzero(C2)):
        return None

    f_low = _cutoff(R, C)
    f_high = _cutoff(R2, C2)
    if f_low >= f_high:
        logger.debug("Band-pass rejected: f_low=%.3f Hz >= f_high=%.3f Hz", f_low, f_high)
        return FilterResult(
            filter_type=filter_type,
            f_low=f_low,
            f_high=f_high,
            error="f_low must be < f_high",
        )

    center = float(np.sqrt(f_low * f_high))
    bandwidth = f_high - f_low
    return FilterResult(
        filter_type=filter_type,
        f_low=f_low,
        f_high=f_high,
        center=center,
        bandwidth=bandwidth,
        q=center / bandwidth,
    )


# --- PCB trace width ---

@dataclass
class TraceResult:
    area_mils2: float   # cross-section, mil²
    width_mils: float
    width_mm: float


def pcb_trace_width(
    current: Number,
    temp_rise: Number = 10,
    thickness_mm: Number = 0.035,
    layer: str = 'external',
) -> Optional[TraceResult]:
    """
    Minimum trace width per IPC-2221.

        area(mil²) = (I / (k · ΔT^0.44))^(1/0.725)
        width      = area / thickness

    k is 0.048 for external and 0.024 for internal layers. 1 oz copper is
    0.035 mm thick.
    """
    if layer not in IPC2221_K:
        raise ValueError(f"Unknown layer '{layer}'. Must be one of: {list(IPC2221_K.keys())}")

    I = to_float(current)
    dT = to_float(temp_rise)
    thickness = to_float(thickness_mm)
    if not (is_set(I) and is_set(dT) and is_set(thickness)):
        return None
    if I <= 0 or dT <= 0 or thickness <= 0:
        return None

    k = IPC2221_K[layer]
    area = (I / (k * dT ** 0.44)) ** (1 / 0.725)
    thickness_mils = thickness / 0.0254
    width_mils = area / thickness_mils
    return TraceResult(
        area_mils2=area,
        width_mils=width_mils,
        width_mm=width_mils * 0.0254,
    )
