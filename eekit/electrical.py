"""
Power-system calculators.

Three-phase power, star/delta resistor network transforms, transformer
sizing, motor full-load and starting current, and power-factor correction.

Conventions:
    V line-to-line voltage (V), I line current (A), PF power factor (cos φ),
    efficiency in percent, powers in kW / kVA / kVAR.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from eekit.tables import (
    LOAD_TYPE_MULTIPLIERS,
    MOTOR_ASSUMED_RPM,
    MOTOR_POWER_UNITS,
    MOTOR_START_MULTIPLIERS,
    WATTS_PER_HP,
)
from eekit.values import Number, ieee, is_nonzero, to_float

logger = logging.getLogger(__name__)

SQRT3 = float(np.sqrt(3))

CONNECTIONS = ('star', 'delta')
PHASES = ('single', 'three')
STAR_DELTA_DIRECTIONS = ('delta-to-star', 'star-to-delta')
LOAD_UNITS = ('kw', 'kva')


def _check(name: str, value: str, allowed) -> None:
    if value not in allowed:
        raise ValueError(f"Unknown {name} '{value}'. Must be one of: {list(allowed)}")


def _phase_factor(phase: str) -> float:
    """√3 for three-phase line quantities, 1 for single-phase."""
    return SQRT3 if phase == 'three' else 1.0


# --- Three-phase power ---

@dataclass
class ThreePhaseResult:
    apparent: float         # kVA
    real: float             # kW, after efficiency
    reactive: float         # kVAR
    phase_voltage: float    # V
    phase_current: float    # A
    phase_angle: float      # degrees
    power_per_phase: float  # kW


def three_phase_power(
    voltage: Number,
    current: Number,
    pf: Number = 0.85,
    efficiency: Number = 95,
    connection: str = 'star',
) -> Optional[ThreePhaseResult]:
    """
    Balanced three-phase load from line voltage and current.

        S = √3·V·I / 1000                 (kVA)
        P = S · PF · efficiency           (kW)
        Q = S · sin(acos PF)              (kVAR)

    Star: phase voltage = V/√3, phase current = I.
    Delta: phase voltage = V, phase current = I/√3.

    A power factor outside [-1, 1] yields NaN angles and reactive power.
    """
    _check('connection', connection, CONNECTIONS)

    V = to_float(voltage)
    I = to_float(current)
    if not (is_nonzero(V) and is_nonzero(I)):
        return None

    PF = np.float64(to_float(pf))
    eff = to_float(efficiency) / 100

    with ieee():
        phi = np.arccos(PF)
        apparent = SQRT3 * V * I / 1000
        real = apparent * PF * eff
        reactive = apparent * np.sin(phi)

    if connection == 'star':
        phase_voltage, phase_current = V / SQRT3, I
    else:
        phase_voltage, phase_current = V, I / SQRT3

    return ThreePhaseResult(
        apparent=apparent,
        real=float(real),
        reactive=float(reactive),
        phase_voltage=phase_voltage,
        phase_current=phase_current,
        phase_angle=float(np.degrees(phi)),
        power_per_phase=float(real / 3),
    )


# --- Star / delta ---

@dataclass
class StarDeltaResult:
    ra: float
    rb: float
    rc: float


def star_delta_transform(direction: str, r1: Number, r2: Number, r3: Number) -> Optional[StarDeltaResult]:
    """
    Convert a resistor network between delta (Π) and star (T) form.

    Delta → star, with Σ = R1 + R2 + R3:
        Ra = R1·R3/Σ,  Rb = R1·R2/Σ,  Rc = R2·R3/Σ

    Star → delta, with N = R1·R2 + R2·R3 + R3·R1:
        Ra = N/R2,  Rb = N/R3,  Rc = N/R1
    """
    _check('direction', direction, STAR_DELTA_DIRECTIONS)

    R1, R2, R3 = (to_float(x) for x in (r1, r2, r3))
    if not (is_nonzero(R1) and is_nonzero(R2) and is_nonzero(R3)):
        return None

    with ieee():
        if direction == 'delta-to-star':
            total = np.float64(R1 + R2 + R3)
            ra, rb, rc = R1 * R3 / total, R1 * R2 / total, R2 * R3 / total
        else:
            num = R1 * R2 + R2 * R3 + R3 * R1
            ra, rb, rc = num / R2, num / R3, num / R1

    return StarDeltaResult(ra=float(ra), rb=float(rb), rc=float(rc))


# --- Transformer sizing ---

@dataclass
class TransformerResult:
    base_kva: float
    multiplier: float
    required_kva: float
    primary_current: float    # A
    secondary_current: float  # A


def transformer_sizing(
    phase: str,
    load: Number,
    load_unit: str,
    primary_v: Number,
    secondary_v: Number,
    pf: Number = 0.8,
    load_type: str = 'resistive',
) -> Optional[TransformerResult]:
    """
    Transformer rating for a load.

    A load given in kW is converted with the power factor (0.8 when unset);
    the rating is then oversized by load type: resistive ×1.0, motor ×1.25,
    nonlinear ×1.35 (rectifiers, UPS).

        I = kVA·1000 / (k·V),  k = √3 three-phase, 1 single-phase
    """
    _check('phase', phase, PHASES)
    _check('load unit', load_unit, LOAD_UNITS)
    _check('load type', load_type, LOAD_TYPE_MULTIPLIERS)

    L = to_float(load)
    V1 = to_float(primary_v)
    V2 = to_float(secondary_v)
    if not (is_nonzero(L) and is_nonzero(V1) and is_nonzero(V2)):
        return None

    base_kva = L
    if load_unit == 'kw':
        PF = to_float(pf)
        base_kva = L / (PF if is_nonzero(PF) else 0.8)

    multiplier = LOAD_TYPE_MULTIPLIERS[load_type]
    required = base_kva * multiplier
    k = _phase_factor(phase)

    return TransformerResult(
        base_kva=base_kva,
        multiplier=multiplier,
        required_kva=required,
        primary_current=required * 1000 / (k * V1),
        secondary_current=required * 1000 / (k * V2),
    )


# --- Motor ---

@dataclass
class MotorResult:
    power_w: float
    power_kw: float
    power_hp: float
    current: float        # A, full load
    start_current: float  # A
    torque: float         # N·m at the assumed speed


def motor_sizing(
    power: Number,
    unit: str,
    voltage: Number,
    phase: str = 'three',
    pf: Number = 0.85,
    efficiency: Number = 90,
    start: str = 'dol',
) -> Optional[MotorResult]:
    """
    Motor full-load current, starting current and torque.

        I = P / (V·PF·η)           single-phase
        I = P / (√3·V·PF·η)        three-phase

    Starting current multiples: DOL 6, star-delta 2, soft starter 3, VFD 1.
    Torque assumes a 1500 rpm shaft speed regardless of pole count:
        T = P·60 / (2π·1500)
    """
    _check('power unit', unit, MOTOR_POWER_UNITS)
    _check('phase', phase, PHASES)
    _check('starting method', start, MOTOR_START_MULTIPLIERS)

    P = to_float(power)
    V = to_float(voltage)
    PF = to_float(pf)
    eff = to_float(efficiency) / 100
    if not (is_nonzero(P) and is_nonzero(V)):
        return None
    if not (is_nonzero(PF) and is_nonzero(eff)):
        logger.debug("Motor sizing needs power factor and efficiency, got pf=%s eff=%s", pf, efficiency)
        return None

    watts = P * MOTOR_POWER_UNITS[unit]
    kw = watts / 1000

    current = watts / (_phase_factor(phase) * V * PF * eff)
    torque = (kw * 1000 * 60) / (2 * np.pi * MOTOR_ASSUMED_RPM)

    return MotorResult(
        power_w=watts,
        power_kw=kw,
        power_hp=watts / WATTS_PER_HP,
        current=current,
        start_current=current * MOTOR_START_MULTIPLIERS[start],
        torque=float(torque),
    )


# --- Power-factor correction ---

@dataclass
class PowerFactorResult:
    required_kvar: float
    kva_old: float
    kva_new: float
    current_old: float        # A
    current_new: float        # A
    current_reduction: float  # A
    percent_reduction: float  # %
    capacitance_uf: float     # µF per capacitor (per phase for three-phase)
    three_phase: bool


def power_factor_correction(
    power_kw: Number,
    old_pf: Number,
    new_pf: Number,
    voltage: Number,
    frequency: Number = 50,
    phase: str = 'three',
) -> Optional[PowerFactorResult]:
    """
    Capacitor bank to raise a load's power factor.

        Qc = P·(tan φ1 - tan φ2)                    (kVAR)
        C  = Qc·1000 / (ω·V²)                       single-phase
        C  = Qc·1000 / (3·ω·V²)                     three-phase, delta bank

    ω = 2πf. Three-phase banks are always taken as delta-connected, so each
    capacitor sees the line voltage.
    """
    _check('phase', phase, PHASES)

    P, pf1, pf2, V, f = (to_float(x) for x in (power_kw, old_pf, new_pf, voltage, frequency))
    if not all(is_nonzero(x) for x in (P, pf1, pf2, V, f)):
        return None

    three_phase = phase == 'three'

    with ieee():
        required_kvar = P * (np.tan(np.arccos(np.float64(pf1))) - np.tan(np.arccos(np.float64(pf2))))

    k = _phase_factor(phase)
    current_old = P * 1000 / (k * V * pf1)
    current_new = P * 1000 / (k * V * pf2)
    reduction = current_old - current_new

    omega = 2 * np.pi * f
    q_var = required_kvar * 1000
    if three_phase:
        capacitance = q_var / (3 * V * V * omega)
    else:
        capacitance = q_var / (V * V * omega)

    return PowerFactorResult(
        required_kvar=float(required_kvar),
        kva_old=P / pf1,
        kva_new=P / pf2,
        current_old=current_old,
        current_new=current_new,
        current_reduction=reduction,
        percent_reduction=reduction / current_old * 100,
        capacitance_uf=float(capacitance * 1e6),
        three_phase=three_phase,
    )
