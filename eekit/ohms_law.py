"""
Ohm's law resolution from any two of V, I, R, P.

    V = I·R        P = V·I = I²·R = V²/R

The pairings are checked in a fixed order and the first pair whose members
are both set determines the other two quantities:

    1. (V, I)   R = V/I         P = V·I
    2. (V, R)   I = V/R         P = V²/R
    3. (V, P)   I = P/V         R = V²/P
    4. (I, R)   V = I·R         P = I²·R
    5. (I, P)   V = P/I         R = P/I²
    6. (R, P)   V = √(P·R)      I = √(P/R)

Supplying more than two values is not a conflict: the earliest pair wins.
Zero divisors and negative radicands come back as inf/NaN.
"""

import logging
from dataclasses import dataclass

import numpy as np

from eekit.values import UNSET, Number, ieee, is_set, to_float

logger = logging.getLogger(__name__)


@dataclass
class OhmsLawResult:
    """All four quantities; every field is NaN when the input was insufficient."""
    voltage: float
    current: float
    resistance: float
    power: float

    @property
    def resolved(self) -> bool:
        return is_set(self.voltage)


def _pair_vi(V, I, R, P):
    return V, I, V / I, V * I


def _pair_vr(V, I, R, P):
    return V, V / R, R, (V * V) / R


def _pair_vp(V, I, R, P):
    return V, P / V, (V * V) / P, P


def _pair_ir(V, I, R, P):
    return I * R, I, R, I * I * R


def _pair_ip(V, I, R, P):
    return P / I, I, P / (I * I), P


def _pair_rp(V, I, R, P):
    return np.sqrt(P * R), np.sqrt(P / R), R, P


# (index of first known, index of second known, solver), in priority order.
# Indices follow the (V, I, R, P) argument order.
_PAIRINGS = [
    (0, 1, _pair_vi),
    (0, 2, _pair_vr),
    (0, 3, _pair_vp),
    (1, 2, _pair_ir),
    (1, 3, _pair_ip),
    (2, 3, _pair_rp),
]


def solve_ohms_law(
    voltage: Number = None,
    current: Number = None,
    resistance: Number = None,
    power: Number = None,
) -> OhmsLawResult:
    """
    Resolve V, I, R and P from any two of them.

    Args:
        voltage: Volts, or None/'' when unknown.
        current: Amps, or None/'' when unknown.
        resistance: Ohms, or None/'' when unknown.
        power: Watts, or None/'' when unknown.

    Returns:
        OhmsLawResult with all four quantities, or all NaN when fewer than
        two inputs are set.

    Example:
        solve_ohms_law(12, 2) → V=12, I=2, R=6, P=24
    """
    known = [np.float64(to_float(x)) for x in (voltage, current, resistance, power)]

    for a, b, solve in _PAIRINGS:
        if is_set(known[a]) and is_set(known[b]):
            with ieee():
                V, I, R, P = solve(*known)
            return OhmsLawResult(
                voltage=float(V),
                current=float(I),
                resistance=float(R),
                power=float(P),
            )

    logger.debug("Ohm's law needs two known values, got %s", known)
    return OhmsLawResult(UNSET, UNSET, UNSET, UNSET)
