"""
Tests for power-system calculators.

Validates:
1. Three-phase apparent/real/reactive power, star and delta phase values
2. Star/delta transforms, both directions and their inverse relation
3. Transformer sizing by load unit, load type and phase
4. Motor current, starting current and fixed-speed torque
5. Power-factor correction kVAR and capacitance
"""

import math

import numpy as np
import pytest
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(__file__))))

from eekit.electrical import (
    motor_sizing,
    power_factor_correction,
    star_delta_transform,
    three_phase_power,
    transformer_sizing,
)

SQRT3 = math.sqrt(3)


class TestThreePhase:
    """Test three-phase power."""

    def test_star_reference_case(self):
        """400 V, 10 A, PF 0.85, 95% → 6.928 kVA, 5.594 kW, 230.94 V phase."""
        result = three_phase_power(400, 10, 0.85, 95, 'star')

        assert result.apparent == pytest.approx(6.928, abs=1e-3)
        assert result.real == pytest.approx(5.594, abs=1e-3)
        assert result.phase_voltage == pytest.approx(230.94, abs=1e-2)
        assert result.phase_current == pytest.approx(10.0)

    def test_reactive_and_angle(self):
        result = three_phase_power(400, 10, 0.85, 95, 'star')
        phi = math.acos(0.85)
        assert result.reactive == pytest.approx(result.apparent * math.sin(phi))
        assert result.phase_angle == pytest.approx(math.degrees(phi))
        assert result.power_per_phase == pytest.approx(result.real / 3)

    def test_delta_phase_current(self):
        result = three_phase_power(400, 10, 0.85, 95, 'delta')
        assert result.phase_voltage == pytest.approx(400.0)
        assert result.phase_current == pytest.approx(10 / SQRT3)

    def test_unity_power_factor(self):
        result = three_phase_power(400, 10, 1.0, 100, 'star')
        assert result.reactive == pytest.approx(0.0, abs=1e-12)
        assert result.real == pytest.approx(result.apparent)

    def test_invalid_power_factor_is_nan(self):
        """PF above 1 has no angle; the result carries NaN instead of raising."""
        result = three_phase_power(400, 10, 1.5, 95, 'star')
        assert np.isnan(result.phase_angle)
        assert np.isnan(result.reactive)

    def test_missing(self):
        assert three_phase_power('', 10) is None
        assert three_phase_power(400, 0) is None

    def test_unknown_connection_raises(self):
        with pytest.raises(ValueError):
            three_phase_power(400, 10, 0.85, 95, 'zigzag')


class TestStarDelta:
    """Test star/delta resistor transforms."""

    def test_balanced_delta_to_star(self):
        """Balanced delta of 30 Ω becomes a star of 10 Ω."""
        result = star_delta_transform('delta-to-star', 30, 30, 30)
        assert (result.ra, result.rb, result.rc) == pytest.approx((10.0, 10.0, 10.0))

    def test_balanced_star_to_delta(self):
        result = star_delta_transform('star-to-delta', 10, 10, 10)
        assert (result.ra, result.rb, result.rc) == pytest.approx((30.0, 30.0, 30.0))

    def test_unbalanced_delta_to_star(self):
        """Ra = R1·R3/Σ, Rb = R1·R2/Σ, Rc = R2·R3/Σ."""
        result = star_delta_transform('delta-to-star', 10, 20, 30)
        assert result.ra == pytest.approx(300 / 60)
        assert result.rb == pytest.approx(200 / 60)
        assert result.rc == pytest.approx(600 / 60)

    def test_unbalanced_star_to_delta(self):
        """N = R1R2 + R2R3 + R3R1; Ra = N/R2, Rb = N/R3, Rc = N/R1."""
        result = star_delta_transform('star-to-delta', 10, 20, 30)
        n = 10 * 20 + 20 * 30 + 30 * 10
        assert result.ra == pytest.approx(n / 20)
        assert result.rb == pytest.approx(n / 30)
        assert result.rc == pytest.approx(n / 10)

    def test_missing(self):
        assert star_delta_transform('delta-to-star', 10, '', 30) is None


class TestTransformer:
    """Test transformer sizing."""

    def test_three_phase_motor_load_in_kw(self):
        """100 kW at PF 0.8 → 125 kVA, ×1.25 for motors → 156.25 kVA."""
        result = transformer_sizing('three', 100, 'kw', 11000, 400, 0.8, 'motor')

        assert result.base_kva == pytest.approx(125.0)
        assert result.multiplier == pytest.approx(1.25)
        assert result.required_kva == pytest.approx(156.25)
        assert result.primary_current == pytest.approx(156250 / (SQRT3 * 11000))
        assert result.secondary_current == pytest.approx(156250 / (SQRT3 * 400))

    def test_single_phase_kva_load(self):
        """kVA loads ignore the power factor."""
        result = transformer_sizing('single', 50, 'kva', 230, 115, 0.5, 'resistive')
        assert result.required_kva == pytest.approx(50.0)
        assert result.primary_current == pytest.approx(50000 / 230)
        assert result.secondary_current == pytest.approx(50000 / 115)

    def test_nonlinear_multiplier(self):
        result = transformer_sizing('three', 100, 'kva', 400, 400, None, 'nonlinear')
        assert result.required_kva == pytest.approx(135.0)

    def test_power_factor_defaults(self):
        """An unset PF on a kW load is taken as 0.8."""
        result = transformer_sizing('three', 80, 'kw', 400, 400, '', 'resistive')
        assert result.base_kva == pytest.approx(100.0)

    def test_missing(self):
        assert transformer_sizing('three', '', 'kw', 400, 400) is None
        assert transformer_sizing('three', 100, 'kw', 400, 0) is None

    def test_unknown_load_type_raises(self):
        with pytest.raises(ValueError):
            transformer_sizing('three', 100, 'kw', 400, 400, 0.8, 'capacitive')


class TestMotor:
    """Test motor sizing."""

    def test_three_phase_kw(self):
        """10 kW, 400 V, PF 0.85, η 90%, DOL."""
        result = motor_sizing(10, 'kw', 400, 'three', 0.85, 90, 'dol')

        current = 10000 / (SQRT3 * 400 * 0.85 * 0.9)
        assert result.power_w == pytest.approx(10000.0)
        assert result.power_hp == pytest.approx(10000 / 746)
        assert result.current == pytest.approx(current)
        assert result.start_current == pytest.approx(current * 6)

    def test_torque_at_fixed_speed(self):
        """Torque is computed at 1500 rpm whatever the motor."""
        result = motor_sizing(10, 'kw', 400)
        assert result.torque == pytest.approx(10000 * 60 / (2 * math.pi * 1500))
        assert result.torque == pytest.approx(63.66, abs=0.01)

    def test_horsepower_single_phase(self):
        result = motor_sizing(1, 'hp', 230, 'single', 0.8, 80, 'dol')
        assert result.power_w == pytest.approx(746.0)
        assert result.current == pytest.approx(746 / (230 * 0.8 * 0.8))

    @pytest.mark.parametrize('start, factor', [
        ('dol', 6), ('star-delta', 2), ('soft', 3), ('vfd', 1),
    ])
    def test_starting_methods(self, start, factor):
        result = motor_sizing(5, 'kw', 400, 'three', 0.85, 90, start)
        assert result.start_current == pytest.approx(result.current * factor)

    def test_missing(self):
        assert motor_sizing('', 'kw', 400) is None
        assert motor_sizing(10, 'kw', '') is None
        assert motor_sizing(10, 'kw', 400, 'three', 0, 90) is None


class TestPowerFactorCorrection:
    """Test power-factor correction."""

    def test_three_phase(self):
        """100 kW from PF 0.7 to 0.95 at 400 V 50 Hz."""
        result = power_factor_correction(100, 0.7, 0.95, 400, 50, 'three')

        kvar = 100 * (math.tan(math.acos(0.7)) - math.tan(math.acos(0.95)))
        assert result.required_kvar == pytest.approx(kvar)
        assert result.required_kvar == pytest.approx(69.2, abs=0.1)

        omega = 2 * math.pi * 50
        assert result.capacitance_uf == pytest.approx(kvar * 1000 / (3 * omega * 400 ** 2) * 1e6)
        assert result.three_phase

    def test_currents(self):
        result = power_factor_correction(100, 0.7, 0.95, 400, 50, 'three')
        i_old = 100000 / (SQRT3 * 400 * 0.7)
        i_new = 100000 / (SQRT3 * 400 * 0.95)
        assert result.current_old == pytest.approx(i_old)
        assert result.current_new == pytest.approx(i_new)
        assert result.current_reduction == pytest.approx(i_old - i_new)
        assert result.percent_reduction == pytest.approx((i_old - i_new) / i_old * 100)
        assert result.kva_old == pytest.approx(100 / 0.7)
        assert result.kva_new == pytest.approx(100 / 0.95)

    def test_single_phase_capacitance(self):
        """Single-phase banks take the whole kVAR on one capacitor."""
        single = power_factor_correction(10, 0.8, 0.95, 230, 60, 'single')
        omega = 2 * math.pi * 60
        assert single.capacitance_uf == pytest.approx(single.required_kvar * 1000 / (omega * 230 ** 2) * 1e6)
        assert not single.three_phase

    def test_missing(self):
        assert power_factor_correction(100, '', 0.95, 400) is None
        assert power_factor_correction(100, 0.7, 0.95, 0) is None
