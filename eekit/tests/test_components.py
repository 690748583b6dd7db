"""
Tests for standard values and display formatting.

Validates:
1. E12 search never rounds below the requested value
2. Resistance and capacitance display thresholds
3. Engineering notation formatting
4. Input parsing into the unset convention
"""

import math
import pytest
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(__file__))))

from eekit.components import (
    engineering_notation,
    format_ohms,
    format_picofarads,
    next_e12_value,
    number_text,
)
from eekit.tables import E12_DECADE
from eekit.values import finite_or_none, is_nonzero, is_set, scale, to_float


class TestNextE12:
    """Test E12 standard-value search."""

    def test_exact_value(self):
        assert next_e12_value(470.0) == pytest.approx(470.0)

    def test_rounds_up(self):
        assert next_e12_value(450.0) == pytest.approx(470.0)
        assert next_e12_value(4.8) == pytest.approx(5.6)

    def test_crosses_decade(self):
        assert next_e12_value(85.0) == pytest.approx(100.0)
        assert next_e12_value(8300.0) == pytest.approx(10000.0)

    def test_sub_ohm(self):
        assert next_e12_value(0.5) == pytest.approx(0.56)

    def test_never_below(self):
        for value in (1.01, 13, 19.5, 230, 999, 47001, 3.3e6):
            assert next_e12_value(value) >= value

    def test_all_decade_values_are_fixed_points(self):
        for base in E12_DECADE:
            assert next_e12_value(base * 100.0) == pytest.approx(base * 100.0)

    @pytest.mark.parametrize('value', [0, -10, float('nan'), float('inf')])
    def test_invalid(self, value):
        assert next_e12_value(value) is None


class TestDisplay:
    """Test display formatting."""

    def test_ohms(self):
        assert format_ohms(470) == '470 Ω'
        assert format_ohms(4.7) == '4.7 Ω'
        assert format_ohms(1000) == '1.00 kΩ'
        assert format_ohms(4700) == '4.70 kΩ'
        assert format_ohms(2.2e6) == '2.20 MΩ'

    def test_picofarads(self):
        assert format_picofarads(22) == '22 pF'
        assert format_picofarads(1000) == '1.00 nF'
        assert format_picofarads(100000) == '100.00 nF'
        assert format_picofarads(1e6) == '1.00 µF'

    def test_number_text(self):
        assert number_text(100.0) == '100'
        assert number_text(0.25) == '0.25'


class TestEngineeringNotation:
    """Test engineering notation formatting."""

    def test_kilo(self):
        assert engineering_notation(1000, 'Ω') == '1kΩ'

    def test_milli(self):
        assert engineering_notation(0.0047, 's') == '4.7ms'

    def test_micro(self):
        assert engineering_notation(0.0001, 'F') == '100µF'

    def test_plain(self):
        assert engineering_notation(159.155, 'Hz') == '159Hz'

    def test_zero(self):
        assert engineering_notation(0, 'V') == '0V'

    def test_negative(self):
        assert engineering_notation(-0.5, 'V') == '-500mV'

    def test_non_finite(self):
        assert engineering_notation(float('inf'), 'A') == 'infA'


class TestValues:
    """Test the unset convention."""

    def test_parse(self):
        assert to_float('12.5') == pytest.approx(12.5)
        assert to_float(' 3 ') == pytest.approx(3.0)
        assert to_float(7) == pytest.approx(7.0)

    @pytest.mark.parametrize('raw', [None, '', '   ', 'abc', '1.2.3', True])
    def test_unset(self, raw):
        assert math.isnan(to_float(raw))

    def test_is_set(self):
        assert is_set(0.0)
        assert not is_set(float('nan'))

    def test_is_nonzero(self):
        assert is_nonzero(1.0)
        assert not is_nonzero(0.0)
        assert not is_nonzero(float('nan'))

    def test_scale(self):
        assert scale('4.7', 1e3) == pytest.approx(4700.0)
        assert math.isnan(scale('', 1e3))

    def test_finite_or_none(self):
        assert finite_or_none(1.5) == 1.5
        assert finite_or_none(float('inf')) is None
        assert finite_or_none(float('nan')) is None
