"""
Tests for resistor color-code reading and marking.

Validates:
1. Band → value for 4-band and 5-band parts, with display formatting
2. Value → band normalization into the digit window
3. Rounding carry out of the window (99.6 → 100)
4. Round trip on the digit/multiplier representation
5. Tolerance color lookup and color names
"""

import pytest
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(__file__))))

from eekit.resistor import (
    ResistorBands,
    band_colors,
    bands_to_value,
    calculate_4band,
    calculate_5band,
    color_name,
    tolerance_color,
    valid_colors,
    value_to_bands,
)


class TestReadBands:
    """Test bands → value."""

    def test_4band_kilohms(self):
        reading = calculate_4band(4, 7, 2, 5)
        assert reading.ohms == pytest.approx(4700.0)
        assert reading.display == '4.70 kΩ'
        assert reading.tolerance == '±5%'

    def test_4band_plain_ohms(self):
        reading = calculate_4band(1, 0, 1, 5)
        assert reading.ohms == pytest.approx(100.0)
        assert reading.display == '100 Ω'

    def test_gold_multiplier(self):
        """Gold (-1) multiplies by 0.1."""
        reading = calculate_4band(4, 7, -1, 5)
        assert reading.ohms == pytest.approx(4.7)
        assert reading.display == '4.7 Ω'

    def test_silver_multiplier(self):
        """Silver (-2) multiplies by 0.01."""
        assert bands_to_value([1, 0], -2) == pytest.approx(0.1)

    def test_5band_megohms(self):
        reading = calculate_5band(1, 0, 0, 4, 1)
        assert reading.ohms == pytest.approx(1e6)
        assert reading.display == '1.00 MΩ'
        assert reading.tolerance == '±1%'

    def test_fractional_tolerance_text(self):
        reading = calculate_5band(2, 2, 1, 1, 0.25)
        assert reading.ohms == pytest.approx(2210.0)
        assert reading.tolerance == '±0.25%'


class TestMarkValue:
    """Test value → bands."""

    def test_4band(self):
        bands = value_to_bands(4700, 4, 5)
        assert (bands.b1, bands.b2, bands.multiplier) == (4, 7, 2)
        assert bands.tolerance == 5

    def test_5band(self):
        bands = value_to_bands(4700, 5, 1)
        assert (bands.b1, bands.b2, bands.b3, bands.multiplier) == (4, 7, 0, 1)

    def test_sub_ohm(self):
        """Values under 10 Ω shift to negative multipliers."""
        bands = value_to_bands(0.47, 4)
        assert (bands.b1, bands.b2, bands.multiplier) == (4, 7, -2)

    def test_rounds_to_digit_window(self):
        """1234 Ω only has two significant digits on a 4-band part."""
        bands = value_to_bands(1234, 4)
        assert (bands.b1, bands.b2, bands.multiplier) == (1, 2, 2)
        assert bands.ohms == pytest.approx(1200.0)

    def test_half_rounds_up(self):
        bands = value_to_bands(1250, 4)
        assert (bands.b1, bands.b2) == (1, 3)

    def test_overflow_carry_4band(self):
        """999.6 Ω: 99.96 rounds to 100, which must become 1, 0 and multiplier + 1."""
        bands = value_to_bands(999.6, 4)
        assert (bands.b1, bands.b2, bands.b3) == (1, 0, 0)
        # pre-correction shift is 1 (999.6 → 99.96)
        assert bands.multiplier == 2
        assert bands.ohms == pytest.approx(1000.0)

    def test_overflow_carry_5band(self):
        bands = value_to_bands(9996, 5)
        assert (bands.b1, bands.b2, bands.b3) == (1, 0, 0)
        assert bands.multiplier == 2
        assert bands.ohms == pytest.approx(10000.0)

    def test_string_input(self):
        bands = value_to_bands('220', 4)
        assert (bands.b1, bands.b2, bands.multiplier) == (2, 2, 1)

    @pytest.mark.parametrize('ohms', [0, -47, None, '', 'abc'])
    def test_rejects_non_positive(self, ohms):
        assert value_to_bands(ohms, 4) is None

    def test_bad_band_count_raises(self):
        with pytest.raises(ValueError):
            value_to_bands(100, 3)


class TestRoundTrip:
    """Marking then reading reproduces the same bands."""

    @pytest.mark.parametrize('ohms', [0.1, 0.47, 1, 4.7, 10, 33, 100, 220, 1234, 4700, 56000, 999.6, 1e6, 2.2e6])
    @pytest.mark.parametrize('count', [4, 5])
    def test_round_trip(self, ohms, count):
        bands = value_to_bands(ohms, count)
        again = value_to_bands(bands.ohms, count)
        assert again.digits == bands.digits
        assert again.multiplier == bands.multiplier

    def test_value_within_digit_precision(self):
        """The read value matches the original to the band's precision."""
        for ohms in (1234, 5678, 91000, 3.3):
            bands = value_to_bands(ohms, 4)
            assert bands.ohms == pytest.approx(ohms, rel=0.05)


class TestColors:
    """Test color lookup."""

    def test_gold_silver_tolerance(self):
        assert tolerance_color(5) == -1
        assert tolerance_color(10) == -2

    def test_precision_tolerances(self):
        assert tolerance_color(1) == 1
        assert tolerance_color(2) == 2
        assert tolerance_color(0.5) == 5
        assert tolerance_color(0.25) == 6
        assert tolerance_color(0.1) == 7
        assert tolerance_color(0.05) == 8

    def test_unknown_tolerance_raises(self):
        with pytest.raises(ValueError):
            tolerance_color(20)

    def test_color_names(self):
        assert color_name(0) == 'Black'
        assert color_name(7) == 'Violet'
        assert color_name(-1) == 'Gold'
        assert color_name(-2) == 'Silver'

    def test_band_colors(self):
        bands = value_to_bands(4700, 4, 5)
        assert band_colors(bands) == ['Yellow', 'Violet', 'Red', 'Gold']

    def test_band_colors_5band(self):
        bands = ResistorBands(b1=1, b2=0, b3=0, multiplier=-1, tolerance=1, bands=5)
        assert band_colors(bands) == ['Brown', 'Black', 'Black', 'Gold', 'Brown']

    def test_multiplier_without_color(self):
        """10^11 has no multiplier color."""
        bands = value_to_bands(1e12, 4, 5)
        assert band_colors(bands)[2] is None

    def test_valid_colors(self):
        assert valid_colors('digit') == list(range(10))
        assert -1 in valid_colors('multiplier')
        assert -2 in valid_colors('multiplier')
        assert sorted(valid_colors('tolerance')) == [0.05, 0.1, 0.25, 0.5, 1, 2, 5, 10]
