"""
Tests for solar system sizing.

Validates:
1. Array power and panel count with efficiency and losses
2. Inverter sizing band and inverter count
3. Battery bank capacity and count
4. Monthly bill averaging
"""

import pytest
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(__file__))))

from eekit.solar import battery_bank, inverter_count, monthly_consumption, solar_array


# 10 kWh/day, 5 peak sun hours, 80% efficiency, 400 W panels, 10% losses
HOUSE = dict(
    energy_consumption=10,
    irradiation=5,
    efficiency=80,
    panel_power=400,
    system_losses=10,
)


class TestSolarArray:
    """Test array sizing."""

    def test_gross_energy(self):
        """10 / 0.8 / 0.9 = 13.89 kWh/day."""
        result = solar_array(**HOUSE)
        assert result.daily_energy_needed == pytest.approx(10.0)
        assert result.energy_with_losses == pytest.approx(10 / 0.8 / 0.9)

    def test_array_power_and_panels(self):
        result = solar_array(**HOUSE)
        assert result.array_power_kw == pytest.approx(10 / 0.8 / 0.9 / 5)
        assert result.array_power_w == pytest.approx(result.array_power_kw * 1000)
        # 2777.8 W / 400 W = 6.94 → 7 panels
        assert result.panel_count == 7

    def test_inverter_band(self):
        result = solar_array(**HOUSE)
        assert result.inverter_low == pytest.approx(result.array_power_kw * 0.8)
        assert result.inverter_center == pytest.approx(result.array_power_kw)
        assert result.inverter_max == pytest.approx(result.array_power_kw * 1.2)

    def test_losses_optional(self):
        result = solar_array(10, 5, 100, 500)
        assert result.array_power_kw == pytest.approx(2.0)
        assert result.panel_count == 4

    def test_missing(self):
        assert solar_array(0, 5, 80, 400) is None
        assert solar_array(10, '', 80, 400) is None

    def test_total_losses_rejected(self):
        assert solar_array(10, 5, 80, 400, 100) is None


class TestInverterCount:
    """Test inverter count across the sizing band."""

    def test_kilowatt_rating(self):
        array = solar_array(**HOUSE)
        result = inverter_count(array, 3, 'kw')
        assert result.inverter_kw == pytest.approx(3.0)
        assert (result.count_low, result.count_center, result.count_max) == (1, 1, 2)

    def test_watt_rating(self):
        array = solar_array(**HOUSE)
        result = inverter_count(array, 1000, 'w')
        assert result.count_center == 3

    def test_missing(self):
        array = solar_array(**HOUSE)
        assert inverter_count(array, 0) is None
        assert inverter_count(None, 1000) is None


class TestBatteryBank:
    """Test battery bank sizing."""

    def test_two_days_48v(self):
        """10 kWh × 2 days / 50% DoD = 40 kWh → 833 Ah at 48 V → 5 × 200 Ah."""
        result = battery_bank(10, 2, 50, 48, 200)
        assert result.total_energy_kwh == pytest.approx(20.0)
        assert result.capacity_kwh == pytest.approx(40.0)
        assert result.total_ah == pytest.approx(40000 / 48)
        assert result.battery_count == 5

    def test_exact_fit(self):
        result = battery_bank(12, 1, 100, 12, 1000)
        assert result.total_ah == pytest.approx(1000.0)
        assert result.battery_count == 1

    def test_missing(self):
        assert battery_bank(10, 0, 50, 48, 200) is None


class TestMonthlyConsumption:
    """Test monthly bill averaging."""

    def test_flat_year(self):
        result = monthly_consumption([300] * 12, [0.2] * 12)
        assert result.months_used == 12
        assert result.average_monthly == pytest.approx(300.0)
        assert result.average_daily == pytest.approx(10.0)
        assert result.annual_cost == pytest.approx(720.0)

    def test_skips_incomplete_months(self):
        result = monthly_consumption(['300', '', '600'], ['0.2', '0.2', ''])
        assert result.months_used == 1
        assert result.average_monthly == pytest.approx(300.0)

    def test_weighted_tariff(self):
        result = monthly_consumption([100, 300], [0.1, 0.3])
        # (10 + 90) / 400 kWh
        assert result.average_tariff == pytest.approx(0.25)
        assert result.annual_cost == pytest.approx(200 * 12 * 0.25)

    def test_no_valid_month(self):
        assert monthly_consumption([''] * 12, [''] * 12) is None
