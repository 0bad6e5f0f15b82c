"""
Unit tests for temperature compensation lookup.
"""

from decimal import Decimal

import pytest

from darkroom_pro.chemistry.temperature import (
    NO_COMPENSATION,
    get_temperature_compensation,
    round_to_half_degree,
)


@pytest.fixture
def table():
    return {
        "18": Decimal("1.2"),
        "20": Decimal("1.0"),
        "21": Decimal("1.1"),
        "22.5": Decimal("0.85"),
    }


class TestRoundToHalfDegree:
    @pytest.mark.parametrize(
        "temperature,expected",
        [
            ("20", "20"),
            ("20.2", "20"),
            ("20.3", "20.5"),
            ("20.5", "20.5"),
            ("20.7", "20.5"),
            ("20.8", "21"),
            ("20.25", "20"),  # tie goes to the even half-step
            ("20.75", "21"),
        ],
    )
    def test_rounding(self, temperature, expected):
        assert round_to_half_degree(Decimal(temperature)) == Decimal(expected)


class TestTemperatureCompensation:
    def test_exact_whole_degree(self, table):
        assert get_temperature_compensation(table, Decimal("21")) == Decimal("1.1")

    def test_exact_half_degree(self, table):
        assert get_temperature_compensation(table, Decimal("22.5")) == Decimal("0.85")

    def test_interpolates_between_whole_degrees(self, table):
        assert get_temperature_compensation(table, Decimal("20.5")) == Decimal("1.05")

    def test_interpolation_after_rounding(self, table):
        """20.6 rounds to 20.5 before interpolation."""
        assert get_temperature_compensation(table, Decimal("20.6")) == Decimal("1.05")

    def test_floor_key_when_upper_missing(self, table):
        assert get_temperature_compensation(table, Decimal("18.5")) == Decimal("1.2")

    def test_no_entry_means_no_compensation(self, table):
        assert get_temperature_compensation(table, Decimal("25")) == NO_COMPENSATION

    def test_upper_only_means_no_compensation(self, table):
        assert get_temperature_compensation(table, Decimal("19.5")) == Decimal("1")

    def test_rounded_to_whole_degree(self, table):
        assert get_temperature_compensation(table, Decimal("20.9")) == Decimal("1.1")

    def test_empty_table(self):
        assert get_temperature_compensation({}, Decimal("20")) == Decimal("1")
