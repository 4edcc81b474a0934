"""Tests for minor-unit conversion and formatting."""

from decimal import Decimal

import pytest

from expense_report.money import (
    format_minor,
    minor_to_major,
    to_decimal,
    to_minor_units,
)


class TestToDecimal:
    """Tests for input amount conversion."""

    def test_float_uses_shortest_repr(self):
        """Floats convert through str, not their binary expansion."""
        assert to_decimal(11.8375) == Decimal("11.8375")

    def test_int_and_str(self):
        assert to_decimal(8) == Decimal("8")
        assert to_decimal("52.10") == Decimal("52.10")

    def test_decimal_passthrough(self):
        value = Decimal("1.005")
        assert to_decimal(value) is value

    def test_bool_rejected(self):
        with pytest.raises(TypeError):
            to_decimal(True)


class TestToMinorUnits:
    """Tests for the ROUND_HALF_UP minor-unit rule."""

    def test_exact_cents(self):
        assert to_minor_units(Decimal("94.70")) == 9470

    def test_half_rounds_away_from_zero(self):
        """Halves round up for positives and down for negatives."""
        assert to_minor_units(Decimal("12.345")) == 1235
        assert to_minor_units(Decimal("-12.345")) == -1235

    def test_below_half_rounds_down(self):
        assert to_minor_units(Decimal("0.004")) == 0
        assert to_minor_units(Decimal("33.3333333")) == 3333

    def test_converted_product(self):
        """8 EUR at 11.8375 is exactly 94.70 NOK."""
        assert to_minor_units(Decimal("8") * Decimal("11.8375")) == 9470


class TestFormatMinor:
    """Tests for major.minor rendering."""

    @pytest.mark.parametrize(
        "minor,expected",
        [
            (9470, "94.70"),
            (0, "0.00"),
            (7, "0.07"),
            (-5, "-0.05"),
            (-1234, "-12.34"),
            (100000, "1000.00"),
        ],
    )
    def test_format(self, minor, expected):
        assert format_minor(minor) == expected

    def test_minor_to_major(self):
        assert minor_to_major(-5) == Decimal("-0.05")
        assert minor_to_major(4170) == Decimal("41.70")
