"""Tests for display formatters."""

from decimal import Decimal

from plusvalia_municipal.shared.formatters import (
    format_coefficient,
    format_currency,
    format_percentage,
)
from plusvalia_municipal.core.rules.tax_constants import redondear


class TestFormatters:
    """Tests for Spanish formatting."""

    def test_format_currency(self):
        """Test thousands dot and decimal comma."""
        assert format_currency(Decimal("2550")) == "2.550,00 €"
        assert format_currency(Decimal("1234567.891")) == "1.234.567,89 €"
        assert format_currency(Decimal("0")) == "0,00 €"

    def test_format_negative_currency(self):
        """Test negative amounts keep the sign in front."""
        assert format_currency(Decimal("-10000")) == "-10.000,00 €"

    def test_format_percentage(self):
        """Test percentage formatting."""
        assert format_percentage(Decimal("30")) == "30%"
        assert format_percentage(Decimal("33.33"), 2) == "33,33%"

    def test_format_coefficient(self):
        """Test coefficient formatting."""
        assert format_coefficient(Decimal("0.17")) == "0,17"


class TestRedondear:
    """Tests for cent rounding."""

    def test_half_away_from_zero(self):
        """Test ties round away from zero, not to even."""
        assert redondear(Decimal("2.675")) == Decimal("2.68")
        assert redondear(Decimal("0.125")) == Decimal("0.13")
        assert redondear(Decimal("-2.675")) == Decimal("-2.68")

    def test_below_half(self):
        """Test values below half a cent round down."""
        assert redondear(Decimal("2.674")) == Decimal("2.67")
