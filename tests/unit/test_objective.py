"""Tests for the objective method."""

from decimal import Decimal

from plusvalia_municipal.core.calculators.objective import calcular_metodo_objetivo
from plusvalia_municipal.core.rules.tax_constants import COEFICIENTES_MAXIMOS_2025


class TestMetodoObjetivo:
    """Tests for land cadastral value x coefficient."""

    def test_five_years_example(self):
        """Test 50,000 of land value held 5 years at 30%."""
        resultado = calcular_metodo_objetivo(
            Decimal("50000"), 5, COEFICIENTES_MAXIMOS_2025, Decimal("30")
        )
        assert resultado.aplicable is True
        assert resultado.coeficiente == Decimal("0.17")
        assert resultado.anos == 5
        assert resultado.base_imponible == Decimal("8500.00")
        assert resultado.cuota == Decimal("2550.00")
        assert resultado.tipo_impositivo == Decimal("30")

    def test_clamps_to_twenty_years(self):
        """Test that 25 years use the 20-year coefficient."""
        resultado = calcular_metodo_objetivo(
            Decimal("50000"), 25, COEFICIENTES_MAXIMOS_2025, Decimal("30")
        )
        assert resultado.anos == 20
        assert resultado.coeficiente == Decimal("0.08")
        assert resultado.base_imponible == Decimal("4000.00")
        assert resultado.cuota == Decimal("1200.00")

    def test_less_than_one_year_not_applicable(self):
        """Test that zero years make the method not applicable."""
        resultado = calcular_metodo_objetivo(
            Decimal("50000"), 0, COEFICIENTES_MAXIMOS_2025, Decimal("30")
        )
        assert resultado.aplicable is False
        assert "al menos 1 año" in resultado.motivo

    def test_unknown_land_value_not_applicable(self):
        """Test that a missing or zero land value is not an error."""
        for valor in (None, Decimal("0")):
            resultado = calcular_metodo_objetivo(
                valor, 5, COEFICIENTES_MAXIMOS_2025, Decimal("30")
            )
            assert resultado.aplicable is False
            assert resultado.cuota == Decimal("0")

    def test_missing_coefficient_not_applicable(self):
        """Test an incomplete schedule marks the method not applicable."""
        resultado = calcular_metodo_objetivo(
            Decimal("50000"), 5, {1: Decimal("0.14")}, Decimal("30")
        )
        assert resultado.aplicable is False
        assert "coeficiente" in resultado.motivo

    def test_rounds_half_away_from_zero(self):
        """Test that half a cent rounds up, not to even."""
        resultado = calcular_metodo_objetivo(
            Decimal("2.5"), 1, {1: Decimal("0.01")}, Decimal("100")
        )
        assert resultado.base_imponible == Decimal("0.03")
        assert resultado.cuota == Decimal("0.03")

    def test_quota_never_decreases_with_rate(self):
        """Test that a higher tax rate never lowers the quota."""
        cuotas = [
            calcular_metodo_objetivo(
                Decimal("73456.78"), 7, COEFICIENTES_MAXIMOS_2025, Decimal(tipo)
            ).cuota
            for tipo in range(0, 31)
        ]
        assert cuotas == sorted(cuotas)
