"""Tests for method selection and rebates."""

from decimal import Decimal

from plusvalia_municipal.core.calculators.selection import (
    aplicar_bonificacion,
    bonificacion_efectiva,
    elegir_metodo,
)
from plusvalia_municipal.core.models import (
    Metodo,
    ResultadoObjetivo,
    ResultadoReal,
    TipoBonificacion,
)


def _objetivo(cuota: str) -> ResultadoObjetivo:
    return ResultadoObjetivo(aplicable=True, cuota=Decimal(cuota))


def _real(cuota: str, hay_plusvalia: bool = True) -> ResultadoReal:
    return ResultadoReal(aplicable=True, hay_plusvalia=hay_plusvalia, cuota=Decimal(cuota))


class TestElegirMetodo:
    """Tests for picking the more favorable method."""

    def test_lower_objective_wins(self):
        """Test objective chosen when its quota is lower."""
        assert elegir_metodo(_objetivo("900"), _real("4500")) == Metodo.OBJETIVO

    def test_lower_real_wins(self):
        """Test real chosen when its quota is lower."""
        assert elegir_metodo(_objetivo("900"), _real("450")) == Metodo.REAL

    def test_tie_goes_to_objective(self):
        """Test equal quotas resolve to the objective method."""
        assert elegir_metodo(_objetivo("900.00"), _real("900.00")) == Metodo.OBJETIVO

    def test_only_real_applicable(self):
        """Test real chosen when objective does not apply."""
        objetivo = ResultadoObjetivo(aplicable=False, motivo="sin valor")
        assert elegir_metodo(objetivo, _real("4500")) == Metodo.REAL
        assert elegir_metodo(None, _real("4500")) == Metodo.REAL

    def test_only_objective_taxable(self):
        """Test objective chosen when real has no taxable gain."""
        assert elegir_metodo(_objetivo("900"), _real("0", hay_plusvalia=False)) == Metodo.OBJETIVO

    def test_neither_applicable(self):
        """Test no method when neither produced a quota."""
        objetivo = ResultadoObjetivo(aplicable=False, motivo="sin valor")
        assert elegir_metodo(objetivo, None) is None
        assert elegir_metodo(None, None) is None


class TestBonificacionEfectiva:
    """Tests for the effective rebate percentage."""

    def test_rebates_do_not_stack(self, talavera):
        """Test spouse 50% and descendant 50% give 50%, not 100%."""
        pct = bonificacion_efectiva(
            [TipoBonificacion.HERENCIA_CONYUGE, TipoBonificacion.HERENCIA_DESCENDIENTES],
            talavera.bonificaciones,
        )
        assert pct == Decimal("50")

    def test_highest_applicable_wins(self, municipio_bonificaciones_distintas):
        """Test the highest offered percentage applies."""
        pct = bonificacion_efectiva(
            list(TipoBonificacion), municipio_bonificaciones_distintas.bonificaciones
        )
        assert pct == Decimal("95")

    def test_not_offered_rebate_ignored(self, municipio_bonificaciones_distintas):
        """Test a rebate the town hall does not offer is ignored."""
        pct = bonificacion_efectiva(
            [TipoBonificacion.VIVIENDA_HABITUAL],
            municipio_bonificaciones_distintas.bonificaciones,
        )
        assert pct == Decimal("0")

    def test_nothing_elected(self, talavera):
        """Test no rebate when none is elected."""
        assert bonificacion_efectiva([], talavera.bonificaciones) == Decimal("0")


class TestAplicarBonificacion:
    """Tests for applying a rebate to a quota."""

    def test_half_rebate(self):
        """Test a 50% rebate halves the quota."""
        assert aplicar_bonificacion(Decimal("2550.00"), Decimal("50")) == Decimal("1275.00")

    def test_no_rebate_returns_quota(self):
        """Test zero rebate leaves the quota untouched."""
        cuota = Decimal("2550.00")
        assert aplicar_bonificacion(cuota, Decimal("0")) is cuota

    def test_rebate_rounds_half_up(self):
        """Test the rebated quota rounds half a cent away from zero."""
        assert aplicar_bonificacion(Decimal("0.05"), Decimal("50")) == Decimal("0.03")

    def test_bounds(self):
        """Test the rebated quota stays between zero and the original quota."""
        cuota = Decimal("1234.57")
        for pct in range(0, 101, 5):
            final = aplicar_bonificacion(cuota, Decimal(pct))
            assert Decimal("0") <= final <= cuota
