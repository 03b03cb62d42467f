"""Pytest configuration and fixtures."""

from datetime import date
from decimal import Decimal

import pytest

from plusvalia_municipal.core.models import (
    Bonificacion,
    Bonificaciones,
    Municipio,
    TipoTransmision,
    Transmision,
)
from plusvalia_municipal.core.rules.municipalities import obtener_municipio
from plusvalia_municipal.core.rules.tax_constants import COEFICIENTES_MAXIMOS_2025


@pytest.fixture
def talavera() -> Municipio:
    """Talavera de la Reina: 30% rate, 50% inheritance rebates."""
    return obtener_municipio("talavera-de-la-reina")


@pytest.fixture
def municipio_bonificaciones_distintas() -> Municipio:
    """Municipality with different rebate percentages per category."""
    return Municipio(
        slug="prueba",
        nombre="Prueba",
        tipo_impositivo=Decimal("30"),
        coeficientes=dict(COEFICIENTES_MAXIMOS_2025),
        bonificaciones=Bonificaciones(
            herencia_conyuge=Bonificacion(aplicable=True, porcentaje=Decimal("95")),
            herencia_descendientes=Bonificacion(aplicable=True, porcentaje=Decimal("50")),
            vivienda_habitual=Bonificacion(aplicable=False, porcentaje=Decimal("99")),
        ),
    )


@pytest.fixture
def make_transmision():
    """Factory for transfers with sensible defaults (10 years held, gain of 50k)."""

    def _make(**overrides) -> Transmision:
        datos = {
            "tipo": TipoTransmision.COMPRAVENTA,
            "valor_adquisicion": Decimal("100000"),
            "valor_transmision": Decimal("150000"),
            "fecha_adquisicion": date(2015, 1, 1),
            "fecha_transmision": date(2025, 6, 1),
            "valor_catastral_suelo": Decimal("30000"),
            "valor_catastral_total": Decimal("100000"),
        }
        datos.update(overrides)
        return Transmision(**datos)

    return _make
