"""Statutory rules and constants for the plusvalía municipal."""

from plusvalia_municipal.core.rules.tax_constants import (
    ANOS_MAXIMOS,
    ANOS_MINIMOS,
    COEFICIENTES_MAXIMOS_2025,
    DIAS_POR_ANO,
    PLAZO_COMPRAVENTA_DIAS,
    PLAZO_HERENCIA_MESES,
    TIPO_IMPOSITIVO_MAXIMO,
    redondear,
)

__all__ = [
    "ANOS_MAXIMOS",
    "ANOS_MINIMOS",
    "COEFICIENTES_MAXIMOS_2025",
    "DIAS_POR_ANO",
    "PLAZO_COMPRAVENTA_DIAS",
    "PLAZO_HERENCIA_MESES",
    "TIPO_IMPOSITIVO_MAXIMO",
    "redondear",
]
