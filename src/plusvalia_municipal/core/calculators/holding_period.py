"""Holding period between acquisition and transfer."""

from datetime import date
from decimal import ROUND_FLOOR, Decimal

from plusvalia_municipal.core.rules.tax_constants import (
    ANOS_MAXIMOS,
    ANOS_MINIMOS,
    DIAS_POR_ANO,
)


def calcular_anos(fecha_adquisicion: date, fecha_transmision: date) -> int:
    """Whole years elapsed between two dates.

    Counts days and divides by 365.25 so leap years average out.

    Args:
        fecha_adquisicion: Acquisition date
        fecha_transmision: Transfer date

    Returns:
        floor(days / 365.25)
    """
    dias = (fecha_transmision - fecha_adquisicion).days
    return int((Decimal(dias) / DIAS_POR_ANO).to_integral_value(rounding=ROUND_FLOOR))


def anos_aplicables(anos: int) -> int:
    """Clamp years held to the range of the coefficient table."""
    return min(max(anos, ANOS_MINIMOS), ANOS_MAXIMOS)
