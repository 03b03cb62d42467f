"""Statutory constants for the plusvalía municipal (IIVTNU).

Values follow the national maxima set after RDL 26/2021. Each municipality
may set coefficients equal to or below these. Coefficients are updated
yearly by the Presupuestos Generales del Estado. Last review: 2025.
Sources:
- Real Decreto-ley 26/2021, de 8 de noviembre
- Texto refundido de la Ley Reguladora de las Haciendas Locales, art. 107
"""

from decimal import ROUND_HALF_UP, Decimal
from types import MappingProxyType
from typing import Mapping

# === Coefficients (maximum per years held, 2025) ===

COEFICIENTES_MAXIMOS_2025: Mapping[int, Decimal] = MappingProxyType({
    1: Decimal("0.14"),
    2: Decimal("0.13"),
    3: Decimal("0.15"),
    4: Decimal("0.15"),
    5: Decimal("0.17"),
    6: Decimal("0.17"),
    7: Decimal("0.17"),
    8: Decimal("0.12"),
    9: Decimal("0.11"),
    10: Decimal("0.10"),
    11: Decimal("0.09"),
    12: Decimal("0.09"),
    13: Decimal("0.09"),
    14: Decimal("0.09"),
    15: Decimal("0.09"),
    16: Decimal("0.09"),
    17: Decimal("0.08"),
    18: Decimal("0.08"),
    19: Decimal("0.08"),
    20: Decimal("0.08"),
})

# === Holding period ===

ANOS_MINIMOS = 1  # below this the tax is not due
ANOS_MAXIMOS = 20  # coefficient table stops here
DIAS_POR_ANO = Decimal("365.25")

# === Tax rate ===

TIPO_IMPOSITIVO_MAXIMO = Decimal("30")  # legal cap, percent

# === Amounts ===

IMPORTE_MAXIMO = Decimal("1000000000000")  # upper bound for prices and cadastral values

# === Voluntary filing deadlines ===

PLAZO_COMPRAVENTA_DIAS = 30  # working days from the transfer
PLAZO_HERENCIA_MESES = 6  # months from the death

# === Rounding ===

CENTIMO = Decimal("0.01")
CIEN = Decimal("100")


def redondear(valor: Decimal) -> Decimal:
    """Round a money amount to cents, half away from zero."""
    return valor.quantize(CENTIMO, rounding=ROUND_HALF_UP)
