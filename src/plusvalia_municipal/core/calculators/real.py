"""Real method.

Base imponible = (valor transmisión - valor adquisición) x (suelo / total catastral)
When the total cadastral value is unknown the land share is taken as 100%.
Cuota = base imponible x tipo impositivo
"""

from decimal import Decimal
from typing import Optional

from plusvalia_municipal.core.models.result import ResultadoReal
from plusvalia_municipal.core.rules.tax_constants import CIEN, redondear

MOTIVO_SIN_INCREMENTO = "No hay incremento de valor. No se genera plusvalía."


def proporcion_suelo(
    valor_catastral_suelo: Optional[Decimal],
    valor_catastral_total: Optional[Decimal],
) -> Decimal:
    """Land share of the total cadastral value, as a fraction (1 if unknown)."""
    if (
        valor_catastral_suelo is not None
        and valor_catastral_total is not None
        and valor_catastral_suelo > 0
        and valor_catastral_total > 0
    ):
        return valor_catastral_suelo / valor_catastral_total
    return Decimal("1")


def calcular_metodo_real(
    valor_adquisicion: Decimal,
    valor_transmision: Decimal,
    valor_catastral_suelo: Optional[Decimal],
    valor_catastral_total: Optional[Decimal],
    tipo_impositivo: Decimal,
) -> ResultadoReal:
    """Compute the quota with the real method.

    A zero or negative increase is still an applicable result, with
    ``hay_plusvalia`` False and no quota: the tax is not due at all.
    """
    incremento_total = valor_transmision - valor_adquisicion

    if incremento_total <= 0:
        return ResultadoReal(
            aplicable=True,
            hay_plusvalia=False,
            motivo=MOTIVO_SIN_INCREMENTO,
            incremento_total=redondear(incremento_total),
            cuota=Decimal("0"),
        )

    proporcion = proporcion_suelo(valor_catastral_suelo, valor_catastral_total)
    base_imponible = incremento_total * proporcion
    cuota = base_imponible * tipo_impositivo / CIEN

    return ResultadoReal(
        aplicable=True,
        hay_plusvalia=True,
        incremento_total=redondear(incremento_total),
        proporcion_suelo=redondear(proporcion * CIEN),
        base_imponible=redondear(base_imponible),
        tipo_impositivo=tipo_impositivo,
        cuota=redondear(cuota),
    )
