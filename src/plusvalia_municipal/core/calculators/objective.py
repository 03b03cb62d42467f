"""Objective method.

Base imponible = valor catastral del suelo x coeficiente (according to years held)
Cuota = base imponible x tipo impositivo
"""

from decimal import Decimal
from typing import Mapping, Optional

from plusvalia_municipal.core.calculators.holding_period import anos_aplicables
from plusvalia_municipal.core.models.result import ResultadoObjetivo
from plusvalia_municipal.core.rules.tax_constants import ANOS_MINIMOS, CIEN, redondear

MOTIVO_SIN_VALOR_CATASTRAL = "Se desconoce el valor catastral del suelo."
MOTIVO_MENOS_DE_UN_ANO = "Debe haber transcurrido al menos 1 año."
MOTIVO_SIN_COEFICIENTE = "No se encontró coeficiente para el periodo."


def calcular_metodo_objetivo(
    valor_catastral_suelo: Optional[Decimal],
    anos: int,
    coeficientes: Mapping[int, Decimal],
    tipo_impositivo: Decimal,
) -> ResultadoObjetivo:
    """Compute the quota with the objective method.

    Args:
        valor_catastral_suelo: Land cadastral value (None or <= 0 if unknown)
        anos: Whole years held, unclamped
        coeficientes: Coefficient per years held (1..20)
        tipo_impositivo: Tax rate in percent

    Returns:
        ResultadoObjetivo, not applicable when the land value is unknown,
        less than one year elapsed, or the coefficient is missing
    """
    if valor_catastral_suelo is None or valor_catastral_suelo <= 0:
        return ResultadoObjetivo(aplicable=False, motivo=MOTIVO_SIN_VALOR_CATASTRAL)

    if anos < ANOS_MINIMOS:
        return ResultadoObjetivo(aplicable=False, motivo=MOTIVO_MENOS_DE_UN_ANO)

    anos_tabla = anos_aplicables(anos)
    coeficiente = coeficientes.get(anos_tabla)
    if coeficiente is None:
        return ResultadoObjetivo(aplicable=False, motivo=MOTIVO_SIN_COEFICIENTE)

    base_imponible = valor_catastral_suelo * coeficiente
    cuota = base_imponible * tipo_impositivo / CIEN

    return ResultadoObjetivo(
        aplicable=True,
        valor_catastral_suelo=valor_catastral_suelo,
        anos=anos_tabla,
        coeficiente=coeficiente,
        base_imponible=redondear(base_imponible),
        tipo_impositivo=tipo_impositivo,
        cuota=redondear(cuota),
    )
