"""Method selection and inheritance rebates."""

from decimal import Decimal
from typing import Iterable, Optional

from plusvalia_municipal.core.models.enums import Metodo, TipoBonificacion
from plusvalia_municipal.core.models.municipality import Bonificaciones
from plusvalia_municipal.core.models.result import ResultadoObjetivo, ResultadoReal
from plusvalia_municipal.core.rules.tax_constants import CIEN, redondear


def cuota_objetivo(resultado: Optional[ResultadoObjetivo]) -> Optional[Decimal]:
    """Quota of the objective method, None if it does not apply."""
    if resultado is not None and resultado.aplicable:
        return resultado.cuota
    return None


def cuota_real(resultado: Optional[ResultadoReal]) -> Optional[Decimal]:
    """Quota of the real method, None if there is no taxable gain."""
    if resultado is not None and resultado.aplicable and resultado.hay_plusvalia:
        return resultado.cuota
    return None


def elegir_metodo(
    resultado_objetivo: Optional[ResultadoObjetivo],
    resultado_real: Optional[ResultadoReal],
) -> Optional[Metodo]:
    """Pick the method with the lower quota.

    The taxpayer may use whichever method is more favorable. Ties go to
    the objective method.

    Returns:
        Chosen method, or None when neither produced a quota
    """
    objetivo = cuota_objetivo(resultado_objetivo)
    real = cuota_real(resultado_real)

    if objetivo is not None and real is not None:
        return Metodo.OBJETIVO if objetivo <= real else Metodo.REAL
    if objetivo is not None:
        return Metodo.OBJETIVO
    if real is not None:
        return Metodo.REAL
    return None


def bonificacion_efectiva(
    elegidas: Iterable[TipoBonificacion],
    bonificaciones: Bonificaciones,
) -> Decimal:
    """Rebate percentage for the elected categories.

    Only categories the municipality offers count, and rebates do not
    stack: the highest percentage applies.
    """
    porcentaje = Decimal("0")
    for tipo in elegidas:
        bonificacion = bonificaciones.get(tipo)
        if bonificacion.aplicable:
            porcentaje = max(porcentaje, bonificacion.porcentaje)
    return porcentaje


def aplicar_bonificacion(cuota: Decimal, porcentaje: Decimal) -> Decimal:
    """Apply a rebate percentage to a quota."""
    if not porcentaje or porcentaje <= 0:
        return cuota
    descuento = cuota * porcentaje / CIEN
    return redondear(cuota - descuento)
