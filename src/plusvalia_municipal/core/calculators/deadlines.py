"""Voluntary filing deadlines for the self-assessment."""

import calendar
from datetime import date, timedelta

from plusvalia_municipal.core.models.enums import TipoTransmision, UnidadPlazo
from plusvalia_municipal.core.models.municipality import Municipio
from plusvalia_municipal.core.models.result import PlazoPresentacion


def sumar_dias_habiles(fecha: date, dias: int) -> date:
    """Add working days (Monday to Friday). Public holidays are not modelled."""
    resultado = fecha
    restantes = dias
    while restantes > 0:
        resultado += timedelta(days=1)
        if resultado.weekday() < 5:
            restantes -= 1
    return resultado


def sumar_meses(fecha: date, meses: int) -> date:
    """Add calendar months, clamping to the last day of the target month."""
    indice = fecha.month - 1 + meses
    ano = fecha.year + indice // 12
    mes = indice % 12 + 1
    dia = min(fecha.day, calendar.monthrange(ano, mes)[1])
    return date(ano, mes, dia)


def plazo_presentacion(
    fecha_transmision: date,
    municipio: Municipio,
    tipo: TipoTransmision,
) -> PlazoPresentacion:
    """Deadline to file the self-assessment.

    Sales: working days from the transfer. Inheritances: months from the
    death, which is the transfer date.
    """
    cantidad = municipio.plazo(tipo)
    if tipo == TipoTransmision.HERENCIA:
        return PlazoPresentacion(
            cantidad=cantidad,
            unidad=UnidadPlazo.MESES,
            fecha_limite=sumar_meses(fecha_transmision, cantidad),
        )
    return PlazoPresentacion(
        cantidad=cantidad,
        unidad=UnidadPlazo.DIAS_HABILES,
        fecha_limite=sumar_dias_habiles(fecha_transmision, cantidad),
    )
