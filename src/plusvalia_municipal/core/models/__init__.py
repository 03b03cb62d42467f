"""Domain models for plusvalía calculations."""

from plusvalia_municipal.core.models.enums import (
    Metodo,
    TipoBonificacion,
    TipoTransmision,
    UnidadPlazo,
)
from plusvalia_municipal.core.models.municipality import (
    Bonificacion,
    Bonificaciones,
    Municipio,
    PlazoVoluntario,
    crear_municipio,
)
from plusvalia_municipal.core.models.result import (
    ErrorCalculo,
    PlazoPresentacion,
    ResultadoCalculo,
    ResultadoObjetivo,
    ResultadoPlusvalia,
    ResultadoReal,
    SinPlusvalia,
)
from plusvalia_municipal.core.models.transfer import Transmision, crear_transmision

__all__ = [
    "Bonificacion",
    "Bonificaciones",
    "ErrorCalculo",
    "Metodo",
    "Municipio",
    "PlazoPresentacion",
    "PlazoVoluntario",
    "ResultadoCalculo",
    "ResultadoObjetivo",
    "ResultadoPlusvalia",
    "ResultadoReal",
    "SinPlusvalia",
    "TipoBonificacion",
    "TipoTransmision",
    "Transmision",
    "UnidadPlazo",
    "crear_municipio",
    "crear_transmision",
]
