"""Enumerations for plusvalía domain models."""

from enum import Enum


class TipoTransmision(str, Enum):
    """Transfer kind."""

    COMPRAVENTA = "compraventa"
    HERENCIA = "herencia"


class Metodo(str, Enum):
    """Valuation method for the taxable base."""

    OBJETIVO = "objetivo"
    REAL = "real"


class TipoBonificacion(str, Enum):
    """Inheritance rebate categories."""

    HERENCIA_CONYUGE = "herencia_conyuge"
    HERENCIA_DESCENDIENTES = "herencia_descendientes"
    VIVIENDA_HABITUAL = "vivienda_habitual"


class UnidadPlazo(str, Enum):
    """Unit of a filing deadline."""

    DIAS_HABILES = "dias_habiles"
    MESES = "meses"
