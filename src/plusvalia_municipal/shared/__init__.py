"""Shared utilities for Plusvalía Municipal."""

from plusvalia_municipal.shared.exceptions import (
    ConfiguracionError,
    DatosInvalidosError,
    MunicipioNoEncontradoError,
    PlusvaliaError,
)
from plusvalia_municipal.shared.formatters import (
    format_coefficient,
    format_currency,
    format_percentage,
)

__all__ = [
    # Exceptions
    "ConfiguracionError",
    "DatosInvalidosError",
    "MunicipioNoEncontradoError",
    "PlusvaliaError",
    # Formatters
    "format_coefficient",
    "format_currency",
    "format_percentage",
]
