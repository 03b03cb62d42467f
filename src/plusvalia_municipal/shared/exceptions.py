"""Custom exceptions for Plusvalía Municipal."""


class PlusvaliaError(Exception):
    """Base exception for all Plusvalía Municipal errors."""

    pass


class DatosInvalidosError(PlusvaliaError):
    """Invalid transfer input (price, date or date order)."""

    def __init__(self, mensaje: str, campo: str | None = None):
        super().__init__(mensaje)
        self.mensaje = mensaje
        self.campo = campo


class ConfiguracionError(PlusvaliaError):
    """Invalid municipality configuration."""

    pass


class MunicipioNoEncontradoError(ConfiguracionError):
    """Municipality identifier not present in the configuration table."""

    def __init__(self, slug: str):
        super().__init__(f"No se encontraron datos para el municipio: {slug}")
        self.slug = slug
