"""Municipality configuration models."""

from decimal import Decimal
from types import MappingProxyType
from typing import Mapping, Optional

from pydantic import BaseModel, Field, ValidationError, field_serializer, field_validator

from plusvalia_municipal.core.models.enums import TipoBonificacion, TipoTransmision
from plusvalia_municipal.core.rules.tax_constants import (
    ANOS_MAXIMOS,
    ANOS_MINIMOS,
    PLAZO_COMPRAVENTA_DIAS,
    PLAZO_HERENCIA_MESES,
    TIPO_IMPOSITIVO_MAXIMO,
)
from plusvalia_municipal.shared.exceptions import ConfiguracionError


class Bonificacion(BaseModel):
    """Rebate granted by the municipality for a qualifying inheritance."""

    aplicable: bool = Field(default=False, description="Rebate offered by the town hall")
    porcentaje: Decimal = Field(default=Decimal("0"), ge=0, le=100)
    descripcion: str = Field(default="")

    model_config = {"frozen": True}


class Bonificaciones(BaseModel):
    """The three inheritance rebates a municipality may configure."""

    herencia_conyuge: Bonificacion = Field(default_factory=Bonificacion)
    herencia_descendientes: Bonificacion = Field(default_factory=Bonificacion)
    vivienda_habitual: Bonificacion = Field(default_factory=Bonificacion)

    def get(self, tipo: TipoBonificacion) -> Bonificacion:
        """Return the rebate for a category."""
        return getattr(self, tipo.value)

    model_config = {"frozen": True}


class PlazoVoluntario(BaseModel):
    """Voluntary filing deadlines."""

    compraventa: int = Field(default=PLAZO_COMPRAVENTA_DIAS, gt=0, description="Working days")
    herencia: int = Field(default=PLAZO_HERENCIA_MESES, gt=0, description="Months")

    model_config = {"frozen": True}


class Municipio(BaseModel):
    """Per-municipality tax configuration."""

    slug: str = Field(..., min_length=1)
    nombre: str = Field(..., min_length=1)
    provincia: str = Field(default="")
    comunidad: str = Field(default="")
    poblacion: Optional[int] = Field(default=None, ge=0)

    tipo_impositivo: Decimal = Field(
        ..., ge=0, le=TIPO_IMPOSITIVO_MAXIMO, description="Tax rate in percent"
    )
    coeficientes: Mapping[int, Decimal] = Field(..., description="Coefficient per years held")
    bonificaciones: Bonificaciones = Field(default_factory=Bonificaciones)
    plazo_voluntario: PlazoVoluntario = Field(default_factory=PlazoVoluntario)

    url_ayuntamiento: Optional[str] = Field(default=None)
    direccion_ayuntamiento: Optional[str] = Field(default=None)
    telefono_ayuntamiento: Optional[str] = Field(default=None)
    ultima_actualizacion: Optional[str] = Field(default=None)

    @field_validator("coeficientes")
    @classmethod
    def validate_coeficientes(cls, v: Mapping[int, Decimal]) -> Mapping[int, Decimal]:
        """Require a non-negative coefficient for every year 1..20; store read-only."""
        faltan = [a for a in range(ANOS_MINIMOS, ANOS_MAXIMOS + 1) if a not in v]
        if faltan:
            raise ValueError(f"Faltan coeficientes para los años: {faltan}")
        for anos, coeficiente in v.items():
            if coeficiente < 0:
                raise ValueError(f"Coeficiente negativo para {anos} años")
        return MappingProxyType(dict(v))

    @field_serializer("coeficientes")
    def serialize_coeficientes(self, v: Mapping[int, Decimal]) -> dict[int, Decimal]:
        return dict(v)

    def plazo(self, tipo: TipoTransmision) -> int:
        """Deadline quantity for a transfer kind (days or months)."""
        if tipo == TipoTransmision.HERENCIA:
            return self.plazo_voluntario.herencia
        return self.plazo_voluntario.compraventa

    model_config = {"frozen": True}


def crear_municipio(**datos) -> Municipio:
    """Build a Municipio, turning validation errors into ConfiguracionError.

    Raises:
        ConfiguracionError: If the configuration breaks a municipality invariant
    """
    try:
        return Municipio(**datos)
    except ValidationError as e:
        slug = datos.get("slug", "?")
        error = e.errors()[0]
        campo = ".".join(str(parte) for parte in error["loc"])
        mensaje = error["msg"].removeprefix("Value error, ")
        raise ConfiguracionError(
            f"Configuración no válida para el municipio {slug} ({campo}): {mensaje}"
        ) from e
