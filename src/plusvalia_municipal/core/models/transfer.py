"""Transfer input model."""

from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from plusvalia_municipal.core.models.enums import TipoBonificacion, TipoTransmision
from plusvalia_municipal.core.rules.tax_constants import IMPORTE_MAXIMO
from plusvalia_municipal.shared.exceptions import DatosInvalidosError
from plusvalia_municipal.shared.formatters import format_currency


class Transmision(BaseModel):
    """A property transfer as entered by the taxpayer."""

    tipo: TipoTransmision = Field(default=TipoTransmision.COMPRAVENTA)
    valor_adquisicion: Decimal = Field(
        ..., gt=0, le=IMPORTE_MAXIMO, description="Acquisition price"
    )
    valor_transmision: Decimal = Field(
        ..., gt=0, le=IMPORTE_MAXIMO, description="Transfer (sale) price"
    )
    fecha_adquisicion: date = Field(..., description="Acquisition date")
    fecha_transmision: date = Field(..., description="Transfer date (death date for inheritance)")
    valor_catastral_suelo: Optional[Decimal] = Field(
        default=None, ge=0, le=IMPORTE_MAXIMO, description="Land cadastral value"
    )
    valor_catastral_total: Optional[Decimal] = Field(
        default=None, ge=0, le=IMPORTE_MAXIMO, description="Total cadastral value"
    )
    bonificaciones: frozenset[TipoBonificacion] = Field(
        default_factory=frozenset, description="Rebates elected by the taxpayer"
    )

    @field_validator("bonificaciones", mode="before")
    @classmethod
    def coerce_bonificaciones(cls, v):
        """Accept any iterable of rebate categories."""
        if v is None:
            return frozenset()
        return frozenset(v)

    @model_validator(mode="after")
    def validate_fechas(self) -> "Transmision":
        """Transfer date must be after acquisition date."""
        if self.fecha_transmision <= self.fecha_adquisicion:
            raise ValueError(
                "La fecha de transmisión debe ser posterior a la de adquisición."
            )
        return self

    @property
    def bonificaciones_elegidas(self) -> frozenset[TipoBonificacion]:
        """Rebates that count: only inheritances can elect them."""
        if self.tipo != TipoTransmision.HERENCIA:
            return frozenset()
        return self.bonificaciones

    model_config = {"frozen": True}


ETIQUETAS_CAMPO = {
    "tipo": "el tipo de transmisión",
    "valor_adquisicion": "el valor de adquisición",
    "valor_transmision": "el valor de transmisión (venta)",
    "fecha_adquisicion": "la fecha de adquisición",
    "fecha_transmision": "la fecha de transmisión",
    "valor_catastral_suelo": "el valor catastral del suelo",
    "valor_catastral_total": "el valor catastral total",
    "bonificaciones": "las bonificaciones elegidas",
}

# Pydantic error types grouped by the message they get
ERRORES_FALTA_VALOR = {
    "missing",
    "greater_than",
    "date_parsing",
    "date_from_datetime_parsing",
    "date_type",
}
ERRORES_NUMERO = {"decimal_parsing", "decimal_type", "finite_number"}


def _mensaje_error(campo: str, tipo_error: str) -> str:
    etiqueta = ETIQUETAS_CAMPO[campo]
    if tipo_error in ERRORES_FALTA_VALOR:
        return f"Introduce {etiqueta}."
    if tipo_error in ERRORES_NUMERO:
        return f"{etiqueta.capitalize()} debe ser un número."
    if tipo_error == "greater_than_equal":
        return f"{etiqueta.capitalize()} no puede ser negativo."
    if tipo_error == "less_than_equal":
        maximo = format_currency(IMPORTE_MAXIMO)
        return f"{etiqueta.capitalize()} supera el máximo admitido ({maximo})."
    return f"Revisa {etiqueta}."


def crear_transmision(**datos) -> Transmision:
    """Build a Transmision, turning validation errors into DatosInvalidosError.

    Raises:
        DatosInvalidosError: With a user-facing message for the first invalid field
    """
    try:
        return Transmision(**datos)
    except ValidationError as e:
        error = e.errors()[0]
        campo = str(error["loc"][0]) if error["loc"] else None
        if campo in ETIQUETAS_CAMPO:
            mensaje = _mensaje_error(campo, error["type"])
        else:
            mensaje = error["msg"].removeprefix("Value error, ")
        raise DatosInvalidosError(mensaje, campo=campo) from e
