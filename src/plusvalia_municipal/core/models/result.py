"""Calculation result models."""

from datetime import date
from decimal import Decimal
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field

from plusvalia_municipal.core.models.enums import Metodo, TipoTransmision, UnidadPlazo


class ResultadoObjetivo(BaseModel):
    """Objective method: land cadastral value x coefficient."""

    metodo: Literal[Metodo.OBJETIVO] = Metodo.OBJETIVO
    aplicable: bool
    motivo: Optional[str] = None
    valor_catastral_suelo: Optional[Decimal] = None
    anos: Optional[int] = None
    coeficiente: Optional[Decimal] = None
    base_imponible: Decimal = Decimal("0")
    tipo_impositivo: Optional[Decimal] = None
    cuota: Decimal = Decimal("0")

    model_config = {"frozen": True}


class ResultadoReal(BaseModel):
    """Real method: actual gain apportioned by the land share."""

    metodo: Literal[Metodo.REAL] = Metodo.REAL
    aplicable: bool
    hay_plusvalia: bool = False
    motivo: Optional[str] = None
    incremento_total: Optional[Decimal] = None
    proporcion_suelo: Optional[Decimal] = Field(
        default=None, description="Land share of the total cadastral value, in percent"
    )
    base_imponible: Decimal = Decimal("0")
    tipo_impositivo: Optional[Decimal] = None
    cuota: Decimal = Decimal("0")

    model_config = {"frozen": True}


class PlazoPresentacion(BaseModel):
    """Voluntary filing deadline for the self-assessment."""

    cantidad: int
    unidad: UnidadPlazo
    fecha_limite: date

    @property
    def descripcion(self) -> str:
        """Human-readable deadline."""
        if self.unidad == UnidadPlazo.MESES:
            return f"{self.cantidad} meses desde el fallecimiento"
        return f"{self.cantidad} días hábiles desde la transmisión"

    model_config = {"frozen": True}


class ResultadoPlusvalia(BaseModel):
    """Tax due, with the breakdown of both methods."""

    estado: Literal["resultado"] = "resultado"
    municipio: str
    tipo: TipoTransmision
    metodo_elegido: Metodo
    resultado_objetivo: Optional[ResultadoObjetivo] = None
    resultado_real: Optional[ResultadoReal] = None
    cuota_objetivo: Optional[Decimal] = None
    cuota_real: Optional[Decimal] = None
    bonificacion_pct: Decimal = Decimal("0")
    cuota_antes_bonificacion: Decimal
    cuota_final: Decimal
    anos: int = Field(..., description="Years held, clamped to the coefficient table")
    anos_transcurridos: int = Field(..., description="Whole years elapsed, unclamped")
    plazo: Optional[PlazoPresentacion] = None

    @property
    def resultado_elegido(self) -> ResultadoObjetivo | ResultadoReal | None:
        """Breakdown of the chosen method."""
        if self.metodo_elegido == Metodo.OBJETIVO:
            return self.resultado_objetivo
        return self.resultado_real

    @property
    def ambos_metodos(self) -> bool:
        """Both methods produced a quota to compare."""
        return self.cuota_objetivo is not None and self.cuota_real is not None

    @property
    def ahorro_bonificacion(self) -> Decimal:
        """Amount saved by the rebate."""
        return self.cuota_antes_bonificacion - self.cuota_final

    model_config = {"frozen": True}


class SinPlusvalia(BaseModel):
    """No tax due: no real gain, or less than one full year held."""

    estado: Literal["sin_plusvalia"] = "sin_plusvalia"
    motivo: str

    model_config = {"frozen": True}


class ErrorCalculo(BaseModel):
    """Neither method could produce a quota."""

    estado: Literal["error"] = "error"
    motivo: str

    model_config = {"frozen": True}


ResultadoCalculo = Annotated[
    Union[ResultadoPlusvalia, SinPlusvalia, ErrorCalculo],
    Field(discriminator="estado"),
]
