"""Plusvalía municipal calculator.

Computes both methods, picks the more favorable one and applies the
inheritance rebate. The calculation is pure: it takes a transfer and a
municipality and returns one of three outcomes (ResultadoPlusvalia,
SinPlusvalia, ErrorCalculo). None of them is raised.
"""

import logging
from decimal import DecimalException

from plusvalia_municipal.core.calculators.deadlines import plazo_presentacion
from plusvalia_municipal.core.calculators.holding_period import (
    anos_aplicables,
    calcular_anos,
)
from plusvalia_municipal.core.calculators.objective import calcular_metodo_objetivo
from plusvalia_municipal.core.calculators.real import calcular_metodo_real
from plusvalia_municipal.core.calculators.selection import (
    aplicar_bonificacion,
    bonificacion_efectiva,
    cuota_objetivo,
    cuota_real,
    elegir_metodo,
)
from plusvalia_municipal.core.models.enums import Metodo
from plusvalia_municipal.core.models.municipality import Municipio
from plusvalia_municipal.core.models.result import (
    ErrorCalculo,
    ResultadoCalculo,
    ResultadoPlusvalia,
    SinPlusvalia,
)
from plusvalia_municipal.core.models.transfer import Transmision
from plusvalia_municipal.core.rules.tax_constants import ANOS_MINIMOS

logger = logging.getLogger(__name__)

MOTIVO_MENOS_DE_UN_ANO = (
    "No se ha completado un año desde la adquisición. No se devenga el impuesto."
)
MOTIVO_SIN_INCREMENTO = (
    "No existe incremento de valor. Según la legislación vigente, no se genera "
    "plusvalía municipal y no hay obligación de pago."
)
MOTIVO_NO_CALCULABLE = "No se pudo calcular. Revisa los datos introducidos."
MOTIVO_FUERA_DE_RANGO = "No se pudo calcular: los importes exceden la precisión admitida."


class PlusvaliaCalculator:
    """Calculates the plusvalía for one transfer in one municipality."""

    def __init__(self, transmision: Transmision, municipio: Municipio):
        self.transmision = transmision
        self.municipio = municipio

    def calcular(self) -> ResultadoCalculo:
        """Run the calculation and return its outcome."""
        try:
            return self._calcular()
        except DecimalException as e:
            logger.warning("Importes fuera de rango en %s: %r", self.municipio.slug, e)
            return ErrorCalculo(motivo=MOTIVO_FUERA_DE_RANGO)

    def _calcular(self) -> ResultadoCalculo:
        t = self.transmision
        m = self.municipio

        anos_transcurridos = calcular_anos(t.fecha_adquisicion, t.fecha_transmision)
        if anos_transcurridos < ANOS_MINIMOS:
            logger.info("Sin plusvalía en %s: menos de un año", m.slug)
            return SinPlusvalia(motivo=MOTIVO_MENOS_DE_UN_ANO)

        anos = anos_aplicables(anos_transcurridos)

        resultado_objetivo = calcular_metodo_objetivo(
            t.valor_catastral_suelo, anos, m.coeficientes, m.tipo_impositivo
        )
        logger.debug("Método objetivo: %s", resultado_objetivo)

        resultado_real = calcular_metodo_real(
            t.valor_adquisicion,
            t.valor_transmision,
            t.valor_catastral_suelo,
            t.valor_catastral_total,
            m.tipo_impositivo,
        )
        logger.debug("Método real: %s", resultado_real)

        # No real gain means no tax, whatever the objective method says
        if resultado_real.aplicable and not resultado_real.hay_plusvalia:
            logger.info("Sin plusvalía en %s: no hay incremento de valor", m.slug)
            return SinPlusvalia(motivo=MOTIVO_SIN_INCREMENTO)

        metodo = elegir_metodo(resultado_objetivo, resultado_real)
        if metodo is None:
            logger.warning("Ningún método aplicable en %s", m.slug)
            return ErrorCalculo(motivo=MOTIVO_NO_CALCULABLE)

        bonificacion_pct = bonificacion_efectiva(
            t.bonificaciones_elegidas, m.bonificaciones
        )

        cuota = (
            resultado_objetivo.cuota
            if metodo == Metodo.OBJETIVO
            else resultado_real.cuota
        )
        cuota_final = aplicar_bonificacion(cuota, bonificacion_pct)

        logger.debug(
            "Método elegido: %s, cuota %s, bonificación %s%%, cuota final %s",
            metodo.value,
            cuota,
            bonificacion_pct,
            cuota_final,
        )

        return ResultadoPlusvalia(
            municipio=m.slug,
            tipo=t.tipo,
            metodo_elegido=metodo,
            resultado_objetivo=resultado_objetivo,
            resultado_real=resultado_real,
            cuota_objetivo=cuota_objetivo(resultado_objetivo),
            cuota_real=cuota_real(resultado_real),
            bonificacion_pct=bonificacion_pct,
            cuota_antes_bonificacion=cuota,
            cuota_final=cuota_final,
            anos=anos,
            anos_transcurridos=anos_transcurridos,
            plazo=plazo_presentacion(t.fecha_transmision, m, t.tipo),
        )


def calcular_plusvalia(transmision: Transmision, municipio: Municipio) -> ResultadoCalculo:
    """Convenience function to calculate the plusvalía of a transfer."""
    calculator = PlusvaliaCalculator(transmision, municipio)
    return calculator.calcular()
