"""Plusvalía calculation engine."""

from plusvalia_municipal.core.calculators.deadlines import plazo_presentacion
from plusvalia_municipal.core.calculators.engine import (
    PlusvaliaCalculator,
    calcular_plusvalia,
)
from plusvalia_municipal.core.calculators.holding_period import (
    anos_aplicables,
    calcular_anos,
)
from plusvalia_municipal.core.calculators.objective import calcular_metodo_objetivo
from plusvalia_municipal.core.calculators.real import calcular_metodo_real
from plusvalia_municipal.core.calculators.selection import (
    aplicar_bonificacion,
    bonificacion_efectiva,
    elegir_metodo,
)

__all__ = [
    "PlusvaliaCalculator",
    "anos_aplicables",
    "aplicar_bonificacion",
    "bonificacion_efectiva",
    "calcular_anos",
    "calcular_metodo_objetivo",
    "calcular_metodo_real",
    "calcular_plusvalia",
    "elegir_metodo",
    "plazo_presentacion",
]
