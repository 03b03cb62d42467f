"""Municipality configuration table.

All five municipalities apply the national maximum coefficients and the
30% legal cap, with 50% inheritance rebates on the habitual residence.
"""

import logging
import unicodedata
from decimal import Decimal
from typing import NamedTuple

from plusvalia_municipal.core.models.municipality import (
    Bonificacion,
    Bonificaciones,
    Municipio,
    PlazoVoluntario,
    crear_municipio,
)
from plusvalia_municipal.core.rules.tax_constants import COEFICIENTES_MAXIMOS_2025
from plusvalia_municipal.shared.exceptions import MunicipioNoEncontradoError

logger = logging.getLogger(__name__)


def _bonificaciones_vivienda_habitual(porcentaje: Decimal) -> Bonificaciones:
    return Bonificaciones(
        herencia_conyuge=Bonificacion(
            aplicable=True,
            porcentaje=porcentaje,
            descripcion="Herencia al cónyuge de vivienda habitual",
        ),
        herencia_descendientes=Bonificacion(
            aplicable=True,
            porcentaje=porcentaje,
            descripcion="Herencia a hijos o nietos de vivienda habitual",
        ),
        vivienda_habitual=Bonificacion(
            aplicable=True,
            porcentaje=porcentaje,
            descripcion="Transmisión mortis causa de vivienda habitual",
        ),
    )


def _municipio(
    slug: str,
    nombre: str,
    provincia: str,
    comunidad: str,
    poblacion: int,
    url: str,
    direccion: str,
    telefono: str,
) -> Municipio:
    return crear_municipio(
        slug=slug,
        nombre=nombre,
        provincia=provincia,
        comunidad=comunidad,
        poblacion=poblacion,
        tipo_impositivo=Decimal("30"),
        coeficientes=dict(COEFICIENTES_MAXIMOS_2025),
        bonificaciones=_bonificaciones_vivienda_habitual(Decimal("50")),
        plazo_voluntario=PlazoVoluntario(compraventa=30, herencia=6),
        url_ayuntamiento=url,
        direccion_ayuntamiento=direccion,
        telefono_ayuntamiento=telefono,
        ultima_actualizacion="2025",
    )


MUNICIPIOS: dict[str, Municipio] = {
    m.slug: m
    for m in (
        _municipio(
            "talavera-de-la-reina", "Talavera de la Reina", "Toledo",
            "Castilla-La Mancha", 83000, "https://www.talavera.es/",
            "Plaza del Pan, 1 - 45600 Talavera de la Reina (Toledo)", "925 72 00 00",
        ),
        _municipio(
            "ponferrada", "Ponferrada", "León",
            "Castilla y León", 65000, "https://www.ponferrada.org/",
            "Plaza del Ayuntamiento, 1 - 24400 Ponferrada (León)", "987 44 48 00",
        ),
        _municipio(
            "motril", "Motril", "Granada",
            "Andalucía", 60000, "https://www.motril.es/",
            "Plaza de España, 1 - 18600 Motril (Granada)", "958 83 83 00",
        ),
        _municipio(
            "alcoy", "Alcoy / Alcoi", "Alicante",
            "Comunidad Valenciana", 59000, "https://www.alcoi.org/",
            "Plaça d'Espanya, 1 - 03801 Alcoi (Alicante)", "965 53 71 00",
        ),
        _municipio(
            "linares", "Linares", "Jaén",
            "Andalucía", 54000, "https://www.linares.es/",
            "Calle Corredera de San Marcos, 1 - 23700 Linares (Jaén)", "953 64 90 00",
        ),
    )
}


class MunicipioResumen(NamedTuple):
    """Entry of the municipality selector."""

    slug: str
    nombre: str
    provincia: str


def obtener_municipio(slug: str) -> Municipio:
    """Look up a municipality by slug.

    Raises:
        MunicipioNoEncontradoError: If the slug is not configured
    """
    municipio = MUNICIPIOS.get(slug.strip().lower())
    if municipio is None:
        logger.debug("Municipio no configurado: %s", slug)
        raise MunicipioNoEncontradoError(slug)
    return municipio


def _clave_orden(nombre: str) -> str:
    # Accent-insensitive ordering, close to a Spanish locale collation
    sin_acentos = unicodedata.normalize("NFKD", nombre)
    return "".join(c for c in sin_acentos if not unicodedata.combining(c)).casefold()


def listar_municipios() -> list[MunicipioResumen]:
    """List configured municipalities sorted by name."""
    return sorted(
        (MunicipioResumen(m.slug, m.nombre, m.provincia) for m in MUNICIPIOS.values()),
        key=lambda r: _clave_orden(r.nombre),
    )
