"""Main Typer application for Plusvalía Municipal."""

from typing import Annotated, Optional

import typer
from rich.panel import Panel
from rich.table import Table

from plusvalia_municipal import __version__
from plusvalia_municipal.cli.console import (
    console,
    print_error,
    print_warning,
    setup_logging,
)
from plusvalia_municipal.core.calculators import calcular_plusvalia
from plusvalia_municipal.core.models import (
    ErrorCalculo,
    Metodo,
    Municipio,
    ResultadoPlusvalia,
    SinPlusvalia,
    TipoBonificacion,
    TipoTransmision,
    crear_transmision,
)
from plusvalia_municipal.core.rules.municipalities import (
    listar_municipios,
    obtener_municipio,
)
from plusvalia_municipal.shared.exceptions import PlusvaliaError
from plusvalia_municipal.shared.formatters import (
    format_coefficient,
    format_currency,
    format_percentage,
)

app = typer.Typer(
    name="plusvalia",
    help="Calculadora de plusvalía municipal (IIVTNU)",
    add_completion=True,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"Plusvalía Municipal v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            "-v",
            help="Muestra la versión y sale",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Muestra el detalle del cálculo en el log"),
    ] = False,
) -> None:
    """Plusvalía Municipal - calculadora del impuesto post RDL 26/2021."""
    setup_logging(verbose)


@app.command()
def municipios() -> None:
    """Lista los municipios disponibles."""
    table = Table(title="Municipios disponibles", show_header=True, header_style="bold")
    table.add_column("Slug", style="dim")
    table.add_column("Municipio")
    table.add_column("Provincia")
    table.add_column("Tipo", justify="right")
    table.add_column("Plazo venta", justify="right")
    table.add_column("Plazo herencia", justify="right")

    for resumen in listar_municipios():
        municipio = obtener_municipio(resumen.slug)
        table.add_row(
            resumen.slug,
            resumen.nombre,
            resumen.provincia,
            format_percentage(municipio.tipo_impositivo),
            f"{municipio.plazo_voluntario.compraventa} días hábiles",
            f"{municipio.plazo_voluntario.herencia} meses",
        )

    console.print(table)


@app.command()
def calcular(
    municipio: Annotated[str, typer.Argument(help="Slug del municipio (ver 'municipios')")],
    fecha_adquisicion: Annotated[
        str, typer.Option("--fecha-adquisicion", help="Fecha de adquisición (AAAA-MM-DD)")
    ],
    fecha_transmision: Annotated[
        str, typer.Option("--fecha-transmision", help="Fecha de transmisión (AAAA-MM-DD)")
    ],
    valor_adquisicion: Annotated[
        str, typer.Option("--valor-adquisicion", help="Valor de adquisición en euros")
    ],
    valor_transmision: Annotated[
        str, typer.Option("--valor-transmision", help="Valor de transmisión en euros")
    ],
    suelo: Annotated[
        Optional[str], typer.Option("--suelo", help="Valor catastral del suelo")
    ] = None,
    total: Annotated[
        Optional[str], typer.Option("--total", help="Valor catastral total")
    ] = None,
    tipo: Annotated[
        TipoTransmision, typer.Option("--tipo", help="Tipo de transmisión")
    ] = TipoTransmision.COMPRAVENTA,
    conyuge: Annotated[
        bool, typer.Option("--conyuge", help="Herencia al cónyuge")
    ] = False,
    descendiente: Annotated[
        bool, typer.Option("--descendiente", help="Herencia a hijos o nietos")
    ] = False,
    vivienda_habitual: Annotated[
        bool, typer.Option("--vivienda-habitual", help="Vivienda habitual del fallecido")
    ] = False,
    json_output: Annotated[
        bool, typer.Option("--json", help="Salida en JSON")
    ] = False,
) -> None:
    """Calcula la plusvalía municipal de una transmisión."""
    elegidas = [
        bonificacion
        for bonificacion, marcada in (
            (TipoBonificacion.HERENCIA_CONYUGE, conyuge),
            (TipoBonificacion.HERENCIA_DESCENDIENTES, descendiente),
            (TipoBonificacion.VIVIENDA_HABITUAL, vivienda_habitual),
        )
        if marcada
    ]

    try:
        config = obtener_municipio(municipio)
        transmision = crear_transmision(
            tipo=tipo,
            valor_adquisicion=valor_adquisicion,
            valor_transmision=valor_transmision,
            fecha_adquisicion=fecha_adquisicion,
            fecha_transmision=fecha_transmision,
            valor_catastral_suelo=suelo or None,
            valor_catastral_total=total or None,
            bonificaciones=elegidas,
        )
    except PlusvaliaError as e:
        print_error(str(e))
        raise typer.Exit(1)

    resultado = calcular_plusvalia(transmision, config)

    if json_output:
        console.print_json(resultado.model_dump_json())
        if isinstance(resultado, ErrorCalculo):
            raise typer.Exit(1)
        return

    if isinstance(resultado, SinPlusvalia):
        _display_sin_plusvalia(resultado)
    elif isinstance(resultado, ErrorCalculo):
        print_error(resultado.motivo)
        raise typer.Exit(1)
    else:
        _display_resultado(resultado, config)


def _display_sin_plusvalia(resultado: SinPlusvalia) -> None:
    console.print()
    console.print(
        Panel.fit(
            resultado.motivo,
            title="Resultado del cálculo",
            border_style="green",
        )
    )


def _display_resultado(resultado: ResultadoPlusvalia, municipio: Municipio) -> None:
    console.print()
    console.print(
        Panel.fit(
            f"[currency]{format_currency(resultado.cuota_final)}[/currency]\n"
            "[muted]Plusvalía municipal estimada[/muted]",
            title="Resultado del cálculo",
            border_style="green",
        )
    )

    if resultado.ambos_metodos:
        comparison = Table(show_header=True, header_style="bold")
        comparison.add_column("Método")
        comparison.add_column("Cuota", justify="right")
        comparison.add_column("")
        for metodo, nombre, cuota in (
            (Metodo.OBJETIVO, "M. Objetivo", resultado.cuota_objetivo),
            (Metodo.REAL, "M. Real", resultado.cuota_real),
        ):
            tag = "[success]Más favorable[/success]" if metodo == resultado.metodo_elegido else ""
            comparison.add_row(nombre, format_currency(cuota), tag)
        console.print(comparison)

    titulo = (
        "Método Objetivo"
        if resultado.metodo_elegido == Metodo.OBJETIVO
        else "Método Real"
    )
    table = Table(title=f"Desglose ({titulo})", show_header=False)
    table.add_column("Concepto")
    table.add_column("Valor", justify="right")

    detalle = resultado.resultado_elegido
    if resultado.metodo_elegido == Metodo.OBJETIVO:
        table.add_row("Valor catastral del suelo", format_currency(detalle.valor_catastral_suelo))
        table.add_row("Años transcurridos", str(detalle.anos))
        table.add_row("Coeficiente aplicable", format_coefficient(detalle.coeficiente))
    else:
        table.add_row("Incremento de valor", format_currency(detalle.incremento_total))
        if detalle.proporcion_suelo < 100:
            table.add_row("Proporción suelo", format_percentage(detalle.proporcion_suelo, 2))
    table.add_row("Base imponible", format_currency(detalle.base_imponible))
    table.add_row("Tipo impositivo", format_percentage(municipio.tipo_impositivo))

    if resultado.bonificacion_pct > 0:
        table.add_row(
            "Cuota antes de bonificación",
            format_currency(resultado.cuota_antes_bonificacion),
        )
        table.add_row("Bonificación aplicada", format_percentage(resultado.bonificacion_pct))

    table.add_row("[value]Cuota a pagar[/value]", f"[value]{format_currency(resultado.cuota_final)}[/value]")
    console.print(table)

    if resultado.plazo is not None:
        print_warning(
            f"Dispone de {resultado.plazo.descripcion} para presentar la "
            f"autoliquidación (hasta el {resultado.plazo.fecha_limite:%d/%m/%Y})."
        )

    if municipio.url_ayuntamiento:
        console.print(
            f"[muted]Información del Ayuntamiento de {municipio.nombre}: "
            f"{municipio.url_ayuntamiento}[/muted]"
        )
