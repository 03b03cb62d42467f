"""Tests for the command-line interface."""

import json

from typer.testing import CliRunner

from plusvalia_municipal import __version__
from plusvalia_municipal.cli.app import app

runner = CliRunner()

VENTA = [
    "calcular",
    "talavera-de-la-reina",
    "--fecha-adquisicion", "2020-01-01",
    "--fecha-transmision", "2025-06-01",
    "--valor-adquisicion", "100000",
    "--valor-transmision", "200000",
    "--suelo", "50000",
    "--total", "100000",
]


class TestCLI:
    """Tests for the plusvalia commands."""

    def test_version(self):
        """Test --version prints the version."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_version_short_flag(self):
        """Test -v prints the version."""
        result = runner.invoke(app, ["-v"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_municipios(self):
        """Test the municipality list."""
        result = runner.invoke(app, ["municipios"])
        assert result.exit_code == 0
        assert "Motril" in result.output
        assert "Linares" in result.output

    def test_calcular(self):
        """Test a sale where the objective method wins."""
        result = runner.invoke(app, VENTA)
        assert result.exit_code == 0
        assert "2.550,00 €" in result.output
        assert "Método Objetivo" in result.output
        assert "Aviso" in result.output

    def test_calcular_json(self):
        """Test the JSON outcome."""
        result = runner.invoke(app, VENTA + ["--json"])
        assert result.exit_code == 0
        datos = json.loads(result.output)
        assert datos["estado"] == "resultado"
        assert datos["metodo_elegido"] == "objetivo"
        assert datos["cuota_final"] == "2550.00"
        assert datos["anos"] == 5

    def test_calcular_herencia_con_bonificacion(self):
        """Test an inheritance with two rebates elected."""
        result = runner.invoke(
            app, VENTA + ["--tipo", "herencia", "--conyuge", "--descendiente", "--json"]
        )
        assert result.exit_code == 0
        datos = json.loads(result.output)
        assert datos["bonificacion_pct"] == "50"
        assert datos["cuota_final"] == "1275.00"

    def test_sin_plusvalia(self):
        """Test a loss shows a neutral message and exits cleanly."""
        args = list(VENTA)
        args[args.index("200000")] = "90000"
        result = runner.invoke(app, args)
        assert result.exit_code == 0
        assert "No existe incremento de valor" in result.output

    def test_unknown_municipality(self):
        """Test an unknown municipality is reported as an error."""
        args = list(VENTA)
        args[1] = "madrid"
        result = runner.invoke(app, args)
        assert result.exit_code == 1
        assert "No se encontraron datos" in result.output

    def test_invalid_dates(self):
        """Test dates out of order are rejected before calculating."""
        args = list(VENTA)
        args[args.index("2025-06-01")] = "2019-01-01"
        result = runner.invoke(app, args)
        assert result.exit_code == 1
        assert "posterior" in result.output

    def test_non_numeric_land_value(self):
        """Test a non-numeric cadastral value is reported as not a number."""
        args = list(VENTA)
        args[args.index("50000")] = "abc"
        result = runner.invoke(app, args)
        assert result.exit_code == 1
        assert "debe ser un número" in result.output
