"""Allow ``python -m plusvalia_municipal``."""

from plusvalia_municipal.cli.app import app

app()
