"""Allow running nmprune with ``python -m nmprune``."""

from nmprune.cli.main import app

app()
