"""CLI package for nmprune.

This package contains the Typer application and its display helpers.
"""

from nmprune.cli.main import app

__all__ = ["app"]
