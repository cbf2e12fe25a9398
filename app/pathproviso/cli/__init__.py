"""CLI package for pathproviso.

This package contains the Typer application and all commands.
"""

from pathproviso.cli.main import app

__all__ = ["app"]
