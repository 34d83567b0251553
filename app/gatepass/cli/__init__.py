"""CLI package for gatepass.

This package contains the Typer application and all subcommands.
"""

from gatepass.cli.main import app

__all__ = ["app"]
