"""CLI commands for gatepass.

This package contains all subcommand implementations.
"""

from gatepass.cli.commands import clean, config, scan

__all__ = ["clean", "config", "scan"]
