"""Shared types and factories for CLI commands.

This module provides common enums and the helpers that turn the
loaded configuration into engine components, so every command builds
its gateway, walker, and coordinator the same way.
"""

from enum import Enum

import typer

from gatepass.core.config import ConfigError, GatePassConfig, load_config_or_default
from gatepass.quarantine.coordinator import BatchCoordinator
from gatepass.quarantine.gateway import AttributeGateway
from gatepass.quarantine.processor import ItemProcessor
from gatepass.quarantine.scanner import QuarantineScanner
from gatepass.quarantine.walker import TreeWalker
from gatepass.utils.formatting import print_error


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"


def require_config() -> GatePassConfig:
    """Load the configuration or exit with an error message.

    Returns:
        Loaded configuration, or defaults when no file exists.

    Raises:
        typer.Exit: If the config file exists but is invalid.
    """
    try:
        return load_config_or_default()
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def get_gateway(config: GatePassConfig) -> AttributeGateway:
    """Create the attribute gateway described by the configuration."""
    return AttributeGateway(
        xattr_command=config.xattr_command,
        timeout=config.timeout_seconds,
    )


def get_walker(config: GatePassConfig) -> TreeWalker:
    """Create the tree walker described by the configuration."""
    return TreeWalker(follow_symlinks=config.follow_symlinks)


def get_coordinator(config: GatePassConfig, gateway: AttributeGateway) -> BatchCoordinator:
    """Create a batch coordinator wired to the given gateway.

    Args:
        config: Loaded configuration.
        gateway: Gateway used for every attribute call.

    Returns:
        Idle BatchCoordinator.
    """
    return BatchCoordinator(ItemProcessor(gateway), get_walker(config))


def get_scanner(config: GatePassConfig, gateway: AttributeGateway) -> QuarantineScanner:
    """Create a read-only scanner wired to the given gateway."""
    return QuarantineScanner(gateway, get_walker(config))


def require_gateway(config: GatePassConfig) -> AttributeGateway:
    """Create the gateway or exit when xattr is not installed.

    Raises:
        typer.Exit: If the configured xattr command cannot be found.
    """
    gateway = get_gateway(config)
    if not gateway.is_available():
        print_error(f"xattr command not found: {config.xattr_command}")
        raise typer.Exit(code=1)
    return gateway
