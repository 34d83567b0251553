"""gatepass configuration and settings.

This module provides the configuration model and I/O functions for
the quarantine removal engine: which ``xattr`` executable to call,
how long a single call may take, and whether the tree walker follows
symbolic links into directories.

Configuration is stored in ~/.config/gatepass/config.toml
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from gatepass.core.paths import get_config_path

logger = logging.getLogger(__name__)

DEFAULT_XATTR_COMMAND = "xattr"
DEFAULT_TIMEOUT_SECONDS = 30.0


class GatePassConfig(BaseModel):
    """Configuration for quarantine removal runs.

    Attributes:
        xattr_command: Executable used to query and delete the attribute.
        timeout_seconds: Maximum time for a single xattr call (1-600s).
        follow_symlinks: Descend into symlinked directories while walking.
    """

    model_config = ConfigDict(extra="forbid")

    xattr_command: Annotated[
        str,
        Field(min_length=1, description="xattr executable name or absolute path"),
    ] = DEFAULT_XATTR_COMMAND
    timeout_seconds: Annotated[
        float,
        Field(ge=1, le=600, description="Timeout per xattr call in seconds (1-600)"),
    ] = DEFAULT_TIMEOUT_SECONDS
    follow_symlinks: Annotated[
        bool,
        Field(description="Descend into symlinked directories"),
    ] = False


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the config file is not found."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> GatePassConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated GatePassConfig object.

    Raises:
        ConfigNotFoundError: If the config file doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        raise ConfigNotFoundError(f"Config not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return GatePassConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid config content: {e}") from e


def load_config_or_default(path: Path | None = None) -> GatePassConfig:
    """Load configuration, falling back to defaults when no file exists.

    Parse and validation errors are not swallowed.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Loaded or default GatePassConfig.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    try:
        return load_config(path)
    except ConfigNotFoundError:
        logger.debug("No config file found, using defaults")
        return GatePassConfig()


def save_config(config: GatePassConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The GatePassConfig object to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(config.model_dump(), f)
        # os.replace() is atomic on POSIX
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path
