"""Locations of gatepass's user files.

Only configuration is stored on disk, under the XDG config home:
``$XDG_CONFIG_HOME/gatepass/`` or ``~/.config/gatepass/``.
"""

import os
from pathlib import Path

APP_NAME = "gatepass"


def get_config_dir() -> Path:
    """Directory holding config.toml and theme.toml."""
    xdg_config_home = os.environ.get("XDG_CONFIG_HOME")
    base = Path(xdg_config_home) if xdg_config_home else Path.home() / ".config"
    return base / APP_NAME


def get_config_path() -> Path:
    return get_config_dir() / "config.toml"


def get_user_theme_path() -> Path:
    return get_config_dir() / "theme.toml"


def ensure_config_dir() -> Path:
    """Create the config directory (and parents) if missing.

    Returns:
        The config directory.

    Raises:
        RuntimeError: If the directory cannot be created.
    """
    path = get_config_dir()
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        msg = f"Cannot create config directory {path}: {e.strerror or e}"
        raise RuntimeError(msg) from e
    return path
