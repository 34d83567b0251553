"""Configuration commands.

Shows the effective configuration and writes a default config file.
"""

from typing import Annotated

import typer
from rich.table import Table

from gatepass.core.config import (
    ConfigError,
    ConfigNotFoundError,
    GatePassConfig,
    load_config,
    save_config,
)
from gatepass.core.paths import ensure_config_dir, get_config_path
from gatepass.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show or create the gatepass configuration.",
    no_args_is_help=True,
)


@app.command()
def show() -> None:
    """Show the effective configuration."""
    config_path = get_config_path()
    try:
        config = load_config(config_path)
        source = str(config_path)
    except ConfigNotFoundError:
        config = GatePassConfig()
        source = "defaults"
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    table = Table(
        title=f"Configuration ({source})",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Setting", no_wrap=True)
    table.add_column("Value", style="info")

    for key, value in config.model_dump().items():
        table.add_row(key, str(value))

    console.print(table)


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a config file with default settings."""
    config_path = get_config_path()
    if config_path.exists() and not force:
        print_info(f"Config already exists: {config_path} (use --force to overwrite)")
        return

    try:
        ensure_config_dir()
        saved = save_config(GatePassConfig(), config_path)
    except (ConfigError, RuntimeError) as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Config written to {saved}")
