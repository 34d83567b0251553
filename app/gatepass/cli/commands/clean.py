"""Clean command implementation.

Removes the quarantine attribute from the given files and folders,
recursively, and reports the outcome for every visited entry.
"""

import json
from pathlib import Path
from typing import Annotated

import typer

from gatepass.cli.display import create_results_table, print_results_summary
from gatepass.cli.types import (
    OutputFormat,
    get_coordinator,
    require_config,
    require_gateway,
)
from gatepass.quarantine.models import ItemStatus, ProcessedItem, ProcessingPhase, ProcessingState
from gatepass.quarantine.roots import collect_roots, read_root_list
from gatepass.utils.formatting import console, err_console, print_error, print_info


def clean(
    paths: Annotated[
        list[Path] | None,
        typer.Argument(help="Files or folders to clean."),
    ] = None,
    from_file: Annotated[
        Path | None,
        typer.Option(
            "--from-file",
            "-F",
            help="Read additional paths from a file, one per line.",
        ),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
    export_path: Annotated[
        Path | None,
        typer.Option(
            "--export",
            "-e",
            help="Export results to JSON file.",
        ),
    ] = None,
) -> None:
    """Remove the com.apple.quarantine attribute from files and folders."""
    roots = _gather_roots(paths or [], from_file)
    config = require_config()
    gateway = require_gateway(config)
    coordinator = get_coordinator(config, gateway)

    with err_console.status("Processing...", spinner="dots"):
        coordinator.start(roots)
        state = coordinator.wait()

    if state.phase == ProcessingPhase.FINISHED:
        _render_finished(state, output_format, export_path)
    elif state.phase == ProcessingPhase.ERROR:
        print_error(state.message or "Processing failed")
        raise typer.Exit(code=1)
    else:
        print_error(f"Run did not complete (state: {state.phase.value})")
        raise typer.Exit(code=1)

    if state.count(ItemStatus.FAILED):
        raise typer.Exit(code=1)


# === Private helper functions ===


def _gather_roots(paths: list[Path], from_file: Path | None) -> list[str]:
    """Collect every root before the run starts."""
    listed: list[Path] = []
    if from_file is not None:
        try:
            listed = read_root_list(from_file)
        except OSError as e:
            print_error(f"Cannot read path list {from_file}: {e}")
            raise typer.Exit(code=1) from e

    try:
        return collect_roots(paths, listed)
    except ValueError as e:
        print_error(str(e))
        raise typer.Exit(code=2) from e


def _render_finished(
    state: ProcessingState,
    output_format: OutputFormat,
    export_path: Path | None,
) -> None:
    """Display the items of a finished run."""
    if export_path is not None:
        _export_results(list(state.items), export_path)

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps([item.to_dict() for item in state.items]))
        return

    console.print(create_results_table(state.items))
    print_results_summary(state)


def _export_results(items: list[ProcessedItem], export_path: Path) -> None:
    """Export processed items to a JSON file."""
    export_path = export_path.resolve()
    if export_path.is_dir():
        print_error(f"Export path is a directory: {export_path}")
        raise typer.Exit(code=1)

    data = [item.to_dict() for item in items]
    try:
        export_path.parent.mkdir(parents=True, exist_ok=True)
        export_path.write_text(json.dumps(data, indent=2))
        print_info(f"Results exported to {export_path}")
    except OSError as e:
        print_error(f"Failed to export: {e}")
        raise typer.Exit(code=1) from e
