"""Scan command implementation.

Lists entries carrying the quarantine attribute without modifying
anything.
"""

import json
from pathlib import Path
from typing import Annotated

import typer

from gatepass.cli.display import create_scan_table
from gatepass.cli.types import OutputFormat, get_scanner, require_config, require_gateway
from gatepass.quarantine.roots import collect_roots
from gatepass.quarantine.scanner import ScannedEntry
from gatepass.utils.formatting import console, print_error, print_success, print_warning


def scan(
    paths: Annotated[
        list[Path],
        typer.Argument(help="Files or folders to scan."),
    ],
    show_all: Annotated[
        bool,
        typer.Option("--all", "-a", help="Also list entries without the attribute."),
    ] = False,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """List files and folders carrying the com.apple.quarantine attribute."""
    try:
        roots = collect_roots(paths)
    except ValueError as e:
        print_error(str(e))
        raise typer.Exit(code=2) from e

    config = require_config()
    scanner = get_scanner(config, require_gateway(config))

    entries = list(scanner.scan(roots))
    quarantined = [e for e in entries if e.quarantined]
    failed = [e for e in entries if e.failed]
    shown = entries if show_all else [e for e in entries if e.quarantined or e.failed]

    if output_format == OutputFormat.JSON:
        _print_json(shown)
    elif not shown:
        print_success(f"No quarantined entries found ({len(entries)} checked).")
    else:
        console.print(create_scan_table(shown))
        console.print(
            f"\n[dim]Found {len(quarantined)} quarantined of {len(entries)} checked[/dim]"
        )

    if failed:
        if output_format == OutputFormat.TABLE:
            noun = "entry" if len(failed) == 1 else "entries"
            print_warning(f"{len(failed)} {noun} could not be checked")
        raise typer.Exit(code=1)


def _print_json(entries: list[ScannedEntry]) -> None:
    """Display scanned entries as JSON."""
    data = [
        {
            "path": e.path,
            "presence": e.presence.value,
            "reason": e.reason,
        }
        for e in entries
    ]
    console.print_json(json.dumps(data))
