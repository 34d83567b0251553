"""Shared Rich display functions for run results.

Provides table builders and summary printers for processed items
and scanned entries.
"""

from rich.markup import escape
from rich.table import Table

from gatepass.quarantine.models import ItemStatus, Presence, ProcessedItem, ProcessingState
from gatepass.quarantine.scanner import ScannedEntry
from gatepass.utils.formatting import console, print_success

_STATUS_LABELS: dict[ItemStatus, str] = {
    ItemStatus.REMOVED: "[removed]removed[/removed]",
    ItemStatus.NOT_FOUND: "[not_found]not found[/not_found]",
    ItemStatus.FAILED: "[failed]failed[/failed]",
}

_PRESENCE_LABELS: dict[Presence, str] = {
    Presence.PRESENT: "[quarantined]quarantined[/quarantined]",
    Presence.ABSENT: "[not_found]clean[/not_found]",
    Presence.QUERY_FAILED: "[failed]failed[/failed]",
}


def format_status(status: ItemStatus) -> str:
    """Format an item status with color markup."""
    return _STATUS_LABELS[status]


def create_results_table(items: tuple[ProcessedItem, ...] | list[ProcessedItem]) -> Table:
    """Create a Rich table displaying processed items in run order.

    Args:
        items: Processed items of a finished run.

    Returns:
        Rich Table configured for results display.
    """
    table = Table(
        title="Results",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Status", width=10, justify="center")
    table.add_column("Path", overflow="fold")
    table.add_column("Details", style="muted")

    for item in items:
        table.add_row(format_status(item.status), escape(item.path), escape(item.reason or ""))

    return table


def create_scan_table(entries: list[ScannedEntry]) -> Table:
    """Create a Rich table displaying scanned entries.

    Args:
        entries: Entries to display.

    Returns:
        Rich Table configured for scan display.
    """
    table = Table(
        title="Quarantined Entries",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Status", width=12, justify="center")
    table.add_column("Path", overflow="fold")
    table.add_column("Details", style="muted")

    for entry in entries:
        table.add_row(
            _PRESENCE_LABELS[entry.presence], escape(entry.path), escape(entry.reason or "")
        )

    return table


def print_results_summary(state: ProcessingState) -> None:
    """Print a summary of a finished run.

    Shows a success message when nothing failed, or the per-status
    counts otherwise.

    Args:
        state: Finished processing state.
    """
    removed = state.count(ItemStatus.REMOVED)
    not_found = state.count(ItemStatus.NOT_FOUND)
    failed = state.count(ItemStatus.FAILED)

    if failed == 0:
        print_success(
            f"Processed {len(state.items)} item(s): {removed} removed, {not_found} not found."
        )
    else:
        console.print(
            f"\n[removed]{removed} removed[/removed], "
            f"[not_found]{not_found} not found[/not_found], "
            f"[failed]{failed} failed[/failed]"
        )
