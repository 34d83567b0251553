"""Shared Rich consoles and message helpers.

Results go to ``console`` (stdout); errors, warnings, the progress
spinner, and log records go to ``err_console`` (stderr).
"""

import sys

from rich.console import Console
from rich.markup import escape

from gatepass.core.theme import get_theme


def _make_console(*, stderr: bool) -> Console:
    stream = sys.stderr if stderr else sys.stdout
    # Full hex colors on a terminal, plain text when piped or captured
    color_system = "truecolor" if stream.isatty() else None
    return Console(theme=get_theme(), stderr=stderr, color_system=color_system)


console = _make_console(stderr=False)
err_console = _make_console(stderr=True)


def print_info(message: str) -> None:
    console.print(f"[info]{escape(message)}[/]")


def print_success(message: str) -> None:
    console.print(f"[success]{escape(message)}[/]")


def print_warning(message: str) -> None:
    err_console.print(f"[warning]Warning:[/] {escape(message)}")


def print_error(message: str) -> None:
    """Print ``Error: <message>`` to stderr.

    The message is printed literally; it is not parsed as markup.
    """
    err_console.print(f"[error]Error:[/] {escape(message)}")
