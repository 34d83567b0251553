"""Unit tests for console construction and message helpers."""

# pyright: reportPrivateUsage=false

import io

import pytest
from gatepass.utils import formatting
from gatepass.utils.formatting import _make_console


class _FakeTty(io.StringIO):
    def isatty(self) -> bool:
        return True


class TestMakeConsole:
    """Tests for _make_console."""

    def test_no_color_when_piped(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Captured output gets no color system."""
        monkeypatch.setattr("sys.stdout", io.StringIO())

        assert _make_console(stderr=False).color_system is None

    def test_truecolor_on_terminal(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """A terminal gets full hex colors."""
        monkeypatch.setattr("sys.stderr", _FakeTty())

        assert _make_console(stderr=True).color_system == "truecolor"


class TestPrintError:
    """Tests for print_error."""

    def test_brackets_printed_literally(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Markup-like text in messages is not interpreted."""
        buf = io.StringIO()
        monkeypatch.setattr(formatting.err_console, "file", buf)

        formatting.print_error("cannot open Setup [1].dmg")

        assert "Error: cannot open Setup [1].dmg" in buf.getvalue()
