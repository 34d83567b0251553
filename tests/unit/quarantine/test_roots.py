"""Unit tests for root collection."""

from pathlib import Path

import pytest
from gatepass.quarantine.roots import collect_roots, read_root_list


class TestReadRootList:
    """Tests for read_root_list."""

    def test_skips_blank_and_comment_lines(self, tmp_path: Path) -> None:
        """Blank lines and comments are ignored."""
        list_file = tmp_path / "roots.txt"
        list_file.write_text("# downloads\n/tmp/a.dmg\n\n  /tmp/My App.app  \n")

        assert read_root_list(list_file) == [Path("/tmp/a.dmg"), Path("/tmp/My App.app")]

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        """Unreadable lists raise OSError."""
        with pytest.raises(OSError):
            read_root_list(tmp_path / "nope.txt")


class TestCollectRoots:
    """Tests for collect_roots."""

    def test_merges_sources_in_order(self) -> None:
        """Sources are concatenated in the order given."""
        roots = collect_roots([Path("/tmp/b"), Path("/tmp/a")], [Path("/tmp/c")])

        assert roots == ["/tmp/b", "/tmp/a", "/tmp/c"]

    def test_deduplicates(self) -> None:
        """The first occurrence of a path wins."""
        roots = collect_roots([Path("/tmp/a"), Path("/tmp/b")], [Path("/tmp/a")])

        assert roots == ["/tmp/a", "/tmp/b"]

    def test_relative_made_absolute(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Relative paths are anchored at the working directory."""
        monkeypatch.chdir(tmp_path)

        assert collect_roots([Path("x.txt")]) == [str(tmp_path / "x.txt")]

    def test_expands_home(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Tilde paths are expanded."""
        monkeypatch.setenv("HOME", str(tmp_path))

        assert collect_roots([Path("~/Downloads")]) == [str(tmp_path / "Downloads")]

    def test_empty_raises(self) -> None:
        """At least one root is required."""
        with pytest.raises(ValueError, match="No files or folders given"):
            collect_roots([], [])
