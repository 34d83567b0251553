"""Unit tests for QuarantineScanner."""

from pathlib import Path
from typing import Any

from gatepass.quarantine.models import Presence
from gatepass.quarantine.scanner import QuarantineScanner


class TestQuarantineScanner:
    """Tests for read-only scanning."""

    def test_reports_presence_without_removing(
        self, app_bundle: Path, fake_gateway_cls: Any
    ) -> None:
        """Scanning queries every entry and never deletes."""
        plist = app_bundle / "Contents" / "Info.plist"
        gateway = fake_gateway_cls(quarantined=[plist])

        entries = list(QuarantineScanner(gateway).scan([str(app_bundle)]))

        assert len(entries) == 5
        quarantined = [e.path for e in entries if e.quarantined]
        assert quarantined == [str(plist)]
        assert all(kind == "query" for kind, _ in gateway.calls)
        assert str(plist) in gateway.quarantined

    def test_walk_failures_reported(self, tmp_path: Path, fake_gateway_cls: Any) -> None:
        """Missing roots come back as failed entries."""
        missing = str(tmp_path / "gone")

        entries = list(QuarantineScanner(fake_gateway_cls()).scan([missing]))

        assert len(entries) == 1
        assert entries[0].presence == Presence.QUERY_FAILED
        assert entries[0].failed
        assert not entries[0].quarantined

    def test_multiple_roots_in_order(self, tmp_path: Path, fake_gateway_cls: Any) -> None:
        """Roots are scanned in the order given."""
        b = tmp_path / "b.txt"
        a = tmp_path / "a.txt"
        b.write_text("x")
        a.write_text("x")

        entries = list(QuarantineScanner(fake_gateway_cls()).scan([str(b), str(a)]))

        assert [e.path for e in entries] == [str(b), str(a)]
        assert all(e.presence == Presence.ABSENT for e in entries)
