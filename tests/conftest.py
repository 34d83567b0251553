"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Iterable
from pathlib import Path

import pytest
from gatepass.quarantine.models import Presence, PresenceResult, RemoveResult


class FakeGateway:
    """In-memory stand-in for AttributeGateway.

    Paths in ``quarantined`` carry the attribute until removed.
    """

    def __init__(
        self,
        quarantined: Iterable[str | Path] = (),
        query_failures: dict[str, str] | None = None,
        remove_failures: dict[str, str] | None = None,
    ) -> None:
        self.quarantined = {str(p) for p in quarantined}
        self.query_failures = query_failures or {}
        self.remove_failures = remove_failures or {}
        self.calls: list[tuple[str, str]] = []

    def is_available(self) -> bool:
        return True

    def query(self, path: str) -> PresenceResult:
        self.calls.append(("query", path))
        if path in self.query_failures:
            return PresenceResult(Presence.QUERY_FAILED, self.query_failures[path])
        if path in self.quarantined:
            return PresenceResult(Presence.PRESENT)
        return PresenceResult(Presence.ABSENT)

    def remove(self, path: str) -> RemoveResult:
        self.calls.append(("remove", path))
        if path in self.remove_failures:
            return RemoveResult(success=False, reason=self.remove_failures[path])
        self.quarantined.discard(path)
        return RemoveResult(success=True)


@pytest.fixture(autouse=True)
def isolated_config_home(
    tmp_path_factory: pytest.TempPathFactory,
    monkeypatch: pytest.MonkeyPatch,
) -> Path:
    """Point XDG_CONFIG_HOME at an empty temporary directory."""
    config_home = tmp_path_factory.mktemp("config-home")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture
def fake_gateway_cls() -> type[FakeGateway]:
    """The FakeGateway class, for tests that build their own instances."""
    return FakeGateway


@pytest.fixture
def app_bundle(tmp_path: Path) -> Path:
    """A small application bundle tree.

    Layout::

        App.app/
            Contents/
                Info.plist
                MacOS/
                    bin
    """
    bundle = tmp_path / "App.app"
    (bundle / "Contents" / "MacOS").mkdir(parents=True)
    (bundle / "Contents" / "Info.plist").write_text("<plist/>")
    (bundle / "Contents" / "MacOS" / "bin").write_text("#!/bin/sh\n")
    return bundle
