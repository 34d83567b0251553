"""Read-only quarantine scanner.

Walks roots the same way a removal run does, but only queries the
attribute. Used to preview which entries a run would clean.
"""

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from gatepass.quarantine.gateway import AttributeGateway
from gatepass.quarantine.models import Presence
from gatepass.quarantine.walker import TreeWalker

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ScannedEntry:
    """Presence of the quarantine attribute on one entry.

    Attributes:
        path: Absolute path of the entry.
        presence: Query answer for the entry.
        reason: Diagnostic text when the entry could not be checked.
    """

    path: str
    presence: Presence
    reason: str | None = None

    @property
    def quarantined(self) -> bool:
        """Check if the entry carries the attribute."""
        return self.presence == Presence.PRESENT

    @property
    def failed(self) -> bool:
        """Check if the entry could not be checked."""
        return self.presence == Presence.QUERY_FAILED


class QuarantineScanner:
    """Reports the quarantine attribute state of every entry under roots.

    Args:
        gateway: Attribute gateway used for queries.
        walker: Tree walker used for enumeration.
    """

    def __init__(self, gateway: AttributeGateway, walker: TreeWalker | None = None) -> None:
        self._gateway = gateway
        self._walker = walker or TreeWalker()

    def scan(self, roots: Sequence[str]) -> Iterator[ScannedEntry]:
        """Query every entry under each root, in walk order.

        Args:
            roots: Root paths to scan.

        Yields:
            ScannedEntry for each visited entry.
        """
        for root in roots:
            for entry in self._walker.walk(root):
                if entry.error is not None:
                    yield ScannedEntry(entry.path, Presence.QUERY_FAILED, entry.error)
                    continue

                result = self._gateway.query(entry.path)
                yield ScannedEntry(entry.path, result.presence, result.reason)
