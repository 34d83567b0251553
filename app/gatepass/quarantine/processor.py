"""Single-entry quarantine processing.

Applies the check-then-remove operation to one path and classifies
the outcome as a ProcessedItem.
"""

import logging

from gatepass.quarantine.gateway import AttributeGateway
from gatepass.quarantine.models import ItemStatus, Presence, ProcessedItem

logger = logging.getLogger(__name__)


class ItemProcessor:
    """Classifies single filesystem entries.

    ``classify`` never raises: every outcome, including failures of
    the underlying tool, is returned as an ItemStatus.

    Args:
        gateway: Attribute gateway used for the query and delete calls.
    """

    def __init__(self, gateway: AttributeGateway) -> None:
        self._gateway = gateway

    def classify(self, path: str) -> ProcessedItem:
        """Remove the quarantine attribute from a path if present.

        Args:
            path: Absolute path of the entry.

        Returns:
            ProcessedItem with REMOVED, NOT_FOUND, or FAILED status.
        """
        try:
            query = self._gateway.query(path)

            if query.presence == Presence.ABSENT:
                return ProcessedItem(path=path, status=ItemStatus.NOT_FOUND)
            if query.presence == Presence.QUERY_FAILED:
                return self.failed(path, query.reason or "Attribute query failed")

            removal = self._gateway.remove(path)
            if removal.success:
                return ProcessedItem(path=path, status=ItemStatus.REMOVED)
            return self.failed(path, removal.reason or "Failed to remove the quarantine attribute")
        except Exception as e:
            logger.exception("Unexpected error processing %s", path)
            return self.failed(path, str(e) or type(e).__name__)

    @staticmethod
    def failed(path: str, reason: str) -> ProcessedItem:
        """Build a FAILED item for an entry that could not be processed.

        Args:
            path: Absolute path of the entry.
            reason: Diagnostic text.

        Returns:
            ProcessedItem with FAILED status.
        """
        return ProcessedItem(path=path, status=ItemStatus.FAILED, reason=reason)
