"""Quarantine attribute gateway.

Thin wrapper around the ``xattr`` command for querying and deleting
the ``com.apple.quarantine`` extended attribute. Every call spawns
one process; there are no retries and no state shared between calls.
"""

import logging
import os
import subprocess

from gatepass.quarantine.models import Presence, PresenceResult, RemoveResult
from gatepass.utils.shell import command_exists, run_command

logger = logging.getLogger(__name__)

QUARANTINE_ATTRIBUTE = "com.apple.quarantine"

REMOVE_FALLBACK_REASON = "Failed to remove the quarantine attribute"


class AttributeGateway:
    """Queries and deletes the quarantine attribute via ``xattr``.

    Args:
        xattr_command: Executable name or absolute path of ``xattr``.
        timeout: Maximum time in seconds for a single call.
    """

    def __init__(self, xattr_command: str = "xattr", timeout: float = 30.0) -> None:
        self._xattr = xattr_command
        self._timeout = timeout

    def is_available(self) -> bool:
        """Check if the configured xattr executable can be found.

        Returns:
            True if the command exists on PATH (or at the given path).
        """
        return command_exists(self._xattr)

    def query(self, path: str) -> PresenceResult:
        """Check whether the quarantine attribute exists on a path.

        ``xattr -p`` exits non-zero when the attribute is missing, so a
        non-zero exit or an empty successful output both mean ABSENT.
        Only a check that could not be performed at all is reported as
        QUERY_FAILED.

        Args:
            path: Filesystem path to check.

        Returns:
            PresenceResult describing the attribute's presence.
        """
        if not os.path.lexists(path):
            return PresenceResult(Presence.QUERY_FAILED, f"No such file or directory: {path}")

        try:
            result = run_command(
                [self._xattr, "-p", QUARANTINE_ATTRIBUTE, path],
                timeout=self._timeout,
            )
        except subprocess.TimeoutExpired:
            logger.warning("xattr query timed out for %s", path)
            return PresenceResult(
                Presence.QUERY_FAILED,
                f"xattr timed out after {self._timeout:g}s",
            )
        except (FileNotFoundError, OSError) as e:
            logger.warning("Cannot run %s: %s", self._xattr, e)
            return PresenceResult(Presence.QUERY_FAILED, f"Failed to execute command: {e}")

        if not result.success or not result.stdout.strip():
            logger.debug("No quarantine attribute on %s", path)
            return PresenceResult(Presence.ABSENT)

        logger.debug("Quarantine attribute present on %s", path)
        return PresenceResult(Presence.PRESENT)

    def remove(self, path: str) -> RemoveResult:
        """Delete the quarantine attribute from a path.

        Args:
            path: Filesystem path to clean.

        Returns:
            RemoveResult, carrying the tool's diagnostic text on failure.
        """
        try:
            result = run_command(
                [self._xattr, "-d", QUARANTINE_ATTRIBUTE, path],
                timeout=self._timeout,
            )
        except subprocess.TimeoutExpired:
            logger.warning("xattr delete timed out for %s", path)
            return RemoveResult(success=False, reason=f"xattr timed out after {self._timeout:g}s")
        except (FileNotFoundError, OSError) as e:
            logger.warning("Cannot run %s: %s", self._xattr, e)
            return RemoveResult(success=False, reason=f"Failed to execute command: {e}")

        if result.success:
            logger.debug("Removed quarantine attribute from %s", path)
            return RemoveResult(success=True)

        reason = result.stderr.strip() or result.stdout.strip() or REMOVE_FALLBACK_REASON
        logger.warning("Failed to remove quarantine attribute from %s: %s", path, reason)
        return RemoveResult(success=False, reason=reason)
