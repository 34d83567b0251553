"""Scoped access to caller-selected roots.

Every root must be acquired before it is enumerated or modified and
released afterwards, on every exit path. ``scoped_access`` wraps an
AccessProvider in a context manager that guarantees the release.
"""

import logging
import os
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Protocol

logger = logging.getLogger(__name__)


class AccessDeniedError(Exception):
    """Raised when access to a root cannot be acquired."""

    def __init__(self, path: str, detail: str) -> None:
        super().__init__(f"Do not have permission to access {path}: {detail}")
        self.path = path
        self.detail = detail


class AccessProvider(Protocol):
    """Acquire-before-use / release-after-use access to a path."""

    def acquire(self, path: str) -> None:
        """Acquire access to a path.

        Raises:
            AccessDeniedError: If access cannot be granted.
        """
        ...

    def release(self, path: str) -> None:
        """Release access previously acquired for a path."""
        ...


class FilesystemAccess:
    """Access provider backed by plain filesystem permission checks.

    A root is granted when it exists and the current process can read
    it. Active grants are counted so leaks show up in diagnostics.
    """

    def __init__(self) -> None:
        self._active: dict[str, int] = {}

    @property
    def active_count(self) -> int:
        """Number of grants not yet released."""
        return sum(self._active.values())

    def acquire(self, path: str) -> None:
        if not os.path.lexists(path):
            raise AccessDeniedError(path, "No such file or directory")
        # Dangling symlinks are still removable entries
        if os.path.exists(path) and not os.access(path, os.R_OK):
            raise AccessDeniedError(path, "Permission denied")

        self._active[path] = self._active.get(path, 0) + 1
        logger.debug("Acquired access to %s", path)

    def release(self, path: str) -> None:
        count = self._active.get(path, 0)
        if count <= 1:
            self._active.pop(path, None)
        else:
            self._active[path] = count - 1
        logger.debug("Released access to %s", path)


@contextmanager
def scoped_access(provider: AccessProvider, path: str) -> Iterator[str]:
    """Hold access to a path for the duration of a ``with`` block.

    Release is skipped only when acquisition itself failed.

    Args:
        provider: Access provider to acquire from.
        path: Root path to acquire.

    Yields:
        The acquired path.

    Raises:
        AccessDeniedError: If access cannot be acquired.
    """
    provider.acquire(path)
    try:
        yield path
    finally:
        provider.release(path)
