"""Recursive tree walker for quarantine removal.

Enumerates a root path and all of its descendants in a stable
pre-order, depth-first order. Enumeration errors are isolated per
entry: an unreadable directory is reported once as a failure entry
and its subtree is skipped, while siblings continue normally.
"""

import logging
import os
import stat
from collections.abc import Iterator
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class WalkEntry:
    """A single path produced by the walker.

    Attributes:
        path: Absolute path of the entry.
        error: Why the entry could not be enumerated, None if it is usable.
    """

    path: str
    error: str | None = None

    @property
    def failed(self) -> bool:
        """Check if the entry could not be enumerated."""
        return self.error is not None


def _describe(exc: OSError) -> str:
    """Format an OSError without the noisy errno prefix."""
    if exc.strerror:
        return f"{exc.strerror}: {exc.filename}" if exc.filename else exc.strerror
    return str(exc) or type(exc).__name__


class TreeWalker:
    """Walks a root path and yields every entry exactly once.

    The root is yielded first. When it is a directory, its descendants
    follow in pre-order with children sorted by name. A root that is a
    symlink to a directory is always walked. Symbolic links below the
    root are yielded as entries but only descended into when
    ``follow_symlinks`` is set, in which case each physical directory
    is descended at most once.

    Args:
        follow_symlinks: Descend into symlinked directories below the root.
    """

    def __init__(self, *, follow_symlinks: bool = False) -> None:
        self._follow_symlinks = follow_symlinks

    def walk(self, root: str | os.PathLike[str]) -> Iterator[WalkEntry]:
        """Enumerate a root and all of its descendants.

        Each call returns an independent generator.

        Args:
            root: File or directory to walk.

        Yields:
            WalkEntry for the root and each descendant.
        """
        root_path = os.path.abspath(os.fspath(root))

        if not os.path.lexists(root_path):
            logger.warning("Root does not exist: %s", root_path)
            yield WalkEntry(root_path, error=f"No such file or directory: {root_path}")
            return

        visited: set[tuple[int, int]] = set()
        # LIFO stack of paths still to visit; children pushed in reverse
        stack: list[str] = [root_path]

        while stack:
            path = stack.pop()

            try:
                # A selected root is resolved even when it is a symlink
                follow = self._follow_symlinks or path == root_path
                descend = self._should_descend(path, visited, follow=follow)
            except OSError as e:
                logger.warning("Cannot determine type of %s: %s", path, e)
                yield WalkEntry(path, error=_describe(e))
                continue

            if not descend:
                yield WalkEntry(path)
                continue

            try:
                children = self._list_children(path)
            except OSError as e:
                logger.warning("Cannot enumerate directory %s: %s", path, e)
                yield WalkEntry(path, error=_describe(e))
                continue

            yield WalkEntry(path)
            stack.extend(reversed(children))

    def _should_descend(
        self, path: str, visited: set[tuple[int, int]], *, follow: bool
    ) -> bool:
        """Decide whether a path is a directory the walker enters.

        Args:
            path: Path to inspect.
            visited: (device, inode) pairs of directories already entered.
            follow: Enter the target when the path is a symlink to a directory.

        Returns:
            True if the path's children must be enumerated.

        Raises:
            OSError: If the path cannot be stat'ed.
        """
        st = os.lstat(path)
        if stat.S_ISLNK(st.st_mode):
            if not follow:
                return False
            try:
                st = os.stat(path)
            except OSError:
                # Dangling link: a plain entry
                return False

        if not stat.S_ISDIR(st.st_mode):
            return False

        key = (st.st_dev, st.st_ino)
        if key in visited:
            logger.debug("Skipping already visited directory %s", path)
            return False
        visited.add(key)
        return True

    @staticmethod
    def _list_children(path: str) -> list[str]:
        """List the direct children of a directory, sorted by name.

        Raises:
            OSError: If the directory cannot be read.
        """
        with os.scandir(path) as it:
            names = sorted(entry.name for entry in it)
        return [os.path.join(path, name) for name in names]
