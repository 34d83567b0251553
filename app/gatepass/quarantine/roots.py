"""Root selection for quarantine removal runs.

Gathers every caller-supplied root before a run starts, so the
coordinator always receives the complete, ordered root list.
"""

import logging
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)


def read_root_list(list_file: Path) -> list[Path]:
    """Read root paths from a text file, one per line.

    Blank lines and lines starting with ``#`` are ignored.

    Args:
        list_file: File containing root paths.

    Returns:
        Paths in file order.

    Raises:
        OSError: If the file cannot be read.
    """
    roots: list[Path] = []
    for line in list_file.read_text(encoding="utf-8").splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        roots.append(Path(stripped))
    return roots


def collect_roots(*sources: Iterable[Path]) -> list[str]:
    """Merge root sources into one ordered, de-duplicated list.

    Each path is expanded (``~``) and made absolute without resolving
    symlinks. The first occurrence of a path wins.

    Args:
        sources: Iterables of paths, consumed in order.

    Returns:
        Absolute root path strings.

    Raises:
        ValueError: If no root was supplied.
    """
    seen: set[str] = set()
    roots: list[str] = []

    for source in sources:
        for raw in source:
            path = str(Path(raw).expanduser().absolute())
            if path in seen:
                logger.debug("Ignoring duplicate root %s", path)
                continue
            seen.add(path)
            roots.append(path)

    if not roots:
        msg = "No files or folders given"
        raise ValueError(msg)
    return roots
