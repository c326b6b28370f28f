"""Scanner for working copies already present on disk."""

import os
from collections.abc import Iterable, Iterator
from pathlib import Path

import structlog

from mgit.core.models.config import expand_placeholders
from mgit.core.models.repository import LocalRepoDescriptor

logger = structlog.get_logger(__name__)

GIT_MARKER = ".git"


class LocalRepoScanner:
    """Finds working copies below a set of root directories.

    A directory holding a ``.git`` directory is a working copy. The
    marker itself is never descended into, but the rest of the working
    copy is, so nested working copies are still found.
    """

    def __init__(self, marker: str = GIT_MARKER) -> None:
        self._marker = marker

    def scan(self, roots: Iterable[str | Path]) -> Iterator[LocalRepoDescriptor]:
        """Yield one descriptor per working copy under every root."""
        for root in roots:
            yield from self.scan_root(root)

    def scan_root(self, root: str | Path) -> Iterator[LocalRepoDescriptor]:
        root_path = Path(expand_placeholders(str(root)))
        if not root_path.is_dir():
            logger.warning("Scan root is not a directory, skipping", root=str(root_path))
            return

        def on_error(error: OSError) -> None:
            logger.warning(
                "Unable to scan directory",
                root=str(root_path),
                path=error.filename,
                error=error.strerror or str(error),
            )

        found = 0
        for dirpath, dirnames, _filenames in os.walk(root_path, onerror=on_error):
            if self._marker in dirnames:
                dirnames.remove(self._marker)
                found += 1
                yield LocalRepoDescriptor(directory=Path(dirpath))

        logger.debug("Scanned root", root=str(root_path), repositories=found)
