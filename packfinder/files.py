"""Lazy source file enumeration under a directory tree."""

from __future__ import annotations

import logging
import os
from typing import Iterable, Iterator

logger = logging.getLogger(__name__)

DEFAULT_IGNORE = {
    ".git", ".svn", ".hg", "CVS", "node_modules", "bin", "bin-debug",
    "bin-release", "obj", "build", "dist", "html-template", ".settings",
    "__pycache__",
}


def _should_ignore(name: str, ignore_set: set[str]) -> bool:
    """Check if a directory or file name matches ignore patterns."""
    return name in ignore_set or name.startswith(".")


def _on_walk_error(err: OSError) -> None:
    logger.warning(f"Skipping unreadable directory {err.filename}: {err.strerror}")


def iter_source_files(
    root: str, exclude_patterns: Iterable[str] = ()
) -> Iterator[str]:
    """Yield every file path under ``root``, skipping ignored directories.

    Paths keep ``root`` as their prefix and use ``/`` separators. Nothing is
    yielded when ``root`` is empty or not a directory.
    """
    if not root or not os.path.isdir(root):
        return

    ignore_set = set(DEFAULT_IGNORE)
    ignore_set.update(exclude_patterns)

    for dirpath, dirnames, filenames in os.walk(root, onerror=_on_walk_error):
        # Filter ignored directories in-place
        dirnames[:] = [
            d for d in sorted(dirnames)
            if not _should_ignore(d, ignore_set)
        ]

        for filename in sorted(filenames):
            if filename.startswith("."):
                continue
            yield os.path.join(dirpath, filename).replace("\\", "/")
