"""Filesystem path to dotted package path conversion."""

from __future__ import annotations

import re
from typing import Iterable

from packfinder.config import SOURCE_EXTENSIONS

_EXTENSION_RE = re.compile(
    "(" + "|".join(re.escape(ext) for ext in SOURCE_EXTENSIONS) + ")$"
)


def truncate_to_src(path: str, source_roots: Iterable[str]) -> str:
    """Trim a path down to what follows its source root directory.

    Each root name is tried in order against the already-trimmed path. The
    first path segment equal to the name is removed together with
    everything before it and its trailing separator.
    """
    for root in source_roots:
        if not root:
            continue
        segments = path.split("/")
        if root in segments:
            path = "/".join(segments[segments.index(root) + 1:])
    return path


def strip_extension(path: str) -> str:
    return _EXTENSION_RE.sub("", path)


def normalize(raw_path: str, source_roots: Iterable[str]) -> str:
    """Convert a raw file path into a dotted package path.

    >>> normalize("/home/me/project/src/com/foo/Bar.as", ["src", "lib"])
    'com.foo.Bar'
    """
    path = raw_path.replace("\\", "/")
    path = truncate_to_src(path, source_roots)
    path = strip_extension(path).replace("/", ".")
    if path.startswith("."):
        path = path[1:]
    return path
