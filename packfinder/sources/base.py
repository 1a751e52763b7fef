"""Abstract base for candidate sources."""

from __future__ import annotations

from typing import Iterator, Protocol, runtime_checkable


@runtime_checkable
class SourceScanner(Protocol):
    """Protocol that all candidate sources must implement."""

    name: str
    label: str
    # Whether hits are filesystem paths that still need source root truncation
    source_relative: bool

    def scan(self, word: str) -> Iterator[str]:
        """Yield slash separated paths whose class name starts with ``word``."""
        ...
