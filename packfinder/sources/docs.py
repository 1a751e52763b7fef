"""Candidates from the bundled documentation table of contents."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

from packfinder.config import ResolverConfig
from packfinder.search.matching import doc_link_pattern, extract_doc_path

BUNDLED_DOC_INDEX = Path(__file__).resolve().parent.parent / "data" / "doc_dictionary.xml"


class DocumentationScanner:
    """Reads class and package member links from the help index.

    The index lists the flash, fl and mx packages. A missing index file is
    a broken installation and surfaces as an ``OSError`` from ``scan``.
    """

    name = "documentation"
    label = "Searching documentation index"
    source_relative = False

    def __init__(self, config: ResolverConfig) -> None:
        self.index_path = Path(config.doc_index) if config.doc_index else BUNDLED_DOC_INDEX

    def scan(self, word: str) -> Iterator[str]:
        pattern = doc_link_pattern(word)
        with open(self.index_path, encoding="utf-8", errors="replace") as f:
            for line in f:
                match = pattern.search(line)
                if match:
                    yield extract_doc_path(match)
