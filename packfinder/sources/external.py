"""Candidates from external library source roots."""

from __future__ import annotations

import logging
from typing import Iterator

from packfinder.config import ResolverConfig
from packfinder.files import iter_source_files
from packfinder.search.matching import filename_pattern
from packfinder.sources.project import strip_prefix

logger = logging.getLogger(__name__)


class ExternalLibraryScanner:
    name = "external"
    label = "Scanning external libraries"
    source_relative = True

    def __init__(self, config: ResolverConfig) -> None:
        self.libs = list(config.external_libs)
        self.exclude_patterns = config.exclude_patterns

    def scan(self, word: str) -> Iterator[str]:
        pattern = filename_pattern(word)
        for lib in self.libs:
            hits = 0
            for file_path in iter_source_files(lib, self.exclude_patterns):
                if pattern.search(file_path):
                    hits += 1
                    # Library relative, so two libraries never collide on their roots
                    yield strip_prefix(file_path, lib)
            logger.debug(f"External library {lib}: {hits} hits for '{word}'")
