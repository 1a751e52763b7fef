"""Candidates from the active project's source tree."""

from __future__ import annotations

from typing import Iterator

from packfinder.config import ResolverConfig
from packfinder.files import iter_source_files
from packfinder.search.matching import filename_pattern


def strip_prefix(path: str, prefix: str) -> str:
    """Remove a root directory prefix so only the project relative part remains."""
    prefix = prefix.replace("\\", "/")
    if prefix and path.startswith(prefix):
        return path[len(prefix):]
    return path


class ProjectScanner:
    name = "project"
    label = "Scanning project"
    source_relative = True

    def __init__(self, config: ResolverConfig) -> None:
        self.project_dir = config.project_dir
        self.exclude_patterns = config.exclude_patterns

    def scan(self, word: str) -> Iterator[str]:
        # Outside a project there is simply nothing to scan.
        if not self.project_dir:
            return
        pattern = filename_pattern(word)
        for file_path in iter_source_files(self.project_dir, self.exclude_patterns):
            if pattern.search(file_path):
                yield strip_prefix(file_path, self.project_dir)
