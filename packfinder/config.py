"""Core data types and configuration for package resolution."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping

SOURCE_EXTENSIONS = (".as", ".mxml")

DEFAULT_SRC_DIRS = "src:lib:source:test"

ENV_SRC_DIRS = "TM_AS3_USUAL_SRC_DIRS"
ENV_EXTERNAL_SRCS = "TM_AS3_EXTERNAL_SRCS"
ENV_PROJECT_DIR = "TM_PROJECT_DIRECTORY"


def common_src_dir_list(environ: Mapping[str, str] | None = None) -> str:
    """Return the colon separated list of usual source directory names."""
    if environ is None:
        environ = os.environ
    src_dirs = environ.get(ENV_SRC_DIRS)
    if src_dirs is None:
        src_dirs = DEFAULT_SRC_DIRS
    return src_dirs


def common_src_dirs(environ: Mapping[str, str] | None = None) -> list[str]:
    """Return the usual source directory names as a list."""
    return common_src_dir_list(environ).split(":")


class MatchKind(str, Enum):
    EXACT = "exact"
    PARTIAL = "partial"


class Outcome(str, Enum):
    DEFINITIVE = "definitive"
    DISAMBIGUATE = "disambiguate"
    NOT_FOUND = "not_found"
    NO_INPUT = "no_input"
    CANCELLED = "cancelled"


@dataclass
class ResolverConfig:
    source_roots: list[str] = field(default_factory=lambda: DEFAULT_SRC_DIRS.split(":"))
    external_libs: list[str] = field(default_factory=list)
    project_dir: str = ""
    doc_index: str | None = None  # None = bundled data/doc_dictionary.xml
    exclude_patterns: list[str] = field(default_factory=list)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ResolverConfig:
        """Build a config from the editor's environment variables."""
        if environ is None:
            environ = os.environ
        external = environ.get(ENV_EXTERNAL_SRCS, "")
        return cls(
            source_roots=common_src_dirs(environ),
            external_libs=[lib for lib in external.split(":") if lib],
            project_dir=environ.get(ENV_PROJECT_DIR, ""),
        )


@dataclass
class ResultSet:
    """Exact and partial package paths, each in scan order."""
    exact: list[str] = field(default_factory=list)
    partial: list[str] = field(default_factory=list)

    def add(self, path: str, kind: MatchKind) -> None:
        if kind is MatchKind.EXACT:
            self.exact.append(path)
        else:
            self.partial.append(path)

    def extend(self, other: ResultSet) -> None:
        self.exact.extend(other.exact)
        self.partial.extend(other.partial)

    def deduplicated(self) -> ResultSet:
        """Drop repeats within each list, keeping the first occurrence.

        A path present in both lists is kept in both.
        """
        return ResultSet(
            exact=list(dict.fromkeys(self.exact)),
            partial=list(dict.fromkeys(self.partial)),
        )

    def __len__(self) -> int:
        return len(self.exact) + len(self.partial)


@dataclass
class Resolution:
    outcome: Outcome
    path: str | None = None
    candidates: list[str] = field(default_factory=list)
    results: ResultSet | None = None
