"""Source registry - the candidate sources in merge order."""

from __future__ import annotations

from typing import TYPE_CHECKING

from packfinder.sources.docs import DocumentationScanner
from packfinder.sources.external import ExternalLibraryScanner
from packfinder.sources.project import ProjectScanner

if TYPE_CHECKING:
    from packfinder.config import ResolverConfig
    from packfinder.sources.base import SourceScanner

_SCANNER_TYPES = (ProjectScanner, DocumentationScanner, ExternalLibraryScanner)


def get_scanners(config: ResolverConfig) -> list[SourceScanner]:
    """Instantiate every source for a query: project, documentation, external."""
    return [scanner_type(config) for scanner_type in _SCANNER_TYPES]


def source_names() -> list[str]:
    return [scanner_type.name for scanner_type in _SCANNER_TYPES]
