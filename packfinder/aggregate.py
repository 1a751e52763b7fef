"""Sequential source orchestrator with timing."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field

from packfinder.config import ResolverConfig, ResultSet
from packfinder.search.matching import classify
from packfinder.search.paths import normalize
from packfinder.sources import get_scanners
from packfinder.sources.base import SourceScanner

logger = logging.getLogger(__name__)


@dataclass
class SearchReport:
    word: str
    per_source: dict[str, ResultSet] = field(default_factory=dict)
    timings: dict[str, float] = field(default_factory=dict)
    merged: ResultSet = field(default_factory=ResultSet)


def _collect(scanner: SourceScanner, word: str, config: ResolverConfig) -> ResultSet:
    """Normalise and classify every hit from one source."""
    roots = config.source_roots if scanner.source_relative else ()
    results = ResultSet()
    for raw_path in scanner.scan(word):
        package_path = normalize(raw_path, roots)
        results.add(package_path, classify(package_path, word))
    return results


def search_sources(
    word: str,
    config: ResolverConfig,
    progress_callback=None,
) -> SearchReport:
    """Run every source for ``word`` and merge the results.

    Args:
        word: Full or partial class name.
        config: Resolver configuration.
        progress_callback: Optional callable(source_name, label) invoked
            when each source starts.
    """
    report = SearchReport(word=word)
    combined = ResultSet()

    for scanner in get_scanners(config):
        if progress_callback:
            progress_callback(scanner.name, scanner.label)
        start = time.monotonic()
        try:
            results = _collect(scanner, word, config)
        except OSError as e:
            # Only the documentation index reads a fixed file; carry on without it.
            logger.warning(f"Source '{scanner.name}' unavailable: {e}")
            results = ResultSet()
        report.timings[scanner.name] = time.monotonic() - start
        report.per_source[scanner.name] = results
        logger.debug(
            f"{scanner.name}: {len(results.exact)} exact, "
            f"{len(results.partial)} partial for '{word}'"
        )

    # Exact lists first from every source, then partial lists, in source order
    for results in report.per_source.values():
        combined.extend(results)
    report.merged = combined.deduplicated()
    return report


def aggregate(word: str, config: ResolverConfig, progress_callback=None) -> ResultSet:
    """Merged, de-duplicated exact and partial package paths for ``word``."""
    return search_sources(word, config, progress_callback).merged


def build_report_dict(report: SearchReport) -> dict:
    """JSON-ready view of a search report."""
    return {
        "word": report.word,
        "exact_matches": report.merged.exact,
        "partial_matches": report.merged.partial,
        "sources": {
            name: {
                "exact_matches": results.exact,
                "partial_matches": results.partial,
                "duration_ms": round(report.timings.get(name, 0.0) * 1000, 1),
            }
            for name, results in report.per_source.items()
        },
    }
