"""Class name to package path resolution and package listing."""

from __future__ import annotations

import logging
import os
from typing import Protocol

from packfinder.aggregate import aggregate
from packfinder.config import (
    SOURCE_EXTENSIONS,
    Outcome,
    Resolution,
    ResolverConfig,
    ResultSet,
)

logger = logging.getLogger(__name__)

SEPARATOR = "-"

NO_INPUT_MESSAGE = "Please select a class to\nlocate the package path for."
NOT_FOUND_MESSAGE = "Class not found"


class Presenter(Protocol):
    def choose(self, items: list[str]) -> int | None:
        """Return the index picked by the user, or None when dismissed."""
        ...


class Notifier(Protocol):
    def notify(self, message: str) -> None:
        ...


class Resolver:
    """Finds package paths for a full or partial class name.

    Candidates come from the project tree, the documentation index and the
    external libraries. Exact matches are listed before partial ones, split
    by ``SEPARATOR`` when both kinds are present.
    """

    def __init__(
        self,
        config: ResolverConfig | None = None,
        presenter: Presenter | None = None,
        notifier: Notifier | None = None,
    ) -> None:
        self.config = config if config is not None else ResolverConfig()
        self.presenter = presenter
        self.notifier = notifier

    def resolve(self, word: str) -> Resolution:
        if not word:
            return Resolution(outcome=Outcome.NO_INPUT)

        return self.rank(aggregate(word, self.config))

    def rank(self, results: ResultSet) -> Resolution:
        """Order merged results for presentation and pick the outcome."""
        if results.exact and results.partial:
            candidates = results.exact + [SEPARATOR] + results.partial
        else:
            candidates = results.exact + results.partial

        if not candidates:
            return Resolution(outcome=Outcome.NOT_FOUND, results=results)
        if len(candidates) == 1:
            return Resolution(
                outcome=Outcome.DEFINITIVE, path=candidates[0], results=results
            )
        return Resolution(
            outcome=Outcome.DISAMBIGUATE, candidates=candidates, results=results
        )

    def find_package(self, word: str) -> str | None:
        """Resolve ``word``, asking the presenter to pick among several paths."""
        resolution = self.resolve(word)

        if resolution.outcome is Outcome.NO_INPUT:
            self._notify(NO_INPUT_MESSAGE)
            return None
        if resolution.outcome is Outcome.NOT_FOUND:
            self._notify(NOT_FOUND_MESSAGE)
            return None
        if resolution.outcome is Outcome.DEFINITIVE:
            return resolution.path

        chosen = self.choose(resolution)
        return chosen.path

    def choose(self, resolution: Resolution) -> Resolution:
        """Turn a disambiguation into a definitive match or a cancellation."""
        if resolution.outcome is not Outcome.DISAMBIGUATE:
            return resolution

        candidates = resolution.candidates
        index = self.presenter.choose(candidates) if self.presenter else None
        if index is None or not 0 <= index < len(candidates):
            return Resolution(outcome=Outcome.CANCELLED, results=resolution.results)
        if candidates[index] == SEPARATOR:
            return Resolution(outcome=Outcome.CANCELLED, results=resolution.results)
        return Resolution(
            outcome=Outcome.DEFINITIVE,
            path=candidates[index],
            results=resolution.results,
        )

    def list_package(self, path: str) -> list[str] | None:
        return list_classes(path, self.config.project_dir)

    def _notify(self, message: str) -> None:
        if self.notifier:
            self.notifier.notify(message)
        else:
            logger.info(message.replace("\n", " "))


def list_classes(path: str, project_dir: str = "") -> list[str] | None:
    """List the class names found directly inside a package or directory.

    ``path`` is either a package declaration such as ``org.helvector.core.*``
    or a directory path. Relative paths that do not exist are retried below
    ``<project_dir>/src/``. Returns None when no such directory exists.
    """
    if "/" not in path and os.sep not in path:
        path = path.replace(".", "/")
    if path.endswith("/*"):
        path = path[:-2]

    if not os.path.exists(path) and project_dir:
        path = os.path.join(project_dir, "src", path)
    if not os.path.exists(path):
        return None

    try:
        entries = os.listdir(path)
    except OSError as e:
        logger.warning(f"Cannot list package directory {path}: {e}")
        return None

    classes = []
    for entry in entries:
        stem, ext = os.path.splitext(entry)
        if ext in SOURCE_EXTENSIONS:
            classes.append(stem)
    return classes


def find_package(
    word: str,
    config: ResolverConfig | None = None,
    presenter: Presenter | None = None,
    notifier: Notifier | None = None,
) -> str | None:
    """Resolve a class name to its package path using the environment config."""
    if config is None:
        config = ResolverConfig.from_env()
    return Resolver(config, presenter, notifier).find_package(word)


def list_package(path: str, config: ResolverConfig | None = None) -> list[str] | None:
    """List the classes inside a package using the environment config."""
    if config is None:
        config = ResolverConfig.from_env()
    return Resolver(config).list_package(path)
