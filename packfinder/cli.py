"""Packfinder CLI - locate the package path of an ActionScript class."""

from __future__ import annotations

import json
import logging

import click
from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt
from rich.table import Table

from packfinder.aggregate import build_report_dict, search_sources
from packfinder.config import Outcome, ResolverConfig
from packfinder.resolver import (
    NO_INPUT_MESSAGE,
    NOT_FOUND_MESSAGE,
    SEPARATOR,
    Resolver,
)
from packfinder.search.matching import class_name


class ConsoleNotifier:
    """Prints transient messages to stderr."""

    def __init__(self, console: Console) -> None:
        self.console = console

    def notify(self, message: str) -> None:
        self.console.print(f"[yellow]{message}[/yellow]")


class MenuPresenter:
    """Numbered menu; a blank answer, ``q`` or end of input dismisses it."""

    def __init__(self, console: Console) -> None:
        self.console = console

    def choose(self, items: list[str]) -> int | None:
        table = Table(show_edge=False)
        table.add_column("#", justify="right", style="bold")
        table.add_column("Class")
        table.add_column("Package path")

        numbered: dict[str, int] = {}
        for index, item in enumerate(items):
            if item == SEPARATOR:
                table.add_section()
                continue
            key = str(len(numbered) + 1)
            numbered[key] = index
            table.add_row(key, class_name(item), item)

        self.console.print(table)
        try:
            answer = Prompt.ask(
                "Select a package", console=self.console, default="", show_default=False
            )
        except (EOFError, KeyboardInterrupt):
            return None
        return numbered.get(answer.strip())


def _build_config(
    project: str | None,
    source_roots: str | None,
    external: str | None,
    doc_index: str | None,
    exclude: tuple[str, ...],
) -> ResolverConfig:
    """Start from the environment and apply command line overrides."""
    config = ResolverConfig.from_env()
    if project is not None:
        config.project_dir = project
    if source_roots is not None:
        config.source_roots = source_roots.split(":")
    if external is not None:
        config.external_libs = [lib for lib in external.split(":") if lib]
    if doc_index is not None:
        config.doc_index = doc_index
    config.exclude_patterns = list(exclude)
    return config


def _setup_logging(verbose: bool) -> None:
    if not verbose:
        return
    from rich.logging import RichHandler

    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _print_timings(console: Console, timings: dict[str, float]) -> None:
    timing_table = Table(title="Source Timings", show_edge=False)
    timing_table.add_column("Source", style="bold")
    timing_table.add_column("Time (ms)", justify="right")
    for source, seconds in timings.items():
        timing_table.add_row(source, f"{seconds * 1000:.1f}")
    console.print(timing_table)


@click.group()
def cli() -> None:
    """Packfinder - find the package a class lives in."""
    pass


@cli.command("find")
@click.argument("word", default="")
@click.option("-p", "--project", default=None, help="Project directory (TM_PROJECT_DIRECTORY)")
@click.option("--source-roots", default=None, help="Colon-separated source directory names")
@click.option("--external", default=None, help="Colon-separated external library roots")
@click.option("--doc-index", default=None, type=click.Path(), help="Documentation index file")
@click.option("--exclude", multiple=True, help="Additional directory names to skip")
@click.option("--json", "as_json", is_flag=True, help="Print all matches as JSON")
@click.option("--verbose", is_flag=True, help="Show per-source timing and debug logging")
def find_cmd(
    word: str,
    project: str | None,
    source_roots: str | None,
    external: str | None,
    doc_index: str | None,
    exclude: tuple[str, ...],
    as_json: bool,
    verbose: bool,
) -> None:
    """Resolve WORD, a full or partial class name, to a package path."""
    _setup_logging(verbose)
    config = _build_config(project, source_roots, external, doc_index, exclude)
    err_console = Console(stderr=True)
    resolver = Resolver(
        config,
        presenter=MenuPresenter(err_console),
        notifier=ConsoleNotifier(err_console),
    )

    if not word:
        resolver.notifier.notify(NO_INPUT_MESSAGE)
        raise SystemExit(1)

    report = search_sources(word, config)
    if verbose:
        _print_timings(err_console, report.timings)

    if as_json:
        click.echo(json.dumps(build_report_dict(report), indent=2))
        return

    resolution = resolver.choose(resolver.rank(report.merged))
    if resolution.outcome is Outcome.NOT_FOUND:
        resolver.notifier.notify(NOT_FOUND_MESSAGE)
        raise SystemExit(1)
    if resolution.outcome is Outcome.DEFINITIVE:
        click.echo(resolution.path)


@cli.command("list")
@click.argument("path")
@click.option("-p", "--project", default=None, help="Project directory (TM_PROJECT_DIRECTORY)")
def list_cmd(path: str, project: str | None) -> None:
    """List the classes in PATH, a package such as com.foo.* or a directory."""
    config = ResolverConfig.from_env()
    if project is not None:
        config.project_dir = project

    classes = Resolver(config).list_package(path)
    if classes is None:
        Console(stderr=True).print(f"[yellow]No such package: {escape(path)}[/yellow]")
        raise SystemExit(1)
    for name in classes:
        click.echo(name)


if __name__ == "__main__":
    cli()
