"""Search word patterns and exact/partial classification.

All patterns are case sensitive. A filename hit needs a word boundary
directly before the search word, then any number of identifier characters,
then a recognised source extension at the end of the path. The boundary
keeps ``MyEvent.as`` out of a search for ``Event`` while ``EventHelper.as``
still qualifies.
"""

from __future__ import annotations

import re

from packfinder.config import SOURCE_EXTENSIONS, MatchKind

_EXTENSIONS = "|".join(re.escape(ext.lstrip(".")) for ext in SOURCE_EXTENSIONS)


def filename_pattern(word: str) -> re.Pattern[str]:
    """Pattern for a file path whose filename starts a token with ``word``."""
    return re.compile(rf"\b{re.escape(word)}\w*\.({_EXTENSIONS})$")


def doc_link_pattern(word: str) -> re.Pattern[str]:
    """Pattern for a documentation index line linking to ``word``.

    Group 1 captures a direct class link (``flash/display/Sprite``), group 2
    a package level member anchor (``flash/utils/package.html#getTimer``).
    """
    w = re.escape(word)
    return re.compile(
        rf"href='([a-zA-Z0-9/]*\b{w}\w*)\.html'"
        rf"|([a-zA-Z0-9/]*/package\.html#{w}\w*)\(\)'"
    )


def extract_doc_path(match: re.Match[str]) -> str:
    """Return the slash separated class or member path from a doc link."""
    if match.group(2):
        return match.group(2).replace("package.html#", "")
    return match.group(1)


def class_name(package_path: str) -> str:
    return package_path.rsplit(".", 1)[-1]


def classify(package_path: str, word: str) -> MatchKind:
    """Exact when the path ends with the search word as a whole segment."""
    if package_path == word or package_path.endswith("." + word):
        return MatchKind.EXACT
    return MatchKind.PARTIAL
