"""Tests for file enumeration and the candidate sources."""

from __future__ import annotations

import os

import pytest

from packfinder.config import ResolverConfig
from packfinder.files import iter_source_files
from packfinder.sources import get_scanners, source_names
from packfinder.sources.base import SourceScanner
from packfinder.sources.docs import BUNDLED_DOC_INDEX, DocumentationScanner
from packfinder.sources.external import ExternalLibraryScanner
from packfinder.sources.project import ProjectScanner, strip_prefix

FIXTURES_DIR = os.path.join(os.path.dirname(__file__), "fixtures")
PROJECT_DIR = os.path.join(FIXTURES_DIR, "as3_project")
EXTERNAL_DIR = os.path.join(FIXTURES_DIR, "external_lib")
DOC_INDEX = os.path.join(FIXTURES_DIR, "doc_index.xml")


class TestIterSourceFiles:
    def test_lists_files_under_root(self):
        files = list(iter_source_files(PROJECT_DIR))
        assert any(f.endswith("src/com/foo/Bar.as") for f in files)
        assert any(f.endswith("src/com/foo/readme.txt") for f in files)
        assert all(f.startswith(PROJECT_DIR.replace("\\", "/")) for f in files)

    def test_skips_ignored_directories(self):
        files = list(iter_source_files(PROJECT_DIR))
        assert not any("/bin-debug/" in f for f in files)

    def test_extra_exclusions(self):
        files = list(iter_source_files(PROJECT_DIR, exclude_patterns=["test"]))
        assert not any(f.endswith("BarTest.as") for f in files)

    def test_missing_root_yields_nothing(self):
        assert list(iter_source_files(os.path.join(FIXTURES_DIR, "nope"))) == []
        assert list(iter_source_files("")) == []

    def test_is_lazy(self):
        files = iter_source_files(PROJECT_DIR)
        assert next(files)


class TestProjectScanner:
    def test_finds_matching_files_relative_to_project(self):
        scanner = ProjectScanner(ResolverConfig(project_dir=PROJECT_DIR))
        hits = list(scanner.scan("Bar"))
        assert hits == [
            "/src/com/foo/Bar.as",
            "/src/com/foo/BarHelper.as",
            "/test/com/foo/BarTest.as",
        ]

    def test_mxml_files(self):
        scanner = ProjectScanner(ResolverConfig(project_dir=PROJECT_DIR))
        assert list(scanner.scan("Baz")) == ["/src/com/foo/Baz.mxml"]

    def test_no_project_yields_nothing(self):
        assert list(ProjectScanner(ResolverConfig()).scan("Bar")) == []


class TestExternalLibraryScanner:
    def test_paths_relative_to_library_root(self):
        scanner = ExternalLibraryScanner(ResolverConfig(external_libs=[EXTERNAL_DIR]))
        hits = list(scanner.scan("Event"))
        assert hits == [
            "/src/mx/events/Event.as",
            "/src/mx/events/EventListenerRequest.as",
        ]

    def test_libraries_scanned_in_order(self):
        config = ResolverConfig(external_libs=[EXTERNAL_DIR, PROJECT_DIR])
        hits = list(ExternalLibraryScanner(config).scan("Bar"))
        assert hits[0] == "/src/com/foo/Bar.as"
        assert hits[-1] == "/test/com/foo/BarTest.as"
        assert len(hits) == 4

    def test_no_libraries_yields_nothing(self):
        assert list(ExternalLibraryScanner(ResolverConfig()).scan("Event")) == []


class TestDocumentationScanner:
    def test_reads_configured_index(self):
        scanner = DocumentationScanner(ResolverConfig(doc_index=DOC_INDEX))
        assert list(scanner.scan("Event")) == [
            "flash/events/Event",
            "flash/events/EventDispatcher",
        ]

    def test_package_members(self):
        scanner = DocumentationScanner(ResolverConfig(doc_index=DOC_INDEX))
        assert list(scanner.scan("get")) == [
            "flash/utils/getTimer",
            "flash/utils/getQualifiedClassName",
        ]

    def test_bundled_index_exists(self):
        assert BUNDLED_DOC_INDEX.is_file()
        scanner = DocumentationScanner(ResolverConfig())
        assert "flash/display/Sprite" in list(scanner.scan("Sprite"))

    def test_non_utf8_index(self, tmp_path):
        index = tmp_path / "latin1.xml"
        index.write_bytes(b"<topic label='\xe9t\xe9' href='flash/display/Sprite.html'/>\n")
        scanner = DocumentationScanner(ResolverConfig(doc_index=str(index)))
        assert list(scanner.scan("Sprite")) == ["flash/display/Sprite"]

    def test_missing_index_raises(self):
        scanner = DocumentationScanner(
            ResolverConfig(doc_index=os.path.join(FIXTURES_DIR, "missing.xml"))
        )
        with pytest.raises(OSError):
            list(scanner.scan("Event"))


class TestRegistry:
    def test_fixed_order(self):
        assert source_names() == ["project", "documentation", "external"]

    def test_scanners_implement_protocol(self):
        for scanner in get_scanners(ResolverConfig()):
            assert isinstance(scanner, SourceScanner)


class TestStripPrefix:
    def test_strips_leading_root(self):
        assert strip_prefix("/libs/core/src/a/B.as", "/libs/core") == "/src/a/B.as"

    def test_leaves_unrelated_path(self):
        assert strip_prefix("/other/a/B.as", "/libs/core") == "/other/a/B.as"
