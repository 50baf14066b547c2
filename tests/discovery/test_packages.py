"""Tests for find_module_packages()."""

from __future__ import annotations

from pathlib import Path

from pg_installer.discovery.packages import find_module_packages
from pg_installer.types import InstalledPackage


def _package(name: str, package_type: str) -> InstalledPackage:
    return InstalledPackage(name=name, type=package_type, install_path=Path("/vendor") / name)


class TestFindModulePackages:
    def test_empty_list(self, sink) -> None:
        """No packages returns empty list and no messages."""
        assert find_module_packages([], sink=sink) == []
        assert sink.messages == []

    def test_keeps_only_marker_type_in_order(self, sink) -> None:
        """Only pg-module packages are kept, in their original order."""
        packages = [
            _package("a/first", "pg-module"),
            _package("b/lib", "library"),
            _package("c/second", "pg-module"),
            _package("d/plugin", "composer-plugin"),
        ]
        result = find_module_packages(packages, sink=sink)
        assert [p.name for p in result] == ["a/first", "c/second"]

    def test_one_message_per_match(self, sink) -> None:
        """Each match emits exactly one message naming the package."""
        packages = [_package("a/first", "pg-module"), _package("b/lib", "library")]
        find_module_packages(packages, sink=sink)
        assert sink.messages == ["  Found pg-module type package: a/first"]

    def test_no_match_emits_nothing(self, sink) -> None:
        """Non-matching packages produce no messages."""
        packages = [_package("b/lib", "library"), _package("c/meta", "metapackage")]
        assert find_module_packages(packages, sink=sink) == []
        assert sink.messages == []

    def test_custom_marker_type(self, sink) -> None:
        """A different marker type selects a different set."""
        packages = [_package("a/first", "pg-module"), _package("b/theme", "pg-theme")]
        result = find_module_packages(packages, package_type="pg-theme", sink=sink)
        assert [p.name for p in result] == ["b/theme"]

    def test_type_match_is_exact(self) -> None:
        """Type comparison is exact, not prefix or case-insensitive."""
        packages = [_package("a/one", "PG-MODULE"), _package("b/two", "pg-modules")]
        assert find_module_packages(packages) == []
