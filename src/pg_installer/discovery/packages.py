"""Selection of module packages among installed packages."""

from __future__ import annotations

from typing import Iterable

from pg_installer.sink import MessageSink, null_sink
from pg_installer.types import InstalledPackage

__all__ = ["DEFAULT_PACKAGE_TYPE", "find_module_packages"]

DEFAULT_PACKAGE_TYPE = "pg-module"


def find_module_packages(
    packages: Iterable[InstalledPackage],
    package_type: str = DEFAULT_PACKAGE_TYPE,
    sink: MessageSink = null_sink,
) -> list[InstalledPackage]:
    """Return the packages whose type equals ``package_type``, in input order."""
    found: list[InstalledPackage] = []
    for package in packages:
        if package.package_type != package_type:
            continue
        sink(f"  Found {package_type} type package: {package.pretty_name}")
        found.append(package)
    return found
