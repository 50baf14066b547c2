"""Expansion of autoload declarations into namespaced source directories."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from pg_installer.types import InstalledPackage, NamespacedSourceDir

logger = logging.getLogger(__name__)

__all__ = ["PSR4", "map_namespace_paths", "resolve_source_dirs"]

PSR4 = "psr-4"


def map_namespace_paths(path_map: dict[str, Any], install_path: Path) -> list[NamespacedSourceDir]:
    """Join every (namespace, relative dir) pair of a PSR-4 map onto ``install_path``.

    A namespace may map to a single directory or to a list of directories.
    """
    result: list[NamespacedSourceDir] = []
    for namespace, paths in path_map.items():
        if isinstance(paths, str):
            paths = [paths]
        for path in paths:
            result.append(
                NamespacedSourceDir(
                    namespace=str(namespace).rstrip("\\"),
                    directory=Path(install_path) / path,
                )
            )
    return result


def resolve_source_dirs(package: InstalledPackage, standard: str = PSR4) -> list[NamespacedSourceDir]:
    """Return the source directories a package declares under ``standard``.

    Declarations under any other autoload standard are ignored.
    """
    result: list[NamespacedSourceDir] = []
    for autoload_type, path_map in package.autoload.items():
        if autoload_type != standard:
            continue
        if not isinstance(path_map, dict):
            logger.debug("Ignoring malformed %s map in %s", autoload_type, package.name)
            continue
        result.extend(map_namespace_paths(path_map, package.install_path))
    return result
