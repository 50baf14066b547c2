"""Recursive source file listing."""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

__all__ = ["DEFAULT_EXCLUDE", "DEFAULT_EXTENSION", "scan_source_files"]

DEFAULT_EXTENSION = "php"
DEFAULT_EXCLUDE = ".dist."


def _is_candidate(name: str, suffix: str, exclude: str | None) -> bool:
    if not name.endswith(suffix):
        return False
    if name.startswith("."):
        return False
    if exclude is not None and exclude.lower() in name.lower():
        return False
    return True


def scan_source_files(
    directory: Path,
    extension: str = DEFAULT_EXTENSION,
    exclude: str | None = DEFAULT_EXCLUDE,
) -> list[Path]:
    """Recursively list source files under ``directory``.

    Files must end with ``.<extension>``. Files whose name starts with a dot
    or contains ``exclude`` (case-insensitive) are skipped. Symbolic links
    are followed. A missing directory yields an empty list.
    """
    root = Path(directory)
    if not root.is_dir():
        return []

    suffix = "." + extension
    visited_real_paths: set[Path] = {root.resolve()}
    results: list[Path] = []

    def _scan_dir(dir_path: Path) -> None:
        with os.scandir(dir_path) as it:
            entries = sorted(it, key=lambda e: e.name)

        for entry in entries:
            entry_path = Path(entry.path)
            if entry.is_dir(follow_symlinks=True):
                if entry.is_symlink():
                    real = entry_path.resolve()
                    if real in visited_real_paths:
                        logger.warning("Symlink cycle detected at %s -> %s, skipping", entry_path, real)
                        continue
                    visited_real_paths.add(real)
                _scan_dir(entry_path)
            elif entry.is_file(follow_symlinks=True):
                if _is_candidate(entry.name, suffix, exclude):
                    results.append(entry_path)

    _scan_dir(root)
    logger.debug("Found %d candidate files under %s", len(results), root)
    return results
