"""Structural matching of module classes in PHP source files.

A module is recognised by the textual shape::

    namespace Vendor\\Package;
    ...
    class SomethingModule extends Module

This is a single pattern over raw file text, not a PHP parser. Only the
first match in a file counts, so files with several classes, or with a
class not preceded by its namespace statement, may be missed.
"""

from __future__ import annotations

import logging
import os
import re
from functools import lru_cache
from pathlib import Path
from typing import Iterable

from pg_installer.sink import MessageSink, null_sink
from pg_installer.types import DiscoveredModule, ModuleMap

logger = logging.getLogger(__name__)

__all__ = ["DEFAULT_BASE_CLASS", "extract_module", "extract_modules", "module_pattern"]

DEFAULT_BASE_CLASS = "Module"


@lru_cache(maxsize=None)
def module_pattern(base_class: str = DEFAULT_BASE_CLASS) -> re.Pattern[str]:
    """Compile the namespace + ``class X extends <base_class>`` pattern."""
    return re.compile(
        r"namespace\s+([a-zA-Z0-9_\\]+)\s*;.*?class\s+([a-zA-Z0-9_]+)\s+extends\s+" + re.escape(base_class),
        re.DOTALL,
    )


def _read_source(file_path: Path) -> str | None:
    if not os.access(file_path, os.R_OK) or not file_path.is_file():
        return None
    try:
        return file_path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        logger.debug("Cannot read %s: %s", file_path, e)
        return None


def extract_module(file_path: Path, base_class: str = DEFAULT_BASE_CLASS) -> DiscoveredModule | None:
    """Return the module defined in ``file_path``, or None if there is none."""
    file_path = Path(file_path)
    content = _read_source(file_path)
    if content is None:
        return None

    match = module_pattern(base_class).search(content)
    if match is None:
        return None

    namespace, class_name = match.group(1), match.group(2)
    return DiscoveredModule(
        class_name=f"{namespace}\\{class_name}",
        short_name=class_name,
        file_path=file_path,
    )


def extract_modules(
    files: Iterable[Path],
    modules: ModuleMap | None = None,
    sink: MessageSink = null_sink,
    base_class: str = DEFAULT_BASE_CLASS,
) -> ModuleMap:
    """Match every file and accumulate found modules into ``modules``.

    The same ModuleMap is returned so that one map can collect the results
    of several calls. Unreadable and non-matching files are skipped.
    """
    if modules is None:
        modules = ModuleMap()

    for file_path in files:
        module = extract_module(Path(file_path), base_class=base_class)
        if module is None:
            continue
        modules.add(module)
        sink(f"      Found pg-module: {module.short_name}")
    return modules
