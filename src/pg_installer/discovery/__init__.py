"""Module discovery: package selection, source resolution, scanning and matching.

Usage::

    from pg_installer.discovery import extract_modules, scan_source_files

    modules = extract_modules(scan_source_files(source_dir))
"""

from __future__ import annotations

from pg_installer.discovery.autoload import PSR4, map_namespace_paths, resolve_source_dirs
from pg_installer.discovery.extractor import extract_module, extract_modules, module_pattern
from pg_installer.discovery.packages import find_module_packages
from pg_installer.discovery.scanner import scan_source_files

__all__ = [
    "PSR4",
    "extract_module",
    "extract_modules",
    "find_module_packages",
    "map_namespace_paths",
    "module_pattern",
    "resolve_source_dirs",
    "scan_source_files",
]
