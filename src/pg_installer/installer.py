"""Module installer pipeline: find module packages, discover classes, update config."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from pg_installer.bootstrap import locate_config_file, merge_config_file
from pg_installer.config import InstallerSettings
from pg_installer.discovery.autoload import resolve_source_dirs
from pg_installer.discovery.extractor import extract_modules
from pg_installer.discovery.packages import find_module_packages
from pg_installer.discovery.scanner import scan_source_files
from pg_installer.sink import MessageSink, null_sink
from pg_installer.types import InstalledPackage, ModuleMap

logger = logging.getLogger(__name__)

__all__ = ["ModuleInstaller"]


class ModuleInstaller:
    """Discovers module classes in installed packages and registers them.

    Each stage is available on its own; ``install()`` runs them in order and
    stops early, with a message, when no module package or no module class
    is found.
    """

    def __init__(
        self,
        settings: InstallerSettings | None = None,
        sink: MessageSink = null_sink,
    ) -> None:
        """Initialize the installer.

        Args:
            settings: Pipeline settings; defaults apply when omitted.
            sink: Receives one human-readable message per pipeline step.
        """
        self.settings = settings or InstallerSettings()
        self.sink = sink

    def find_module_packages(self, packages: Iterable[InstalledPackage]) -> list[InstalledPackage]:
        return find_module_packages(packages, self.settings.package_type, self.sink)

    def find_module_classes(
        self,
        packages: Iterable[InstalledPackage],
        modules: ModuleMap | None = None,
    ) -> ModuleMap:
        """Scan every package's source directories into one ModuleMap."""
        if modules is None:
            modules = ModuleMap()
        for package in packages:
            source_dirs = resolve_source_dirs(package, self.settings.autoload_standard)
            for source_dir in source_dirs:
                files = scan_source_files(
                    source_dir.directory,
                    extension=self.settings.extension,
                    exclude=self.settings.exclude,
                )
                if not files:
                    logger.debug("No source files in %s for %s", source_dir.directory, package.name)
                    continue
                extract_modules(files, modules, sink=self.sink, base_class=self.settings.base_class)
        return modules

    def config_file(self, project_root: Path) -> Path:
        return locate_config_file(project_root, self.settings.config_path)

    def write_config_file(self, config_file: Path, modules: ModuleMap) -> bool:
        return merge_config_file(config_file, modules, sink=self.sink, lock=self.settings.lock_writes)

    def install(self, packages: Iterable[InstalledPackage], project_root: Path) -> bool:
        """Run the whole pipeline.

        Returns:
            True if the config file was rewritten, False when there was
            nothing to do.
        """
        self.sink("Search pg-modules packages")
        module_packages = self.find_module_packages(packages)
        if not module_packages:
            self.sink("pg-modules packages not found, abort")
            return False

        modules = self.find_module_classes(module_packages)
        if not modules:
            self.sink("pg-modules not found in packages, abort")
            return False

        config_file = self.config_file(project_root)
        logger.debug("Updating %s with %d modules", config_file, len(modules))
        return self.write_config_file(config_file, modules)
