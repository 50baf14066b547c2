"""Composer host adapter: installed package metadata and the post-install hook."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable

from pydantic import ValidationError

from pg_installer.config import SETTINGS_KEY, Config, InstallerSettings
from pg_installer.errors import ConfigError, PackageMetadataError
from pg_installer.installer import ModuleInstaller
from pg_installer.sink import MessageSink, StreamSink
from pg_installer.types import InstalledPackage

logger = logging.getLogger(__name__)

__all__ = [
    "EXTRA_KEY",
    "ComposerProject",
    "ScriptEvent",
    "SUBSCRIBED_EVENTS",
    "load_installed_packages",
    "post_autoload_dump",
    "read_composer_json",
    "resolve_vendor_dir",
]

EXTRA_KEY = "pg-installer"
POST_AUTOLOAD_DUMP = "post-autoload-dump"


def _read_json(path: Path) -> Any:
    content = path.read_text(encoding="utf-8")
    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise PackageMetadataError(path=str(path), reason=str(e)) from e


def read_composer_json(project_root: Path) -> dict[str, Any]:
    """Load the root ``composer.json``; a project without one yields ``{}``."""
    path = Path(project_root) / "composer.json"
    if not path.is_file():
        return {}
    data = _read_json(path)
    if not isinstance(data, dict):
        raise PackageMetadataError(path=str(path), reason="expected a JSON object")
    return data


def resolve_vendor_dir(project_root: Path, composer_json: dict[str, Any] | None = None) -> Path:
    """Return the absolute vendor directory of a project.

    ``COMPOSER_VENDOR_DIR`` wins over ``config.vendor-dir``, which wins over
    the default ``vendor``.
    """
    vendor = os.environ.get("COMPOSER_VENDOR_DIR")
    if not vendor and composer_json:
        vendor = (composer_json.get("config") or {}).get("vendor-dir")
    return (Path(project_root) / (vendor or "vendor")).resolve()


def load_installed_packages(vendor_dir: Path) -> list[InstalledPackage]:
    """Read ``vendor/composer/installed.json`` into InstalledPackage records.

    Both the Composer 2 ``{"packages": [...]}`` layout and the Composer 1
    top-level list are accepted. A missing file means nothing is installed.
    """
    vendor_dir = Path(vendor_dir)
    composer_dir = vendor_dir / "composer"
    path = composer_dir / "installed.json"
    if not path.is_file():
        logger.debug("No installed.json at %s", path)
        return []

    data = _read_json(path)
    if isinstance(data, dict):
        data = data.get("packages", [])
    if not isinstance(data, list):
        raise PackageMetadataError(path=str(path), reason="expected a list of packages")

    packages: list[InstalledPackage] = []
    for entry in data:
        if not isinstance(entry, dict) or not entry.get("name"):
            logger.warning("Skipping package entry without a name in %s", path)
            continue
        install_path = entry.get("install-path")
        if install_path:
            resolved = (composer_dir / install_path).resolve()
        else:
            resolved = vendor_dir / entry["name"]
        try:
            packages.append(
                InstalledPackage(
                    name=entry["name"],
                    type=entry.get("type", "library"),
                    autoload=entry.get("autoload") or {},
                    install_path=resolved,
                    version=entry.get("version"),
                )
            )
        except ValidationError as e:
            raise PackageMetadataError(path=str(path), reason=f"package '{entry['name']}': {e}") from e
    return packages


def _normalize_keys(section: dict[str, Any]) -> dict[str, Any]:
    return {str(key).replace("-", "_"): value for key, value in section.items()}


@dataclass
class ComposerProject:
    """What the hook needs from Composer: vendor dir, root extra, packages."""

    vendor_dir: Path
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_project_root(cls, project_root: Path) -> ComposerProject:
        composer_json = read_composer_json(project_root)
        return cls(
            vendor_dir=resolve_vendor_dir(project_root, composer_json),
            extra=composer_json.get("extra") or {},
        )

    @property
    def project_root(self) -> Path:
        return self.vendor_dir.parent

    def installed_packages(self) -> list[InstalledPackage]:
        return load_installed_packages(self.vendor_dir)

    def settings_overrides(self) -> dict[str, Any]:
        """Installer settings declared under ``extra.pg-installer``."""
        section = self.extra.get(EXTRA_KEY) or {}
        if not isinstance(section, dict):
            raise ConfigError(message=f"'extra.{EXTRA_KEY}' in composer.json must be an object")
        return _normalize_keys(section)


@dataclass
class ScriptEvent:
    """A Composer script event: the project and the console output."""

    composer: ComposerProject
    io: MessageSink = field(default_factory=StreamSink)


def post_autoload_dump(
    event: ScriptEvent,
    config: Config | None = None,
    overrides: dict[str, Any] | None = None,
) -> None:
    """Refresh the generated module list after Composer dumps the autoloader.

    Settings come from ``config``, then ``extra.pg-installer`` of the root
    composer.json, then ``overrides``, each layer winning over the previous.
    """
    config = (config or Config()).merged({SETTINGS_KEY: event.composer.settings_overrides()})
    if overrides:
        config = config.merged({SETTINGS_KEY: overrides})
    settings: InstallerSettings = config.settings()

    installer = ModuleInstaller(settings=settings, sink=event.io)
    installer.install(event.composer.installed_packages(), event.composer.project_root)


SUBSCRIBED_EVENTS: dict[str, Callable[..., None]] = {
    POST_AUTOLOAD_DUMP: post_autoload_dump,
}
