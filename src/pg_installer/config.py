"""Installer settings: dot-path config accessor and validated settings model."""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from pg_installer.errors import ConfigError, ConfigNotFoundError

__all__ = ["Config", "InstallerSettings", "SETTINGS_KEY"]

SETTINGS_KEY = "installer"


class InstallerSettings(BaseModel):
    """Knobs of the discovery and config-synthesis pipeline.

    Attributes:
        package_type: Composer package ``type`` that marks module packages.
        autoload_standard: The only autoload standard scanned for sources.
        extension: Source file extension, without the leading dot.
        exclude: Basename marker of template files to skip (case-insensitive).
        base_class: Base class name a module class must extend.
        config_path: Generated file location, relative to the project root.
        lock_writes: Take an exclusive advisory lock while rewriting the file.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    package_type: str = "pg-module"
    autoload_standard: str = "psr-4"
    extension: str = "php"
    exclude: str | None = ".dist."
    base_class: str = "Module"
    config_path: str = "src/Bootstrap/PgFramework.php"
    lock_writes: bool = True


def _deep_merge(base: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    result = copy.deepcopy(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = copy.deepcopy(value)
    return result


class Config:
    """Configuration accessor with dot-path key support."""

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = data or {}

    @classmethod
    def load(cls, path: Path) -> Config:
        """Load configuration from a YAML file.

        Raises ConfigNotFoundError if the file does not exist, since a
        settings file is only ever loaded when explicitly requested.
        """
        path = Path(path)
        if not path.exists():
            raise ConfigNotFoundError(config_path=str(path))

        content = path.read_text(encoding="utf-8")
        try:
            parsed = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(message=f"Invalid YAML in config file: {path}") from e

        if parsed is None:
            return cls()
        if not isinstance(parsed, dict):
            raise ConfigError(message=f"Config file must be a YAML mapping: {path}")
        return cls(parsed)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value by dot-path key."""
        parts = key.split(".")
        current: Any = self._data
        for part in parts:
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                return default
        return current

    def merged(self, overrides: dict[str, Any]) -> Config:
        """Return a new Config with ``overrides`` layered over this one."""
        return Config(_deep_merge(self._data, overrides))

    def settings(self) -> InstallerSettings:
        """Validate the ``installer`` section into InstallerSettings."""
        section = self.get(SETTINGS_KEY, {})
        if section is None:
            section = {}
        if not isinstance(section, dict):
            raise ConfigError(message=f"'{SETTINGS_KEY}' section must be a mapping")
        try:
            return InstallerSettings(**section)
        except ValidationError as e:
            raise ConfigError(message=f"Invalid installer settings: {e}") from e
