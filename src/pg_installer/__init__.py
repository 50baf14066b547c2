"""pg_installer - Composer post-install generator for PgFramework module lists."""

from __future__ import annotations

# Core
from pg_installer.installer import ModuleInstaller
from pg_installer.types import DiscoveredModule, InstalledPackage, ModuleMap, NamespacedSourceDir

# Config file synthesis
from pg_installer.bootstrap import (
    locate_config_file,
    merge_config_file,
    render_config_file,
    write_config_file,
)

# Settings
from pg_installer.config import Config, InstallerSettings

# Composer adapter
from pg_installer.composer import ComposerProject, ScriptEvent, post_autoload_dump

# Messages
from pg_installer.sink import LoggingSink, MessageSink, StreamSink

# Errors
from pg_installer.errors import (
    ConfigError,
    ConfigNotFoundError,
    ErrorCodes,
    InstallerError,
    PackageMetadataError,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "ModuleInstaller",
    "InstalledPackage",
    "NamespacedSourceDir",
    "DiscoveredModule",
    "ModuleMap",
    # Config file synthesis
    "locate_config_file",
    "merge_config_file",
    "render_config_file",
    "write_config_file",
    # Settings
    "Config",
    "InstallerSettings",
    # Composer adapter
    "ComposerProject",
    "ScriptEvent",
    "post_autoload_dump",
    # Messages
    "MessageSink",
    "StreamSink",
    "LoggingSink",
    # Errors
    "ErrorCodes",
    "InstallerError",
    "ConfigError",
    "ConfigNotFoundError",
    "PackageMetadataError",
]
