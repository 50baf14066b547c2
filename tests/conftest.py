"""Shared test fixtures: message recording and on-disk vendor trees."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest

from pg_installer.types import InstalledPackage


# === Module source templates ===

MODULE_TEMPLATE = """\
<?php

declare(strict_types=1);

namespace {namespace};

use PgFramework\\Module;

class {class_name} extends Module
{{
    public const DEFINITIONS = __DIR__ . '/config.php';
}}
"""

CONFIG_TEMPLATE = """\
<?php

return [
    'router.prefix' => '/',
];
"""


class RecordingSink:
    """Message sink that keeps every message for assertions."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def __call__(self, message: str) -> None:
        self.messages.append(message)

    def containing(self, fragment: str) -> list[str]:
        return [m for m in self.messages if fragment in m]


def write_module(directory: Path, namespace: str, class_name: str, filename: str | None = None) -> Path:
    """Write a PHP module class file and return its path."""
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / (filename or f"{class_name}.php")
    path.write_text(MODULE_TEMPLATE.format(namespace=namespace, class_name=class_name))
    return path


# === Fixtures ===


@pytest.fixture
def sink() -> RecordingSink:
    """A sink recording every progress message."""
    return RecordingSink()


@pytest.fixture
def module_file() -> Callable[..., Path]:
    """Return the helper writing a PHP module class file."""
    return write_module


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """An empty project directory with a vendor dir."""
    root = tmp_path / "project"
    (root / "vendor").mkdir(parents=True)
    return root


@pytest.fixture
def make_package(project_root: Path) -> Callable[..., InstalledPackage]:
    """Factory creating a package directory under vendor/ and its record."""

    def factory(
        name: str,
        package_type: str = "pg-module",
        autoload: dict[str, Any] | None = None,
    ) -> InstalledPackage:
        install_path = project_root / "vendor" / name
        install_path.mkdir(parents=True, exist_ok=True)
        return InstalledPackage(
            name=name,
            type=package_type,
            autoload=autoload if autoload is not None else {},
            install_path=install_path,
        )

    return factory


@pytest.fixture
def router_package(make_package: Callable[..., InstalledPackage]) -> InstalledPackage:
    """A pg-module package with one RouterModule class and a plain config file."""
    package = make_package("pgframework/router", autoload={"psr-4": {"Router\\": "src/"}})
    src = package.install_path / "src"
    write_module(src, "Router", "RouterModule")
    (src / "config.php").write_text(CONFIG_TEMPLATE)
    return package


@pytest.fixture
def auth_package(make_package: Callable[..., InstalledPackage]) -> InstalledPackage:
    """A pg-module package with its module one directory down."""
    package = make_package("pgframework/auth", autoload={"psr-4": {"PgFramework\\Auth\\": "src"}})
    write_module(package.install_path / "src" / "Auth", "PgFramework\\Auth", "AuthModule")
    return package


@pytest.fixture
def write_installed_json(project_root: Path) -> Callable[[Any], Path]:
    """Write vendor/composer/installed.json with the given payload."""

    def writer(payload: Any) -> Path:
        composer_dir = project_root / "vendor" / "composer"
        composer_dir.mkdir(parents=True, exist_ok=True)
        path = composer_dir / "installed.json"
        path.write_text(json.dumps(payload))
        return path

    return writer
