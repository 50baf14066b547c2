"""Core types: InstalledPackage, NamespacedSourceDir, DiscoveredModule, ModuleMap."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterator

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "InstalledPackage",
    "NamespacedSourceDir",
    "DiscoveredModule",
    "ModuleMap",
]


class InstalledPackage(BaseModel):
    """An installed dependency as reported by the package manager."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    name: str
    package_type: str = Field(default="library", alias="type")
    autoload: dict[str, Any] = Field(default_factory=dict)
    install_path: Path
    version: str | None = None

    @property
    def pretty_name(self) -> str:
        """Display name of the package."""
        return self.name


@dataclass(frozen=True)
class NamespacedSourceDir:
    """A namespace prefix and the absolute directory holding its sources."""

    namespace: str
    directory: Path


@dataclass(frozen=True)
class DiscoveredModule:
    """A module class found in a source file."""

    class_name: str
    short_name: str
    file_path: Path | None = None


class ModuleMap:
    """Running set of discovered modules, keyed by fully-qualified class name.

    Insertion order is the order modules were first discovered. The map is
    an explicit accumulator: pass the same instance to every extraction call
    of one discovery run and ``clear()`` it before starting another.
    """

    def __init__(self) -> None:
        self._modules: dict[str, DiscoveredModule] = {}

    def add(self, module: DiscoveredModule) -> None:
        # Re-adding a known name keeps its original discovery position.
        self._modules[module.class_name] = module

    def update(self, other: ModuleMap) -> None:
        for module in other:
            self.add(module)

    def clear(self) -> None:
        self._modules.clear()

    def get(self, class_name: str) -> DiscoveredModule | None:
        return self._modules.get(class_name)

    def as_dict(self) -> dict[str, str]:
        """Return ``{fully-qualified name: bare class name}`` in discovery order."""
        return {name: module.short_name for name, module in self._modules.items()}

    def __contains__(self, class_name: object) -> bool:
        return class_name in self._modules

    def __iter__(self) -> Iterator[DiscoveredModule]:
        return iter(list(self._modules.values()))

    def __len__(self) -> int:
        return len(self._modules)

    def __bool__(self) -> bool:
        return bool(self._modules)

    def __repr__(self) -> str:
        return f"ModuleMap({self.as_dict()!r})"
