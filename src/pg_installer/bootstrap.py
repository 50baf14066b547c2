"""Generated bootstrap config file: location, rendering and idempotent merging.

The file is read and written without newline translation and with
``surrogateescape`` decoding, so line endings and bytes that are not UTF-8
in existing content survive a rewrite unchanged.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable

try:
    import fcntl
except ImportError:  # Windows: no advisory locks, lock_writes must be off
    fcntl = None  # type: ignore[assignment]

from pg_installer.errors import ConfigError
from pg_installer.sink import MessageSink, null_sink
from pg_installer.types import DiscoveredModule

logger = logging.getLogger(__name__)

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"

__all__ = [
    "CONFIG_FILE_PATH",
    "locate_config_file",
    "merge_config_file",
    "render_config_file",
    "write_config_file",
]

CONFIG_FILE_PATH = "src/Bootstrap/PgFramework.php"

_TEMPLATE = """\
<?php

/** This file is auto generated, do not edit */

declare(strict_types=1);

{uses}

return [
    'modules' => [
{modules}
    ]
];
"""

# Group 1: the use block after declare(); group 2: the modules list body.
_CONFIG_SHAPE = re.compile(
    r"declare\S+\s*;\s+([\s\S]*)\s+return\s+\[\s+'modules'\s+=>\s+\[\s+([\s\S]+)\s+]\s+"
)

_NOTHING_TO_UPDATE = "Nothing to update in config file."


def locate_config_file(project_root: Path, relative_path: str = CONFIG_FILE_PATH) -> Path:
    """Return the path of the generated config file inside ``project_root``."""
    return Path(project_root).joinpath(*relative_path.split("/"))


def render_config_file(uses: str, modules: str) -> str:
    """Render the full file text from a use block and a modules list body."""
    return _TEMPLATE.format(uses=uses, modules=modules)


def write_config_file(path: Path, uses: str, modules: str, lock: bool = True) -> None:
    """Overwrite ``path`` with the rendered file.

    With ``lock`` the file is held under an exclusive advisory lock while it
    is truncated and rewritten. Disable it on storage without lock support.
    """
    path = Path(path)
    if lock and fcntl is None:
        raise ConfigError(message="File locking is not available on this platform; set lock_writes to false")
    content = render_config_file(uses, modules)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "a", encoding=_ENCODING, errors=_ERRORS, newline="") as fh:
        if lock:
            fcntl.flock(fh.fileno(), fcntl.LOCK_EX)
        fh.truncate(0)
        fh.write(content)
        fh.flush()
    logger.debug("Wrote %s (lock=%s)", path, lock)


def merge_config_file(
    path: Path,
    modules: Iterable[DiscoveredModule],
    sink: MessageSink = null_sink,
    lock: bool = True,
) -> bool:
    """Append modules not yet registered in the config file at ``path``.

    Existing use statements and list entries are kept as they are. A module
    counts as registered when ``<ShortName>::class`` already appears in the
    modules list. Returns True only if the file was rewritten.
    """
    path = Path(path)
    if not path.is_file():
        sink(f"Config file\n {path} \n don't exist in this project, writing dummy file")
        write_config_file(path, "", "", lock=lock)

    with open(path, encoding=_ENCODING, errors=_ERRORS, newline="") as fh:
        content = fh.read()
    match = _CONFIG_SHAPE.search(content)
    if match is None:
        logger.debug("No modules list found in %s", path)
        sink(_NOTHING_TO_UPDATE)
        return False

    uses = (match.group(1) or "").strip() + "\n"
    entries = match.group(2).strip() + "\n"
    changed = False

    for module in modules:
        if f"{module.short_name}::class" in entries:
            sink(f"Module {module.short_name} already exist in config file")
            continue
        changed = True
        entries += f"\t\t{module.short_name}::class,\n"
        uses += f"use {module.class_name};\n"
        sink(f"Write module {module.short_name} in config file")

    if not changed:
        sink(_NOTHING_TO_UPDATE)
        return False

    write_config_file(path, uses.strip(), "\t\t" + entries.strip(), lock=lock)
    return True
