"""Command line entry point, meant to run as a Composer ``post-autoload-dump`` script."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from pg_installer.composer import ComposerProject, ScriptEvent, post_autoload_dump
from pg_installer.config import Config
from pg_installer.errors import InstallerError
from pg_installer.sink import StreamSink

__all__ = ["build_parser", "main"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pg-installer",
        description="Register pg-module packages in the generated PgFramework bootstrap file.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Enable debug logging.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    install_parser = subparsers.add_parser(
        "install",
        help="Discover installed modules and update the bootstrap config file.",
    )
    install_parser.add_argument(
        "--project-root",
        default=".",
        help="Directory holding composer.json (defaults to current directory).",
    )
    install_parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML file with an 'installer' settings section.",
    )
    install_parser.add_argument(
        "--no-lock",
        action="store_true",
        help="Write the config file without an exclusive lock.",
    )
    install_parser.set_defaults(func=_run_install)
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="[pg-installer] %(levelname)s %(name)s: %(message)s",
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    return args.func(args)


def _run_install(args: argparse.Namespace) -> int:
    overrides = {"lock_writes": False} if args.no_lock else None
    try:
        config = Config.load(args.config) if args.config else Config()
        project = ComposerProject.from_project_root(Path(args.project_root).resolve())
        post_autoload_dump(ScriptEvent(composer=project, io=StreamSink()), config=config, overrides=overrides)
    except InstallerError as e:
        print(f"pg-installer: {e}", file=sys.stderr)
        return 1
    return 0
