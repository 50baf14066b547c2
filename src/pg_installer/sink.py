"""Message sinks for user-visible progress output."""

from __future__ import annotations

import logging
import sys
from typing import Any, Callable

__all__ = ["MessageSink", "StreamSink", "LoggingSink", "null_sink"]

MessageSink = Callable[[str], None]


class StreamSink:
    """Write each message as one line to a text stream (stdout by default)."""

    def __init__(self, output: Any = None) -> None:
        self._output = output

    def __call__(self, message: str) -> None:
        output = self._output if self._output is not None else sys.stdout
        output.write(message + "\n")
        output.flush()


class LoggingSink:
    """Forward each message to a logger at INFO level."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger("pg_installer")

    def __call__(self, message: str) -> None:
        self._logger.info("%s", message)


def null_sink(message: str) -> None:
    """Discard the message."""
