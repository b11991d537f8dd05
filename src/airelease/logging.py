"""Logging for the airelease CLI.

Log output goes to stderr so it never mixes with command output. The text
format renders through rich; ``AIRELEASE_LOG_FORMAT=json`` emits one JSON
object per record for piping into other tools.
"""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from airelease.settings import Settings


class JsonLineFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry)


def _make_handler(log_format: str) -> logging.Handler:
    if log_format == "json":
        handler: logging.Handler = logging.StreamHandler()
        handler.setFormatter(JsonLineFormatter())
        return handler
    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    return handler


def setup_logging(settings: Settings) -> None:
    """Replace the root logger's handlers with one configured from *settings*.

    Unknown level names fall back to WARNING.
    """
    level = getattr(logging, settings.log_level.upper(), logging.WARNING)
    if not isinstance(level, int):
        level = logging.WARNING

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    handler = _make_handler(settings.log_format)
    handler.setLevel(level)
    root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
