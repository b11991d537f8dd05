"""Exception hierarchy and top-level error reporting."""

from __future__ import annotations

import traceback

from rich.console import Console

from airelease import __version__
from airelease.settings import Settings


class KnownError(Exception):
    """An anticipated failure the user can act on.

    Printed as a single line without a stack trace.
    """


class ConfigParseError(KnownError):
    """The persisted config file exists but cannot be parsed."""


class UnknownKeyError(KnownError):
    """A config key outside the fixed key set was given."""


class ConfigValidationError(KnownError):
    """A config value was rejected by its key's validator."""

    def __init__(self, key: str, message: str) -> None:
        super().__init__(message)
        self.key = key


def handle_cli_error(error: object, console: Console | None = None) -> None:
    """Report an unexpected exception with its traceback and a bug pointer.

    Known errors are left alone: the command already printed their message.
    """
    if not isinstance(error, Exception) or isinstance(error, KnownError):
        return

    console = console or Console(stderr=True)
    lines = traceback.format_exception(error)
    # Skip the "Traceback (most recent call last):" header.
    if len(lines) > 1:
        console.print("".join(lines[1:]).rstrip(), style="dim", markup=False, highlight=False)
    console.print(f"\n[dim]airelease v{__version__}[/dim]")
    console.print("\nPlease open a Bug report with the information above:")
    console.print(Settings().issues_url, markup=False)
