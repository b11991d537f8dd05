"""Thin wrapper around external commands (git, npm, poetry, bump2version)."""

from __future__ import annotations

import subprocess
from collections.abc import Sequence
from pathlib import Path

from airelease.logging import get_logger

_log = get_logger("airelease.process")


class CommandError(Exception):
    """An external command was missing or exited non-zero."""

    def __init__(self, args: Sequence[str], message: str, returncode: int | None = None) -> None:
        super().__init__(message)
        self.args_list = list(args)
        self.returncode = returncode


def run_command(
    args: Sequence[str],
    *,
    cwd: str | Path | None = None,
) -> str:
    """Run *args* to completion and return stripped stdout.

    Raises:
        CommandError: If the executable is missing or exits non-zero.
    """
    _log.debug("Running %s", " ".join(args))
    try:
        result = subprocess.run(
            list(args),
            cwd=cwd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
    except FileNotFoundError as exc:
        raise CommandError(args, f"{args[0]} is not installed or not in PATH") from exc

    if result.returncode != 0:
        stderr = result.stderr.strip()
        raise CommandError(
            args,
            f"Command failed: {' '.join(args)}" + (f"\n{stderr}" if stderr else ""),
            returncode=result.returncode,
        )
    return result.stdout.strip()
