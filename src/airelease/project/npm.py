"""npm/Node.js version handling."""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path

from airelease.errors import KnownError
from airelease.git import get_latest_tag, stage_tracked_changes
from airelease.logging import get_logger
from airelease.process import CommandError, run_command
from airelease.project.semver import as_tag

_log = get_logger("airelease.project.npm")


def get_current_npm_version(cwd: str | Path = ".") -> str | None:
    """Read ``version`` from package.json, or None if unavailable."""
    manifest = Path(cwd).resolve() / "package.json"
    try:
        data = json.loads(manifest.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return None
    version = data.get("version") if isinstance(data, dict) else None
    return version if isinstance(version, str) and version else None


def bump_npm_version(
    target: str,
    passthrough: Sequence[str] = (),
    cwd: str | Path = ".",
) -> str:
    """Run ``npm version`` and return the new version as a ``v``-prefixed tag.

    The result is read back from the tag npm created, or from package.json
    when npm made no new tag (e.g. ``--no-git-tag-version``), never from
    npm's own output.
    """
    previous_tag = get_latest_tag(cwd)
    try:
        run_command(["npm", "version", target, *passthrough], cwd=cwd)
    except CommandError as exc:
        raise KnownError(f"npm version {target} failed: {exc}") from exc
    stage_tracked_changes(cwd=cwd)

    tag = get_latest_tag(cwd)
    version = tag if tag and tag != previous_tag else get_current_npm_version(cwd)
    if not version:
        raise KnownError("Could not determine the new version after running npm version.")
    _log.debug("npm bumped to %s", version)
    return as_tag(version)
