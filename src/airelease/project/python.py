"""Python project version handling.

Bumping tries, in order: ``poetry version``, ``bump2version``, then editing
the version field in place in the first manifest that has one.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from airelease.errors import KnownError
from airelease.fs import file_exists
from airelease.git import get_latest_tag, stage, stage_tracked_changes
from airelease.logging import get_logger
from airelease.process import CommandError, run_command
from airelease.project.semver import as_tag, bump_version

_log = get_logger("airelease.project.python")

_QUOTED = r"""(?P<quote>["'])(?P<version>[^"']+)(?P=quote)"""


@dataclass(frozen=True)
class VersionLocation:
    """A manifest file and the pattern that finds its version field."""

    relpath: str
    pattern: re.Pattern[str]
    editable: bool = True

    def find(self, root: Path) -> tuple[Path, str, re.Match[str]] | None:
        path = root / self.relpath
        if not file_exists(path) or not path.is_file():
            return None
        content = path.read_text(encoding="utf-8")
        match = self.pattern.search(content)
        if match is None:
            return None
        return path, content, match


VERSION_LOCATIONS: tuple[VersionLocation, ...] = (
    VersionLocation("pyproject.toml", re.compile(rf"^\s*version\s*=\s*{_QUOTED}", re.MULTILINE)),
    VersionLocation("__init__.py", re.compile(rf"^\s*__version__\s*=\s*{_QUOTED}", re.MULTILINE)),
    VersionLocation(
        str(Path("src", "__init__.py")),
        re.compile(rf"^\s*__version__\s*=\s*{_QUOTED}", re.MULTILINE),
    ),
    VersionLocation("setup.py", re.compile(rf"\bversion\s*=\s*{_QUOTED}")),
    VersionLocation(
        "setup.cfg",
        re.compile(r"^\s*version\s*=\s*(?P<version>\S+)", re.MULTILINE),
        editable=False,
    ),
)


def get_current_python_version(cwd: str | Path = ".") -> str | None:
    """Return the first version field found across the manifests, or None."""
    root = Path(cwd).resolve()
    for location in VERSION_LOCATIONS:
        found = location.find(root)
        if found is not None:
            return found[2].group("version")
    return None


# ---------------------------------------------------------------------------
# Bump strategies: (root, target) -> new version or None to try the next one
# ---------------------------------------------------------------------------

BumpStrategy = Callable[[Path, str], str | None]


def bump_with_poetry(root: Path, target: str) -> str | None:
    try:
        run_command(["poetry", "version", target], cwd=root)
        version = run_command(["poetry", "version", "--short"], cwd=root)
    except CommandError as exc:
        _log.debug("poetry unavailable: %s", exc)
        return None
    if not version:
        return None
    stage(root / "pyproject.toml", cwd=root)
    return version


def bump_with_bump2version(root: Path, target: str) -> str | None:
    previous_tag = get_latest_tag(root)
    try:
        run_command(["bump2version", target], cwd=root)
    except CommandError as exc:
        _log.debug("bump2version unavailable: %s", exc)
        return None
    # Without commit = True the edits are left unstaged.
    stage_tracked_changes(cwd=root)
    # A tag that predates the run belongs to the previous release.
    tag = get_latest_tag(root)
    if tag and tag != previous_tag:
        return tag
    return get_current_python_version(root)


def _edit_in_place(location: VersionLocation) -> BumpStrategy:
    def bump(root: Path, target: str) -> str | None:
        found = location.find(root)
        if found is None:
            return None
        path, content, match = found
        new_version = bump_version(match.group("version"), target)
        start, end = match.span("version")
        path.write_text(content[:start] + new_version + content[end:], encoding="utf-8")
        stage(path, cwd=root)
        _log.debug("Wrote version %s to %s", new_version, path)
        return new_version

    return bump


BUMP_STRATEGIES: tuple[BumpStrategy, ...] = (
    bump_with_poetry,
    bump_with_bump2version,
    *(_edit_in_place(loc) for loc in VERSION_LOCATIONS if loc.editable),
)


def bump_python_version(target: str, cwd: str | Path = ".") -> str:
    """Bump the project version and return it as a ``v``-prefixed tag."""
    root = Path(cwd).resolve()
    for strategy in BUMP_STRATEGIES:
        version = strategy(root, target)
        if version:
            return as_tag(version)

    checked = ", ".join(loc.relpath for loc in VERSION_LOCATIONS if loc.editable)
    raise KnownError(
        f"Could not find version field in {checked}.\n"
        "Please ensure your Python project has a version field defined."
    )
