"""Semantic version arithmetic for bump targets."""

from __future__ import annotations

from airelease.errors import KnownError

BUMP_TARGETS = ("major", "minor", "patch")


def assert_bump_target(target: str | None) -> str:
    """Return *target* if it is a bump target, else raise KnownError."""
    if target not in BUMP_TARGETS:
        raise KnownError(
            "No version argument was provided. "
            "Please provide target release (ex: major, minor, patch)"
        )
    return target


def bump_version(version: str, target: str) -> str:
    """Increment one component of a dotted numeric *version*.

    Missing components are treated as zero, so ``"1.2"`` patches to
    ``"1.2.1"``. Pre-release or build suffixes are rejected.

    Raises:
        KnownError: On fewer than two numeric components or an unknown target.
    """
    try:
        parts = [int(p) for p in version.split(".")]
    except ValueError:
        parts = []
    if len(parts) < 2:
        raise KnownError(f"Invalid version format: {version}")

    while len(parts) < 3:
        parts.append(0)
    major, minor, patch = parts[:3]

    match target:
        case "major":
            return f"{major + 1}.0.0"
        case "minor":
            return f"{major}.{minor + 1}.0"
        case "patch":
            return f"{major}.{minor}.{patch + 1}"
        case _:
            raise KnownError(f"Invalid version target: {target}")


def as_tag(version: str) -> str:
    """Normalize *version* to carry a leading ``v``."""
    return version if version.startswith("v") else f"v{version}"
