"""Classify the working directory by the marker files it contains."""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path

from airelease.errors import KnownError
from airelease.fs import file_exists
from airelease.logging import get_logger

_log = get_logger("airelease.project.detector")


class ProjectType(StrEnum):
    """Ecosystem of the project being released."""

    npm = "npm"
    python = "python"
    unsupported = "unsupported"


NPM_MARKERS: tuple[str, ...] = ("package.json",)
PYTHON_MARKERS: tuple[str, ...] = ("setup.py", "pyproject.toml", "setup.cfg")

# Recognized ecosystems we refuse to release, checked in this order.
UNSUPPORTED_ECOSYSTEMS: dict[str, tuple[str, ...]] = {
    "Ruby": ("Gemfile",),
    "Rust": ("Cargo.toml",),
    "Go": ("go.mod",),
    "Java (Maven)": ("pom.xml",),
    "Java (Gradle)": ("build.gradle", "build.gradle.kts"),
    "PHP": ("composer.json",),
}

SUPPORTED_ECOSYSTEMS: dict[str, tuple[str, ...]] = {
    "npm/Node.js": NPM_MARKERS,
    "Python": PYTHON_MARKERS,
}


def _any_marker(root: Path, markers: tuple[str, ...]) -> str | None:
    for name in markers:
        if file_exists(root / name):
            return name
    return None


def detect_project_type(cwd: str | Path = ".") -> ProjectType:
    """Return the project type of *cwd*; first match wins.

    Raises:
        KnownError: If a recognized but unsupported ecosystem is found.
    """
    root = Path(cwd).resolve()

    if _any_marker(root, NPM_MARKERS):
        return ProjectType.npm

    if _any_marker(root, PYTHON_MARKERS):
        return ProjectType.python

    for ecosystem, markers in UNSUPPORTED_ECOSYSTEMS.items():
        marker = _any_marker(root, markers)
        if marker:
            _log.debug("Found %s in %s", marker, root)
            raise KnownError(
                f"{ecosystem} project detected but not yet supported.\n"
                "airelease currently supports npm/Node.js and Python projects.\n"
                f"{ecosystem} support is planned for a future release."
            )

    return ProjectType.unsupported


def assert_supported_project(cwd: str | Path = ".") -> ProjectType:
    """Detect the project type and fail unless it can be released."""
    project_type = detect_project_type(cwd)

    if project_type is ProjectType.unsupported:
        supported = "\n".join(
            f"  • {name} projects ({', '.join(markers)})"
            for name, markers in SUPPORTED_ECOSYSTEMS.items()
        )
        raise KnownError(
            "No supported project configuration found.\n"
            f"airelease supports:\n{supported}\n"
            "Please run this command in a supported project directory."
        )

    return project_type
