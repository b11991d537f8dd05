"""Dispatch version reads and bumps to the handler for each project type."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from airelease.errors import KnownError
from airelease.project.detector import ProjectType
from airelease.project.npm import bump_npm_version, get_current_npm_version
from airelease.project.python import bump_python_version, get_current_python_version
from airelease.project.semver import assert_bump_target


def get_current_version(project_type: ProjectType, cwd: str | Path = ".") -> str | None:
    match project_type:
        case ProjectType.npm:
            return get_current_npm_version(cwd)
        case ProjectType.python:
            return get_current_python_version(cwd)
        case _:
            return None


def bump_project_version(
    project_type: ProjectType,
    target: str,
    passthrough: Sequence[str] = (),
    cwd: str | Path = ".",
) -> str:
    """Advance the project version by *target* and return the new ``v`` tag.

    *passthrough* arguments are forwarded to ``npm version`` only.
    """
    assert_bump_target(target)
    match project_type:
        case ProjectType.npm:
            return bump_npm_version(target, passthrough, cwd)
        case ProjectType.python:
            return bump_python_version(target, cwd)
        case _:
            raise KnownError(f"Unsupported project type: {project_type}")
