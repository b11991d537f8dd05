"""Filesystem helpers."""

from __future__ import annotations

import os
from pathlib import Path


def file_exists(path: str | Path) -> bool:
    """Return True if *path* exists as a file, directory, or symlink.

    Uses ``lstat`` so a symlink whose target is missing still counts.
    """
    try:
        os.lstat(path)
    except OSError:
        return False
    return True
