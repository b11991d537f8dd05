"""Shared pytest fixtures for the airelease test suite."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import patch

import pytest

from airelease.settings import Settings


@pytest.fixture
def test_settings() -> Settings:
    """Settings instance with test defaults, ignoring any .env file on disk."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        log_level="DEBUG",
        log_format="text",
    )


@pytest.fixture(autouse=True)
def _reset_root_logger() -> Iterator[None]:
    """Restore root logger state between tests (the CLI reconfigures it)."""
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    yield
    root.handlers.clear()
    root.handlers.extend(original_handlers)
    root.setLevel(original_level)


@pytest.fixture
def config_file(tmp_path: Path) -> Iterator[Path]:
    """Point the persisted config at a temporary file."""
    path = tmp_path / "home" / ".airelease"
    with patch("airelease.config.manager.user_config_path", return_value=path):
        yield path
