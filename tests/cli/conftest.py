"""Shared fixtures for CLI tests."""

from __future__ import annotations

from collections.abc import Iterator
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from typer.testing import CliRunner

from airelease.git import CommitDigest
from airelease.project.detector import ProjectType

_RELEASE = "airelease.cli.commands.release"


@pytest.fixture
def cli_runner() -> CliRunner:
    """Typer CliRunner instance for invoking CLI commands in tests."""
    return CliRunner()


def _make_digest(*commits: str, previous_tag: str = "v1.0.0") -> CommitDigest:
    """Factory for CommitDigest test instances."""
    commits = commits or ("feat: add export (#12)", "fix: crash on empty list")
    return CommitDigest(
        commits=list(commits),
        message="\n".join(f"abc{i:03d} {c}" for i, c in enumerate(commits)),
        previous_tag=previous_tag,
    )


@pytest.fixture
def release_env() -> Iterator[SimpleNamespace]:
    """Patch every side effect of the release flow with recording mocks.

    Defaults describe a clean npm repo with two commits whose provider
    drafts a single note and whose operator picks "commit".
    """
    provider = MagicMock()
    provider.generate = AsyncMock(return_value=["Features\n- Export (#12)"])
    digest = _make_digest()
    config = {
        "api_provider": "openai",
        "OPENAI_KEY": "sk-test",
        "ANTHROPIC_API_KEY": None,
        "locale": "en",
        "model": "gpt-4o",
        "timeout": 10_000,
        "editor": "vi",
    }
    targets = {
        "assert_git_repo": dict(return_value="/repo"),
        "assert_clean_working_tree": dict(return_value=None),
        "assert_supported_project": dict(return_value=ProjectType.npm),
        "get_commit_digest": dict(return_value=digest),
        "resolve_config": dict(return_value=config),
        "get_provider": dict(return_value=provider),
        "bump_project_version": dict(return_value="v1.1.0"),
        "has_uncommitted_changes": dict(return_value=False),
        "commit_release": dict(return_value=None),
        "tag_release": dict(return_value=None),
    }
    patches = {name: patch(f"{_RELEASE}.{name}", **kwargs) for name, kwargs in targets.items()}
    patches["ask"] = patch(f"{_RELEASE}.Prompt.ask", return_value="commit")
    patches["confirm"] = patch(f"{_RELEASE}.Confirm.ask", return_value=True)
    patches["edit"] = patch(f"{_RELEASE}.typer.edit", return_value=None)

    mocks = {name: p.start() for name, p in patches.items()}
    yield SimpleNamespace(provider=provider, config=config, digest=digest, **mocks)
    for p in patches.values():
        p.stop()
