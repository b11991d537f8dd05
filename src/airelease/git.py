"""Git queries and release operations."""

from __future__ import annotations

import re
from pathlib import Path

from pydantic import BaseModel

from airelease.errors import KnownError
from airelease.logging import get_logger
from airelease.process import CommandError, run_command

_log = get_logger("airelease.git")

# Previous tag used when the repository has never been tagged.
INITIAL_TAG = "initial"

_HASH_PREFIX_RE = re.compile(r"^[a-f0-9]+ ")


class CommitDigest(BaseModel):
    """Commit subjects between the previous release and HEAD."""

    commits: list[str]
    message: str
    previous_tag: str


def git(*args: str, cwd: str | Path | None = None) -> str:
    return run_command(["git", *args], cwd=cwd)


def assert_git_repo(cwd: str | Path | None = None) -> str:
    """Return the repository top-level path or raise KnownError."""
    try:
        return git("rev-parse", "--show-toplevel", cwd=cwd)
    except CommandError as exc:
        raise KnownError("The current directory must be a Git repository!") from exc


def has_uncommitted_changes(cwd: str | Path | None = None) -> bool:
    try:
        return bool(git("status", "--porcelain", cwd=cwd))
    except CommandError as exc:
        raise KnownError(f"Could not read the working tree status: {exc}") from exc


def assert_clean_working_tree(cwd: str | Path | None = None) -> None:
    if has_uncommitted_changes(cwd):
        raise KnownError(
            "The working directory has uncommitted changes. Please commit or stash them."
        )


def get_latest_tag(cwd: str | Path | None = None) -> str | None:
    """Return the most recent reachable tag, or None if there is none."""
    try:
        return git("describe", "--tags", "--abbrev=0", cwd=cwd) or None
    except CommandError:
        return None


def strip_commit_hash(line: str) -> str:
    return _HASH_PREFIX_RE.sub("", line, count=1)


def get_commit_digest(
    target_tag: str | None = None,
    cwd: str | Path | None = None,
) -> CommitDigest | None:
    """Collect commit subjects since *target_tag* (or the latest tag).

    Returns None when the range holds no commits. Without any tag the whole
    history is used and the previous tag is reported as ``"initial"``.
    """
    previous_tag = target_tag or get_latest_tag(cwd)

    try:
        if previous_tag is None:
            previous_tag = INITIAL_TAG
            log = git("log", "--oneline", cwd=cwd)
        else:
            log = git("log", "--oneline", f"{previous_tag}..HEAD", cwd=cwd)
    except CommandError as exc:
        raise KnownError(
            f"Could not read commits since {previous_tag}. "
            "Try specifying a different target tag."
        ) from exc

    if not log:
        return None

    commits = [strip_commit_hash(line) for line in log.splitlines()]
    _log.debug("Found %d commit(s) since %s", len(commits), previous_tag)
    return CommitDigest(commits=commits, message=log, previous_tag=previous_tag)


def format_detected_commits(commits: list[str], previous_tag: str) -> str:
    """Human summary of a digest; 0 and 1 commits both read as singular."""
    count = len(commits)
    suffix = "s" if count > 1 else ""
    # Comma thousands separator regardless of locale.
    return f"Detected {count:,} commit{suffix} from the previous release ({previous_tag}) "


def stage(path: str | Path, cwd: str | Path | None = None) -> None:
    git("add", str(path), cwd=cwd)


def stage_tracked_changes(cwd: str | Path | None = None) -> None:
    """Stage every modification to tracked files, as left by a bump tool."""
    try:
        git("add", "--update", cwd=cwd)
    except CommandError as exc:
        raise KnownError(f"Could not stage the version bump: {exc}") from exc


def commit_release(message: str, *, amend: bool, cwd: str | Path | None = None) -> None:
    """Record the release commit, rewriting the bump tool's commit when *amend*."""
    args = ["commit", "--amend", "-m", message] if amend else ["commit", "-m", message]
    try:
        git(*args, cwd=cwd)
    except CommandError as exc:
        raise KnownError(f"Could not commit the release: {exc}") from exc


def tag_release(version: str, cwd: str | Path | None = None) -> None:
    try:
        git("tag", version, "-f", cwd=cwd)
    except CommandError as exc:
        raise KnownError(f"Could not tag the release as {version}: {exc}") from exc
