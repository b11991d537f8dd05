"""release commands: draft notes, bump the version, commit and tag."""

from __future__ import annotations

import asyncio
import importlib
import os
from collections.abc import Callable

import typer
from rich import print as rprint
from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, Prompt
from rich.text import Text

from airelease.config.manager import ValidConfig, resolve_config
from airelease.errors import KnownError, handle_cli_error
from airelease.git import (
    assert_clean_working_tree,
    assert_git_repo,
    commit_release,
    format_detected_commits,
    get_commit_digest,
    has_uncommitted_changes,
    tag_release,
)
from airelease.logging import get_logger
from airelease.project.detector import assert_supported_project
from airelease.project.semver import BUMP_TARGETS
from airelease.project.versioning import bump_project_version
from airelease.providers.registry import get_provider

_log = get_logger("airelease.cli.commands.release")

_API_KEY_FIELDS: dict[str, str] = {
    "openai": "OPENAI_KEY",
    "anthropic": "ANTHROPIC_API_KEY",
}


def _load_provider(name: str) -> None:
    """Import the provider subpackage so it registers itself."""
    try:
        importlib.import_module(f"airelease.providers.{name}")
    except ImportError as exc:
        _log.debug("Could not load provider %r: %s", name, exc)


def _env_overrides(provider: str | None) -> dict[str, str | None]:
    """Config overrides from flags and the environment."""
    env = os.environ
    return {
        "api_provider": provider,
        "OPENAI_KEY": env.get("OPENAI_KEY") or env.get("OPENAI_API_KEY"),
        "ANTHROPIC_API_KEY": env.get("ANTHROPIC_API_KEY"),
    }


def _draft_notes(config: ValidConfig, commit_log: str) -> list[str]:
    provider_name = str(config["api_provider"])
    _load_provider(provider_name)
    try:
        provider = get_provider(
            provider_name,
            api_key=str(config[_API_KEY_FIELDS[provider_name]]),
            timeout_ms=int(config["timeout"]),  # type: ignore[call-overload]
        )
    except KeyError as exc:
        raise KnownError(str(exc)) from exc
    return asyncio.run(
        provider.generate(
            commit_log,
            model=str(config["model"]),
            locale=str(config["locale"]),
        )
    )


def _review_notes(notes: str, editor: str) -> str | None:
    """Let the operator accept, edit, or cancel the draft. None means cancel."""
    action = Prompt.ask(
        Text(f"Generated release message:\n\n   {notes}\n\nWhat would you like to do?"),
        choices=["commit", "edit", "cancel"],
        default="commit",
    )
    if action == "cancel":
        return None
    if action == "commit":
        return notes

    edited = typer.edit(notes, editor=editor, require_save=False)
    edited = (edited or "").strip()
    if not edited:
        raise KnownError("Please enter a release message")
    if not Confirm.ask(Text(f"Use this edited message?\n\n   {edited}\n")):
        return None
    return edited


def run_release(
    target: str,
    tag: str | None,
    provider: str | None,
    passthrough: list[str],
) -> None:
    """Full release flow for one bump *target*."""
    console = Console()
    console.rule("[bold cyan] airelease [/bold cyan]")

    assert_git_repo()
    assert_clean_working_tree()
    project_type = assert_supported_project()

    with console.status("Detecting target commit list"):
        digest = get_commit_digest(tag)
    if digest is None:
        raise KnownError("No commits were detected. Try specifying a different target tag.")
    listing = "\n".join(f"     {commit}" for commit in digest.commits)
    summary = format_detected_commits(digest.commits, digest.previous_tag)
    console.print(f"{summary}:\n{listing}", markup=False, highlight=False)

    config = resolve_config(_env_overrides(provider))

    with console.status("The AI is analyzing your changes"):
        messages = _draft_notes(config, digest.message)
    console.print("Changes analyzed")
    if not messages:
        raise KnownError("No release notes were generated. Try again.")

    notes = _review_notes(messages[0], str(config["editor"]))
    if notes is None:
        console.print("Release cancelled")
        return

    version = bump_project_version(project_type, target, passthrough)
    console.print(f"Version: [green]{version}[/green]")

    # Bump tools that commit on their own get their commit amended.
    commit_release(f"{version}\n\n{notes}", amend=not has_uncommitted_changes())
    tag_release(version)

    console.print("[green]✔[/green] Successfully committed!")


def _make_release_command(target: str) -> Callable[..., None]:
    def command(
        ctx: typer.Context,
        tag: str | None = typer.Option(
            None,
            "--tag",
            "-t",
            help="Previous release tag. If not provided, the latest release tag is used.",
        ),
        provider: str | None = typer.Option(
            None, "--provider", help="Provider override (openai | anthropic)"
        ),
    ) -> None:
        try:
            run_release(target, tag, provider, list(ctx.args))
        except KnownError as exc:
            rprint(f"[red]✖ {escape(str(exc))}[/red]")
            raise typer.Exit(code=1) from exc
        except Exception as exc:
            rprint(f"[red]✖ {escape(str(exc))}[/red]")
            handle_cli_error(exc)
            raise typer.Exit(code=1) from exc

    command.__doc__ = f"Release a new {target} version with AI-drafted notes."
    return command


RELEASE_COMMANDS: dict[str, Callable[..., None]] = {
    target: _make_release_command(target) for target in BUMP_TARGETS
}
