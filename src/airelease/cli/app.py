"""Typer CLI application definition for airelease."""

from __future__ import annotations

import typer

from airelease.cli.commands.config import config_app
from airelease.cli.commands.release import RELEASE_COMMANDS
from airelease.logging import setup_logging
from airelease.settings import Settings

app = typer.Typer(
    name="airelease",
    help="Draft release notes from commits with an LLM, then bump, commit and tag.",
    no_args_is_help=True,
)


@app.callback()
def _main() -> None:
    setup_logging(Settings())


for _target, _command in RELEASE_COMMANDS.items():
    app.command(
        _target,
        context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
    )(_command)
app.add_typer(config_app, name="config")


def main() -> None:
    app()
