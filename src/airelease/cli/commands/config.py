"""config subcommand: read and write the persisted configuration."""

from __future__ import annotations

import typer
from rich import print as rprint
from rich.markup import escape

from airelease.config.keys import CONFIG_KEYS, PROVIDERS
from airelease.config.manager import get_config_values, set_configs
from airelease.errors import KnownError, handle_cli_error

config_app = typer.Typer(
    name="config",
    help="Manage airelease configuration.",
    no_args_is_help=True,
)


def _fail(exc: Exception) -> typer.Exit:
    rprint(f"[red]✖ {escape(str(exc))}[/red]")
    handle_cli_error(exc)
    return typer.Exit(code=1)


def parse_assignments(assignments: list[str]) -> list[tuple[str, str]]:
    """Split ``key=value`` arguments on the first ``=``."""
    pairs: list[tuple[str, str]] = []
    for item in assignments:
        key, sep, value = item.partition("=")
        if not sep:
            raise KnownError(f"Invalid assignment {item!r}. Use key=value.")
        pairs.append((key, value))
    return pairs


@config_app.command("get")
def config_get(
    keys: list[str] | None = typer.Argument(None, help="Config keys to show (default: all)"),
) -> None:
    """Show resolved config values."""
    try:
        config = get_config_values(keys or [])
    except Exception as exc:
        raise _fail(exc) from exc

    if not keys:
        typer.echo("Current configuration:")
        for key, value in config.items():
            typer.echo(f"  {key}={value if value is not None else ''}")
        typer.echo("\nAPI Provider Info:")
        typer.echo(f"  Current API: {config.get('api_provider', 'openai')}")
        typer.echo(f"  Available providers: {', '.join(PROVIDERS)}")
        return

    for key, value in config.items():
        typer.echo(f"{key}={value if value is not None else ''}")


@config_app.command("set")
def config_set(
    assignments: list[str] = typer.Argument(..., help="key=value pairs to persist"),
) -> None:
    """Validate and persist config values."""
    try:
        pairs = parse_assignments(assignments)
        set_configs(pairs)
    except Exception as exc:
        raise _fail(exc) from exc

    for key, value in pairs:
        rprint(f"Set {escape(key)} = {escape(value)}")


@config_app.command("keys")
def config_keys() -> None:
    """List the available config keys."""
    width = max(len(k) for k in CONFIG_KEYS)
    for name, key_def in CONFIG_KEYS.items():
        typer.echo(f"  {name:<{width}}  {key_def.description}")
