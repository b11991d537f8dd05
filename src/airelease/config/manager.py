"""Config loading, validation, and persistence for the ``~/.airelease`` file."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import Path

from airelease.config.keys import CONFIG_KEYS, ResolveContext, parse_api_provider
from airelease.errors import ConfigParseError, ConfigValidationError, UnknownKeyError
from airelease.fs import file_exists
from airelease.logging import get_logger

_log = get_logger("airelease.config.manager")

RawConfig = dict[str, str]
ValidConfig = dict[str, object]


def user_config_path() -> Path:
    """Return the persisted config file path."""
    return Path.home() / ".airelease"


def parse_config_text(text: str, source: str = "config") -> RawConfig:
    """Parse section-less ``key=value`` text.

    Blank lines and ``;``/``#`` comments are skipped.
    """
    parsed: RawConfig = {}
    for lineno, line in enumerate(text.splitlines(), start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith((";", "#")):
            continue
        if stripped.startswith("[") or "=" not in stripped:
            raise ConfigParseError(
                f"Could not parse {source} at line {lineno}: {stripped!r}"
            )
        key, _, value = stripped.partition("=")
        key = key.strip()
        if not key:
            raise ConfigParseError(
                f"Could not parse {source} at line {lineno}: missing key"
            )
        parsed[key] = value.strip()
    return parsed


def format_config_text(config: Mapping[str, str]) -> str:
    """Serialize *config* back to ``key=value`` lines."""
    return "".join(f"{key}={value}\n" for key, value in config.items())


def read_persisted() -> RawConfig:
    """Read the persisted config, returning an empty dict if the file is absent."""
    path = user_config_path()
    if not file_exists(path):
        return {}
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigParseError(f"Could not read {path}: {exc}") from exc
    return parse_config_text(text, source=str(path))


def resolve_config(
    overrides: Mapping[str, str | None] | None = None,
    suppress_errors: bool = False,
) -> ValidConfig:
    """Resolve every key: override → persisted value → validator default.

    ``api_provider`` is resolved first and passed as context to the other
    validators. With *suppress_errors*, keys that fail validation are
    omitted from the result instead of raising.
    """
    overrides = overrides or {}
    persisted = read_persisted()

    def raw(key: str) -> str | None:
        value = overrides.get(key)
        return value if value is not None else persisted.get(key)

    resolved: ValidConfig = {}
    try:
        resolved["api_provider"] = parse_api_provider(raw("api_provider"), ResolveContext())
    except ConfigValidationError:
        if not suppress_errors:
            raise
    ctx = ResolveContext(api_provider=str(resolved.get("api_provider", "openai")))

    for key, key_def in CONFIG_KEYS.items():
        if key == "api_provider":
            continue
        try:
            resolved[key] = key_def.parse(raw(key), ctx)
        except ConfigValidationError as exc:
            if not suppress_errors:
                raise
            _log.debug("Omitting %s from resolved config: %s", key, exc)

    return resolved


def get_config_values(keys: Iterable[str] = ()) -> ValidConfig:
    """Return resolved values for *keys* (all keys when empty), errors suppressed.

    Unknown keys are skipped.
    """
    config = resolve_config({}, suppress_errors=True)
    wanted = list(keys)
    if not wanted:
        return config
    return {k: config[k] for k in wanted if k in config}


def set_configs(pairs: Iterable[tuple[str, str]]) -> None:
    """Validate each pair and persist the batch with a single write.

    Keys already in the file but unknown to airelease are kept as-is.
    Nothing is written if any pair is rejected.
    """
    config = read_persisted()

    for key, value in pairs:
        if key not in CONFIG_KEYS:
            available = ", ".join(CONFIG_KEYS)
            raise UnknownKeyError(
                f"Invalid config property: {key}. Available properties are: {available}"
            )

        key_def = CONFIG_KEYS[key]
        try:
            provider = parse_api_provider(config.get("api_provider"), ResolveContext())
        except ConfigValidationError:
            provider = "openai"
        ctx = ResolveContext(api_provider=provider)

        try:
            parsed = key_def.parse(value, ctx)
        except ConfigValidationError as exc:
            if key_def.hint is None:
                raise
            raise ConfigValidationError(key, f"{exc}\n{key_def.hint(ctx)}") from exc

        if parsed is None:
            config.pop(key, None)
        else:
            config[key] = str(parsed)

    path = user_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(format_config_text(config), encoding="utf-8")
    _log.debug("Wrote %d config value(s) to %s", len(config), path)
