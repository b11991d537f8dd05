"""Config key definitions, per-key validators and provider-aware defaults."""

from __future__ import annotations

import re
import shutil
import sys
from collections.abc import Callable
from dataclasses import dataclass

from airelease.errors import ConfigValidationError
from airelease.logging import get_logger

_log = get_logger("airelease.config.keys")

PROVIDERS = ("openai", "anthropic")
DEFAULT_PROVIDER = "openai"

OPENAI_MODELS = (
    "gpt-4o",
    "gpt-4o-mini",
    "gpt-4-turbo",
    "gpt-4",
    "gpt-3.5-turbo",
)
ANTHROPIC_MODELS = (
    "claude-sonnet-4-5-20250929",
    "claude-haiku-4-5-20251001",
    "claude-opus-4-1-20250805",
    "claude-3-5-haiku-latest",
)
MODELS_BY_PROVIDER: dict[str, tuple[str, ...]] = {
    "openai": OPENAI_MODELS,
    "anthropic": ANTHROPIC_MODELS,
}
DEFAULT_MODELS: dict[str, str] = {
    "openai": "gpt-4o",
    "anthropic": "claude-sonnet-4-5-20250929",
}

DEFAULT_LOCALE = "en"
DEFAULT_TIMEOUT_MS = 10_000
MIN_TIMEOUT_MS = 500

EDITORS_BY_PLATFORM: dict[str, tuple[str, ...]] = {
    "darwin": ("vi", "nano", "vim", "nvim", "emacs", "code", "sublime", "atom", "pico"),
    "win32": ("notepad", "notepad++", "atom", "sublime"),
    "linux": ("vi", "nano", "vim", "nvim", "emacs", "code", "gedit", "kate", "pico"),
}
DEFAULT_EDITORS: dict[str, str] = {"win32": "notepad"}

_LOCALE_RE = re.compile(r"^[a-z-]+$", re.IGNORECASE)
_TIMEOUT_RE = re.compile(r"^\d+$")


@dataclass(frozen=True)
class ResolveContext:
    """Values resolved in the first phase and visible to later validators."""

    api_provider: str = DEFAULT_PROVIDER


def platform_editors(platform: str | None = None) -> tuple[str, ...]:
    """Return the common editors for *platform*, defaulting to the linux list."""
    return EDITORS_BY_PLATFORM.get(platform or sys.platform, EDITORS_BY_PLATFORM["linux"])


def default_editor(platform: str | None = None) -> str:
    return DEFAULT_EDITORS.get(platform or sys.platform, "vi")


def _assert(key: str, condition: object, message: str) -> None:
    if not condition:
        raise ConfigValidationError(key, f"Invalid config property {key}: {message}")


# ---------------------------------------------------------------------------
# Validators: (raw value or None, context) -> parsed value
# ---------------------------------------------------------------------------


def parse_api_provider(value: str | None, ctx: ResolveContext) -> str:
    if not value:
        return DEFAULT_PROVIDER
    _assert("api_provider", value in PROVIDERS, f"Must be one of: {', '.join(PROVIDERS)}")
    return value


def _api_key_parser(key: str, provider: str, prefix: str) -> Callable[[str | None, ResolveContext], str | None]:
    def parse(value: str | None, ctx: ResolveContext) -> str | None:
        if not value:
            if ctx.api_provider != provider:
                return None
            raise ConfigValidationError(
                key,
                f"Please set your {key} via `airelease config set {key}=<your token>`",
            )
        _assert(key, value.startswith(prefix), f'Must start with "{prefix}"')
        return value

    return parse


parse_openai_key = _api_key_parser("OPENAI_KEY", "openai", "sk-")
parse_anthropic_api_key = _api_key_parser("ANTHROPIC_API_KEY", "anthropic", "sk-ant-")


def parse_locale(value: str | None, ctx: ResolveContext) -> str:
    if not value:
        return DEFAULT_LOCALE
    _assert(
        "locale",
        _LOCALE_RE.match(value),
        "Must be a valid locale (letters and dashes/underscores). You can consult the "
        "list of codes in: https://wikipedia.org/wiki/List_of_ISO_639-1_codes",
    )
    return value


def parse_model(value: str | None, ctx: ResolveContext) -> str:
    if not value:
        return DEFAULT_MODELS[ctx.api_provider]
    # Accepted against both providers' lists, whichever provider is active.
    known = OPENAI_MODELS + ANTHROPIC_MODELS
    _assert("model", value in known, f"Unknown model {value!r}")
    return value


def parse_timeout(value: str | None, ctx: ResolveContext) -> int:
    if not value:
        return DEFAULT_TIMEOUT_MS
    _assert("timeout", _TIMEOUT_RE.match(value), "Must be an integer")
    parsed = int(value)
    _assert("timeout", parsed >= MIN_TIMEOUT_MS, f"Must be greater than {MIN_TIMEOUT_MS}ms")
    return parsed


def is_command_available(command: str) -> bool:
    """Best-effort PATH lookup; never raises."""
    try:
        return shutil.which(command) is not None
    except OSError:
        return False


def warn_editor_availability(editor: str, platform: str | None = None) -> None:
    """Log advisory warnings when *editor* is missing or uncommon."""
    editors = platform_editors(platform)

    if not is_command_available(editor):
        _log.warning(
            "'%s' does not appear to be installed or is not in your PATH.", editor
        )
        available = [ed for ed in editors if is_command_available(ed)]
        if available:
            _log.warning("Available editors on your system: %s", ", ".join(available))
            _log.warning(
                "Tip: Run 'airelease config set editor=%s' to use an available editor.",
                available[0],
            )
        else:
            _log.warning("No common editors were detected on your system.")
    elif editor not in editors:
        _log.warning(
            "Note: '%s' is not in the list of common editors for your platform, "
            "but it is installed.",
            editor,
        )


def parse_editor(value: str | None, ctx: ResolveContext) -> str:
    if not value:
        return default_editor()
    _assert("editor", value.strip(), "Cannot be empty")
    warn_editor_availability(value)
    return value


# ---------------------------------------------------------------------------
# Remediation hints appended by ``set_configs`` on validation failure
# ---------------------------------------------------------------------------


def _editor_hint(ctx: ResolveContext) -> str:
    return f"Recommended editors for your platform: {', '.join(platform_editors())}"


def _locale_hint(ctx: ResolveContext) -> str:
    return "Example valid locales: en, en-US, fr, de-DE, ja, zh-CN"


def _model_hint(ctx: ResolveContext) -> str:
    models = MODELS_BY_PROVIDER[ctx.api_provider]
    return f"Available models for {ctx.api_provider}: {', '.join(models)}"


def _timeout_hint(ctx: ResolveContext) -> str:
    return "Timeout should be specified in milliseconds (e.g., 10000 for 10 seconds)"


@dataclass(frozen=True)
class ConfigKey:
    """Definition of a persisted configuration key."""

    name: str
    parse: Callable[[str | None, ResolveContext], object]
    description: str
    hint: Callable[[ResolveContext], str] | None = None


# Declaration order is resolution order; api_provider must stay first.
CONFIG_KEYS: dict[str, ConfigKey] = {
    "api_provider": ConfigKey(
        name="api_provider",
        parse=parse_api_provider,
        description="LLM provider to use (openai | anthropic)",
    ),
    "OPENAI_KEY": ConfigKey(
        name="OPENAI_KEY",
        parse=parse_openai_key,
        description="OpenAI API key (required when using OpenAI)",
    ),
    "ANTHROPIC_API_KEY": ConfigKey(
        name="ANTHROPIC_API_KEY",
        parse=parse_anthropic_api_key,
        description="Anthropic API key (required when using Anthropic)",
    ),
    "locale": ConfigKey(
        name="locale",
        parse=parse_locale,
        description="Output language for release notes (ISO 639-1 code)",
        hint=_locale_hint,
    ),
    "model": ConfigKey(
        name="model",
        parse=parse_model,
        description="Model used to draft release notes",
        hint=_model_hint,
    ),
    "timeout": ConfigKey(
        name="timeout",
        parse=parse_timeout,
        description="API request timeout in milliseconds",
        hint=_timeout_hint,
    ),
    "editor": ConfigKey(
        name="editor",
        parse=parse_editor,
        description="Text editor used to edit drafted notes",
        hint=_editor_hint,
    ),
}
