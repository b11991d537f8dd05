"""Tests for per-key validators and provider-aware defaults."""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

from airelease.config.keys import (
    ANTHROPIC_MODELS,
    CONFIG_KEYS,
    EDITORS_BY_PLATFORM,
    OPENAI_MODELS,
    ResolveContext,
    default_editor,
    parse_anthropic_api_key,
    parse_api_provider,
    parse_editor,
    parse_locale,
    parse_model,
    parse_openai_key,
    parse_timeout,
    platform_editors,
)
from airelease.errors import ConfigValidationError

OPENAI = ResolveContext(api_provider="openai")
ANTHROPIC = ResolveContext(api_provider="anthropic")


def test_key_set_is_closed() -> None:
    assert list(CONFIG_KEYS) == [
        "api_provider",
        "OPENAI_KEY",
        "ANTHROPIC_API_KEY",
        "locale",
        "model",
        "timeout",
        "editor",
    ]


class TestApiProvider:
    def test_default(self) -> None:
        assert parse_api_provider(None, OPENAI) == "openai"

    @pytest.mark.parametrize("value", ["openai", "anthropic"])
    def test_known_values(self, value: str) -> None:
        assert parse_api_provider(value, OPENAI) == value

    def test_rejects_unknown(self) -> None:
        with pytest.raises(ConfigValidationError, match="api_provider"):
            parse_api_provider("gemini", OPENAI)


class TestApiKeys:
    def test_active_provider_key_required(self) -> None:
        with pytest.raises(ConfigValidationError, match="config set OPENAI_KEY"):
            parse_openai_key(None, OPENAI)
        with pytest.raises(ConfigValidationError, match="config set ANTHROPIC_API_KEY"):
            parse_anthropic_api_key(None, ANTHROPIC)

    def test_inactive_provider_key_optional(self) -> None:
        assert parse_openai_key(None, ANTHROPIC) is None
        assert parse_anthropic_api_key(None, OPENAI) is None

    def test_prefix_checked(self) -> None:
        with pytest.raises(ConfigValidationError, match='Must start with "sk-"'):
            parse_openai_key("invalid", OPENAI)
        with pytest.raises(ConfigValidationError, match='Must start with "sk-ant-"'):
            parse_anthropic_api_key("sk-proj-123", ANTHROPIC)

    def test_prefix_checked_even_when_inactive(self) -> None:
        with pytest.raises(ConfigValidationError):
            parse_openai_key("invalid", ANTHROPIC)

    def test_valid_keys(self) -> None:
        assert parse_openai_key("sk-validkey123", OPENAI) == "sk-validkey123"
        assert parse_anthropic_api_key("sk-ant-abc", ANTHROPIC) == "sk-ant-abc"


class TestLocale:
    def test_default(self) -> None:
        assert parse_locale(None, OPENAI) == "en"

    @pytest.mark.parametrize("value", ["en", "en-US", "zh-CN", "FR"])
    def test_accepts(self, value: str) -> None:
        assert parse_locale(value, OPENAI) == value

    @pytest.mark.parametrize("value", ["123", "en_US", "invalid!!!"])
    def test_rejects(self, value: str) -> None:
        with pytest.raises(ConfigValidationError, match="Must be a valid locale"):
            parse_locale(value, OPENAI)


class TestModel:
    def test_default_depends_on_provider(self) -> None:
        assert parse_model(None, OPENAI) == "gpt-4o"
        assert parse_model(None, ANTHROPIC) == "claude-sonnet-4-5-20250929"

    def test_accepts_models_of_either_provider(self) -> None:
        assert parse_model("gpt-4-turbo", ANTHROPIC) == "gpt-4-turbo"
        assert parse_model(ANTHROPIC_MODELS[0], OPENAI) == ANTHROPIC_MODELS[0]

    def test_rejects_unknown(self) -> None:
        with pytest.raises(ConfigValidationError, match="model"):
            parse_model("text-davinci-001", OPENAI)

    def test_defaults_are_listed_models(self) -> None:
        assert parse_model(None, OPENAI) in OPENAI_MODELS
        assert parse_model(None, ANTHROPIC) in ANTHROPIC_MODELS


class TestTimeout:
    def test_default(self) -> None:
        assert parse_timeout(None, OPENAI) == 10_000

    def test_parses_int(self) -> None:
        assert parse_timeout("5000", OPENAI) == 5000
        assert parse_timeout("500", OPENAI) == 500

    @pytest.mark.parametrize("value", ["abc", "-1", "1.5", "10s"])
    def test_rejects_non_integer(self, value: str) -> None:
        with pytest.raises(ConfigValidationError, match="Must be an integer"):
            parse_timeout(value, OPENAI)

    def test_rejects_below_minimum(self) -> None:
        with pytest.raises(ConfigValidationError, match="greater than 500ms"):
            parse_timeout("100", OPENAI)


class TestEditor:
    def test_platform_tables(self) -> None:
        assert "vi" in EDITORS_BY_PLATFORM["darwin"]
        assert "code" in EDITORS_BY_PLATFORM["darwin"]
        assert "notepad" in EDITORS_BY_PLATFORM["win32"]
        assert "nano" in EDITORS_BY_PLATFORM["linux"]

    def test_unknown_platform_uses_linux_list(self) -> None:
        assert platform_editors("freebsd") == EDITORS_BY_PLATFORM["linux"]

    def test_platform_defaults(self) -> None:
        assert default_editor("win32") == "notepad"
        assert default_editor("linux") == "vi"
        assert default_editor("darwin") == "vi"

    def test_absent_uses_default_without_probing(self) -> None:
        with patch("airelease.config.keys.is_command_available") as mock_probe:
            assert parse_editor(None, OPENAI) == default_editor()
        mock_probe.assert_not_called()

    def test_blank_rejected(self) -> None:
        with pytest.raises(ConfigValidationError, match="Cannot be empty"):
            parse_editor("   ", OPENAI)

    def test_missing_editor_warns_but_returns(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        available = {"nano"}
        with (
            caplog.at_level(logging.WARNING, logger="airelease.config.keys"),
            patch(
                "airelease.config.keys.is_command_available",
                side_effect=lambda cmd: cmd in available,
            ),
            patch("airelease.config.keys.sys.platform", "linux"),
        ):
            assert parse_editor("my-editor", OPENAI) == "my-editor"
        assert "does not appear to be installed" in caplog.text
        assert "Available editors on your system: nano" in caplog.text
        assert "config set editor=nano" in caplog.text

    def test_no_editors_detected_warns(self, caplog: pytest.LogCaptureFixture) -> None:
        with (
            caplog.at_level(logging.WARNING, logger="airelease.config.keys"),
            patch("airelease.config.keys.is_command_available", return_value=False),
        ):
            parse_editor("ghost", OPENAI)
        assert "No common editors were detected" in caplog.text

    def test_uncommon_installed_editor_notes(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        with (
            caplog.at_level(logging.WARNING, logger="airelease.config.keys"),
            patch("airelease.config.keys.is_command_available", return_value=True),
            patch("airelease.config.keys.sys.platform", "linux"),
        ):
            assert parse_editor("micro", OPENAI) == "micro"
        assert "not in the list of common editors" in caplog.text

    def test_common_installed_editor_is_silent(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        with (
            caplog.at_level(logging.WARNING, logger="airelease.config.keys"),
            patch("airelease.config.keys.is_command_available", return_value=True),
            patch("airelease.config.keys.sys.platform", "linux"),
        ):
            parse_editor("vim", OPENAI)
        assert caplog.text == ""
