"""Process settings for the airelease CLI, read from the environment."""

from __future__ import annotations

from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Diagnostics knobs that sit outside the persisted ``~/.airelease`` store.

    Read from ``AIRELEASE_``-prefixed environment variables or a ``.env``
    file in the working directory, e.g. ``AIRELEASE_LOG_LEVEL=debug``.
    Provider, model and API keys are user config, see
    :mod:`airelease.config.manager`.
    """

    model_config = SettingsConfigDict(
        env_prefix="AIRELEASE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "WARNING"
    log_format: Literal["text", "json"] = "text"

    # Printed under unexpected failures
    issues_url: str = "https://github.com/Coldsewoo/airelease/issues/new/choose"

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.strip().upper()
