"""Shared exception hierarchy for all provider implementations."""

from __future__ import annotations

from airelease.errors import KnownError


class ProviderError(KnownError):
    """Base exception for all provider errors."""


class ProviderAuthError(ProviderError):
    """Authentication or credential errors."""


class ProviderAPIError(ProviderError):
    """Non-success responses from the LLM API."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ProviderTimeoutError(ProviderError):
    """Request timeout errors."""


class ProviderConnectionError(ProviderError):
    """The provider host could not be reached."""

    def __init__(self, host: str) -> None:
        super().__init__(f"Error connecting to {host}. Are you connected to the internet?")
        self.host = host
