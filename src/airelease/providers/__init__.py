"""Release-notes providers and registry."""

from __future__ import annotations

from airelease.providers.base import ReleaseNotesProvider
from airelease.providers.errors import (
    ProviderAPIError,
    ProviderAuthError,
    ProviderConnectionError,
    ProviderError,
    ProviderTimeoutError,
)

__all__ = [
    "ProviderAPIError",
    "ProviderAuthError",
    "ProviderConnectionError",
    "ProviderError",
    "ProviderTimeoutError",
    "ReleaseNotesProvider",
]
