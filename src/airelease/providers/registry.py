"""Provider registry: maps provider names to factory callables."""

from __future__ import annotations

from collections.abc import Callable

from airelease.providers.base import ReleaseNotesProvider

ProviderFactory = Callable[[str, int], ReleaseNotesProvider]

# Module-level registry: provider name -> factory(api_key, timeout_ms)
_REGISTRY: dict[str, ProviderFactory] = {}


def register_provider(name: str, factory: ProviderFactory) -> None:
    """Register a factory function under the given provider name."""
    _REGISTRY[name] = factory


def get_provider(name: str, api_key: str, timeout_ms: int) -> ReleaseNotesProvider:
    """Look up and instantiate a provider by name.

    Raises:
        KeyError: If no provider is registered under *name*.
    """
    if name not in _REGISTRY:
        registered = list(_REGISTRY.keys())
        raise KeyError(
            f"Provider '{name}' is not registered. Available providers: {registered}"
        )
    return _REGISTRY[name](api_key, timeout_ms)


def list_providers() -> list[str]:
    """Return the names of all currently registered providers."""
    return list(_REGISTRY.keys())
