"""Anthropic release-notes provider."""

from airelease.providers.anthropic.provider import AnthropicProvider
from airelease.providers.registry import register_provider

# Auto-register on import.
register_provider("anthropic", AnthropicProvider)

__all__ = ["AnthropicProvider"]
