"""OpenAI release-notes provider."""

from airelease.providers.openai.provider import OpenAIProvider
from airelease.providers.registry import register_provider

# Auto-register on import.
register_provider("openai", OpenAIProvider)

__all__ = ["OpenAIProvider"]
