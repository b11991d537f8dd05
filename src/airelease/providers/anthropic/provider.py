"""AnthropicProvider: release notes via the Anthropic Messages API."""

from __future__ import annotations

import anthropic
import httpx
from anthropic import AsyncAnthropic

from airelease.logging import get_logger
from airelease.providers.errors import (
    ProviderAPIError,
    ProviderAuthError,
    ProviderConnectionError,
    ProviderTimeoutError,
)
from airelease.providers.prompt import build_release_prompt
from airelease.providers.text import deduplicate, sanitize_notes

_log = get_logger("airelease.providers.anthropic.provider")

# Used when handed a model name that is not a Claude model.
FALLBACK_MODEL = "claude-3-5-haiku-latest"
MAX_TOKENS = 5000


class AnthropicProvider:
    """Drafts release notes with a Claude model."""

    def __init__(self, api_key: str, timeout_ms: int) -> None:
        self._timeout_ms = timeout_ms
        self._client = AsyncAnthropic(
            api_key=api_key,
            timeout=httpx.Timeout(timeout_ms / 1000),
            max_retries=0,
        )

    @property
    def provider_type(self) -> str:
        return "anthropic"

    async def generate(
        self,
        commit_log: str,
        *,
        model: str,
        locale: str,
        completions: int = 1,
    ) -> list[str]:
        resolved_model = model if "claude" in model else FALLBACK_MODEL
        _log.debug("Requesting %d completion(s) from %s", completions, resolved_model)
        notes: list[str] = []
        try:
            # The Messages API returns one candidate per request.
            for _ in range(completions):
                notes.extend(await self._complete(resolved_model, commit_log, locale))
        finally:
            await self._client.close()
        return deduplicate(notes)

    async def _complete(self, model: str, commit_log: str, locale: str) -> list[str]:
        try:
            response = await self._client.messages.create(
                model=model,
                max_tokens=MAX_TOKENS,
                temperature=0.7,
                messages=[
                    {
                        "role": "user",
                        "content": f"{build_release_prompt(locale)}\n\n{commit_log}",
                    }
                ],
            )
        except anthropic.AuthenticationError as exc:
            raise ProviderAuthError(f"Anthropic rejected the API key: {exc.message}") from exc
        except anthropic.APITimeoutError as exc:
            raise ProviderTimeoutError(
                f"Time out error: request took over {self._timeout_ms}ms. Try increasing "
                "the `timeout` config, or checking the Anthropic API status."
            ) from exc
        except anthropic.APIConnectionError as exc:
            raise ProviderConnectionError(self._client.base_url.host) from exc
        except anthropic.APIStatusError as exc:
            message = f"Anthropic API Error: {exc.status_code} - {exc.message}"
            if exc.status_code == 500:
                message += "\n\nCheck the Anthropic API status."
            raise ProviderAPIError(message, status_code=exc.status_code) from exc

        texts = [block.text for block in response.content if block.type == "text"]
        return [sanitize_notes(texts[0])] if texts else []
