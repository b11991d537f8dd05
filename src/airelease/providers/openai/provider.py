"""OpenAIProvider: release notes via the OpenAI Chat Completions API."""

from __future__ import annotations

import httpx
import openai
from openai import AsyncOpenAI

from airelease.logging import get_logger
from airelease.providers.errors import (
    ProviderAPIError,
    ProviderAuthError,
    ProviderConnectionError,
    ProviderTimeoutError,
)
from airelease.providers.prompt import build_release_prompt
from airelease.providers.text import deduplicate, sanitize_notes

_log = get_logger("airelease.providers.openai.provider")

STATUS_URL = "https://status.openai.com"


class OpenAIProvider:
    """Drafts release notes with an OpenAI chat model."""

    def __init__(self, api_key: str, timeout_ms: int) -> None:
        self._timeout_ms = timeout_ms
        self._client = AsyncOpenAI(
            api_key=api_key,
            timeout=httpx.Timeout(timeout_ms / 1000),
            max_retries=0,
        )

    @property
    def provider_type(self) -> str:
        return "openai"

    async def generate(
        self,
        commit_log: str,
        *,
        model: str,
        locale: str,
        completions: int = 1,
    ) -> list[str]:
        _log.debug("Requesting %d completion(s) from %s", completions, model)
        try:
            completion = await self._client.chat.completions.create(
                model=model,
                messages=[
                    {"role": "system", "content": build_release_prompt(locale)},
                    {"role": "user", "content": commit_log},
                ],
                temperature=0.7,
                top_p=1,
                frequency_penalty=0,
                presence_penalty=0,
                max_tokens=1000,
                n=completions,
            )
        except openai.AuthenticationError as exc:
            raise ProviderAuthError(f"OpenAI rejected the API key: {exc.message}") from exc
        except openai.APITimeoutError as exc:
            raise ProviderTimeoutError(
                f"Time out error: request took over {self._timeout_ms}ms. Try increasing "
                f"the `timeout` config, or checking the OpenAI API status {STATUS_URL}"
            ) from exc
        except openai.APIConnectionError as exc:
            raise ProviderConnectionError(self._client.base_url.host) from exc
        except openai.APIStatusError as exc:
            message = f"OpenAI API Error: {exc.status_code} - {exc.message}"
            if exc.status_code == 500:
                message += f"\n\nCheck the API status: {STATUS_URL}"
            raise ProviderAPIError(message, status_code=exc.status_code) from exc
        finally:
            await self._client.close()

        return deduplicate(
            [
                sanitize_notes(choice.message.content)
                for choice in completion.choices
                if choice.message and choice.message.content
            ]
        )
