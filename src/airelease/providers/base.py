"""ReleaseNotesProvider Protocol: contract for all provider implementations."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ReleaseNotesProvider(Protocol):
    """Drafts release notes from a commit log."""

    @property
    def provider_type(self) -> str:
        """Provider identifier: "openai" or "anthropic"."""
        ...

    async def generate(
        self,
        commit_log: str,
        *,
        model: str,
        locale: str,
        completions: int = 1,
    ) -> list[str]:
        """Return distinct candidate release notes for *commit_log*."""
        ...
