"""Post-processing of model output into plain release notes."""

from __future__ import annotations

import re

_SUBSTITUTIONS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"[\n\r]+"), "\n"),
    (re.compile(r"(\w)\.$"), r"\1"),
    (re.compile(r"\*\*(.*?)\*\*"), r"\1"),
    (re.compile(r"\*(.*?)\*"), r"\1"),
    (re.compile(r"~~(.*?)~~"), r"\1"),
    (re.compile(r"^#+\s*", re.MULTILINE), ""),
)


def sanitize_notes(text: str) -> str:
    """Strip markdown emphasis and heading markers and normalize line breaks."""
    text = text.strip()
    for pattern, replacement in _SUBSTITUTIONS:
        text = pattern.sub(replacement, text)
    return text


def deduplicate(messages: list[str]) -> list[str]:
    """Drop repeated messages, keeping first-seen order."""
    return list(dict.fromkeys(messages))
