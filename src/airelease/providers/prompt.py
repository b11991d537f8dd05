"""Instructions sent to the model alongside the commit log."""

from __future__ import annotations


def build_release_prompt(locale: str = "en") -> str:
    return "\n".join(
        [
            "Using the provided commit messages, create a release note with categorized "
            "sections based on the content or prefix of each commit message "
            "(e.g., feat, fix, chore, improve, refactor).",
            "Ensure the notes are clear, concise, and customer-friendly, without any "
            "technical explanations.",
            "Retain the pull request numbers (e.g., #number) and remove any icons.",
            f"The release note should be generated in the specified locale ({locale}).",
            "Exclude information related to package version updates and console cleanup.",
            "Do not include header title.",
        ]
    )
