"""airelease: LLM-drafted release notes, version bumps and release tags."""

__version__ = "0.3.0"
