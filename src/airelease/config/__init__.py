"""Persistent user configuration."""
