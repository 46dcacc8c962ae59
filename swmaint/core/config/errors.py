"""Configuration errors."""

from __future__ import annotations


class ConfigError(Exception):
    """Raised when the software registry or its config file is invalid."""
