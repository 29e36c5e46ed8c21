"""Configuration error classes.

Only load failures, illegal enum tokens on the single-value accessor and an
explicit ``raise_for_errors()`` ever escape as exceptions. Everything else is
logged or collected.
"""

from __future__ import annotations


class ConfigError(Exception):
    """Base exception for configuration errors."""

    pass


class ConfigLoadError(ConfigError, OSError):
    """Raised when a configuration file cannot be read."""

    pass


class IllegalEnumValueError(ConfigError, ValueError):
    """Raised when a comma-separated value holds a token that is not an enum member."""

    def __init__(self, key: str, source: str, token: str):
        self.key = key
        self.source = source
        self.token = token
        super().__init__(f"Property {key} in file {source} contains illegal enum value [{token}]")
