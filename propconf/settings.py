"""
Library settings using pydantic-settings.

These control how propconf itself behaves (file encoding, log output). They
never overlay the values read from a configuration file.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class PropconfSettings(BaseSettings):
    """
    Settings loaded from ``PROPCONF_*`` environment variables.

    All settings have defaults suitable for reading local properties files.
    """

    model_config = SettingsConfigDict(
        env_prefix="PROPCONF_",
        extra="ignore",
        case_sensitive=False,
    )

    encoding: str = Field(
        default="utf-8",
        description="Text encoding used when reading configuration files",
    )
    log_level: str = Field(
        default="INFO",
        description="Log level used by configure_logging when none is given",
    )
    log_source: str = Field(
        default="propconf",
        description="Source tag shown in brackets in log lines",
    )

    @field_validator("log_level", mode="after")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize log_level."""
        v = v.upper()
        if v not in _LOG_LEVELS:
            raise ValueError(f"Invalid PROPCONF_LOG_LEVEL: {v}. Must be one of {', '.join(_LOG_LEVELS)}")
        return v


@lru_cache
def get_settings() -> PropconfSettings:
    """
    Get cached settings instance.

    Settings are loaded once and cached for the lifetime of the process.
    Tests that patch the environment call ``get_settings.cache_clear()``.
    """
    return PropconfSettings()
