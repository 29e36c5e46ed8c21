"""
Logging setup for applications that read configuration with propconf.

Format: 2026-01-06T14:05:52Z [source] LEVEL message

Environment Variables:
    PROPCONF_LOG_LEVEL: "DEBUG", "INFO" (default), "WARNING", "ERROR" or "CRITICAL"
    PROPCONF_LOG_SOURCE: source tag shown in brackets (default "propconf")

Usage:
    from propconf.logging_config import configure_logging, get_logger

    configure_logging(source="loader")
    logger = get_logger(__name__)
    props = ConfigProperties.load("app.properties", logger)
"""

from __future__ import annotations

import logging
import sys
from datetime import UTC, datetime

from .settings import get_settings


class ISO8601Formatter(logging.Formatter):
    """Formatter producing ISO8601 timestamps in UTC.

    Output format: 2026-01-06T14:05:52Z [source] LEVEL message
    """

    def __init__(self, source: str = "propconf"):
        """Initialize formatter with a source identifier.

        Args:
            source: Identifier shown in brackets (e.g., "loader", "startup")
        """
        self.source = source
        super().__init__()

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record with ISO8601 UTC timestamp."""
        timestamp = datetime.fromtimestamp(record.created, UTC).strftime("%Y-%m-%dT%H:%M:%SZ")
        message = record.getMessage()

        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"

        return f"{timestamp} [{self.source}] {record.levelname} {message}"


def configure_logging(
    source: str | None = None,
    level: int | None = None,
    debug: bool | None = None,
) -> logging.Logger:
    """Configure the root logger to write formatted lines to stdout.

    Args:
        source: Source identifier for log messages (defaults to PROPCONF_LOG_SOURCE)
        level: Logging level (defaults to PROPCONF_LOG_LEVEL)
        debug: Enable debug mode (overrides level to DEBUG)

    Returns:
        Configured root logger
    """
    settings = get_settings()
    if debug:
        level = logging.DEBUG
    elif level is None:
        level = logging.getLevelName(settings.log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Clear existing handlers to avoid duplicates
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(ISO8601Formatter(source=source or settings.log_source))
    root_logger.addHandler(handler)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given module name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
