"""
Typed access to flat key=value configuration files.

Two ways to read a file:

    from propconf import ConfigProperties, ConfigPropertiesBuilder, Cell, TextCell

    # One value at a time; problems are logged and a zero/None/default returned
    props = ConfigProperties.load("app.properties", logger)
    timeout = props.get_int("request.timeout")
    enabled = props.get_bool("feature.enabled", "TRUE", default=False)

    # Many values in one chain; problems are collected and read at the end
    host, port = TextCell(), Cell(0)
    errors = (
        ConfigPropertiesBuilder.load("app.properties")
        .set_string(host, "server.host")
        .set_integer(port, "server.port")
        .errors()
    )
"""

from __future__ import annotations

from .accessor import ConfigProperties
from .builder import ConfigPropertiesBuilder, ErrorCollector
from .coercion import enum_by_name
from .errors import ConfigError, ConfigLoadError, IllegalEnumValueError
from .store import RawStore
from .types import Cell, Coerced, Reason, TextCell

__all__ = [
    # Accessors
    "ConfigProperties",
    "ConfigPropertiesBuilder",
    "ErrorCollector",
    "RawStore",
    # Destinations and results
    "Cell",
    "TextCell",
    "Coerced",
    "Reason",
    "enum_by_name",
    # Error classes
    "ConfigError",
    "ConfigLoadError",
    "IllegalEnumValueError",
]
