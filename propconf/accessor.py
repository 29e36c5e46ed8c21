"""
ConfigProperties - one-shot typed reads from a properties file.

Never fails the caller for a missing or malformed value: the problem is logged
and a zero, None or default value is returned instead.
"""

from __future__ import annotations

import logging
from typing import Any

from .coercion import (
    Members,
    coerce_bool,
    coerce_enum_set,
    coerce_int,
    coerce_long,
    coerce_string,
    is_blank,
)
from .errors import IllegalEnumValueError
from .store import PathLike, RawStore
from .types import Coerced, Reason


class ConfigProperties:
    """
    Typed accessor over a RawStore with log-and-continue failure handling.

    Missing keys and non-numeric values are logged at ERROR level to the
    logger supplied at construction, so log lines name the component that
    owns the configuration file.

    Usage:
        props = ConfigProperties.load("app.properties", logging.getLogger("app"))

        batch_size = props.get_int("batch.size")
        enabled = props.get_bool("feature.enabled")
        modes = props.get_enum_set(Mode, "run.modes")
    """

    def __init__(self, source: PathLike | RawStore, logger: logging.Logger | None = None):
        """
        Initialize the accessor.

        Args:
            source: Path of the properties file, or an already loaded RawStore.
            logger: Logger that receives diagnostics. Defaults to this module's logger.

        Raises:
            ConfigLoadError: If ``source`` is a path that cannot be read.
        """
        self._store = source if isinstance(source, RawStore) else RawStore(source)
        self._logger = logger if logger is not None else logging.getLogger(__name__)

    @classmethod
    def load(cls, path: PathLike, logger: logging.Logger | None = None) -> ConfigProperties:
        return cls(path, logger)

    @property
    def file_name(self) -> str:
        """Name of the loaded config file, for logging problems with it."""
        return self._store.source_name

    @property
    def store(self) -> RawStore:
        return self._store

    def _lookup(self, key: str) -> str | None:
        raw = self._store.get(key)
        if raw is None:
            self._logger.error("Property %s not found in file %s", key, self.file_name)
        return raw

    def _log_not_numeric(self, key: str, result: Coerced[Any]) -> None:
        if result.reason is Reason.NOT_NUMERIC:
            self._logger.error(
                "Property %s has value [%s] which is not an integer in file: %s",
                key,
                result.detail,
                self.file_name,
            )

    def get_string(self, key: str) -> str | None:
        """Get the raw value, or None if the key is missing (logged)."""
        return coerce_string(self._lookup(key)).value

    def get_string_upper(self, key: str) -> str | None:
        """Get the value converted to upper case, or None if the key is missing (logged)."""
        return coerce_string(self._lookup(key), upper=True).value

    def get_int(self, key: str) -> int:
        """
        Get the value as a 32-bit integer.

        Returns 0 when the key is missing or the value is not a valid number.
        Both cases are logged.
        """
        result = coerce_int(self._lookup(key))
        self._log_not_numeric(key, result)
        return result.value if result.ok else 0

    def get_integer(self, key: str) -> int | None:
        """
        Get the value as an optional integer.

        Returns None when the key is missing (logged), the value is blank (not
        logged) or the value is not a valid number (logged).
        """
        raw = self._lookup(key)
        if is_blank(raw):
            return None
        result = coerce_int(raw)
        self._log_not_numeric(key, result)
        return result.value

    def get_long(self, key: str) -> int:
        """Get the value as a 64-bit integer. Same failure handling as get_int."""
        result = coerce_long(self._lookup(key))
        self._log_not_numeric(key, result)
        return result.value if result.ok else 0

    def get_bool(self, key: str, flag: str = "Y", default: bool | None = None) -> bool:
        """
        Get the value as a boolean.

        Args:
            key: The property key
            flag: The value that means True, compared ignoring case
            default: Returned without logging when the key is missing. When
                None a missing key is logged and False is returned.

        Returns:
            True if the value matches ``flag``.
        """
        if default is not None and not self._store.has(key):
            return default
        result = coerce_bool(self._lookup(key), flag)
        return bool(result.value)

    def get_enum_set(self, members: Members, key: str) -> frozenset[Any]:
        """
        Get a comma-separated value as a set of enum members.

        Args:
            members: Enum class matched by exact member name, or a converter
                callable raising ValueError/KeyError for unknown tokens
            key: The property key

        Returns:
            The converted values. Empty if the key is missing (logged).

        Raises:
            IllegalEnumValueError: If any token is not a valid member.
        """
        result = coerce_enum_set(self._lookup(key), members)
        if result.reason is Reason.ILLEGAL_ENUM:
            raise IllegalEnumValueError(key, self.file_name, result.detail or "")
        return result.value if result.ok else frozenset()
