"""
ConfigPropertiesBuilder - fluent loading of many properties in one pass.

Destinations are passed into each chained call along with the property key.
Missing keys and invalid values are collected rather than logged or raised;
``errors()`` ends the chain and returns everything that went wrong.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator
from typing import Any

from .coercion import (
    Members,
    coerce_bool,
    coerce_enum_set,
    coerce_int,
    coerce_long,
    coerce_string,
)
from .errors import ConfigError
from .store import PathLike, RawStore
from .types import Cell, Coerced, TextCell

logger = logging.getLogger(__name__)


class ErrorCollector:
    """
    Append-only set of ``"<key> : <reason>"`` error records.

    Each builder creates its own collector. Pass one collector to several
    builders to gather their errors together; access is lock-guarded so the
    builders may run on different threads.
    """

    def __init__(self) -> None:
        self._errors: set[str] = set()
        self._lock = threading.Lock()

    def add(self, record: str) -> None:
        with self._lock:
            self._errors.add(record)

    def snapshot(self) -> set[str]:
        """Return a copy of the records collected so far."""
        with self._lock:
            return set(self._errors)

    def __contains__(self, record: object) -> bool:
        with self._lock:
            return record in self._errors

    def __iter__(self) -> Iterator[str]:
        return iter(self.snapshot())

    def __len__(self) -> int:
        with self._lock:
            return len(self._errors)


class ConfigPropertiesBuilder:
    """
    Fluent builder that populates caller-owned destinations from one file.

    Usage:
        host = TextCell()
        port = Cell(0)
        debug = Cell(False)
        modes: set[Mode] = set()

        errors = (
            ConfigPropertiesBuilder.load("app.properties")
            .set_string(host, "server.host")
            .set_integer(port, "server.port")
            .set_boolean(debug, "server.debug")
            .set_enum_set(modes, Mode, "server.modes")
            .errors()
        )
        if errors:
            ...  # abort startup, or carry on with what was set
    """

    def __init__(self, source: PathLike | RawStore, errors: ErrorCollector | None = None):
        """
        Initialize the builder.

        Args:
            source: Path of the properties file, or an already loaded RawStore.
            errors: Collector to record failures into. A new one is created if None.

        Raises:
            ConfigLoadError: If ``source`` is a path that cannot be read.
        """
        self._store = source if isinstance(source, RawStore) else RawStore(source)
        self._errors = errors if errors is not None else ErrorCollector()

    @classmethod
    def load(cls, path: PathLike, errors: ErrorCollector | None = None) -> ConfigPropertiesBuilder:
        """Load the properties file at ``path`` and start a chain."""
        return cls(path, errors)

    @property
    def file_name(self) -> str:
        return self._store.source_name

    def _accept(self, key: str, result: Coerced[Any]) -> bool:
        """Record a failed result. Returns True if the destination should be written."""
        if result.reason is not None:
            self._errors.add(result.reason.record(key))
            return False
        return True

    def set_string(self, dest: TextCell, key: str) -> ConfigPropertiesBuilder:
        """Append the property value to ``dest``."""
        result = coerce_string(self._store.get(key))
        if self._accept(key, result):
            dest.append(result.value)
        return self

    def set_string_upper(self, dest: TextCell, key: str) -> ConfigPropertiesBuilder:
        """Append the property value, converted to upper case, to ``dest``."""
        result = coerce_string(self._store.get(key), upper=True)
        if self._accept(key, result):
            dest.append(result.value)
        return self

    def set_integer(self, dest: Cell[int], key: str) -> ConfigPropertiesBuilder:
        """
        Set ``dest`` to the property value as a 32-bit integer.

        Missing keys and values that are not a valid number are recorded and
        leave ``dest`` unchanged.
        """
        result = coerce_int(self._store.get(key))
        if self._accept(key, result):
            dest.set(result.value)
        return self

    def set_long(self, dest: Cell[int], key: str) -> ConfigPropertiesBuilder:
        """Set ``dest`` to the property value as a 64-bit integer."""
        result = coerce_long(self._store.get(key))
        if self._accept(key, result):
            dest.set(result.value)
        return self

    def set_boolean(self, dest: Cell[bool], key: str) -> ConfigPropertiesBuilder:
        """Set ``dest`` assuming that "Y" means True."""
        return self.set_bool(dest, key, "Y")

    def set_bool(
        self,
        dest: Cell[bool],
        key: str,
        flag: str = "Y",
        default: bool | None = None,
    ) -> ConfigPropertiesBuilder:
        """
        Set ``dest`` to True if the property value matches ``flag`` (ignoring case).

        Args:
            dest: The cell to set
            key: The property key
            flag: The value that means True
            default: Written without recording an error when the key is
                missing. When None a missing key is recorded.

        Returns:
            The current builder
        """
        if default is not None and not self._store.has(key):
            dest.set(default)
            return self
        result = coerce_bool(self._store.get(key), flag)
        if self._accept(key, result):
            dest.set(result.value)
        return self

    def set_enum_set(self, dest: set[Any], members: Members, key: str) -> ConfigPropertiesBuilder:
        """
        Add the members named in a comma-separated property value to ``dest``.

        If any token is not a valid member nothing is added and a single
        illegal enum error is recorded. Existing members of ``dest`` are kept.
        """
        result = coerce_enum_set(self._store.get(key), members)
        if self._accept(key, result):
            dest.update(result.value)
        return self

    @property
    def has_errors(self) -> bool:
        return len(self._errors) > 0

    def errors(self) -> set[str]:
        """
        Get the errors that occurred. This is a terminal operation.

        Returns:
            A copy of the error records, empty if none occurred.
        """
        return self._errors.snapshot()

    def raise_for_errors(self) -> ConfigPropertiesBuilder:
        """
        Raise if any errors were recorded.

        Raises:
            ConfigError: Listing every recorded error.
        """
        errors = sorted(self._errors.snapshot())
        if errors:
            logger.debug("Config file %s has %d errors", self.file_name, len(errors))
            raise ConfigError(
                f"Configuration validation failed for {self.file_name} ({len(errors)} errors):\n" + "\n".join(errors)
            )
        return self
