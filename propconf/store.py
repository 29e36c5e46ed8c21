"""
RawStore - flat key/value mapping loaded from a properties file.

The file is read once at construction. Parsing follows the Java properties
format and is delegated to jproperties; after loading the mapping never changes.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator, Mapping
from pathlib import Path
from types import MappingProxyType

from jproperties import ParseError, Properties

from .errors import ConfigLoadError
from .settings import get_settings

logger = logging.getLogger(__name__)

PathLike = str | os.PathLike[str]


class RawStore:
    """
    Immutable mapping of property key to raw string value.

    Usage:
        store = RawStore.load("app.properties")
        if store.has("batch.size"):
            raw = store.get("batch.size")
    """

    def __init__(self, path: PathLike, encoding: str | None = None):
        """
        Load the configuration file at ``path``.

        Args:
            path: Location of the properties file.
            encoding: Text encoding (defaults to the PROPCONF_ENCODING setting).

        Raises:
            ConfigLoadError: If the file is missing, unreadable or cannot be parsed.
        """
        self._install(self._read(Path(path), encoding or get_settings().encoding), os.fspath(path))
        logger.debug("Loaded %d properties from %s", len(self._values), self._source)

    @classmethod
    def load(cls, path: PathLike, encoding: str | None = None) -> RawStore:
        """Load a store from a file. Equivalent to ``RawStore(path)``."""
        return cls(path, encoding=encoding)

    @classmethod
    def from_mapping(cls, values: Mapping[str, str], source_name: str = "<memory>") -> RawStore:
        """
        Build a store from values that have already been parsed.

        Raises:
            TypeError: If any key or value is not a string.
        """
        for key, value in values.items():
            if not isinstance(key, str) or not isinstance(value, str):
                raise TypeError(
                    f"Property {key!r} in {source_name} must map str to str, "
                    f"got {type(key).__name__} -> {type(value).__name__}"
                )
        store = cls.__new__(cls)
        store._install(dict(values), source_name)
        return store

    def _install(self, values: dict[str, str], source_name: str) -> None:
        self._source = source_name
        self._values = MappingProxyType(values)

    @staticmethod
    def _read(path: Path, encoding: str) -> dict[str, str]:
        properties = Properties()
        try:
            text = path.read_text(encoding=encoding)
            properties.load(text.encode("utf-8"), "utf-8")
        except (OSError, UnicodeDecodeError, ParseError) as e:
            raise ConfigLoadError(f"Unable to read config file {path}: {e}") from e

        return {key: properties[key].data for key in properties}

    @property
    def source_name(self) -> str:
        """Path of the file the store was loaded from, for diagnostics."""
        return self._source

    def has(self, key: str) -> bool:
        return key in self._values

    def get(self, key: str) -> str | None:
        """Return the raw value for ``key`` or None when the key is absent."""
        return self._values.get(key)

    def keys(self) -> list[str]:
        return list(self._values)

    def as_dict(self) -> dict[str, str]:
        """Return a copy of the underlying mapping."""
        return dict(self._values)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"RawStore(source={self._source!r}, keys={len(self._values)})"
