"""Value types shared by the accessor and the builder.

Defines the failure reasons, the result of a single coercion and the mutable
destination cells the builder writes into.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class Reason(str, Enum):
    """Why a coercion failed. The value is the text used in builder error records."""

    MISSING = "Does not exist in config file"
    NOT_NUMERIC = "Is not a valid number"
    ILLEGAL_ENUM = "Contains an illegal enum value"

    def record(self, key: str) -> str:
        """Format the error record for ``key``."""
        return f"{key} : {self.value}"


@dataclass(frozen=True)
class Coerced(Generic[T]):
    """
    Outcome of coercing one raw value.

    Exactly one of ``value`` and ``reason`` is meaningful: when ``reason`` is
    None the coercion succeeded and ``value`` holds the typed result.

    Attributes:
        value: The typed value on success
        reason: The failure reason, or None on success
        detail: Extra context for diagnostics (e.g. the offending enum token)
    """

    value: T | None = None
    reason: Reason | None = None
    detail: str | None = None

    @property
    def ok(self) -> bool:
        return self.reason is None

    @classmethod
    def success(cls, value: T) -> Coerced[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, reason: Reason, detail: str | None = None) -> Coerced[Any]:
        return cls(reason=reason, detail=detail)


@dataclass
class Cell(Generic[T]):
    """Caller-owned slot for a single int, long or bool value."""

    value: T

    def set(self, value: T) -> None:
        self.value = value

    def get(self) -> T:
        return self.value


@dataclass
class TextCell:
    """Caller-owned string accumulator. Builder string setters append to it."""

    value: str = ""

    def append(self, text: str) -> TextCell:
        self.value += text
        return self

    def __str__(self) -> str:
        return self.value
