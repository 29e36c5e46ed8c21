"""Coercion of raw property values to typed values.

Every function takes the raw value (None when the key is absent) and returns a
``Coerced`` result. Callers choose what to do with a failure: the single-value
accessor logs it, the builder records it.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any, TypeVar

from .types import Coerced, Reason

E = TypeVar("E")

INT_MIN, INT_MAX = -(2**31), 2**31 - 1
LONG_MIN, LONG_MAX = -(2**63), 2**63 - 1

# Either an Enum class or a converter that raises ValueError/KeyError on unknown tokens
Members = type[Enum] | Callable[[str], Any]


def is_numeric(value: str | None) -> bool:
    """True if ``value`` is non-empty and made only of decimal digits."""
    return value is not None and value.isdecimal()


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def enum_by_name(enum_type: type[Enum]) -> Callable[[str], Enum]:
    """Converter that maps a token to the member of ``enum_type`` with that exact name."""

    def convert(token: str) -> Enum:
        try:
            return enum_type[token]
        except KeyError:
            raise ValueError(f"{token!r} is not a member of {enum_type.__name__}") from None

    return convert


def _converter(members: Members) -> Callable[[str], Any]:
    if isinstance(members, type) and issubclass(members, Enum):
        return enum_by_name(members)
    return members


def coerce_string(raw: str | None, upper: bool = False) -> Coerced[str]:
    if raw is None:
        return Coerced.failure(Reason.MISSING)
    return Coerced.success(raw.upper() if upper else raw)


def _coerce_bounded(raw: str | None, lower: int, upper: int) -> Coerced[int]:
    if raw is None:
        return Coerced.failure(Reason.MISSING)
    if not is_numeric(raw):
        return Coerced.failure(Reason.NOT_NUMERIC, detail=raw)
    value = int(raw)
    if not lower <= value <= upper:
        return Coerced.failure(Reason.NOT_NUMERIC, detail=raw)
    return Coerced.success(value)


def coerce_int(raw: str | None) -> Coerced[int]:
    """Parse a digits-only value into a signed 32-bit integer."""
    return _coerce_bounded(raw, INT_MIN, INT_MAX)


def coerce_long(raw: str | None) -> Coerced[int]:
    """Parse a digits-only value into a signed 64-bit integer."""
    return _coerce_bounded(raw, LONG_MIN, LONG_MAX)


def coerce_bool(raw: str | None, flag: str = "Y") -> Coerced[bool]:
    """True iff ``raw`` equals ``flag`` after lower-casing both. No trimming or Unicode case folding."""
    if raw is None:
        return Coerced.failure(Reason.MISSING)
    return Coerced.success(raw.lower() == flag.lower())


def coerce_enum_set(raw: str | None, members: Members) -> Coerced[frozenset[Any]]:
    """
    Split a comma-separated value and convert every token.

    Args:
        raw: The raw property value, or None if the key is absent
        members: An Enum class (tokens matched by exact member name) or a
            converter callable raising ValueError/KeyError for unknown tokens

    Returns:
        The set of converted values, or a failure. A single bad token fails
        the whole value; no partial result is produced.
    """
    if raw is None:
        return Coerced.failure(Reason.MISSING)

    convert = _converter(members)
    values = set()
    for token in (part.strip() for part in raw.split(",")):
        try:
            values.add(convert(token))
        except (ValueError, KeyError):
            return Coerced.failure(Reason.ILLEGAL_ENUM, detail=token)
    return Coerced.success(frozenset(values))
