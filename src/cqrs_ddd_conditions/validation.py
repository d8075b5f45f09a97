"""
Field validation helpers shared by every condition type.

Each helper returns the value unchanged when it is acceptable and
``None`` otherwise, so callers can collect one error per rejected field.
"""

from __future__ import annotations

import datetime
import math
import re
from typing import TYPE_CHECKING, Any, TypeVar

if TYPE_CHECKING:
    from collections.abc import Collection

V = TypeVar("V")

_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def validate_in(value: V | None, allowed: Collection[Any] | None) -> V | None:
    """Return *value* if it is a member of *allowed*, else ``None``."""
    if value is None or allowed is None:
        return None
    try:
        return value if value in allowed else None
    except TypeError:
        # Unhashable values are never members of a set of names.
        return None


def validate_is_text(value: Any) -> str | None:
    """Return *value* if it is a string, else ``None``."""
    return value if isinstance(value, str) else None


def validate_is_number(
    value: Any, *, allow_decimal: bool = True
) -> int | float | None:
    """
    Return *value* if it is a finite number, else ``None``.

    Booleans are rejected even though they subclass ``int``.  With
    ``allow_decimal=False`` only integral values pass, and integral
    floats come back as ``int``.
    """
    if isinstance(value, bool) or not isinstance(value, int | float):
        return None
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        if not allow_decimal:
            return int(value) if value.is_integer() else None
    return value


def validate_in_range(
    value: int | float | None, bounds: tuple[float, float] | None
) -> int | float | None:
    """Return *value* if it lies within the inclusive *bounds* (or none are set)."""
    if value is None:
        return None
    if bounds is None:
        return value
    low, high = bounds
    return value if low <= value <= high else None


def validate_is_boolean(value: Any) -> bool | None:
    """Return *value* if it is a boolean, else ``None``."""
    return value if isinstance(value, bool) else None


def validate_is_date(value: Any) -> str | datetime.date | None:
    """
    Return *value* if it is a calendar date, else ``None``.

    Accepts ``datetime.date`` instances (but not ``datetime.datetime``)
    and ``YYYY-MM-DD`` strings naming a real day.
    """
    if isinstance(value, datetime.datetime):
        return None
    if isinstance(value, datetime.date):
        return value
    if not isinstance(value, str) or not _ISO_DATE_RE.match(value):
        return None
    try:
        datetime.date.fromisoformat(value)
    except ValueError:
        return None
    return value
