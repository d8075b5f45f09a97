"""Date conditions on calendar-date columns."""

from __future__ import annotations

import datetime
from typing import Any, ClassVar

from ..condition import Condition
from ..encoder import EncoderRules
from ..validation import validate_is_date


class Date(Condition):
    """
    Calendar-date condition.

    Values are ``YYYY-MM-DD`` strings or ``datetime.date`` objects and are
    bound in ISO format.
    """

    type_name: ClassVar[str] = "date"
    comparators: ClassVar[tuple[str, ...]] = (
        "on",
        "not on",
        "after",
        "on or before",
        "before",
        "on or after",
    )
    encoder: ClassVar[EncoderRules] = (
        EncoderRules()
        .rule("on", "not on", "(column = ?)")
        .rule("not on", "on", "(column != ?)")
        .rule("after", "on or before", "(column > ?)")
        .rule("on or before", "after", "(column <= ?)")
        .rule("before", "on or after", "(column < ?)")
        .rule("on or after", "before", "(column >= ?)")
    )

    value: str | datetime.date

    @classmethod
    def validate_value(cls, value: Any, config: Any) -> str | datetime.date | None:
        return validate_is_date(value)

    def value_text(self) -> str:
        if isinstance(self.value, datetime.date):
            return self.value.isoformat()
        return self.value
