"""Number conditions: equality and ordering on numeric columns."""

from __future__ import annotations

from typing import Any, ClassVar

from ..condition import Condition
from ..config import NumberConfig
from ..encoder import EncoderRules
from ..validation import validate_in_range, validate_is_number


class Number(Condition):
    """
    Numeric condition.

    ``allow_decimal`` and ``allowed_values`` from :class:`NumberConfig`
    narrow which values are accepted; a rejected value is reported like
    any other value of the wrong shape.
    """

    type_name: ClassVar[str] = "number"
    comparators: ClassVar[tuple[str, ...]] = (
        "equals",
        "does not equal",
        "greater than",
        "less than or equal to",
        "less than",
        "greater than or equal to",
    )
    config_model: ClassVar[type[NumberConfig]] = NumberConfig
    encoder: ClassVar[EncoderRules] = (
        EncoderRules()
        .rule("equals", "does not equal", "(column = ?)")
        .rule("does not equal", "equals", "(column != ?)")
        .rule("greater than", "less than or equal to", "(column > ?)")
        .rule("less than or equal to", "greater than", "(column <= ?)")
        .rule("less than", "greater than or equal to", "(column < ?)")
        .rule("greater than or equal to", "less than", "(column >= ?)")
    )

    value: int | float

    @classmethod
    def validate_value(cls, value: Any, config: NumberConfig) -> int | float | None:
        number = validate_is_number(value, allow_decimal=config.allow_decimal)
        return validate_in_range(number, config.allowed_values)
