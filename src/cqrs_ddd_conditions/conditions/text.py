"""Text conditions: exact match and substring match on string columns."""

from __future__ import annotations

from typing import Any, ClassVar

from ..condition import Condition
from ..encoder import EncoderRules
from ..validation import validate_is_text


class Text(Condition):
    type_name: ClassVar[str] = "text"
    comparators: ClassVar[tuple[str, ...]] = (
        "is",
        "is not",
        "contains",
        "does not contain",
    )
    encoder: ClassVar[EncoderRules] = (
        EncoderRules()
        .rule("is", "is not", "(column = ?)")
        .rule("is not", "is", "(column != ?)")
        .rule("contains", "does not contain", "(column LIKE ?)", ["%value%"])
        .rule("does not contain", "contains", "(column NOT LIKE ?)", ["%value%"])
    )

    value: str

    @classmethod
    def validate_value(cls, value: Any, config: Any) -> str | None:
        return validate_is_text(value)
