"""Boolean conditions."""

from __future__ import annotations

from typing import Any, ClassVar

from ..condition import Condition
from ..encoder import EncoderRules
from ..validation import validate_is_boolean


class Boolean(Condition):
    type_name: ClassVar[str] = "boolean"
    comparators: ClassVar[tuple[str, ...]] = ("is", "is not")
    encoder: ClassVar[EncoderRules] = (
        EncoderRules()
        .rule("is", "is not", "(column = ?)")
        .rule("is not", "is", "(column != ?)")
    )

    value: bool

    @classmethod
    def validate_value(cls, value: Any, config: Any) -> bool | None:
        return validate_is_boolean(value)

    def value_text(self) -> str:
        return "true" if self.value else "false"
