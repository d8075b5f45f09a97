"""
Condition exception hierarchy.

Only setup and programming defects raise. Invalid user input is reported
as an error list on :class:`~cqrs_ddd_conditions.result.ParseResult`.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any


class ConditionError(Exception):
    """Base exception for all condition errors."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class ConditionParseError(ConditionError):
    """A parse result was unwrapped although parsing failed."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "CONDITION_PARSE_ERROR",
            "errors": list(self.errors),
        }


class ConditionConfigError(ConditionError):
    """The per-type configuration entry is malformed."""

    def __init__(self, condition_type: str, detail: str) -> None:
        self.condition_type = condition_type
        self.detail = detail
        super().__init__(
            f"Invalid configuration for {condition_type} conditions: {detail}"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "CONDITION_CONFIG_ERROR",
            "condition_type": self.condition_type,
            "detail": self.detail,
        }


class ConditionRegistrationError(ConditionError):
    """A condition type could not be registered."""


class EncoderRuleError(ConditionError):
    """An encoder table was declared inconsistently."""


class EncoderNotFoundError(ConditionError):
    """
    No encoder rule matches the condition's comparator.

    Conditions produced by a successful parse never hit this; seeing it
    means an encoder table is incomplete.  Suggests close comparator
    names to ease fixing the table.
    """

    def __init__(self, comparator: str, known_comparators: list[str]) -> None:
        self.comparator = comparator
        self.known_comparators = known_comparators
        self.suggestions = get_close_matches(
            comparator, known_comparators, n=3, cutoff=0.6
        )

        message = f"No encoder rule for comparator '{comparator}'."
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "ENCODER_NOT_FOUND",
            "comparator": self.comparator,
            "suggestions": self.suggestions,
            "known_comparators": sorted(self.known_comparators),
        }
