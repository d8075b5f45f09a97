"""ParseResult: a parsed condition or the reasons it was rejected."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Generic, TypeVar

from .exceptions import ConditionParseError

if TYPE_CHECKING:
    from .condition import Condition

C = TypeVar("C", bound="Condition")
V = TypeVar("V")


def default_errors_factory() -> list[str]:
    """Factory for the mutable default error list of ParseResult."""
    return []


@dataclass(frozen=True)
class ParseResult(Generic[C]):
    """Outcome of parsing a single condition.

    Holds either a condition or a non-empty error list, never both.

    Usage::

        result = ParseResult.success(condition)
        result = ParseResult.failure(["Unknown filter condition 'bogus'"])
    """

    condition: C | None = None
    errors: list[str] = field(default_factory=default_errors_factory)

    def __post_init__(self) -> None:
        if (self.condition is None) == (not self.errors):
            raise ValueError(
                "ParseResult needs exactly one of a condition or errors"
            )

    @property
    def is_valid(self) -> bool:
        return self.condition is not None

    # ── Factory methods ──────────────────────────────────────────

    @classmethod
    def success(cls, condition: C) -> ParseResult[C]:
        return cls(condition=condition)

    @classmethod
    def failure(cls, errors: list[str]) -> ParseResult[C]:
        return cls(errors=list(errors))

    # ── Access ───────────────────────────────────────────────────

    def unwrap(self) -> C:
        """Return the condition or raise :class:`ConditionParseError`."""
        if self.condition is None:
            raise ConditionParseError(self.errors)
        return self.condition

    def __bool__(self) -> bool:
        return self.is_valid


class ErrorCollector:
    """Collects one error per rejected field instead of failing fast.

    Usage::

        errors = ErrorCollector()
        column = errors.check(validate_in(raw, keys), "Invalid text column 'x'")
        value = errors.check(validate_is_text(raw_value), "...")
        return errors.finish(lambda: Text(column=column, ...))
    """

    def __init__(self) -> None:
        self.errors: list[str] = []

    def check(self, validated: V | None, message: str) -> V | None:
        """Record *message* when *validated* is ``None``; pass it through."""
        if validated is None:
            self.errors.append(message)
        return validated

    def add(self, message: str) -> None:
        self.errors.append(message)

    def finish(self, build: Callable[[], C]) -> ParseResult[C]:
        """Build the condition only when no error was collected."""
        if self.errors:
            return ParseResult.failure(self.errors)
        return ParseResult.success(build())

    def __bool__(self) -> bool:
        return not self.errors
