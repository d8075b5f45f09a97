"""
Declarative encoder tables.

Each condition type declares one :class:`EncoderRule` per comparator,
naming the comparator's logical opposite.  Encoding an inverted
condition re-dispatches once under the opposite comparator, so a pair of
rules covers both polarities::

    encoder = (
        EncoderRules()
        .rule("is", "is not", "(column = ?)")
        .rule("is not", "is", "(column != ?)")
    )
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .exceptions import EncoderNotFoundError, EncoderRuleError
from .fragment import PLACEHOLDER, Fragment

if TYPE_CHECKING:
    from .condition import Condition

logger = logging.getLogger(__name__)

COLUMN_TOKEN = "column"
VALUE_TOKEN = "value"


def default_value_templates() -> tuple[str, ...]:
    return (VALUE_TOKEN,)


@dataclass(frozen=True)
class EncoderRule:
    """Template for one comparator.

    Attributes:
        comparator: Comparator this rule encodes.
        reverse_comparator: Logical opposite used for inverted conditions.
        expression: Expression with ``column`` where the column name goes.
        values: Bound value templates with ``value`` where the value goes.
    """

    comparator: str
    reverse_comparator: str
    expression: str
    values: tuple[str, ...] = field(default_factory=default_value_templates)

    def render(self, column: str, value_text: str) -> Fragment:
        return Fragment(
            expression=self.expression.replace(COLUMN_TOKEN, column),
            values=tuple(
                template.replace(VALUE_TOKEN, value_text) for template in self.values
            ),
        )


class EncoderRules:
    """Encoder table of one condition type, keyed by exact comparator."""

    def __init__(self) -> None:
        self._rules: dict[str, EncoderRule] = {}

    # -- declaration ---------------------------------------------------------

    def rule(
        self,
        comparator: str,
        reverse_comparator: str,
        expression: str,
        values: Sequence[str] = (VALUE_TOKEN,),
    ) -> EncoderRules:
        """Declare the rule for *comparator*; returns the table for chaining."""
        if comparator in self._rules:
            raise EncoderRuleError(
                f"Duplicate encoder rule for comparator '{comparator}'"
            )
        placeholders = expression.count(PLACEHOLDER)
        if placeholders != len(values):
            raise EncoderRuleError(
                f"Expression '{expression}' of comparator '{comparator}' has "
                f"{placeholders} placeholder(s) but {len(values)} value template(s)"
            )
        self._rules[comparator] = EncoderRule(
            comparator=comparator,
            reverse_comparator=reverse_comparator,
            expression=expression,
            values=tuple(values),
        )
        return self

    def check(self, comparators: Iterable[str]) -> None:
        """
        Verify the table covers *comparators* and every inversion resolves.

        Raises:
            EncoderRuleError: On a missing rule or an unregistered
                reverse comparator.
        """
        missing = [c for c in comparators if c not in self._rules]
        if missing:
            raise EncoderRuleError(
                f"No encoder rule for comparator(s): {', '.join(missing)}"
            )
        for rule in self._rules.values():
            if rule.reverse_comparator not in self._rules:
                raise EncoderRuleError(
                    f"Reverse comparator '{rule.reverse_comparator}' of "
                    f"'{rule.comparator}' has no encoder rule"
                )

    # -- look-up -------------------------------------------------------------

    def get(self, comparator: str) -> EncoderRule | None:
        return self._rules.get(comparator)

    @property
    def comparators(self) -> list[str]:
        return list(self._rules)

    # -- encoding ------------------------------------------------------------

    def encode(self, condition: Condition) -> Fragment:
        """
        Encode *condition* into a :class:`Fragment`.

        Raises:
            EncoderNotFoundError: If no rule matches the comparator.
        """
        rule = self._rules.get(condition.comparator)
        if rule is None:
            raise EncoderNotFoundError(condition.comparator, self.comparators)

        if condition.inverse:
            logger.debug(
                "Encoding inverted '%s' as '%s'",
                rule.comparator,
                rule.reverse_comparator,
            )
            resolved = condition.model_copy(
                update={"comparator": rule.reverse_comparator, "inverse": False}
            )
            return self.encode(resolved)

        return rule.render(condition.column, condition.value_text())
