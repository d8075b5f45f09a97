"""Fragment: an expression template plus its ordered bound values."""

from __future__ import annotations

from typing import Any

from .value_object import ValueObject

PLACEHOLDER = "?"


class Fragment(ValueObject):
    """Backend-agnostic query fragment.

    ``expression`` uses one :data:`PLACEHOLDER` per bound value and
    ``values`` lists them in placeholder order::

        Fragment(expression="(title = ?)", values=("Milk",))

    The placeholder count is fixed by the encoder rule's templates, and
    configured column names never contain a placeholder.
    """

    expression: str
    values: tuple[Any, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {"expression": self.expression, "values": list(self.values)}
