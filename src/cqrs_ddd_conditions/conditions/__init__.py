"""
Built-in condition types.

Usage::

    from cqrs_ddd_conditions.conditions import build_default_registry

    registry = build_default_registry()
    result = registry.parse({"text": {"keys": ["title"]}}, options)
"""

from __future__ import annotations

from ..registry import ConditionRegistry
from .boolean import Boolean
from .date import Date
from .number import Number
from .text import Text


def build_default_registry() -> ConditionRegistry:
    """
    Create a frozen registry with all built-in condition types.

    Returns:
        ConditionRegistry: ``text``, ``number``, ``date`` and ``boolean``.
    """
    registry = ConditionRegistry()
    registry.register_all(Text, Number, Date, Boolean)
    return registry.freeze()


__all__ = [
    "Boolean",
    "Date",
    "Number",
    "Text",
    "build_default_registry",
]
