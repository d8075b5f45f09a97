"""Condition registry, dispatching parsing by declared type name."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from .exceptions import ConditionRegistrationError
from .result import ParseResult

if TYPE_CHECKING:
    from .condition import Condition
    from .config import ConditionConfig

logger = logging.getLogger(__name__)


class ConditionRegistry:
    """
    Registry of condition types keyed by their exact ``type_name``.

    Types are registered during bootstrapping, after which the registry is
    frozen and only read.

    Usage::

        registry = ConditionRegistry()
        registry.register_all(Text, Number)
        registry.freeze()

        result = registry.parse(
            {"text": {"keys": ["title"]}},
            {"type": "text", "column": "title", "comparator": "is",
             "value": "Milk", "inverse": False},
        )
    """

    def __init__(self) -> None:
        self._types: dict[str, type[Condition]] = {}
        self._frozen = False

    # -- registration --------------------------------------------------------

    def register(self, condition_type: type[Condition]) -> None:
        """Register a concrete condition type under its ``type_name``."""
        if self._frozen:
            raise ConditionRegistrationError(
                f"Cannot register {condition_type.__name__}: registry is frozen"
            )
        type_name = getattr(condition_type, "type_name", None)
        if not type_name:
            raise ConditionRegistrationError(
                f"{condition_type.__name__} does not declare a type_name"
            )
        existing = self._types.get(type_name)
        if existing is not None and existing is not condition_type:
            raise ConditionRegistrationError(
                f"Duplicate condition type '{type_name}': "
                f"{existing.__name__} already registered, "
                f"cannot register {condition_type.__name__}"
            )
        self._types[type_name] = condition_type
        logger.debug(
            "Registered condition type %s -> %s", type_name, condition_type.__name__
        )

    def register_all(self, *condition_types: type[Condition]) -> None:
        """Register multiple condition types at once."""
        for condition_type in condition_types:
            self.register(condition_type)

    def freeze(self) -> ConditionRegistry:
        """Reject further registrations; returns the registry."""
        self._frozen = True
        logger.debug("Condition registry frozen with types: %s", sorted(self._types))
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    # -- look-up -------------------------------------------------------------

    def get(self, type_name: str) -> type[Condition] | None:
        """Return the registered condition type or ``None``."""
        return self._types.get(type_name)

    def has(self, type_name: str) -> bool:
        return type_name in self._types

    @property
    def supported_types(self) -> set[str]:
        return set(self._types)

    # -- parsing -------------------------------------------------------------

    def parse(
        self,
        configs: Mapping[str, ConditionConfig | Mapping[str, Any]] | None,
        options: Mapping[str, Any],
    ) -> ParseResult[Any]:
        """
        Parse *options* with the condition type named by ``options["type"]``.

        The type's entry in *configs* is handed to it (an absent entry
        means defaults) together with *options* minus ``type``.  An
        unknown type name yields a failed result, not an exception.
        """
        type_name = options.get("type")
        condition_type = (
            self._types.get(type_name) if isinstance(type_name, str) else None
        )
        if condition_type is None:
            logger.debug("Rejected unknown condition type %r", type_name)
            return ParseResult.failure([f"Unknown filter condition '{type_name}'"])

        config = configs.get(type_name) if configs else None
        remaining = {key: val for key, val in options.items() if key != "type"}
        return condition_type.parse(config, remaining)
