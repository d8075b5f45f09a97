"""
The contract every concrete condition type implements.

A concrete type declares its dispatch name, the comparators it accepts,
its configuration model and its encoder table; parsing and encoding are
shared::

    class Text(Condition):
        type_name: ClassVar[str] = "text"
        comparators: ClassVar[tuple[str, ...]] = ("is", "is not")
        encoder: ClassVar[EncoderRules] = (
            EncoderRules()
            .rule("is", "is not", "(column = ?)")
            .rule("is not", "is", "(column != ?)")
        )

        @classmethod
        def validate_value(cls, value, config):
            return validate_is_text(value)
"""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Mapping
from typing import Any, ClassVar, TypedDict

from pydantic import ValidationError as PydanticValidationError

from .config import ConditionConfig
from .encoder import EncoderRules
from .exceptions import ConditionConfigError
from .formatting import describe_invalid_enum_value, describe_invalid_value_type
from .fragment import Fragment
from .result import ErrorCollector, ParseResult
from .validation import validate_in, validate_is_boolean
from .value_object import ValueObject


class ConditionOptions(TypedDict, total=False):
    """Untyped condition input, as supplied by a filter loader."""

    type: str
    column: Any
    comparator: Any
    value: Any
    inverse: Any


class Condition(ValueObject):
    """A single validated filter predicate.

    Instances are only created by :meth:`parse` and never change.
    """

    type_name: ClassVar[str]
    comparators: ClassVar[tuple[str, ...]] = ()
    config_model: ClassVar[type[ConditionConfig]] = ConditionConfig
    encoder: ClassVar[EncoderRules]

    column: str
    comparator: str
    value: Any
    inverse: bool = False

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        if getattr(cls, "type_name", None) is None:
            return
        if cls.__abstractmethods__:
            missing = ", ".join(sorted(cls.__abstractmethods__))
            raise TypeError(
                f"Condition type {cls.__name__} does not implement: {missing}"
            )
        cls.encoder.check(cls.comparators)

    # -- parsing -------------------------------------------------------------

    @classmethod
    def load_config(
        cls, config: ConditionConfig | Mapping[str, Any] | None
    ) -> ConditionConfig:
        """Validate the configuration entry; an absent entry means defaults."""
        if config is None:
            return cls.config_model()
        if isinstance(config, cls.config_model):
            return config
        if isinstance(config, ConditionConfig):
            config = config.model_dump()
        try:
            return cls.config_model.model_validate(config)
        except PydanticValidationError as exc:
            raise ConditionConfigError(cls.type_name, str(exc)) from exc

    @classmethod
    @abstractmethod
    def validate_value(cls, value: Any, config: Any) -> Any:
        """Return *value* if it has the right shape for this type, else ``None``."""

    @classmethod
    def parse(
        cls,
        config: ConditionConfig | Mapping[str, Any] | None,
        options: Mapping[str, Any],
    ) -> ParseResult[Any]:
        """
        Validate *options* against *config* and build a condition.

        Every rejected field contributes one message, in the order
        column, comparator, inverse, value.

        Raises:
            ConditionConfigError: If *config* does not fit ``config_model``.
        """
        settings = cls.load_config(config)
        errors = ErrorCollector()

        raw_column = options.get("column")
        column = errors.check(
            validate_in(raw_column, settings.keys),
            describe_invalid_enum_value(raw_column, "column", cls.type_name),
        )

        raw_comparator = options.get("comparator")
        comparator = errors.check(
            validate_in(raw_comparator, cls.comparators),
            describe_invalid_enum_value(raw_comparator, "comparator", cls.type_name),
        )

        raw_inverse = options.get("inverse")
        if raw_inverse is None:
            raw_inverse = False
        inverse = errors.check(
            validate_is_boolean(raw_inverse),
            describe_invalid_enum_value(raw_inverse, "inverse", cls.type_name),
        )

        value = errors.check(
            cls.validate_value(options.get("value"), settings),
            describe_invalid_value_type(raw_column, cls.type_name),
        )

        return errors.finish(
            lambda: cls(
                column=column,
                comparator=comparator,
                value=value,
                inverse=inverse,
            )
        )

    # -- encoding ------------------------------------------------------------

    def value_text(self) -> str:
        """The value as substituted into the encoder's value templates."""
        return str(self.value)

    def encode(self) -> Fragment:
        return self.encoder.encode(self)

    # -- serialisation -------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type_name,
            "column": self.column,
            "comparator": self.comparator,
            "value": self.value,
            "inverse": self.inverse,
        }
