"""Typed filter conditions: parse untrusted options, encode query fragments."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .condition import Condition, ConditionOptions
from .conditions import Boolean, Date, Number, Text, build_default_registry
from .config import ConditionConfig, NumberConfig
from .encoder import EncoderRule, EncoderRules
from .exceptions import (
    ConditionConfigError,
    ConditionError,
    ConditionParseError,
    ConditionRegistrationError,
    EncoderNotFoundError,
    EncoderRuleError,
)
from .formatting import describe_invalid_enum_value, describe_invalid_value_type
from .fragment import Fragment
from .registry import ConditionRegistry
from .result import ErrorCollector, ParseResult
from .validation import (
    validate_in,
    validate_in_range,
    validate_is_boolean,
    validate_is_date,
    validate_is_number,
    validate_is_text,
)

default_registry = build_default_registry()


def parse(
    configs: Mapping[str, ConditionConfig | Mapping[str, Any]] | None,
    options: Mapping[str, Any],
) -> ParseResult[Any]:
    """Parse *options* with the built-in condition types."""
    return default_registry.parse(configs, options)


def encode(condition: Condition) -> Fragment:
    """Encode a parsed condition into a :class:`Fragment`."""
    return condition.encode()


__all__ = [
    # Entry points
    "parse",
    "encode",
    "default_registry",
    "build_default_registry",
    # Core types
    "Condition",
    "ConditionOptions",
    "ConditionRegistry",
    "Fragment",
    "ParseResult",
    "ErrorCollector",
    # Encoder tables
    "EncoderRule",
    "EncoderRules",
    # Configuration
    "ConditionConfig",
    "NumberConfig",
    # Built-in condition types
    "Text",
    "Number",
    "Date",
    "Boolean",
    # Exceptions
    "ConditionError",
    "ConditionParseError",
    "ConditionConfigError",
    "ConditionRegistrationError",
    "EncoderRuleError",
    "EncoderNotFoundError",
    # Helpers
    "describe_invalid_enum_value",
    "describe_invalid_value_type",
    "validate_in",
    "validate_in_range",
    "validate_is_boolean",
    "validate_is_date",
    "validate_is_number",
    "validate_is_text",
]
