"""Human-readable messages for rejected condition fields."""

from __future__ import annotations

from typing import Any

# Non-text columns are shown through repr(), bounded to keep messages short.
_MAX_REPR_LENGTH = 15
_HEAD_LENGTH = 13
_TAIL_LENGTH = 3


def describe_invalid_enum_value(
    value: Any, field_kind: str, condition_type: str
) -> str:
    """Describe a value that is not one of the allowed choices for *field_kind*.

    Example::

        >>> describe_invalid_enum_value("unknown_col", "column", "text")
        "Invalid text column 'unknown_col'"
    """
    return f"Invalid {condition_type} {field_kind} '{value}'"


def describe_invalid_value_type(column: Any, condition_type: str) -> str:
    """Describe a value of the wrong shape for the condition on *column*.

    A non-text *column* means the condition itself is malformed, so its
    ``repr()`` is quoted instead.  Representations longer than 15
    characters keep the first 13 and the last 3 around an ellipsis.
    """
    if isinstance(column, str):
        return f"Invalid {condition_type} value for {column}"

    rendered = repr(column)
    if len(rendered) > _MAX_REPR_LENGTH:
        rendered = f"{rendered[:_HEAD_LENGTH]}...{rendered[-_TAIL_LENGTH:]}"
    return describe_invalid_value_type(f"'{rendered}'", condition_type)
