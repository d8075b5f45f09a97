"""Per-type condition configuration models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from .fragment import PLACEHOLDER


class ConditionConfig(BaseModel):
    """Configuration shared by every condition type.

    Attributes:
        keys: Column names conditions of this type may filter on.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    keys: frozenset[str] = frozenset()

    @field_validator("keys")
    @classmethod
    def reject_placeholders(cls, keys: frozenset[str]) -> frozenset[str]:
        # A placeholder in a column name would break the fragment's value count.
        offending = sorted(key for key in keys if PLACEHOLDER in key)
        if offending:
            raise ValueError(
                f"column names must not contain '{PLACEHOLDER}': "
                f"{', '.join(offending)}"
            )
        return keys


class NumberConfig(ConditionConfig):
    """Configuration for ``number`` conditions.

    Attributes:
        allow_decimal: Accept non-integral values.
        allowed_values: Optional inclusive ``(min, max)`` bounds.
    """

    allow_decimal: bool = True
    allowed_values: tuple[float, float] | None = None

    @model_validator(mode="after")
    def check_bounds(self) -> NumberConfig:
        if self.allowed_values is not None:
            low, high = self.allowed_values
            if low > high:
                raise ValueError(f"allowed_values minimum {low} exceeds maximum {high}")
        return self
