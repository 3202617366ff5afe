"""Filter condition models and default values."""

from __future__ import annotations

from enum import Enum
from typing import Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .fields import NUMERIC_TYPES, FieldType
from .operators import OperatorType


class NumberRange(BaseModel):
    """Inclusive numeric range for ``between`` on number/amount fields."""

    model_config = ConfigDict(extra="forbid")

    min: int | float | None = Field(default=None, description="Lower bound (inclusive)")
    max: int | float | None = Field(default=None, description="Upper bound (inclusive)")


class DateRange(BaseModel):
    """Inclusive ISO date range for ``between`` on date fields."""

    model_config = ConfigDict(extra="forbid")

    start: str | None = Field(default=None, description="ISO start date (inclusive)")
    end: str | None = Field(default=None, description="ISO end date (inclusive)")


# Shape depends on field type and operator; None means "absent".
FilterValue = Union[bool, int, float, str, list[str], NumberRange, DateRange, None]


class FilterCondition(BaseModel):
    """One (field, operator, value) filter row."""

    id: str = Field(..., min_length=1, description="Opaque unique condition id")
    field: str = Field(..., description="Dot-path of the field to test")
    operator: str = Field(..., description="Operator identifier, see OperatorType")
    value: FilterValue = Field(default=None, description="Comparison value")

    @field_validator("operator", mode="before")
    @classmethod
    def _plain_operator(cls, value: object) -> object:
        if isinstance(value, Enum):
            return value.value
        return value


def default_value(field_type: FieldType | str, operator: str | None = None) -> FilterValue:
    """Starting value for a fresh condition row, or after its field/operator changes."""
    field_type = FieldType(field_type)
    if operator == OperatorType.between:
        if field_type == FieldType.date:
            return DateRange(start="", end="")
        if field_type in NUMERIC_TYPES:
            return NumberRange(min=0, max=0)
    if field_type == FieldType.boolean:
        return False
    if field_type == FieldType.multi_select:
        return []
    if field_type in NUMERIC_TYPES:
        return 0
    return ""
