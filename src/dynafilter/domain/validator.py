"""Condition validation.

Checks that a condition's value is well formed for its field type and
operator. Rules are applied in order and the first failure wins:

1. value absent or "" -> required
2. number/amount ``between`` -> both bounds present, min <= max
3. date ``between`` -> both dates present and parseable, start <= end
4. ``in`` / ``notIn`` -> at least one option
5. otherwise valid

Known limitation: rule 1 treats an empty string as missing for every field,
so "" can never be used as a text comparison value. ``False`` and ``0`` are
valid values.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, Field

from .dates import parse_iso
from .fields import NUMERIC_TYPES, FieldDefinition, FieldType
from .filters import DateRange, FilterCondition, NumberRange
from .operators import OperatorType

MSG_VALUE_REQUIRED = "Value is required"
MSG_RANGE_BOUNDS_REQUIRED = "Both min and max values are required"
MSG_RANGE_INVERTED = "Min value cannot be greater than max value"
MSG_DATES_REQUIRED = "Both start and end dates are required"
MSG_DATES_INVERTED = "Start date cannot be after end date"
MSG_OPTION_REQUIRED = "At least one option must be selected"


class FilterValidationError(BaseModel):
    """A user-correctable problem with one condition."""

    filter_id: str = Field(..., description="Id of the offending condition")
    message: str = Field(..., description="Human readable error")


class ValidationResult:
    """Result of validating a condition set."""

    def __init__(self, errors: list[FilterValidationError] | None = None):
        self.errors = errors or []

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def add_error(self, filter_id: str, message: str) -> ValidationResult:
        """Add an error and return self for chaining."""
        self.errors.append(FilterValidationError(filter_id=filter_id, message=message))
        return self

    def error_for(self, filter_id: str) -> str | None:
        for error in self.errors:
            if error.filter_id == filter_id:
                return error.message
        return None

    def by_id(self) -> dict[str, str]:
        return {error.filter_id: error.message for error in self.errors}

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for JSON response."""
        return {
            "valid": self.is_valid,
            "errors": [error.model_dump() for error in self.errors],
        }


def _validate_number_range(value: Any) -> str | None:
    if not isinstance(value, NumberRange) or value.min is None or value.max is None:
        return MSG_RANGE_BOUNDS_REQUIRED
    if value.min > value.max:
        return MSG_RANGE_INVERTED
    return None


def _validate_date_range(value: Any) -> str | None:
    if not isinstance(value, DateRange):
        return MSG_DATES_REQUIRED
    start = parse_iso(value.start)
    end = parse_iso(value.end)
    if start is None or end is None:
        return MSG_DATES_REQUIRED
    if start > end:
        return MSG_DATES_INVERTED
    return None


def validate_condition(condition: FilterCondition, field: FieldDefinition) -> str | None:
    """Return an error message for ``condition``, or None when it is valid."""
    operator = condition.operator
    value = condition.value

    if value is None or value == "":
        return MSG_VALUE_REQUIRED

    if operator == OperatorType.between:
        if field.type in NUMERIC_TYPES:
            return _validate_number_range(value)
        if field.type == FieldType.date:
            return _validate_date_range(value)

    if operator in (OperatorType.in_, OperatorType.not_in):
        if not isinstance(value, list) or not value:
            return MSG_OPTION_REQUIRED

    return None


def validate_conditions(
    conditions: Iterable[FilterCondition],
    fields: dict[str, FieldDefinition],
) -> ValidationResult:
    """Validate every condition whose field is known; unknown fields are skipped."""
    result = ValidationResult()
    for condition in conditions:
        field = fields.get(condition.field)
        if field is None:
            continue
        message = validate_condition(condition, field)
        if message:
            result.add_error(condition.id, message)
    return result
