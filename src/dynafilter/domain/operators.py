"""Operator catalog: the legal operators for each field type."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from .fields import FieldType


class OperatorType(str, Enum):
    """Supported filter operators."""

    equals = "equals"
    contains = "contains"
    starts_with = "startsWith"
    ends_with = "endsWith"
    not_contains = "notContains"
    regex = "regex"
    greater_than = "greaterThan"
    less_than = "lessThan"
    greater_than_or_equal = "greaterThanOrEqual"
    less_than_or_equal = "lessThanOrEqual"
    between = "between"             # inclusive range
    is_ = "is"
    is_not = "isNot"
    in_ = "in"                      # sequences intersect
    not_in = "notIn"                # sequences do not intersect


class OperatorDefinition(BaseModel):
    """An operator with its display label. The label is never used for evaluation."""

    model_config = ConfigDict(frozen=True)

    value: OperatorType = Field(..., description="Operator identifier")
    label: str = Field(..., description="Human readable label")


def _op(value: OperatorType, label: str) -> OperatorDefinition:
    return OperatorDefinition(value=value, label=label)


_NUMBER_OPERATORS = (
    _op(OperatorType.equals, "Equals"),
    _op(OperatorType.greater_than, "Greater Than"),
    _op(OperatorType.less_than, "Less Than"),
    _op(OperatorType.greater_than_or_equal, "Greater Than or Equal"),
    _op(OperatorType.less_than_or_equal, "Less Than or Equal"),
    _op(OperatorType.between, "Between"),
)

FIELD_OPERATORS: dict[FieldType, tuple[OperatorDefinition, ...]] = {
    FieldType.text: (
        _op(OperatorType.equals, "Equals"),
        _op(OperatorType.contains, "Contains"),
        _op(OperatorType.starts_with, "Starts With"),
        _op(OperatorType.ends_with, "Ends With"),
        _op(OperatorType.not_contains, "Does Not Contain"),
        _op(OperatorType.regex, "Regex Match (Advanced)"),
    ),
    FieldType.number: _NUMBER_OPERATORS,
    FieldType.amount: _NUMBER_OPERATORS,
    FieldType.date: (_op(OperatorType.between, "Between"),),
    FieldType.single_select: (
        _op(OperatorType.is_, "Is"),
        _op(OperatorType.is_not, "Is Not"),
    ),
    FieldType.multi_select: (
        _op(OperatorType.in_, "In"),
        _op(OperatorType.not_in, "Not In"),
    ),
    FieldType.boolean: (_op(OperatorType.is_, "Is"),),
}


def operators_for(field_type: FieldType | str) -> tuple[OperatorDefinition, ...]:
    """Return the ordered operator set for a field type (never empty)."""
    return FIELD_OPERATORS[FieldType(field_type)]


def default_operator(field_type: FieldType | str) -> OperatorType:
    """First catalog operator for a field type, used for fresh conditions."""
    return operators_for(field_type)[0].value


def is_operator_allowed(field_type: FieldType | str, operator: str) -> bool:
    return any(definition.value == operator for definition in operators_for(field_type))
