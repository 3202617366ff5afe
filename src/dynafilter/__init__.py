"""dynafilter: typed filter conditions over tabular records."""

from .domain import (
    DateRange,
    FieldDefinition,
    FieldType,
    FilterCondition,
    NumberRange,
    OperatorType,
    apply_filters,
    evaluate,
    operators_for,
    resolve,
    validate_condition,
)

__version__ = "0.1.0"
__all__ = [
    "DateRange",
    "FieldDefinition",
    "FieldType",
    "FilterCondition",
    "NumberRange",
    "OperatorType",
    "apply_filters",
    "evaluate",
    "operators_for",
    "resolve",
    "validate_condition",
]
