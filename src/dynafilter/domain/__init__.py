"""Domain layer for dynafilter: schema, catalog, validation and evaluation."""

from .evaluator import evaluate
from .fields import FieldDefinition, FieldType, field_index
from .filter_engine import apply_filters, matches_all
from .filters import DateRange, FilterCondition, FilterValue, NumberRange, default_value
from .operators import (
    FIELD_OPERATORS,
    OperatorDefinition,
    OperatorType,
    default_operator,
    is_operator_allowed,
    operators_for,
)
from .paths import resolve
from .sorting import SortSpec, sort_records
from .validator import (
    FilterValidationError,
    ValidationResult,
    validate_condition,
    validate_conditions,
)

__all__ = [
    "DateRange",
    "FIELD_OPERATORS",
    "FieldDefinition",
    "FieldType",
    "FilterCondition",
    "FilterValidationError",
    "FilterValue",
    "NumberRange",
    "OperatorDefinition",
    "OperatorType",
    "SortSpec",
    "ValidationResult",
    "apply_filters",
    "default_operator",
    "default_value",
    "evaluate",
    "field_index",
    "is_operator_allowed",
    "matches_all",
    "operators_for",
    "resolve",
    "sort_records",
    "validate_condition",
    "validate_conditions",
]
