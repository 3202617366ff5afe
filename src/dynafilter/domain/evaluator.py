"""Condition evaluation against a single record.

Dispatch is on the runtime type of the resolved value, not the declared field
type, so a record that disagrees with its schema still gets a defined answer.
The evaluator never raises: an absent value is False, an invalid regex is
False (logged), and an operator it does not understand is True.

Order of checks:

1. absent value -> False
2. bool -> equality with the condition value, whatever the operator
3. str -> case-insensitive text operators; ``regex`` is case-insensitive
   against the unmodified text; ``between`` on a date-named key compares dates
4. int/float -> numeric comparisons and inclusive ``between``
5. list/tuple -> ``in`` / ``notIn`` intersection; empty filter matches all
6. any other value: ``is`` / ``isNot`` -> strict equality on the raw value
7. anything else -> True

Each typed branch (3 to 5) answers True for an operator it has no rule for.
A consequence is that ``is`` and ``isNot`` never reach the equality check for
string values, so single-select conditions on string fields do not narrow the
result.

Date-valued fields are stored as ISO strings. A string field is treated as a
date only when its key contains "Date" or "Review"; any date field named
otherwise falls through to the plain text operators.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from typing import Any

from .dates import is_date_key, parse_iso
from .filters import DateRange, FilterCondition, NumberRange
from .operators import OperatorType
from .paths import resolve

_LOGGER = logging.getLogger(__name__)

_TEXT_OPS: dict[str, Callable[[str, str], bool]] = {
    OperatorType.equals.value: lambda field, value: field == value,
    OperatorType.contains.value: lambda field, value: value in field,
    OperatorType.not_contains.value: lambda field, value: value not in field,
    OperatorType.starts_with.value: lambda field, value: field.startswith(value),
    OperatorType.ends_with.value: lambda field, value: field.endswith(value),
}

_NUMBER_OPS: dict[str, Callable[[float, float], bool]] = {
    OperatorType.equals.value: lambda field, value: field == value,
    OperatorType.greater_than.value: lambda field, value: field > value,
    OperatorType.less_than.value: lambda field, value: field < value,
    OperatorType.greater_than_or_equal.value: lambda field, value: field >= value,
    OperatorType.less_than_or_equal.value: lambda field, value: field <= value,
}


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _as_number(value: Any) -> float | None:
    if _is_number(value):
        return value
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def _regex_match(field_value: str, pattern: Any) -> bool:
    if pattern is None:
        pattern = ""
    try:
        compiled = re.compile(str(pattern), re.IGNORECASE)
    except re.error as error:
        _LOGGER.warning(
            "invalid_regex_pattern",
            extra={"pattern": str(pattern), "error": str(error)},
        )
        return False
    return compiled.search(field_value) is not None


def _date_between(field_value: str, value: Any) -> bool:
    if not isinstance(value, DateRange):
        return False
    point = parse_iso(field_value)
    start = parse_iso(value.start)
    end = parse_iso(value.end)
    if point is None or start is None or end is None:
        return False
    return start <= point <= end


def _evaluate_text(field_key: str, field_value: str, operator: str, value: Any) -> bool:
    if operator == OperatorType.regex:
        return _regex_match(field_value, value)
    if operator == OperatorType.between and is_date_key(field_key):
        return _date_between(field_value, value)
    handler = _TEXT_OPS.get(operator)
    if handler is None:
        return True
    value_text = value.lower() if isinstance(value, str) else ""
    return handler(field_value.lower(), value_text)


def _evaluate_number(field_value: float, operator: str, value: Any) -> bool:
    if operator == OperatorType.between:
        if not isinstance(value, NumberRange) or value.min is None or value.max is None:
            return False
        return value.min <= field_value <= value.max
    handler = _NUMBER_OPS.get(operator)
    if handler is None:
        return True
    number = _as_number(value)
    if number is None:
        return False
    return handler(field_value, number)


def _evaluate_sequence(field_value: list | tuple, operator: str, value: Any) -> bool:
    if value is None or value == "" or value == []:
        return True
    wanted = value if isinstance(value, list) else [value]
    overlaps = any(item in wanted for item in field_value)
    if operator == OperatorType.in_:
        return overlaps
    if operator == OperatorType.not_in:
        return not overlaps
    return True


def evaluate(record: Any, condition: FilterCondition) -> bool:
    """Decide whether ``record`` satisfies ``condition``."""
    field_value = resolve(record, condition.field)
    operator = condition.operator
    value = condition.value

    if field_value is None:
        return False

    if isinstance(field_value, bool):
        return isinstance(value, bool) and field_value == value

    if isinstance(field_value, str):
        return _evaluate_text(condition.field, field_value, operator, value)
    if _is_number(field_value):
        return _evaluate_number(field_value, operator, value)
    if isinstance(field_value, (list, tuple)):
        return _evaluate_sequence(field_value, operator, value)

    if operator == OperatorType.is_:
        return field_value == value
    if operator == OperatorType.is_not:
        return field_value != value
    return True
