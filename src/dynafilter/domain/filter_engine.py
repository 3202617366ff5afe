"""Filter engine: AND-combines conditions over a record set."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, TypeVar

from .evaluator import evaluate
from .filters import FilterCondition

RecordT = TypeVar("RecordT")


def matches_all(record: Any, conditions: Iterable[FilterCondition]) -> bool:
    """True if every condition holds for ``record`` (stops at the first False)."""
    return all(evaluate(record, condition) for condition in conditions)


def apply_filters(records: Sequence[RecordT], conditions: Sequence[FilterCondition]) -> list[RecordT]:
    """Return the records that satisfy every condition, in input order.

    Neither records nor conditions are modified. With no conditions every
    record is returned.
    """
    if not conditions:
        return list(records)
    return [record for record in records if matches_all(record, conditions)]
