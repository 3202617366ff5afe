"""Column sorting for filtered views."""

from __future__ import annotations

from collections.abc import Sequence
from functools import cmp_to_key
from typing import Any, Literal, TypeVar

from pydantic import BaseModel, Field

from .paths import resolve

RecordT = TypeVar("RecordT")
SortOrder = Literal["asc", "desc"]


class SortSpec(BaseModel):
    """Which column to sort by, and in which direction."""

    field: str = Field(..., min_length=1, description="Dot-path of the sort column")
    order: SortOrder = Field(default="asc", description="'asc' or 'desc'")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def compare_values(left: Any, right: Any) -> int:
    """Compare two cell values; unlike types, sequences and absent values tie."""
    if isinstance(left, str) and isinstance(right, str):
        left_key, right_key = left.casefold(), right.casefold()
        if left_key == right_key:
            left_key, right_key = left, right
        return (left_key > right_key) - (left_key < right_key)
    if _is_number(left) and _is_number(right):
        return (left > right) - (left < right)
    return 0


def sort_records(records: Sequence[RecordT], field: str, order: str = "asc") -> list[RecordT]:
    """Return a stably sorted copy of ``records`` ordered by the value at ``field``."""
    if order not in ("asc", "desc"):
        raise ValueError(f"sort order must be 'asc' or 'desc', got {order!r}")
    sign = 1 if order == "asc" else -1

    def _compare(left: RecordT, right: RecordT) -> int:
        return sign * compare_values(resolve(left, field), resolve(right, field))

    return sorted(records, key=cmp_to_key(_compare))
