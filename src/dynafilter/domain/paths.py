"""Dot-path access into nested records.

This is the only place that walks record structure; validator, evaluator,
sorting and export all go through ``resolve``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel


def split_path(path: str) -> list[str]:
    return path.split(".")


def _step(current: Any, segment: str) -> Any:
    if isinstance(current, Mapping):
        return current.get(segment)
    if isinstance(current, BaseModel):
        if segment in type(current).model_fields:
            return getattr(current, segment)
        for name, info in type(current).model_fields.items():
            if info.alias == segment:
                return getattr(current, name)
        return None
    if isinstance(current, (list, tuple)) and segment.isdigit():
        index = int(segment)
        return current[index] if index < len(current) else None
    return None


def resolve(record: Any, path: str) -> Any:
    """Return the value at ``path`` in ``record``, or None when any segment is absent.

    Mappings are indexed by key, pydantic models by attribute, and lists by
    numeric segment (``skills.0``). Anything else has no children.
    """
    current = record
    for segment in split_path(path):
        if current is None:
            return None
        current = _step(current, segment)
    return current
