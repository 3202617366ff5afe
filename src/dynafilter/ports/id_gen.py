"""Port: condition ID generation."""

from __future__ import annotations

import random
import string
import time
from typing import Protocol, runtime_checkable


@runtime_checkable
class ConditionIdProvider(Protocol):
    """Generate a unique filter condition ID."""

    def new_condition_id(self) -> str: ...


# ---------------------------------------------------------------------------
# Default implementations (pure stdlib, no infra deps)
# ---------------------------------------------------------------------------

_BASE36 = string.digits + string.ascii_lowercase


class TimestampConditionIdProvider:
    """``filter-<epoch millis>-<9 random base36 chars>``."""

    def new_condition_id(self) -> str:
        millis = int(time.time() * 1000)
        suffix = "".join(random.choices(_BASE36, k=9))
        return f"filter-{millis}-{suffix}"


class SequentialConditionIdProvider:
    """Deterministic ``<prefix>-1``, ``<prefix>-2``, ... (tests and scripted sessions)."""

    def __init__(self, prefix: str = "filter") -> None:
        self._prefix = prefix
        self._counter = 0

    def new_condition_id(self) -> str:
        self._counter += 1
        return f"{self._prefix}-{self._counter}"
