"""Port interfaces (Protocols).

Services depend only on these, never on concrete ID strategies.
"""

from .id_gen import (
    ConditionIdProvider,
    SequentialConditionIdProvider,
    TimestampConditionIdProvider,
)

__all__ = [
    "ConditionIdProvider",
    "SequentialConditionIdProvider",
    "TimestampConditionIdProvider",
]
