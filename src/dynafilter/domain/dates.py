"""ISO date parsing shared by the validator and evaluator."""

from __future__ import annotations

from datetime import date, datetime, timezone

# Date-valued string fields are recognised by key name; see evaluator.
DATE_KEY_MARKERS = ("Date", "Review")


def parse_iso(value: object) -> datetime | None:
    """Parse an ISO date or datetime into an aware UTC datetime.

    Date-only strings are midnight UTC. Returns None for empty or unparseable
    input instead of raising.
    """
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, date):
        dt = datetime(value.year, value.month, value.day)
    elif isinstance(value, str) and value.strip():
        try:
            dt = datetime.fromisoformat(value.strip())
        except ValueError:
            return None
    else:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def is_date_key(field_key: str) -> bool:
    return any(marker in field_key for marker in DATE_KEY_MARKERS)
