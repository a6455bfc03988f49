"""Calendar helpers for ISO ``YYYY-MM-DD`` dates."""

from datetime import date, datetime, timedelta
from typing import Any, Optional


def parse_date(date_value: Any) -> Optional[date]:
    """Parse date from string or date object."""
    if date_value is None:
        return None
    if isinstance(date_value, datetime):
        return date_value.date()
    if isinstance(date_value, date):
        return date_value
    if isinstance(date_value, str):
        try:
            return datetime.strptime(date_value[:10], "%Y-%m-%d").date()
        except ValueError:
            return None
    return None


def to_iso(value: date) -> str:
    """Format a date as ``YYYY-MM-DD``."""
    return value.isoformat()


def week_start(value: date) -> date:
    """Return the Monday of the ISO week containing ``value``."""
    return value - timedelta(days=value.weekday())


def days_between(start: date, end: date) -> int:
    """Whole days from ``start`` to ``end`` (negative if ``end`` is earlier)."""
    return (end - start).days
