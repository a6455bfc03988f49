"""Utility helpers shared by the calculation engines."""

from .dates import parse_date, to_iso, week_start, days_between
from .numbers import round_half_up

__all__ = [
    "parse_date",
    "to_iso",
    "week_start",
    "days_between",
    "round_half_up",
]
