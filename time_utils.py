from __future__ import annotations

from datetime import date, timedelta
from typing import List

WEEKDAY_KEYS = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]


def time_to_minutes(value: str) -> int:
    hours, minutes = value.split(":")
    return int(hours) * 60 + int(minutes)


def minutes_to_time(minutes: int) -> str:
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def days_between(start: date, end: date) -> int:
    """Inclusive number of days covered by start and end, in either order."""
    return abs((end - start).days) + 1


def date_range(start: date, end: date) -> List[date]:
    days: List[date] = []
    current = start
    while current <= end:
        days.append(current)
        current += timedelta(days=1)
    return days


def day_index(day: date) -> int:
    # Sunday = 0 ... Saturday = 6, the layout of Routine.days
    return (day.weekday() + 1) % 7


def is_weekend(day: date) -> bool:
    return day_index(day) in (0, 6)


def week_start_of(reference_date: date) -> date:
    return reference_date - timedelta(days=reference_date.weekday())
