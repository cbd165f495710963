"""Calendar-date helpers.

Days are plain ``datetime.date`` values: a year/month/day triple with no
time-of-day or UTC offset, so stepping across DST changes never skips or
repeats a day.
"""

from __future__ import annotations

from collections.abc import Iterator
from datetime import date, timedelta


def parse_day(s: str) -> date:
    """Parse 'YYYY-MM-DD' into a date. Raises ValueError on bad input."""
    return date.fromisoformat(s.strip())


def format_day(day: date) -> str:
    return day.isoformat()


def add_days(day: date | str, n: int) -> date | str:
    """Shift *day* by *n* calendar days, returning the same kind it was given."""
    if isinstance(day, str):
        return format_day(parse_day(day) + timedelta(days=n))
    return day + timedelta(days=n)


def window_days(today: date, window: int = 30) -> Iterator[date]:
    """Yield today, today-1, ..., today-(window-1)."""
    for i in range(window):
        yield today - timedelta(days=i)
