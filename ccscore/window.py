"""Trailing-window aggregation over a UsageLog.

Every function walks the same span: today and the ``window - 1`` days
before it. Days without a record count as zero activity.
"""

from __future__ import annotations

from collections.abc import Iterator
from datetime import date

from ccscore.dates import window_days
from ccscore.models import DayRecord, UsageLog, WindowAggregate

DEFAULT_WINDOW = 30

_EMPTY = DayRecord()


def iter_window(
    log: UsageLog, today: date, window: int = DEFAULT_WINDOW
) -> Iterator[tuple[date, DayRecord]]:
    for day in window_days(today, window):
        yield day, log.get(day) or _EMPTY


def count_active_days(log: UsageLog, today: date, window: int = DEFAULT_WINDOW) -> int:
    return sum(1 for _, rec in iter_window(log, today, window) if rec.is_active)


def sum_autonomy_hours(
    log: UsageLog, today: date, window: int = DEFAULT_WINDOW
) -> tuple[float, float]:
    """Return (main, sub) hour totals. Legacy scalar days count as sub."""
    main = 0.0
    sub = 0.0
    for _, rec in iter_window(log, today, window):
        main += rec.primary_hours
        sub += rec.secondary_hours
    return main, sub


def count_ghost_days(
    log: UsageLog, today: date, window: int = DEFAULT_WINDOW
) -> tuple[int, int]:
    """Return (ghost, active) day counts."""
    ghost = 0
    active = 0
    for _, rec in iter_window(log, today, window):
        if rec.is_active:
            active += 1
            if rec.is_ghost:
                ghost += 1
    return ghost, active


def sum_total_hours(log: UsageLog, today: date, window: int = DEFAULT_WINDOW) -> float:
    return sum(rec.total_hours for _, rec in iter_window(log, today, window))


def aggregate_window(
    log: UsageLog, today: date, window: int = DEFAULT_WINDOW
) -> WindowAggregate:
    """All window statistics in a single pass."""
    active = 0
    ghost = 0
    primary = 0.0
    secondary = 0.0
    for _, rec in iter_window(log, today, window):
        primary += rec.primary_hours
        secondary += rec.secondary_hours
        if rec.is_active:
            active += 1
            if rec.is_ghost:
                ghost += 1
    return WindowAggregate(
        active_days=active,
        ghost_days=ghost,
        total_primary_hours=primary,
        total_secondary_hours=secondary,
        window_size=window,
    )
