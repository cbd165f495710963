"""Current-streak detection."""

from __future__ import annotations

from datetime import date, timedelta

from ccscore.models import UsageLog


def compute_streak(log: UsageLog, today: date) -> int:
    """Count consecutive active days walking back from today.

    Today's record is often not written yet, so a missing record for today
    moves the anchor to yesterday. A record that exists but sums to zero
    ends the streak just like a missing day.
    """
    day = today
    if log.get(day) is None:
        day -= timedelta(days=1)

    streak = 0
    while True:
        rec = log.get(day)
        if rec is None or not rec.is_active:
            break
        streak += 1
        day -= timedelta(days=1)
    return streak
