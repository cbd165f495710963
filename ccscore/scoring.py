"""Component scorers and the full scoring pipeline.

Points per component:
    Consistency  30  share of window days with any activity
    Autonomy     25  AI hours / user hours
    Ghost Days   20  share of active days where only AI worked
    Volume       15  total hours, full marks at 100h
    Streak       10  current streak, full marks at 30 days
"""

from __future__ import annotations

import math
from datetime import date

from ccscore.grade import grade_for
from ccscore.models import (
    AutonomyScore,
    ConsistencyScore,
    GhostDaysScore,
    ScoreReport,
    StreakScore,
    UsageLog,
    VolumeScore,
)
from ccscore.streak import compute_streak
from ccscore.window import DEFAULT_WINDOW, aggregate_window

CONSISTENCY_MAX = 30
AUTONOMY_MAX = 25
GHOST_MAX = 20
VOLUME_MAX = 15
STREAK_MAX = 10

# Ratio used when there is AI time but no user time at all.
SOLO_RATIO = 2.0


def round_half_up(x: float) -> int:
    """Round .5 away from zero for non-negative x (Python's round() is banker's)."""
    return int(math.floor(x + 0.5))


def _clamp(points: int, max_points: int) -> int:
    return max(0, min(max_points, points))


def score_consistency(active_days: int, window: int = DEFAULT_WINDOW) -> ConsistencyScore:
    raw = active_days / window if window > 0 else 0.0
    return ConsistencyScore(
        points=_clamp(round_half_up(raw * CONSISTENCY_MAX), CONSISTENCY_MAX),
        active_days=active_days,
        window=window,
        raw=raw,
    )


def score_autonomy(main_hours: float, sub_hours: float) -> AutonomyScore:
    """Score the AI/user hour ratio.

    The scale is linear at 12.5 points per 1.0x, capped at 2.0x.
    """
    if main_hours > 0:
        ratio = sub_hours / main_hours
    elif sub_hours > 0:
        ratio = SOLO_RATIO
    else:
        ratio = 0.0
    return AutonomyScore(
        points=_clamp(round_half_up(ratio * 12.5), AUTONOMY_MAX),
        ratio=ratio,
        main_hours=main_hours,
        sub_hours=sub_hours,
    )


def score_ghost_days(ghost_days: int, active_days: int) -> GhostDaysScore:
    pct = ghost_days / active_days if active_days > 0 else 0.0
    return GhostDaysScore(
        points=_clamp(round_half_up(pct * 25), GHOST_MAX),
        ghost_days=ghost_days,
        active_days=active_days,
        pct=pct,
    )


def score_volume(total_hours: float) -> VolumeScore:
    return VolumeScore(
        points=_clamp(round_half_up(total_hours / 100 * VOLUME_MAX), VOLUME_MAX),
        total_hours=total_hours,
    )


def score_streak(streak: int) -> StreakScore:
    return StreakScore(
        points=_clamp(round_half_up(streak / 30 * STREAK_MAX), STREAK_MAX),
        streak=streak,
    )


def compute_score(log: UsageLog, today: date, window: int = DEFAULT_WINDOW) -> ScoreReport:
    """Run aggregation, streak detection, scoring and grading for one anchor date."""
    agg = aggregate_window(log, today, window)

    consistency = score_consistency(agg.active_days, agg.window_size)
    autonomy = score_autonomy(agg.total_primary_hours, agg.total_secondary_hours)
    ghost = score_ghost_days(agg.ghost_days, agg.active_days)
    volume = score_volume(agg.total_hours)
    streak = score_streak(compute_streak(log, today))

    total = sum(c.points for c in (consistency, autonomy, ghost, volume, streak))
    return ScoreReport(
        total=total,
        grade=grade_for(total),
        consistency=consistency,
        autonomy=autonomy,
        ghost=ghost,
        volume=volume,
        streak=streak,
        today=today.isoformat(),
    )
