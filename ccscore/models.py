"""Typed dataclasses for the ccscore data model.

Input records are normalized once in ``DayRecord.from_value``; everything
downstream reads the two-field form. Report objects serialize to camelCase
JSON via ``to_dict``.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date
from typing import Any

LOGGER = logging.getLogger(__name__)


def _hours(value: Any, where: str) -> float:
    """Coerce one hours field; anything that isn't a finite non-negative number is 0."""
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        LOGGER.warning("Ignoring non-numeric hours %r (%s)", value, where)
        return 0.0
    try:
        hours = float(value)
    except OverflowError:
        hours = math.inf
    if not math.isfinite(hours) or hours < 0:
        LOGGER.warning("Ignoring invalid hours %.20r (%s)", value, where)
        return 0.0
    return hours


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, (int, float)) and not isinstance(value, bool) and value == 0


# ── Input ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class DayRecord:
    """Hours attributed to one calendar day.

    primary_hours: time the user drove directly ("main" in cc-agent-load).
    secondary_hours: time AI agents ran on their own ("sub").
    """

    primary_hours: float = 0.0
    secondary_hours: float = 0.0

    @classmethod
    def from_value(cls, value: Any, day: str = "?") -> DayRecord:
        """Build a record from a structured mapping or a legacy scalar."""
        if isinstance(value, Mapping):
            primary = value.get("main", value.get("primaryHours"))
            secondary = value.get("sub", value.get("secondaryHours"))
            return cls(
                primary_hours=_hours(primary, f"{day} primary"),
                secondary_hours=_hours(secondary, f"{day} secondary"),
            )
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            # Legacy logs stored a single number: all of it is agent time.
            return cls(secondary_hours=_hours(value, day))
        LOGGER.warning("Ignoring malformed record for %s: %r", day, value)
        return cls()

    @property
    def total_hours(self) -> float:
        return self.primary_hours + self.secondary_hours

    @property
    def is_active(self) -> bool:
        return self.total_hours > 0

    @property
    def is_ghost(self) -> bool:
        """AI worked while the user logged no hours at all."""
        return self.primary_hours == 0 and self.secondary_hours > 0


@dataclass(frozen=True)
class UsageLog:
    """Date string -> DayRecord. Gaps mean zero activity.

    null and bare 0 values mean "nothing logged yet" and are dropped, so a
    blank today still lets the streak start from yesterday.
    """

    by_date: Mapping[str, DayRecord] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, d: Any) -> UsageLog:
        if not d or not isinstance(d, Mapping):
            return cls()
        return cls(
            by_date={
                str(k): DayRecord.from_value(v, str(k))
                for k, v in d.items()
                if not _is_blank(v)
            }
        )

    def get(self, day: date | str) -> DayRecord | None:
        key = day.isoformat() if isinstance(day, date) else day
        return self.by_date.get(key)

    def __contains__(self, day: object) -> bool:
        if isinstance(day, (date, str)):
            return self.get(day) is not None
        return False

    def __len__(self) -> int:
        return len(self.by_date)


# ── Aggregates ────────────────────────────────────────────────


@dataclass(frozen=True)
class WindowAggregate:
    active_days: int = 0
    ghost_days: int = 0
    total_primary_hours: float = 0.0
    total_secondary_hours: float = 0.0
    window_size: int = 30

    @property
    def total_hours(self) -> float:
        return self.total_primary_hours + self.total_secondary_hours


# ── Score components ──────────────────────────────────────────


@dataclass(frozen=True)
class ConsistencyScore:
    points: int
    active_days: int
    window: int
    raw: float
    max_points: int = 30

    def to_dict(self) -> dict[str, Any]:
        return {
            "raw": self.raw,
            "points": self.points,
            "max": self.max_points,
            "activeDays": self.active_days,
            "window": self.window,
        }


@dataclass(frozen=True)
class AutonomyScore:
    points: int
    ratio: float
    main_hours: float
    sub_hours: float
    max_points: int = 25

    def to_dict(self) -> dict[str, Any]:
        return {
            "ratio": self.ratio,
            "points": self.points,
            "max": self.max_points,
            "mainHours": self.main_hours,
            "subHours": self.sub_hours,
        }


@dataclass(frozen=True)
class GhostDaysScore:
    points: int
    ghost_days: int
    active_days: int
    pct: float
    max_points: int = 20

    def to_dict(self) -> dict[str, Any]:
        return {
            "ghostDays": self.ghost_days,
            "activeDays": self.active_days,
            "pct": self.pct,
            "points": self.points,
            "max": self.max_points,
        }


@dataclass(frozen=True)
class VolumeScore:
    points: int
    total_hours: float
    max_points: int = 15

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalHours": self.total_hours,
            "points": self.points,
            "max": self.max_points,
        }


@dataclass(frozen=True)
class StreakScore:
    points: int
    streak: int
    max_points: int = 10

    def to_dict(self) -> dict[str, Any]:
        return {"streak": self.streak, "points": self.points, "max": self.max_points}


# ── Report ────────────────────────────────────────────────────


@dataclass(frozen=True)
class Grade:
    grade: str
    label: str
    description: str


@dataclass(frozen=True)
class ScoreReport:
    total: int
    grade: Grade
    consistency: ConsistencyScore
    autonomy: AutonomyScore
    ghost: GhostDaysScore
    volume: VolumeScore
    streak: StreakScore
    today: str

    def components(self) -> list[Any]:
        """The five components in display order."""
        return [self.consistency, self.autonomy, self.ghost, self.volume, self.streak]

    def to_dict(self) -> dict[str, Any]:
        return {
            "score": self.total,
            "grade": self.grade.grade,
            "label": self.grade.label,
            "description": self.grade.description,
            "breakdown": {
                "consistency": self.consistency.to_dict(),
                "autonomy": self.autonomy.to_dict(),
                "ghost": self.ghost.to_dict(),
                "volume": self.volume.to_dict(),
                "streak": self.streak.to_dict(),
            },
            "today": self.today,
        }
