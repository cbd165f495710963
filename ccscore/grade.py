"""Grade tiers for the total score."""

from __future__ import annotations

from ccscore.models import Grade

# (lower bound, tier), checked top-down.
GRADES: list[tuple[int, Grade]] = [
    (90, Grade("S", "Cyborg", "You and AI are seamlessly fused.")),
    (75, Grade("A", "Power User", "Serious AI collaboration.")),
    (60, Grade("B", "Growing", "Your AI habits are taking shape.")),
    (45, Grade("C", "Early Stage", "Room to develop the relationship.")),
    (30, Grade("D", "Getting Started", "Keep going.")),
    (0, Grade("F", "Dormant", "Wake up your AI.")),
]

_COLORS = {
    "S": "\x1b[95m",  # purple
    "A": "\x1b[92m",  # green
    "B": "\x1b[96m",  # cyan
    "C": "\x1b[93m",  # yellow
    "D": "\x1b[33m",  # orange
    "F": "\x1b[91m",  # red
}


def grade_for(total: int) -> Grade:
    """Map a 0-100 total to its tier. Lower bounds are inclusive."""
    for lower, grade in GRADES:
        if total >= lower:
            return grade
    return GRADES[-1][1]


def grade_color(total: int) -> str:
    return _COLORS[grade_for(total).grade]

