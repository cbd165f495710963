"""Text, share, JSON and YAML renderings of a ScoreReport."""

from __future__ import annotations

import json

import yaml

from ccscore.grade import grade_color
from ccscore.models import ScoreReport
from ccscore.scoring import round_half_up

RESET = "\x1b[0m"
BOLD = "\x1b[1m"
DIM = "\x1b[2m"
CYAN = "\x1b[96m"

RULE = "─" * 52


class _Palette:
    def __init__(self, color: bool) -> None:
        self.color = color

    def __call__(self, code: str) -> str:
        return code if self.color else ""


def breakdown_rows(report: ScoreReport) -> list[tuple[str, int, int, str]]:
    """(label, points, max, detail) per component, in display order."""
    c, a, g, v, s = report.components()
    return [
        ("Consistency", c.points, c.max_points, f"{c.active_days}/{c.window} days active"),
        (
            "Autonomy",
            a.points,
            a.max_points,
            f"{a.ratio:.2f}x ratio ({a.sub_hours:.1f}h AI / {a.main_hours:.1f}h you)",
        ),
        (
            "Ghost Days",
            g.points,
            g.max_points,
            f"{g.ghost_days} days AI ran solo ({round_half_up(g.pct * 100)}%)",
        ),
        ("Volume", v.points, v.max_points, f"{v.total_hours:.1f}h total"),
        ("Streak", s.points, s.max_points, f"{s.streak} days current streak"),
    ]


def mini_bar(points: int, max_points: int, width: int = 10, color: bool = True) -> str:
    p = _Palette(color)
    filled = round_half_up(points / max_points * width) if max_points else 0
    return f"{p(CYAN)}{'█' * filled}{p(DIM)}{'░' * (width - filled)}{p(RESET)}"


def format_report(report: ScoreReport, color: bool = True) -> str:
    p = _Palette(color)
    col = p(grade_color(report.total))
    g = report.grade
    lines = [
        "",
        f"  {p(BOLD)}cc-score{p(RESET)}",
        f"  {p(DIM)}Your AI Productivity Score — last {report.consistency.window} days{p(RESET)}",
        "",
        f"  {col}{p(BOLD)}{report.total} / 100{p(RESET)}   "
        f"{col}{p(BOLD)}{g.grade}{p(RESET)}  {p(DIM)}{g.label}{p(RESET)}",
        f"  {p(DIM)}{g.description}{p(RESET)}",
        "",
        f"  {RULE}",
        "",
    ]
    for label, pts, max_pts, detail in breakdown_rows(report):
        bar = mini_bar(pts, max_pts, 10, color)
        pts_str = f"{pts}/{max_pts}".rjust(5)
        lines.append(f"  {label.ljust(13)} {bar}  {pts_str}  {p(DIM)}{detail}{p(RESET)}")
    lines += ["", f"  {RULE}"]
    return "\n".join(lines)


def format_share(report: ScoreReport) -> str:
    g = report.grade
    return (
        f"My Claude Code AI Score: {report.total}/100 ({g.grade} — {g.label})\n"
        f"→ {report.consistency.active_days} active days, "
        f"{report.autonomy.ratio:.2f}x autonomy ratio, "
        f"{report.streak.streak}-day streak\n"
        "npx cc-score #ClaudeCode #AIProductivity"
    )


def format_share_block(report: ScoreReport, color: bool = True) -> str:
    """Share text indented for display under the report."""
    p = _Palette(color)
    body = format_share(report).replace("\n", "\n  ")
    return "\n".join(["", f"  {p(BOLD)}Share:{p(RESET)}", "", f"  {p(DIM)}{body}{p(RESET)}"])


def format_json(report: ScoreReport) -> str:
    return json.dumps(report.to_dict(), indent=2, ensure_ascii=False)


def format_yaml(report: ScoreReport) -> str:
    return yaml.safe_dump(report.to_dict(), default_flow_style=False, allow_unicode=True, sort_keys=False)
