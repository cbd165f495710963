"""Tests for ccscore/report.py and the Textual dashboard."""

import asyncio
import json

import pytest
import yaml

from ccscore.report import (
    breakdown_rows,
    format_json,
    format_report,
    format_share,
    format_share_block,
    format_yaml,
    mini_bar,
)
from ccscore.scoring import compute_score

from conftest import TODAY


@pytest.fixture
def report(make_log):
    days = {n: {"main": 1, "sub": 2} for n in range(30)}
    days.update({n: {"main": 0, "sub": 3} for n in range(0, 30, 5)})
    return compute_score(make_log(days), TODAY)


def test_breakdown_rows(report):
    rows = breakdown_rows(report)
    assert [r[0] for r in rows] == ["Consistency", "Autonomy", "Ghost Days", "Volume", "Streak"]
    assert [r[2] for r in rows] == [30, 25, 20, 15, 10]
    assert rows[0][3] == "30/30 days active"
    assert rows[2][3] == "6 days AI ran solo (20%)"
    assert rows[4][3] == "30 days current streak"


def test_mini_bar():
    assert mini_bar(15, 30, color=False) == "█████░░░░░"
    assert mini_bar(0, 10, color=False) == "░" * 10
    assert mini_bar(25, 25, color=False) == "█" * 10


def test_format_report_plain(report):
    text = format_report(report, color=False)
    assert "\x1b[" not in text
    assert f"{report.total} / 100" in text
    assert report.grade.label in text
    assert "Consistency" in text and "30/30" in text


def test_format_report_color(report):
    assert "\x1b[" in format_report(report, color=True)


def test_format_share(report):
    lines = format_share(report).splitlines()
    assert lines[0] == f"My Claude Code AI Score: {report.total}/100 ({report.grade.grade} — {report.grade.label})"
    assert lines[1].startswith("→ 30 active days, ")
    assert lines[1].endswith("-day streak")
    assert lines[2] == "npx cc-score #ClaudeCode #AIProductivity"


def test_format_share_block(report):
    block = format_share_block(report, color=False)
    assert "Share:" in block
    assert "  npx cc-score" in block


def test_format_json(report):
    data = json.loads(format_json(report))
    assert data["score"] == report.total
    assert data["grade"] == report.grade.grade
    assert set(data["breakdown"]) == {"consistency", "autonomy", "ghost", "volume", "streak"}
    assert data["breakdown"]["consistency"]["activeDays"] == 30
    assert data["today"] == "2026-02-11"


def test_format_yaml(report):
    assert yaml.safe_load(format_yaml(report)) == report.to_dict()


def test_score_app(report):
    from textual.widgets import DataTable, Static

    from ccscore.tui import ScoreApp

    async def run() -> None:
        app = ScoreApp(report)
        async with app.run_test() as pilot:
            table = app.query_one("#breakdown-table", DataTable)
            assert table.row_count == 5
            share = app.query_one("#share-text", Static)
            assert share.display is False
            await pilot.press("s")
            assert share.display is True

    asyncio.run(run())


def test_score_app_opens_with_share(report):
    from textual.widgets import Static

    from ccscore.tui import ScoreApp

    async def run() -> None:
        app = ScoreApp(report, show_share=True)
        async with app.run_test() as pilot:
            share = app.query_one("#share-text", Static)
            assert share.display is True
            await pilot.press("s")
            assert share.display is False

    asyncio.run(run())
