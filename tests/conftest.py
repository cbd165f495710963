"""Shared test fixtures for ccscore tests."""

from __future__ import annotations

import json
import os
from datetime import date, timedelta
from pathlib import Path

import pytest
import yaml

from ccscore.models import UsageLog

TODAY = date(2026, 2, 11)


def by_date(days: dict[int, object], today: date = TODAY) -> dict[str, object]:
    """Raw cc-agent-load byDate mapping keyed by offset back from *today*."""
    return {(today - timedelta(days=n)).isoformat(): v for n, v in days.items()}


@pytest.fixture
def make_log():
    """Build a UsageLog from {days_back: value}."""

    def _make(days: dict[int, object], today: date = TODAY) -> UsageLog:
        return UsageLog.from_dict(by_date(days, today))

    return _make


@pytest.fixture
def ccscore_home(tmp_path: Path) -> Path:
    """Create a temporary config directory with a config.yaml."""
    root = tmp_path / "ccscore"
    root.mkdir(parents=True)

    config = {"timezone": "UTC", "sources": []}
    (root / "config.yaml").write_text(
        yaml.dump(config, default_flow_style=False), encoding="utf-8"
    )

    os.environ["CCSCORE_HOME"] = str(root)
    yield root
    if "CCSCORE_HOME" in os.environ:
        del os.environ["CCSCORE_HOME"]


@pytest.fixture
def usage_file(tmp_path: Path) -> Path:
    """A saved cc-agent-load --json dump: 30 active days ending at TODAY."""
    data = {
        "generatedAt": "2026-02-11T21:30:00",
        "byDate": by_date({n: {"main": 1, "sub": 2} for n in range(30)}),
    }
    path = tmp_path / "usage.json"
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path
