"""Tests for ccscore/cli.py."""

import json

import pytest

from ccscore import cli
from ccscore.source import DataUnavailableError


def test_cli_json(ccscore_home, usage_file, capsys):
    code = cli.main(["--input", str(usage_file), "--today", "2026-02-11", "--json"])
    assert code == 0
    data = json.loads(capsys.readouterr().out)
    assert data["score"] == 79
    assert data["grade"] == "A"
    assert data["breakdown"]["streak"]["streak"] == 30


def test_cli_yaml(ccscore_home, usage_file, capsys):
    import yaml

    code = cli.main(["--input", str(usage_file), "--today", "2026-02-11", "--yaml"])
    assert code == 0
    assert yaml.safe_load(capsys.readouterr().out)["label"] == "Power User"


def test_cli_text_and_share(ccscore_home, usage_file, capsys):
    code = cli.main(["--input", str(usage_file), "--today", "2026-02-11", "--share"])
    assert code == 0
    out = capsys.readouterr().out
    assert "79 / 100" in out
    assert "My Claude Code AI Score: 79/100 (A — Power User)" in out
    assert "\x1b[" not in out  # stdout is not a tty under capsys


def test_cli_scores_against_today_default(ccscore_home, usage_file, capsys, monkeypatch):
    from datetime import date

    monkeypatch.setattr(cli, "today_date", lambda config=None: date(2026, 3, 30))
    assert cli.main(["--input", str(usage_file), "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["today"] == "2026-03-30"
    assert data["score"] == 0


def test_cli_missing_input(ccscore_home, tmp_path, capsys):
    code = cli.main(["--input", str(tmp_path / "nope.json")])
    assert code == 1
    captured = capsys.readouterr()
    assert "Could not load cc-agent-load data" in captured.err
    assert "npm i -g cc-agent-load" in captured.err
    assert captured.out == ""


def test_cli_source_unavailable(ccscore_home, capsys, monkeypatch):
    def fail(config=None):
        raise DataUnavailableError("nothing found")

    monkeypatch.setattr(cli, "load_usage_log", fail)
    assert cli.main(["--json"]) == 1
    assert "Could not load" in capsys.readouterr().err


def test_cli_invalid_today(ccscore_home, usage_file):
    with pytest.raises(SystemExit) as exc:
        cli.main(["--input", str(usage_file), "--today", "yesterday"])
    assert exc.value.code == 2


def test_cli_help_lists_grades(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["--help"])
    assert exc.value.code == 0
    out = capsys.readouterr().out
    assert "90–100  S  Cyborg. You and AI are seamlessly fused." in out
    assert "Consistency  (30pts)" in out


def test_cli_broken_config_falls_back_to_defaults(ccscore_home, usage_file, capsys):
    (ccscore_home / "config.yaml").write_text("timezone: [unclosed\n", encoding="utf-8")
    code = cli.main(["--input", str(usage_file), "--today", "2026-02-11", "--json"])
    assert code == 0
    assert json.loads(capsys.readouterr().out)["score"] == 79


def test_cli_tui_forwards_share(ccscore_home, usage_file, monkeypatch):
    from ccscore import tui

    shown = []
    monkeypatch.setattr(tui.ScoreApp, "run", lambda self: shown.append(self.show_share))
    assert cli.main(["--input", str(usage_file), "--today", "2026-02-11", "--tui", "--share"]) == 0
    assert cli.main(["--input", str(usage_file), "--today", "2026-02-11", "--tui"]) == 0
    assert shown == [True, False]
