"""cc-score: your AI productivity score (0–100).

A single number that captures how effectively you're using Claude Code.
Combines streak, autonomy ratio, ghost days and active days into one score.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from datetime import date
from pathlib import Path

from ccscore.config import load_config, today_date
from ccscore.dates import parse_day
from ccscore.report import format_json, format_report, format_share_block, format_yaml
from ccscore.scoring import compute_score
from ccscore.source import INSTALL_HINT, DataUnavailableError, load_usage_file, load_usage_log

LOGGER = logging.getLogger(__name__)

EPILOG = """
Score breakdown:
  Consistency  (30pts) — how regularly you use Claude Code
  Autonomy     (25pts) — how much AI runs independently
  Ghost Days   (20pts) — how often AI works without you
  Volume       (15pts) — total hours over last 30 days
  Streak       (10pts) — days without a gap

Grades:
  90–100  S  Cyborg. You and AI are seamlessly fused.
  75–89   A  Power user. Serious AI collaboration.
  60–74   B  Growing. Your AI habits are taking shape.
  45–59   C  Early stage. Room to develop the relationship.
  30–44   D  Just getting started.
  0–29    F  Wake up your AI.
"""


def _parse_today(value: str) -> date:
    try:
        return parse_day(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid date {value!r} (expected YYYY-MM-DD)") from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cc-score",
        description="Your AI Productivity Score (0–100)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=EPILOG,
    )
    output = parser.add_mutually_exclusive_group()
    output.add_argument("--json", action="store_true", help="raw JSON output")
    output.add_argument("--yaml", action="store_true", help="raw YAML output")
    output.add_argument("--tui", action="store_true", help="interactive dashboard (with --share: share text shown)")
    parser.add_argument("--share", action="store_true", help="print shareable tweet text")
    parser.add_argument(
        "--input",
        type=Path,
        help="read a saved `cc-agent-load --json` dump instead of running it",
    )
    parser.add_argument(
        "--today",
        type=_parse_today,
        help="score as of this date (YYYY-MM-DD, default: today)",
    )
    parser.add_argument("--no-color", action="store_true", help="disable ANSI colors")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = load_config()
    try:
        if args.input:
            log = load_usage_file(args.input)
        else:
            log = load_usage_log(config)
    except DataUnavailableError as e:
        LOGGER.debug("Data unavailable: %s", e)
        print("Error: Could not load cc-agent-load data.", file=sys.stderr)
        print(INSTALL_HINT, file=sys.stderr)
        return 1

    today = args.today or today_date(config)
    report = compute_score(log, today)

    if args.json:
        print(format_json(report))
        return 0
    if args.yaml:
        print(format_yaml(report), end="")
        return 0
    if args.tui:
        from ccscore.tui import ScoreApp

        ScoreApp(report, show_share=args.share).run()
        return 0

    color = not args.no_color and "NO_COLOR" not in os.environ and sys.stdout.isatty()
    print(format_report(report, color=color))
    if args.share:
        print(format_share_block(report, color=color))
    print("")
    return 0


if __name__ == "__main__":
    sys.exit(main())
