"""Usage data source: cc-agent-load.

Tries each candidate command in turn and takes the first one that prints a
JSON object with a ``byDate`` mapping. Extra candidates can be listed under
``sources`` in config.yaml, either as a command string or as a mapping:

    sources:
      - "~/tools/cc-agent-load --json"
      - command: ["node", "~/src/cc-agent-load/cli.mjs", "--json"]
        timeout: 60
"""

from __future__ import annotations

import json
import logging
import math
import os
import shlex
import subprocess
from pathlib import Path
from typing import Any

from ccscore.fileio import read_json
from ccscore.models import UsageLog

LOGGER = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30

DEFAULT_SOURCES: list[list[str]] = [
    ["~/bin/cc-agent-load", "--json"],
    ["node", "~/projects/cc-loop/cc-agent-load/cli.mjs", "--json"],
]

INSTALL_HINT = "Install: npm i -g cc-agent-load"


class DataUnavailableError(RuntimeError):
    """No usage data could be obtained; scoring must not proceed."""


def _parse_timeout(value: Any) -> float:
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        timeout = 0.0
    if not math.isfinite(timeout) or timeout <= 0:
        LOGGER.warning("Invalid source timeout %r, using %ss", value, DEFAULT_TIMEOUT)
        return DEFAULT_TIMEOUT
    return timeout


def _parse_source(entry: Any) -> tuple[list[str], float] | None:
    timeout: Any = DEFAULT_TIMEOUT
    command = entry
    if isinstance(entry, dict):
        command = entry.get("command", "")
        timeout = entry.get("timeout", DEFAULT_TIMEOUT)
    if isinstance(command, str):
        try:
            argv = shlex.split(command)
        except ValueError:
            return None
    elif isinstance(command, list):
        argv = [str(a) for a in command]
    else:
        return None
    if not argv:
        return None
    return [os.path.expanduser(a) for a in argv], _parse_timeout(timeout)


def candidate_commands(config: dict[str, Any] | None = None) -> list[tuple[list[str], float]]:
    """Configured sources first, then the built-in locations."""
    sources = (config or {}).get("sources") or []
    if isinstance(sources, (str, dict)):
        LOGGER.warning("`sources` should be a list; treating it as a single entry")
        sources = [sources]
    elif not isinstance(sources, list):
        LOGGER.warning("Ignoring invalid `sources` setting: %r", sources)
        sources = []
    entries = sources + DEFAULT_SOURCES
    candidates = []
    for entry in entries:
        parsed = _parse_source(entry)
        if parsed is None:
            LOGGER.warning("Skipping invalid source entry: %r", entry)
            continue
        candidates.append(parsed)
    return candidates


def _extract_by_date(data: Any) -> dict[str, Any] | None:
    if isinstance(data, dict) and isinstance(data.get("byDate"), dict):
        return data["byDate"]
    return None


def run_source(argv: list[str], timeout: float = DEFAULT_TIMEOUT) -> UsageLog:
    """Run one candidate command. Raises DataUnavailableError on any failure."""
    try:
        proc = subprocess.run(
            argv,
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired as e:
        raise DataUnavailableError(f"{argv[0]} timed out after {timeout}s") from e
    except OSError as e:
        raise DataUnavailableError(f"{argv[0]}: {e}") from e

    if proc.returncode != 0:
        raise DataUnavailableError(
            f"{argv[0]} exited with {proc.returncode}: {proc.stderr.strip()[:200]}"
        )
    try:
        data = json.loads(proc.stdout)
    except json.JSONDecodeError as e:
        raise DataUnavailableError(f"{argv[0]} printed invalid JSON: {e}") from e

    by_date = _extract_by_date(data)
    if by_date is None:
        raise DataUnavailableError(f"{argv[0]} output has no byDate mapping")
    return UsageLog.from_dict(by_date)


def load_usage_log(config: dict[str, Any] | None = None) -> UsageLog:
    """Fetch the usage log from the first working source."""
    errors = []
    for argv, timeout in candidate_commands(config):
        LOGGER.debug("Trying data source: %s", " ".join(argv))
        try:
            log = run_source(argv, timeout)
        except DataUnavailableError as e:
            LOGGER.debug("Data source failed: %s", e)
            errors.append(str(e))
            continue
        LOGGER.debug("Loaded %d day records from %s", len(log), argv[0])
        return log
    raise DataUnavailableError("; ".join(errors) or "no data sources configured")


def load_usage_file(path: Path) -> UsageLog:
    """Load a saved ``cc-agent-load --json`` dump, or a bare date mapping."""
    if not path.exists():
        raise DataUnavailableError(f"{path}: no such file")
    try:
        data = read_json(path)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise DataUnavailableError(f"{path}: {e}") from e

    by_date = _extract_by_date(data)
    if by_date is None:
        if not isinstance(data, dict) or not data:
            raise DataUnavailableError(f"{path}: no byDate mapping")
        by_date = data
    return UsageLog.from_dict(by_date)
