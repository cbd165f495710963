"""Config directory, timezone and "today" helpers for ccscore."""

from __future__ import annotations

import logging
import os
from datetime import date, datetime
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import yaml

from ccscore.fileio import read_yaml

LOGGER = logging.getLogger(__name__)


def config_root() -> Path:
    """Get the config directory (holds config.yaml)."""
    return Path(
        os.environ.get("CCSCORE_HOME", str(Path.home() / ".config" / "ccscore"))
    ).expanduser().resolve()


def config_path(root: Path | None = None) -> Path:
    if root is None:
        root = config_root()
    return root / "config.yaml"


def load_config(root: Path | None = None) -> dict[str, Any]:
    """Load config.yaml; a missing or malformed file yields defaults."""
    path = config_path(root)
    try:
        return read_yaml(path)
    except yaml.YAMLError as e:
        LOGGER.warning("Ignoring unreadable config %s: %s", path, e)
        return {}


def get_user_timezone(config: dict[str, Any] | None = None) -> ZoneInfo | None:
    """Timezone from config, or None for the system local zone."""
    if config is None:
        config = load_config()
    name = config.get("timezone")
    if not name:
        return None
    try:
        return ZoneInfo(str(name))
    except (ZoneInfoNotFoundError, ValueError):
        LOGGER.warning("Unknown timezone %r in config, using local time", name)
        return None


def today_date(config: dict[str, Any] | None = None) -> date:
    """Today's calendar date in the user's timezone."""
    tz = get_user_timezone(config)
    if tz is None:
        return datetime.now().date()
    return datetime.now(tz).date()
