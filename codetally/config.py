"""Persistent JSON config helpers.

Stores default match/ignore patterns, view mode, capture depth, and output
format. All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

from .scan.types import DEFAULT_CAPTURE_DEPTH, VIEW_MODE_FILES, VIEW_MODES

APP_NAME = "codetally"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

OUTPUT_FORMAT_TABLE = "table"
OUTPUT_FORMAT_JSON = "json"
OUTPUT_FORMATS = (OUTPUT_FORMAT_TABLE, OUTPUT_FORMAT_JSON)


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Any filesystem/serialization error is ignored so a read-only config
    directory never breaks a scan.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except Exception:
        pass


def _load_pattern_string(key: str) -> str:
    """Return a whitespace-joined pattern string for ``key``.

    Accepts either a string or a list of strings; anything else yields ``""``.
    """
    value = load_config().get(key)
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return " ".join(item.strip() for item in value if item.strip())
    return ""


def load_match_patterns() -> str:
    """Load default match (include) patterns."""
    return _load_pattern_string("match")


def load_ignore_patterns() -> str:
    """Load default ignore (exclude) patterns."""
    return _load_pattern_string("ignore")


def save_patterns(match: str, ignore: str) -> None:
    """Persist default match/ignore pattern strings."""
    config = load_config()
    config["match"] = match.strip()
    config["ignore"] = ignore.strip()
    save_config(config)


def load_view_mode() -> str:
    """Return persisted view mode, falling back to file summary."""
    value = load_config().get("view_mode")
    return value if isinstance(value, str) and value in VIEW_MODES else VIEW_MODE_FILES


def load_capture_depth() -> int:
    """Return persisted capture depth.

    Booleans, non-integers, and values below 1 fall back to the default.
    """
    value = load_config().get("capture_depth")
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        return DEFAULT_CAPTURE_DEPTH
    return value


def load_output_format() -> str:
    """Return persisted output format name."""
    value = load_config().get("output")
    return value if isinstance(value, str) and value in OUTPUT_FORMATS else OUTPUT_FORMAT_TABLE


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "OUTPUT_FORMAT_TABLE",
    "OUTPUT_FORMAT_JSON",
    "OUTPUT_FORMATS",
    "load_config",
    "save_config",
    "load_match_patterns",
    "load_ignore_patterns",
    "save_patterns",
    "load_view_mode",
    "load_capture_depth",
    "load_output_format",
]
