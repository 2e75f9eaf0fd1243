"""Persistent JSON config helpers.

Stores the notes-file location, loop tick, and UI theme preference.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir, user_data_dir, user_log_dir

from ..notes import NOTES_FILENAME

APP_NAME = "notepane"
CONFIG_FILENAME = "config.json"
LOG_FILENAME = "notepane.log"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
DEFAULT_NOTES_PATH = Path(user_data_dir(APP_NAME, appauthor=False)) / NOTES_FILENAME
DEFAULT_LOG_PATH = Path(user_log_dir(APP_NAME, appauthor=False)) / LOG_FILENAME
DEFAULT_TICK_MS = 250


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem errors are ignored; an unwritable config never stops the app.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError:
        pass


def load_notes_path() -> Path:
    """Return the configured notes file, or the per-user data default."""
    value = load_config().get("notes_file")
    if not isinstance(value, str) or not value.strip():
        return DEFAULT_NOTES_PATH
    return Path(value.strip()).expanduser()


def load_tick_ms() -> int:
    """Return the configured loop tick in milliseconds.

    Booleans, non-integers, and non-positive values fall back to the default.
    """
    value = load_config().get("tick_ms")
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        return DEFAULT_TICK_MS
    return value


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def save_theme_name(theme_name: str) -> None:
    """Persist selected UI theme name."""
    stripped = str(theme_name).strip()
    if not stripped:
        return
    config = load_config()
    config["theme"] = stripped
    save_config(config)
