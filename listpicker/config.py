"""Persistent JSON config helpers.

Stores the default list directory, UI language, and post-save pause.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

from .messages import available_languages

APP_NAME = "listpicker"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


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

    Filesystem errors are ignored; preferences are never worth aborting a run.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError:
        pass


def load_list_dir() -> Path | None:
    value = load_config().get("list_dir")
    if not isinstance(value, str) or not value.strip():
        return None
    return Path(value).expanduser()


def load_language() -> str | None:
    value = load_config().get("language")
    if not isinstance(value, str):
        return None
    language = value.strip().lower()
    return language if language in available_languages() else None


def load_save_pause_seconds() -> float | None:
    """Return the configured post-save pause; booleans and negatives are rejected."""
    value = load_config().get("save_pause_seconds")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if value < 0:
        return None
    return float(value)


def save_settings(list_dir: Path, language: str, save_pause_seconds: float) -> None:
    config = load_config()
    config["list_dir"] = str(list_dir)
    config["language"] = language
    config["save_pause_seconds"] = save_pause_seconds
    save_config(config)
