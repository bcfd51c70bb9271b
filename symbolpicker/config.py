"""Persistent JSON config helpers.

Stores the priority list, the resource directory, and the last selection.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "symbolpicker"
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

    Filesystem errors are ignored so an unwritable config never breaks a
    selection.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError:
        pass


def _load_string(key: str) -> str | None:
    value = load_config().get(key)
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def _save_string(key: str, value: str) -> None:
    stripped = str(value).strip()
    if not stripped:
        return
    config = load_config()
    config[key] = stripped
    save_config(config)


def load_top_symbols() -> list[str] | None:
    """Load the configured priority list.

    Non-string and blank entries are dropped; a missing or non-list value
    returns ``None`` so callers fall back to the built-in defaults.
    """
    value = load_config().get("top_symbols")
    if not isinstance(value, list):
        return None
    return [item.strip() for item in value if isinstance(item, str) and item.strip()]


def save_top_symbols(names: list[str]) -> None:
    config = load_config()
    config["top_symbols"] = [name.strip() for name in names if name.strip()]
    save_config(config)


def load_resource_dir() -> Path | None:
    """Load the configured resource directory, expanding ``~``."""
    value = _load_string("resource_dir")
    return Path(value).expanduser() if value is not None else None


def save_resource_dir(path: Path) -> None:
    _save_string("resource_dir", str(path))


def load_last_selection() -> str | None:
    return _load_string("last_selection")


def save_last_selection(name: str) -> None:
    """Persist the most recently selected symbol name."""
    _save_string("last_selection", name)
