"""User preferences for the pygame client, kept as JSON beside the package."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

_SETTINGS_PATH = Path(__file__).resolve().parent / "user_settings.json"

DEFAULT_VOLUMES: Dict[str, float] = {"master": 1.0, "effects": 1.0, "ui": 0.8}


def load_user_settings() -> Dict[str, Any]:
    """Return the stored preferences, or an empty dict when none are readable."""
    try:
        data = json.loads(_SETTINGS_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_user_settings(settings: Dict[str, Any]) -> None:
    """Write preferences; an unwritable location leaves the previous file untouched."""
    payload = json.dumps(settings, indent=2, sort_keys=True)
    try:
        _SETTINGS_PATH.parent.mkdir(parents=True, exist_ok=True)
        _SETTINGS_PATH.write_text(payload, encoding="utf-8")
    except OSError:
        return


def volume_settings(settings: Dict[str, Any]) -> Dict[str, float]:
    stored = settings.get("volume")
    if not isinstance(stored, dict):
        return dict(DEFAULT_VOLUMES)
    volumes = {}
    for key, default in DEFAULT_VOLUMES.items():
        value = stored.get(key, default)
        # bool is an int subclass but never a meaningful volume
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            value = default
        volumes[key] = max(0.0, min(1.0, float(value)))
    return volumes


__all__ = ["DEFAULT_VOLUMES", "load_user_settings", "save_user_settings", "volume_settings"]
