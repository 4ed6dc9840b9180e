"""JSON-based settings persistence for the choir calendar."""

import copy
import json
import os

from choir_calendar.annotation_resolver import DisplayCaps
from choir_calendar.holiday_sources import ALL_KEYS

SETTINGS_PATH = os.path.join(os.path.expanduser("~"), ".choir-calendar-settings.json")

_DEFAULTS = {
    "locale": "ko",
    "display_caps": {"events": 2, "songs": 3, "birthdays": 2},
    "show_event_overflow": False,
    "builtin_holidays": True,
    "holidays": list(ALL_KEYS),
    "data_files": {"events": None, "holidays": None, "songs": None, "members": None},
    "log_level": "INFO",
}


def default_settings() -> dict:
    return copy.deepcopy(_DEFAULTS)


def load_settings(path: str | None = None) -> dict:
    """Load settings from disk, returning defaults for missing keys."""
    settings = default_settings()
    try:
        with open(path or SETTINGS_PATH, "r", encoding="utf-8") as f:
            stored = json.load(f)
        if not isinstance(stored, dict):
            return settings
        if "locale" in stored and isinstance(stored["locale"], str):
            settings["locale"] = stored["locale"]
        for key in ("show_event_overflow", "builtin_holidays"):
            if key in stored and isinstance(stored[key], bool):
                settings[key] = stored[key]
        if "display_caps" in stored and isinstance(stored["display_caps"], dict):
            for cat, cap in stored["display_caps"].items():
                if (cat in settings["display_caps"] and isinstance(cap, int)
                        and not isinstance(cap, bool) and cap >= 0):
                    settings["display_caps"][cat] = cap
        if "holidays" in stored and isinstance(stored["holidays"], list):
            settings["holidays"] = [k for k in stored["holidays"] if isinstance(k, str)]
        if "data_files" in stored and isinstance(stored["data_files"], dict):
            for kind, file_path in stored["data_files"].items():
                if kind in settings["data_files"] and (file_path is None or isinstance(file_path, str)):
                    settings["data_files"][kind] = file_path
        if "log_level" in stored and isinstance(stored["log_level"], str):
            settings["log_level"] = stored["log_level"].upper()
    except (FileNotFoundError, json.JSONDecodeError, OSError):
        pass
    return settings


def save_settings(settings: dict, path: str | None = None) -> None:
    """Persist settings to disk."""
    with open(path or SETTINGS_PATH, "w", encoding="utf-8") as f:
        json.dump(settings, f, indent=2, ensure_ascii=False)


def display_caps_from(settings: dict) -> DisplayCaps:
    caps = settings.get("display_caps", {})
    return DisplayCaps(
        events=caps.get("events", 2),
        songs=caps.get("songs", 3),
        birthdays=caps.get("birthdays", 2),
        event_overflow=bool(settings.get("show_event_overflow", False)),
    )
