"""JSON-based settings persistence for the Bongabdo calendar."""

import json
import logging
import os

from bengali_calendar import DISPLAY_FORMATS
from month_starts import LOCATIONS, WEST_BENGAL

logger = logging.getLogger(__name__)

_DEFAULT_PATH = os.path.join(os.path.expanduser("~"), ".bongabdo-settings.json")

_DEFAULTS = {
    "display_format": "full",
    "use_bengali_numerals": True,
    "show_festivals": True,
    "show_gregorian": False,
    "show_month_calendar": True,
    "location": WEST_BENGAL,
    "month_starts_path": None,
}

_BOOL_KEYS = ("use_bengali_numerals", "show_festivals", "show_gregorian", "show_month_calendar")


def settings_path() -> str:
    """Return the settings file path (``BONGABDO_SETTINGS`` overrides the default)."""
    return os.environ.get("BONGABDO_SETTINGS") or _DEFAULT_PATH


def default_settings() -> dict:
    return dict(_DEFAULTS)


def load_settings() -> dict:
    """Load settings from disk, returning defaults for missing or invalid keys."""
    settings = default_settings()
    path = settings_path()
    try:
        with open(path, "r", encoding="utf-8") as f:
            stored = json.load(f)
    except FileNotFoundError:
        return settings
    except (json.JSONDecodeError, UnicodeDecodeError, OSError) as exc:
        logger.warning("Ignoring unreadable settings file %s: %s", path, exc)
        return settings

    if not isinstance(stored, dict):
        logger.warning("Ignoring settings file %s: not a JSON object", path)
        return settings

    for key in _BOOL_KEYS:
        if key in stored and isinstance(stored[key], bool):
            settings[key] = stored[key]
    if stored.get("display_format") in DISPLAY_FORMATS:
        settings["display_format"] = stored["display_format"]
    if stored.get("location") in LOCATIONS:
        settings["location"] = stored["location"]
    if "month_starts_path" in stored and isinstance(stored["month_starts_path"], (str, type(None))):
        settings["month_starts_path"] = stored["month_starts_path"]
    return settings


def save_settings(settings: dict) -> None:
    """Persist settings to disk."""
    with open(settings_path(), "w", encoding="utf-8") as f:
        json.dump(settings, f, indent=2, ensure_ascii=False)
