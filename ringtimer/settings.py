"""Application settings with JSON persistence.

Settings are stored at:
    ~/.config/ringtimer/settings.json

Usage::

    settings = load_settings()
    settings.sound_volume = 50
    save_settings(settings)
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, asdict, fields
from pathlib import Path

from .timer.engine import DEFAULT_SECONDS


logger = logging.getLogger(__name__)

APP_SUPPORT_DIR = Path.home() / ".config" / "ringtimer"
SETTINGS_PATH = APP_SUPPORT_DIR / "settings.json"


@dataclass
class Settings:
    """All user-configurable preferences."""

    # ── timer ─────────────────────────────────────────────────────────
    default_seconds: int = DEFAULT_SECONDS

    # ── audio ─────────────────────────────────────────────────────────
    sound_enabled: bool = True
    sound_volume: int = 70                 # 0-100

    # ── window ────────────────────────────────────────────────────────
    window_width: int = 420
    window_height: int = 560
    always_on_top: bool = False


_POSITIVE_FIELDS = frozenset({"default_seconds", "window_width", "window_height"})


def _valid(name: str, value: object, default: object) -> bool:
    if isinstance(default, bool):
        return isinstance(value, bool)
    # bool is an int subclass; never accept it for a number field
    if isinstance(value, bool) or not isinstance(value, type(default)):
        return False
    if name in _POSITIVE_FIELDS:
        return value > 0
    return True


def load_settings() -> Settings:
    """Load settings from disk, falling back to defaults.

    Each field with a wrong type (or a non-positive duration or window
    size) is replaced by its default on its own, with a warning.
    """
    if not SETTINGS_PATH.exists():
        return Settings()
    try:
        data = json.loads(SETTINGS_PATH.read_text(encoding="utf-8"))
        # Only use keys that exist in the dataclass
        valid_keys = {f.name for f in fields(Settings)}
        settings = Settings(**{k: v for k, v in data.items() if k in valid_keys})
    except (OSError, ValueError, TypeError, AttributeError) as e:
        logger.warning("Ignoring unreadable settings at %s: %s", SETTINGS_PATH, e)
        return Settings()

    for f in fields(Settings):
        value = getattr(settings, f.name)
        if not _valid(f.name, value, f.default):
            logger.warning("Invalid %s %r, using %r", f.name, value, f.default)
            setattr(settings, f.name, f.default)
    return settings


def save_settings(settings: Settings) -> None:
    """Write settings to disk as JSON."""
    SETTINGS_PATH.parent.mkdir(parents=True, exist_ok=True)
    SETTINGS_PATH.write_text(
        json.dumps(asdict(settings), indent=2) + "\n",
        encoding="utf-8",
    )
