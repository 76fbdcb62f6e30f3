"""Application settings loaded from JSON.

Settings are read from:
    ~/Library/Application Support/ArcTimer/settings.json

Usage::

    settings = load_settings()
    face = ClockFace(engine, radius=settings.radius)

Timer state is never written back; the file is user-edited.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, fields
from pathlib import Path

logger = logging.getLogger(__name__)

APP_SUPPORT_DIR = Path.home() / "Library" / "Application Support" / "ArcTimer"
SETTINGS_PATH = APP_SUPPORT_DIR / "settings.json"


@dataclass
class Settings:
    """All user-configurable preferences."""

    # ── face ──────────────────────────────────────────────────────────
    radius: int = 200                      # px; every dimension scales
    branding: str = "ArcTimer"
    pan_threshold: int = 24                # px a drag must travel

    # ── timer ─────────────────────────────────────────────────────────
    initial_time: int = 25 * 60            # seconds

    # ── diagnostics ───────────────────────────────────────────────────
    log_level: str = "INFO"


def _matches_default(value, default) -> bool:
    # bool is an int subclass but never a valid number here
    if isinstance(value, bool):
        return isinstance(default, bool)
    return isinstance(value, type(default))


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from disk, falling back to defaults."""
    path = path or SETTINGS_PATH
    if not path.exists():
        return Settings()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring unreadable settings at %s: %s", path, exc)
        return Settings()
    if not isinstance(data, dict):
        logger.warning("Ignoring settings at %s: expected an object", path)
        return Settings()

    # Only use keys that exist in the dataclass, with the default's type
    filtered = {}
    for f in fields(Settings):
        if f.name not in data:
            continue
        value = data[f.name]
        if not _matches_default(value, f.default):
            logger.warning("Ignoring setting %s=%r: expected %s",
                           f.name, value, type(f.default).__name__)
            continue
        filtered[f.name] = value
    settings = Settings(**filtered)
    if settings.radius <= 0:
        logger.warning("Non-positive radius %r, using default",
                       settings.radius)
        settings.radius = Settings.radius
    return settings
