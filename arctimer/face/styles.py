"""Colours used on the analog face."""

from __future__ import annotations

FACE_COLORS: dict[str, str] = {
    "initial":     "#dddddd",   # neutral band: full initial duration
    "remaining":   "#fb0000",   # highlighted band: time left
    "last_minute": "#c70000",   # narrow band in the final 60 s
    "ink":         "#000000",   # ticks, numerals, pin, labels
}

DEFAULT_BRANDING = "ArcTimer"
