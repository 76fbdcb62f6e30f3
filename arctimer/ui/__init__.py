"""UI package."""

from .clock_face import ClockFace
from .styles import build_stylesheet

__all__ = [
    "ClockFace",
    "build_stylesheet",
]
