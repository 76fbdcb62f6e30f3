"""Geometry for the analog face.

Every drawn dimension is a fixed ratio of a single radius, so the whole
face scales uniformly.  Angles are radians in canvas convention: the
y axis points down and 12 o'clock sits at ``-π/2``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


# ── proportions ──────────────────────────────────────────────────────────

FACE_PROPORTION = 0.8          # face band width / radius
LAST_MINUTE_PROPORTION = 0.5   # last-minute band width / radius

FULL_TURN_SECONDS = 3600       # one revolution of the face band
LAST_MINUTE_SECONDS = 60       # one revolution of the last-minute band

TIME_FONT_RATIO = 0.2
TIME_OFFSET_RATIO = 0.15
NUMERAL_FONT_RATIO = 0.1
NUMERAL_RADIUS_RATIO = 0.9
PIN_RATIO = 0.03
BRANDING_FONT_RATIO = 0.05
BRANDING_OFFSET_RATIO = 0.3

NUMERAL_COUNT = 12
NUMERAL_STEP = 5               # label increments: 0, 5, … 55

TWELVE_O_CLOCK = -0.5 * math.pi
TAU = 2 * math.pi


@dataclass(frozen=True)
class TickMarks:
    """A ring of evenly spaced radial marks near the outer edge."""

    count: int
    length: float   # fraction of radius
    width: float    # fraction of radius

    @property
    def step(self) -> float:
        return math.pi / (self.count / 2)


MINUTE_TICKS = TickMarks(count=60, length=0.06, width=0.01)
HOUR_TICKS = TickMarks(count=12, length=0.1, width=0.02)


# ── pure helpers ─────────────────────────────────────────────────────────


def time_angle(value: float, scale: float = FULL_TURN_SECONDS) -> float:
    """Angle of *value* seconds on a dial where *scale* is one full turn."""
    return TWELVE_O_CLOCK - TAU * (value / scale)


def arc_sweep(start: float, end: float, anticlockwise: bool) -> float:
    """Signed sweep of a canvas ``arc(start, end, anticlockwise)`` call.

    Negative sweeps run anticlockwise on screen.  Follows the HTML canvas
    rules: a difference of a full turn or more draws the whole circle,
    anything less is reduced modulo ``2π``.
    """
    if anticlockwise:
        if start - end >= TAU:
            return -TAU
        return -((start - end) % TAU)
    if end - start >= TAU:
        return TAU
    return (end - start) % TAU


def format_time(second: int) -> str:
    """``MM:SS`` for a remaining-seconds value."""
    minutes, seconds = divmod(int(second), 60)
    return f"{minutes:02d}:{seconds:02d}"


def shows_last_minute(running: bool, second: int) -> bool:
    """True when the narrow last-minute band should be drawn."""
    return bool(running) and second <= LAST_MINUTE_SECONDS


def numeral_angle(index: int) -> float:
    """Placement angle of the *index*-th numeral (anticlockwise from 12)."""
    return -index * math.pi / (NUMERAL_COUNT / 2)


# ── layout ───────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class FaceLayout:
    """All dimensions derived from one radius."""

    radius: float
    face_width: float
    face_arc_radius: float
    last_minute_width: float
    last_minute_arc_radius: float
    time_font_size: int
    time_offset: float
    numeral_font_size: int
    numeral_radius: float
    pin_radius: float
    branding_font_size: int
    branding_offset: float

    @classmethod
    def for_radius(cls, radius: float) -> "FaceLayout":
        face_width = radius * FACE_PROPORTION
        last_minute_width = radius * LAST_MINUTE_PROPORTION
        time_font = round(radius * TIME_FONT_RATIO)
        branding_font = round(radius * BRANDING_FONT_RATIO)
        return cls(
            radius=radius,
            face_width=face_width,
            face_arc_radius=face_width / 2,
            last_minute_width=last_minute_width,
            last_minute_arc_radius=last_minute_width / 2,
            time_font_size=time_font,
            time_offset=radius * TIME_OFFSET_RATIO + time_font,
            numeral_font_size=round(radius * NUMERAL_FONT_RATIO),
            numeral_radius=radius * NUMERAL_RADIUS_RATIO,
            pin_radius=radius * PIN_RATIO,
            branding_font_size=branding_font,
            branding_offset=radius * BRANDING_OFFSET_RATIO + branding_font,
        )

    def tick_span(self, marks: TickMarks) -> tuple[float, float]:
        """Outer and inner y-distance from centre for a radial mark."""
        outer = self.radius * FACE_PROPORTION
        inner = self.radius * (FACE_PROPORTION - marks.length)
        return outer, inner
