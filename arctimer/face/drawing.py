"""Drawing engine for the analog countdown face.

``paint_frame`` repaints the whole face for one tick.  Layers are drawn
in a fixed order, later ones over earlier ones:

1. clear
2. primary time arc (initial duration, then time remaining)
3. last-minute band (running and ≤ 60 s only)
4. ``MM:SS`` label
5. static face: minute ticks, hour ticks, numerals, centre pin
6. branding label

Every layer leaves the surface transform exactly as it found it, so the
same arguments always produce the same primitive sequence.
"""

from __future__ import annotations

from .geometry import (
    FaceLayout,
    TickMarks,
    MINUTE_TICKS,
    HOUR_TICKS,
    LAST_MINUTE_SECONDS,
    NUMERAL_COUNT,
    NUMERAL_STEP,
    format_time,
    numeral_angle,
    shows_last_minute,
    time_angle,
)
from .styles import DEFAULT_BRANDING, FACE_COLORS
from .surface import Surface


def paint_frame(
    surface: Surface,
    second: int,
    initial: int,
    running: bool,
    radius: float,
    branding: str = DEFAULT_BRANDING,
) -> None:
    """Fully repaint the face for *second* remaining out of *initial*."""
    layout = FaceLayout.for_radius(radius)

    clear_surface(surface)
    draw_time(surface, layout, second, initial)
    if shows_last_minute(running, second):
        draw_last_minute(surface, layout, second)
    draw_time_text(surface, layout, second)
    draw_face(surface, layout)
    draw_branding(surface, layout, branding)


# ── layers ───────────────────────────────────────────────────────────────


def clear_surface(surface: Surface) -> None:
    surface.save()
    surface.reset_transform()
    surface.clear()
    surface.restore()


def draw_time(
    surface: Surface, layout: FaceLayout, second: int, initial: int,
) -> None:
    """Neutral band for the initial duration, red band for what's left."""
    start = time_angle(0)
    surface.stroke_arc(
        0, 0, layout.face_arc_radius, start, time_angle(initial), True,
        width=layout.face_width, color=FACE_COLORS["initial"],
    )
    surface.stroke_arc(
        0, 0, layout.face_arc_radius, start, time_angle(second), True,
        width=layout.face_width, color=FACE_COLORS["remaining"],
    )


def draw_last_minute(
    surface: Surface, layout: FaceLayout, second: int,
) -> None:
    surface.stroke_arc(
        0, 0,
        layout.last_minute_arc_radius,
        time_angle(0, LAST_MINUTE_SECONDS),
        time_angle(second, LAST_MINUTE_SECONDS),
        True,
        width=layout.last_minute_width,
        color=FACE_COLORS["last_minute"],
    )


def draw_time_text(surface: Surface, layout: FaceLayout, second: int) -> None:
    surface.fill_text(
        format_time(second), 0, layout.time_offset,
        font_size=layout.time_font_size, color=FACE_COLORS["ink"],
        align="center", baseline="bottom",
    )


def draw_face(surface: Surface, layout: FaceLayout) -> None:
    draw_tick_marks(surface, layout, MINUTE_TICKS)
    draw_tick_marks(surface, layout, HOUR_TICKS)
    draw_numerals(surface, layout)
    draw_pin(surface, layout)


def draw_tick_marks(
    surface: Surface, layout: FaceLayout, marks: TickMarks,
) -> None:
    outer, inner = layout.tick_span(marks)
    width = layout.radius * marks.width
    surface.save()
    for _ in range(marks.count):
        surface.stroke_line(
            0, -outer, 0, -inner,
            width=width, color=FACE_COLORS["ink"], cap="round",
        )
        surface.rotate(marks.step)
    surface.restore()


def draw_numerals(surface: Surface, layout: FaceLayout) -> None:
    """0, 5 … 55 around the rim, rotated into place but kept upright."""
    for index in range(NUMERAL_COUNT):
        angle = numeral_angle(index)
        surface.save()
        surface.rotate(angle)
        surface.translate(0, -layout.numeral_radius)
        surface.rotate(-angle)
        surface.fill_text(
            str(index * NUMERAL_STEP), 0, 0,
            font_size=layout.numeral_font_size, color=FACE_COLORS["ink"],
            align="center", baseline="middle",
        )
        surface.restore()


def draw_pin(surface: Surface, layout: FaceLayout) -> None:
    surface.fill_circle(0, 0, layout.pin_radius, color=FACE_COLORS["ink"])


def draw_branding(surface: Surface, layout: FaceLayout, branding: str) -> None:
    surface.fill_text(
        branding, 0, -layout.branding_offset,
        font_size=layout.branding_font_size, color=FACE_COLORS["ink"],
        align="center", baseline="bottom",
    )
