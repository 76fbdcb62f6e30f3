"""The 2D drawing surface the face is painted on.

Modelled on an HTML canvas context: a transform stack, radians with the
y axis pointing down, and arcs/text anchored the way ``arc()`` and
``fillText()`` anchor them.  The origin is translated to the face centre
once, when the surface is attached.
"""

from __future__ import annotations

from typing import Literal, Protocol


LineCap = Literal["butt", "round"]
TextAlign = Literal["left", "center", "right"]
TextBaseline = Literal["top", "middle", "alphabetic", "bottom"]


class Surface(Protocol):
    def save(self) -> None: ...

    def restore(self) -> None: ...

    def reset_transform(self) -> None: ...

    def clear(self) -> None:
        """Clear the full device-pixel rectangle."""
        ...

    def translate(self, dx: float, dy: float) -> None: ...

    def rotate(self, angle: float) -> None: ...

    def stroke_arc(
        self,
        x: float,
        y: float,
        radius: float,
        start: float,
        end: float,
        anticlockwise: bool = False,
        *,
        width: float,
        color: str,
    ) -> None: ...

    def stroke_line(
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        *,
        width: float,
        color: str,
        cap: LineCap = "butt",
    ) -> None: ...

    def fill_circle(
        self, x: float, y: float, radius: float, *, color: str,
    ) -> None: ...

    def fill_text(
        self,
        text: str,
        x: float,
        y: float,
        *,
        font_size: int,
        color: str,
        align: TextAlign = "left",
        baseline: TextBaseline = "alphabetic",
    ) -> None: ...
