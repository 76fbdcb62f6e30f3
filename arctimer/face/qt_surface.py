"""``Surface`` implementation on top of QPainter."""

from __future__ import annotations

import math

from PyQt6.QtCore import Qt, QPointF, QRectF
from PyQt6.QtGui import QColor, QFont, QFontMetricsF, QImage, QPainter, QPen

from .geometry import TAU, arc_sweep
from .surface import LineCap, TextAlign, TextBaseline


FONT_FAMILY = "Arial"

_CAPS: dict[str, Qt.PenCapStyle] = {
    "butt": Qt.PenCapStyle.FlatCap,
    "round": Qt.PenCapStyle.RoundCap,
}


def _to_qt_angle(radians: float) -> int:
    """Canvas radians (clockwise on screen) → Qt 1/16ths of a degree."""
    return round(-math.degrees(radians) * 16)


class QPainterSurface:
    """Paints through a QPainter that is active on a QImage backing store.

    Qt measures arc angles anticlockwise in 1/16 degree while the canvas
    convention turns clockwise, so every angle is negated on the way in.
    """

    def __init__(self, painter: QPainter, image: QImage) -> None:
        self._painter = painter
        self._image = image
        self._painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        self._painter.setRenderHint(QPainter.RenderHint.TextAntialiasing)

    @property
    def painter(self) -> QPainter:
        return self._painter

    # ── transform stack ──────────────────────────────────────────────────

    def save(self) -> None:
        self._painter.save()

    def restore(self) -> None:
        self._painter.restore()

    def reset_transform(self) -> None:
        self._painter.resetTransform()

    def translate(self, dx: float, dy: float) -> None:
        self._painter.translate(dx, dy)

    def rotate(self, angle: float) -> None:
        self._painter.rotate(math.degrees(angle))

    def clear(self) -> None:
        size = self._image.deviceIndependentSize()
        self._painter.save()
        self._painter.setCompositionMode(
            QPainter.CompositionMode.CompositionMode_Source
        )
        self._painter.fillRect(
            QRectF(0, 0, size.width(), size.height()),
            Qt.GlobalColor.transparent,
        )
        self._painter.restore()

    # ── primitives ───────────────────────────────────────────────────────

    def _pen(self, color: str, width: float, cap: LineCap) -> QPen:
        pen = QPen(QColor(color))
        pen.setWidthF(width)
        pen.setCapStyle(_CAPS[cap])
        return pen

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
    ) -> None:
        sweep = arc_sweep(start, end, anticlockwise)
        if sweep == 0:
            return
        self._painter.setPen(self._pen(color, width, "butt"))
        self._painter.setBrush(Qt.BrushStyle.NoBrush)
        if abs(sweep) >= TAU:
            self._painter.drawEllipse(QPointF(x, y), radius, radius)
            return
        rect = QRectF(x - radius, y - radius, 2 * radius, 2 * radius)
        self._painter.drawArc(rect, _to_qt_angle(start), _to_qt_angle(sweep))

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
    ) -> None:
        self._painter.setPen(self._pen(color, width, cap))
        self._painter.drawLine(QPointF(x1, y1), QPointF(x2, y2))

    def fill_circle(
        self, x: float, y: float, radius: float, *, color: str,
    ) -> None:
        self._painter.setPen(Qt.PenStyle.NoPen)
        self._painter.setBrush(QColor(color))
        self._painter.drawEllipse(QPointF(x, y), radius, radius)

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
    ) -> None:
        font = QFont(FONT_FAMILY)
        font.setPixelSize(max(1, int(font_size)))
        metrics = QFontMetricsF(font)

        advance = metrics.horizontalAdvance(text)
        if align == "center":
            x -= advance / 2
        elif align == "right":
            x -= advance

        # QPainter.drawText(QPointF) anchors at the alphabetic baseline
        if baseline == "bottom":
            y -= metrics.descent()
        elif baseline == "middle":
            y += (metrics.ascent() - metrics.descent()) / 2
        elif baseline == "top":
            y += metrics.ascent()

        self._painter.setFont(font)
        self._painter.setPen(QColor(color))
        self._painter.drawText(QPointF(x, y), text)
