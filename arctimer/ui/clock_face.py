"""ClockFace — the analog countdown face as a QWidget.

The face is painted into a QImage backing store through
``QPainterSurface``; the bridge repaints that image on every timer tick
and ``paintEvent`` just blits it.  Mouse input is turned into gestures:

- double-click       → start
- drag up / down     → −/+ one minute
- drag left / right  → +/− one second
"""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt, QPointF
from PyQt6.QtGui import QImage, QPainter
from PyQt6.QtWidgets import QWidget

from ..face.bridge import FaceBridge
from ..face.gestures import (
    DOUBLE_TAP, GestureEvent, classify_pan, route_gesture,
)
from ..face.qt_surface import QPainterSurface
from ..face.styles import DEFAULT_BRANDING

logger = logging.getLogger(__name__)


class ClockFace(QWidget):
    """Fixed-size ``2r × 2r`` analog face driven by a timer."""

    DEFAULT_PAN_THRESHOLD = 24

    def __init__(
        self,
        timer,
        radius: float,
        branding: str = DEFAULT_BRANDING,
        pan_threshold: float = DEFAULT_PAN_THRESHOLD,
        parent: QWidget | None = None,
    ) -> None:
        if radius <= 0:
            raise ValueError(f"radius must be positive, got {radius!r}")
        super().__init__(parent)
        self._timer = timer
        self._radius = radius
        self._pan_threshold = pan_threshold
        self._press_pos: QPointF | None = None

        side = int(round(2 * radius))
        self.setFixedSize(side, side)

        self._bridge = FaceBridge(timer, radius, branding, parent=self)
        self._bridge.frame_painted.connect(self._on_frame_painted)

        self._image: QImage | None = None
        self._image_painter: QPainter | None = None
        self.frames_painted: int = 0

    @property
    def bridge(self) -> FaceBridge:
        return self._bridge

    @property
    def image(self) -> QImage | None:
        return self._image

    # ══════════════════════════════════════════════════════════════════
    #  LIFECYCLE
    # ══════════════════════════════════════════════════════════════════

    def attach(self) -> None:
        """Create the backing store and start following the timer."""
        if self._bridge.is_attached:
            return

        dpr = self.devicePixelRatioF()
        side = self.width()
        image = QImage(
            int(round(side * dpr)), int(round(side * dpr)),
            QImage.Format.Format_ARGB32_Premultiplied,
        )
        image.setDevicePixelRatio(dpr)
        image.fill(Qt.GlobalColor.transparent)
        logger.debug("Face backing store %dx%d @%.2fx",
                     image.width(), image.height(), dpr)

        self._image = image
        self._image_painter = QPainter(image)
        self._bridge.attach(QPainterSurface(self._image_painter, image))
        self._bridge.refresh()

    def detach(self) -> None:
        """Stop following the timer.  Safe to call repeatedly."""
        self._bridge.release()
        if self._image_painter is not None:
            if self._image_painter.isActive():
                self._image_painter.end()
            self._image_painter = None

    def showEvent(self, event) -> None:  # type: ignore[override]
        super().showEvent(event)
        self.attach()

    def closeEvent(self, event) -> None:  # type: ignore[override]
        self.detach()
        super().closeEvent(event)

    def _on_frame_painted(self, _second: int) -> None:
        self.frames_painted += 1
        self.update()

    # ══════════════════════════════════════════════════════════════════
    #  PAINTING
    # ══════════════════════════════════════════════════════════════════

    def paintEvent(self, event) -> None:  # type: ignore[override]
        if self._image is None:
            return
        painter = QPainter(self)
        painter.drawImage(QPointF(0, 0), self._image)
        painter.end()

    # ══════════════════════════════════════════════════════════════════
    #  GESTURES
    # ══════════════════════════════════════════════════════════════════

    def mouseDoubleClickEvent(self, event) -> None:  # type: ignore[override]
        route_gesture(self._timer, GestureEvent.tap(DOUBLE_TAP))
        self._press_pos = None
        event.accept()

    def mousePressEvent(self, event) -> None:  # type: ignore[override]
        if event.button() == Qt.MouseButton.LeftButton:
            self._press_pos = event.position()
        event.accept()

    def mouseReleaseEvent(self, event) -> None:  # type: ignore[override]
        if self._press_pos is not None:
            delta = event.position() - self._press_pos
            self._press_pos = None
            self.handle_drag(delta.x(), delta.y())
        event.accept()

    def handle_drag(self, dx: float, dy: float) -> str | None:
        """Route a completed drag of (*dx*, *dy*) pixels."""
        kind = classify_pan(dx, dy, self._pan_threshold)
        return route_gesture(self._timer, GestureEvent.pan(kind))
