"""Wires a timer's signals to the drawing engine.

The bridge holds exactly two connections while attached: one on
``running_changed`` that caches the latest running flag, one on ``tick``
that repaints the face.  ``release()`` drops both and is safe to call at
any point, including before ``attach()`` or twice in a row.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from PyQt6.QtCore import QObject, QMetaObject, pyqtSignal

from .drawing import paint_frame
from .styles import DEFAULT_BRANDING
from .surface import Surface

logger = logging.getLogger(__name__)


@dataclass
class FaceHandle:
    """The live subscriptions of one attach."""

    surface: Surface
    running_conn: Optional[QMetaObject.Connection] = None
    tick_conn: Optional[QMetaObject.Connection] = None

    @property
    def active(self) -> bool:
        return self.running_conn is not None or self.tick_conn is not None


class FaceBridge(QObject):
    """Lifecycle-scoped glue between a timer and a drawing surface.

    Signals
    -------
    frame_painted(second: int)
        Emitted after every repaint, so a host widget can schedule an
        update of whatever displays the surface.
    """

    frame_painted = pyqtSignal(int)

    def __init__(
        self,
        timer,
        radius: float,
        branding: str = DEFAULT_BRANDING,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._timer = timer
        self._radius = radius
        self._branding = branding
        self._running: bool = False
        self._handle: FaceHandle | None = None

    @property
    def radius(self) -> float:
        return self._radius

    @property
    def running(self) -> bool:
        """Last running flag seen on the timer."""
        return self._running

    @property
    def is_attached(self) -> bool:
        return self._handle is not None

    # ══════════════════════════════════════════════════════════════════
    #  LIFECYCLE
    # ══════════════════════════════════════════════════════════════════

    def attach(self, surface: Surface) -> FaceHandle:
        """Centre the surface and start painting on every tick."""
        if self._handle is not None:
            raise RuntimeError("FaceBridge is already attached")

        surface.translate(self._radius, self._radius)
        handle = FaceHandle(surface)
        self._handle = handle

        handle.running_conn = self._timer.running_changed.connect(
            self._on_running_changed
        )
        # Qt signals don't replay; the current flag stands in for the
        # first running-state emission.
        self._running = bool(self._timer.is_running)
        handle.tick_conn = self._timer.tick.connect(self._on_tick)

        logger.debug("Face attached (radius=%s, running=%s)",
                     self._radius, self._running)
        return handle

    def release(self, handle: FaceHandle | None = None) -> int:
        """Drop the subscriptions of *handle* (default: the live one).

        Returns the number of connections released.  Never raises.
        """
        handle = handle if handle is not None else self._handle
        if handle is None:
            return 0

        released = 0
        if handle.running_conn is not None:
            released += self._disconnect(
                "running_changed", handle.running_conn
            )
            handle.running_conn = None
        if handle.tick_conn is not None:
            released += self._disconnect("tick", handle.tick_conn)
            handle.tick_conn = None

        if handle is self._handle:
            self._handle = None
        logger.debug("Face released (%d subscriptions)", released)
        return released

    def _disconnect(self, name: str, connection: QMetaObject.Connection) -> int:
        try:
            getattr(self._timer, name).disconnect(connection)
        except (TypeError, RuntimeError) as exc:
            # Sender already destroyed or connection already gone.
            logger.debug("Stale connection dropped: %s", exc)
        return 1

    # ══════════════════════════════════════════════════════════════════
    #  PAINTING
    # ══════════════════════════════════════════════════════════════════

    def refresh(self) -> None:
        """Repaint the timer's current value outside the tick stream."""
        if self._handle is None:
            return
        self._paint(self._timer.remaining)

    def _on_running_changed(self, running: bool) -> None:
        self._running = bool(running)

    def _on_tick(self, second: int) -> None:
        # Late emissions after release must not paint.
        if self._handle is None:
            return
        self._paint(second)

    def _paint(self, second: int) -> None:
        paint_frame(
            self._handle.surface,
            second,
            self._timer.initial_time,
            self._running,
            self._radius,
            self._branding,
        )
        self.frame_painted.emit(second)
