"""Main application window."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QLabel, QMainWindow, QVBoxLayout, QWidget

from .face.gestures import GestureEvent, GestureKind, route_gesture
from .settings import Settings, load_settings
from .timer.engine import TimerEngine, TimerState
from .ui.clock_face import ClockFace
from .ui.styles import build_stylesheet

HINT_TEXT = (
    "Double-click to start · drag ↑↓ for minutes, ←→ for seconds · "
    "Space pause · Esc reset"
)

_ARROW_GESTURES: dict[Qt.Key, GestureKind] = {
    Qt.Key.Key_Up:    GestureKind.PAN_UP,
    Qt.Key.Key_Down:  GestureKind.PAN_DOWN,
    Qt.Key.Key_Left:  GestureKind.PAN_LEFT,
    Qt.Key.Key_Right: GestureKind.PAN_RIGHT,
}


class ArcTimerApp(QMainWindow):
    """Main application window."""

    def __init__(self, settings: Settings | None = None) -> None:
        super().__init__()
        self.setWindowTitle("ArcTimer")

        # ── settings ──────────────────────────────────────────────────
        self._settings: Settings = settings or load_settings()

        # ── engine ────────────────────────────────────────────────────
        self._timer_engine = TimerEngine(
            self, initial_time=self._settings.initial_time,
        )

        self.setStyleSheet(build_stylesheet())

        # ── central widget ────────────────────────────────────────────
        central = QWidget()
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(16, 16, 16, 12)
        layout.setSpacing(8)

        self._face = ClockFace(
            self._timer_engine,
            radius=self._settings.radius,
            branding=self._settings.branding,
            pan_threshold=self._settings.pan_threshold,
            parent=central,
        )
        layout.addWidget(self._face, alignment=Qt.AlignmentFlag.AlignCenter)

        hint = QLabel(HINT_TEXT, central)
        hint.setObjectName("hintLabel")
        hint.setAlignment(Qt.AlignmentFlag.AlignCenter)
        hint.setWordWrap(True)
        layout.addWidget(hint)

        # Arrow keys must reach the window, not the face
        self._face.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)

    @property
    def timer_engine(self) -> TimerEngine:
        return self._timer_engine

    @property
    def face(self) -> ClockFace:
        return self._face

    # ══════════════════════════════════════════════════════════════════
    #  KEYBOARD
    # ══════════════════════════════════════════════════════════════════

    def _on_space(self) -> None:
        """Start, pause, or resume the timer."""
        self._timer_engine.toggle()

    def _on_escape(self) -> None:
        """Reset the timer (no-op when idle)."""
        if self._timer_engine.state != TimerState.IDLE:
            self._timer_engine.reset()

    def _on_arrow(self, kind: GestureKind) -> None:
        route_gesture(self._timer_engine, GestureEvent.pan(kind))

    def keyPressEvent(self, event) -> None:  # type: ignore[override]
        """Space (start/pause), Escape (reset), arrows (adjust)."""
        key = event.key()
        if key == Qt.Key.Key_Space and not event.modifiers():
            self._on_space()
            event.accept()
            return
        if key == Qt.Key.Key_Escape:
            self._on_escape()
            event.accept()
            return
        for arrow, kind in _ARROW_GESTURES.items():
            if key == arrow:
                self._on_arrow(kind)
                event.accept()
                return
        super().keyPressEvent(event)

    # ══════════════════════════════════════════════════════════════════
    #  WINDOW EVENTS
    # ══════════════════════════════════════════════════════════════════

    def closeEvent(self, event) -> None:  # type: ignore[override]
        self._timer_engine.pause()
        self._face.detach()
        event.accept()
