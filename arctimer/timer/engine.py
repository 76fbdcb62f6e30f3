"""Countdown state machine for ArcTimer.

States
------
IDLE      Not running — duration can be adjusted.
RUNNING   Counting down once per second.
PAUSED    Frozen mid-countdown.

Transitions
-----------
IDLE → RUNNING           (start)
RUNNING → PAUSED         (pause)
PAUSED → RUNNING         (start)
RUNNING → IDLE           (countdown reaches 0)
Any → IDLE               (reset)

Adjustments
-----------
``increase_minute`` / ``decrease_minute`` / ``increase_second`` /
``decrease_second`` change the initial duration (and the remaining time
with it) while IDLE.  The duration is clamped to one turn of the face,
``[0, 3600]`` seconds.
"""

from __future__ import annotations

import logging
from enum import Enum

from PyQt6.QtCore import QObject, QTimer, pyqtSignal

logger = logging.getLogger(__name__)


# ── enums ─────────────────────────────────────────────────────────────────


class TimerState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"


# ── constants ─────────────────────────────────────────────────────────────

MAX_SECONDS = 60 * 60
DEFAULT_INITIAL_TIME = 25 * 60
MINUTE_STEP = 60
SECOND_STEP = 1
TICK_INTERVAL_MS = 1000


# ── engine ────────────────────────────────────────────────────────────────


class TimerEngine(QObject):
    """Qt-based countdown timer.

    Signals
    -------
    tick(remaining_seconds: int)
        Emitted every second while running, and whenever the remaining
        time changes by adjustment or reset.
    running_changed(running: bool)
        Emitted when the running flag flips.  Always emitted before the
        first tick of a run.
    state_changed(new_state: TimerState)
        Emitted on every state transition.
    finished()
        Emitted once the countdown reaches 0.
    """

    tick = pyqtSignal(int)
    running_changed = pyqtSignal(bool)
    state_changed = pyqtSignal(object)
    finished = pyqtSignal()

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        initial_time: int = DEFAULT_INITIAL_TIME,
    ) -> None:
        super().__init__(parent)

        self._state: TimerState = TimerState.IDLE
        self._initial: int = _clamp(initial_time)
        self._remaining: int = self._initial

        self._qt_timer = QTimer(self)
        self._qt_timer.setInterval(TICK_INTERVAL_MS)
        self._qt_timer.timeout.connect(self._on_tick)

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def state(self) -> TimerState:
        return self._state

    @property
    def initial_time(self) -> int:
        """Full countdown duration in seconds."""
        return self._initial

    @property
    def remaining(self) -> int:
        """Seconds left on the clock."""
        return self._remaining

    @property
    def is_running(self) -> bool:
        return self._state == TimerState.RUNNING

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def start(self) -> None:
        """Run from IDLE or PAUSED.  A finished countdown restarts."""
        if self._state == TimerState.RUNNING:
            return
        if self._remaining <= 0:
            if self._initial <= 0:
                return
            self._remaining = self._initial
            self.tick.emit(self._remaining)
        logger.info("Timer started at %d s", self._remaining)
        self._set_state(TimerState.RUNNING)
        self._qt_timer.start()

    def pause(self) -> None:
        if self._state != TimerState.RUNNING:
            return
        self._qt_timer.stop()
        logger.info("Timer paused at %d s", self._remaining)
        self._set_state(TimerState.PAUSED)

    def toggle(self) -> None:
        """Start when stopped, pause when running."""
        if self.is_running:
            self.pause()
        else:
            self.start()

    def reset(self) -> None:
        """Stop and return to the full initial duration."""
        self._qt_timer.stop()
        self._remaining = self._initial
        self._set_state(TimerState.IDLE)
        self.tick.emit(self._remaining)

    def set_initial_time(self, seconds: int) -> None:
        """Replace the duration (IDLE only)."""
        if self._state != TimerState.IDLE:
            return
        self._apply_initial(_clamp(seconds))

    def increase_minute(self) -> None:
        self._adjust(MINUTE_STEP)

    def decrease_minute(self) -> None:
        self._adjust(-MINUTE_STEP)

    def increase_second(self) -> None:
        self._adjust(SECOND_STEP)

    def decrease_second(self) -> None:
        self._adjust(-SECOND_STEP)

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL — timer mechanics
    # ══════════════════════════════════════════════════════════════════

    def _adjust(self, delta: int) -> None:
        if self._state != TimerState.IDLE:
            return
        self._apply_initial(_clamp(self._initial + delta))

    def _apply_initial(self, seconds: int) -> None:
        if seconds == self._initial and self._remaining == seconds:
            return
        self._initial = seconds
        self._remaining = seconds
        self.tick.emit(self._remaining)

    def _on_tick(self) -> None:
        self._remaining = max(0, self._remaining - 1)
        self.tick.emit(self._remaining)

        if self._remaining == 0:
            self._qt_timer.stop()
            logger.info("Timer finished")
            self._set_state(TimerState.IDLE)
            self.finished.emit()

    def _set_state(self, new_state: TimerState) -> None:
        was_running = self.is_running
        self._state = new_state
        self.state_changed.emit(new_state)
        if self.is_running != was_running:
            self.running_changed.emit(self.is_running)


def _clamp(seconds: int) -> int:
    return max(0, min(MAX_SECONDS, int(seconds)))
