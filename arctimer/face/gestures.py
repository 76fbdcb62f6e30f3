"""Gesture → timer command routing.

| Gesture            | Timer call          |
|--------------------|---------------------|
| double tap         | ``start()``         |
| pan up             | ``decrease_minute()`` |
| pan down           | ``increase_minute()`` |
| pan left           | ``increase_second()`` |
| pan right          | ``decrease_second()`` |

Anything else is ignored.  Calls are fire-and-forget: the face only
changes once the timer emits its next tick.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol

logger = logging.getLogger(__name__)


class TimerControls(Protocol):
    def start(self) -> None: ...
    def increase_minute(self) -> None: ...
    def decrease_minute(self) -> None: ...
    def increase_second(self) -> None: ...
    def decrease_second(self) -> None: ...


class GestureKind(Enum):
    TAP = "tap"
    PAN_UP = "pan_up"
    PAN_DOWN = "pan_down"
    PAN_LEFT = "pan_left"
    PAN_RIGHT = "pan_right"
    OTHER = "other"


@dataclass(frozen=True)
class GestureEvent:
    kind: GestureKind
    tap_count: int = 0

    @classmethod
    def tap(cls, count: int) -> "GestureEvent":
        return cls(GestureKind.TAP, tap_count=count)

    @classmethod
    def pan(cls, kind: GestureKind) -> "GestureEvent":
        return cls(kind)


DOUBLE_TAP = 2

_PAN_ACTIONS: dict[GestureKind, str] = {
    GestureKind.PAN_UP:    "decrease_minute",
    GestureKind.PAN_DOWN:  "increase_minute",
    GestureKind.PAN_LEFT:  "increase_second",
    GestureKind.PAN_RIGHT: "decrease_second",
}


def route_gesture(timer: TimerControls, event: GestureEvent) -> Optional[str]:
    """Issue the timer call for *event*; return its name, or None."""
    if event.kind is GestureKind.TAP:
        if event.tap_count != DOUBLE_TAP:
            return None
        action = "start"
    else:
        action = _PAN_ACTIONS.get(event.kind)
        if action is None:
            return None

    logger.debug("Gesture %s → %s()", event.kind.value, action)
    getattr(timer, action)()
    return action


def classify_pan(dx: float, dy: float, threshold: float) -> GestureKind:
    """Direction of a pointer drag along its dominant axis.

    Screen y grows downward, so a negative *dy* is an upward pan.  Drags
    shorter than *threshold* on both axes are not pans.
    """
    if max(abs(dx), abs(dy)) < threshold:
        return GestureKind.OTHER
    if abs(dx) > abs(dy):
        return GestureKind.PAN_LEFT if dx < 0 else GestureKind.PAN_RIGHT
    return GestureKind.PAN_UP if dy < 0 else GestureKind.PAN_DOWN
