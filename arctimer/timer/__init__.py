"""Timer package."""

from .engine import (
    TimerEngine,
    TimerState,
    MAX_SECONDS,
    DEFAULT_INITIAL_TIME,
    MINUTE_STEP,
    SECOND_STEP,
)

__all__ = [
    "TimerEngine",
    "TimerState",
    "MAX_SECONDS",
    "DEFAULT_INITIAL_TIME",
    "MINUTE_STEP",
    "SECOND_STEP",
]
