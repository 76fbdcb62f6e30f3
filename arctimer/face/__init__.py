"""Analog face: geometry, drawing engine, timer bridge and gestures."""

from .bridge import FaceBridge, FaceHandle
from .drawing import paint_frame
from .geometry import FaceLayout, format_time, time_angle
from .gestures import GestureEvent, GestureKind, classify_pan, route_gesture
from .qt_surface import QPainterSurface
from .surface import Surface

__all__ = [
    "FaceBridge",
    "FaceHandle",
    "paint_frame",
    "FaceLayout",
    "format_time",
    "time_angle",
    "GestureEvent",
    "GestureKind",
    "classify_pan",
    "route_gesture",
    "QPainterSurface",
    "Surface",
]
