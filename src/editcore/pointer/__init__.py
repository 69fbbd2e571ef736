"""Hit-testing and drag selection."""

from .drag import IDLE, Dragging, DragState, Idle, drag_to, press, release
from .hit_test import HitMetrics, Viewport, offset_at

__all__ = [
    "IDLE",
    "Dragging",
    "DragState",
    "HitMetrics",
    "Idle",
    "Viewport",
    "drag_to",
    "offset_at",
    "press",
    "release",
]
