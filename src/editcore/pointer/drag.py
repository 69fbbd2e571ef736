"""Drag-selection state machine.

The state is a plain value passed into each handler and returned from it;
hosts keep whatever the last call returned.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from editcore.buffer import Buffer


@dataclass(frozen=True, slots=True)
class Idle:
    pass


@dataclass(frozen=True, slots=True)
class Dragging:
    anchor: int


DragState = Union[Idle, Dragging]

IDLE = Idle()


def press(buffer: Buffer, state: DragState, offset: int) -> DragState:
    del state
    offset = buffer.text.snap(offset)
    buffer.cursor.move_to(offset)
    return Dragging(anchor=offset)


def drag_to(buffer: Buffer, state: DragState, offset: int) -> DragState:
    if isinstance(state, Idle):
        return state
    # Edits made mid-drag may have shortened the text under the anchor.
    anchor = buffer.text.snap(state.anchor)
    buffer.cursor.select(anchor, buffer.text.snap(offset))
    return Dragging(anchor=anchor)


def release(buffer: Buffer, state: DragState) -> DragState:
    # ``select`` already collapses anchor == cursor into a caret, so a
    # click without movement leaves no selection behind.
    del buffer, state
    return IDLE


__all__ = ["Idle", "Dragging", "DragState", "IDLE", "press", "drag_to", "release"]
