"""Validation helpers shared across buffer services."""

from __future__ import annotations

from .state import Caret, CursorState, select
from .text import TextBuffer


def ensure_state(text: TextBuffer, state: CursorState) -> CursorState:
    """Clamp both ends of ``state`` onto boundaries of ``text``."""

    cursor = text.snap(state.cursor)
    if state.anchor is None:
        return Caret(cursor)
    return select(text.snap(state.anchor), cursor)


__all__ = ["ensure_state"]
