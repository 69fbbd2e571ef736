"""Cursor and selection state for a text buffer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union

Range = Tuple[int, int]


@dataclass(frozen=True, slots=True)
class Caret:
    """A bare cursor with no selection."""

    offset: int

    @property
    def cursor(self) -> int:
        return self.offset

    @property
    def anchor(self) -> None:
        return None

    def normalized(self) -> Optional[Range]:
        return None


@dataclass(frozen=True, slots=True)
class Selection:
    """An active selection: ``anchor`` is fixed, ``cursor`` moves.

    Never build one directly with equal ends; use :func:`select`, which
    collapses such a pair into a :class:`Caret`.
    """

    anchor: int
    cursor: int

    def __post_init__(self) -> None:
        if self.anchor == self.cursor:
            raise ValueError("empty selection must be represented as a Caret")

    @property
    def start(self) -> int:
        return min(self.anchor, self.cursor)

    @property
    def end(self) -> int:
        return max(self.anchor, self.cursor)

    def normalized(self) -> Optional[Range]:
        return (self.start, self.end)


CursorState = Union[Caret, Selection]


def select(anchor: int, cursor: int) -> CursorState:
    if anchor == cursor:
        return Caret(cursor)
    return Selection(anchor, cursor)


class CursorModel:
    """Mutable holder for the current :data:`CursorState`."""

    def __init__(self, state: Optional[CursorState] = None) -> None:
        self.state: CursorState = state or Caret(0)

    def __repr__(self) -> str:
        return f"CursorModel({self.state!r})"

    @property
    def cursor(self) -> int:
        return self.state.cursor

    @property
    def anchor(self) -> Optional[int]:
        return self.state.anchor

    @property
    def has_selection(self) -> bool:
        return isinstance(self.state, Selection)

    def selection_range(self) -> Optional[Range]:
        return self.state.normalized()

    def move_to(self, offset: int) -> None:
        """Place the cursor and drop any selection."""

        self.state = Caret(offset)

    def extend_to(self, offset: int) -> None:
        """Move only the cursor, keeping (or starting) the anchor."""

        anchor = self.state.anchor
        if anchor is None:
            anchor = self.state.cursor
        self.state = select(anchor, offset)

    def select(self, anchor: int, cursor: int) -> None:
        self.state = select(anchor, cursor)

    def clear_selection(self) -> None:
        self.state = Caret(self.state.cursor)


__all__ = ["Caret", "Selection", "CursorState", "CursorModel", "Range", "select"]
