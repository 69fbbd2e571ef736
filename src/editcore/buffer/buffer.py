"""High-level buffer façade combining text storage and cursor state."""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import ContextManager, Optional

from editcore.runtime import telemetry

from .state import CursorModel, CursorState, Range
from .sync import BufferView
from .text import TextBuffer
from .validation import ensure_state


@dataclass(frozen=True, slots=True)
class BufferDelta:
    version: int
    start: int
    removed: str
    inserted: str
    cursor: int
    label: str


class Buffer:
    """A :class:`TextBuffer` and its :class:`CursorModel`, kept consistent.

    All edits go through :meth:`replace_range`, which runs inside a
    telemetry transaction and leaves the cursor just past the inserted
    text with the selection cleared.
    """

    def __init__(
        self,
        *,
        name: str = "default",
        text: Optional[TextBuffer] = None,
        cursor: Optional[CursorModel] = None,
    ) -> None:
        self.name = name
        self.text = text or TextBuffer()
        self.cursor = cursor or CursorModel()
        self.cursor.state = ensure_state(self.text, self.cursor.state)

    @classmethod
    def from_text(cls, text: str, *, name: str = "default") -> "Buffer":
        return cls(name=name, text=TextBuffer.from_text(text))

    @property
    def content(self) -> str:
        return self.text.text

    def snapshot(self) -> BufferView:
        return BufferView(
            version=self.text.version,
            text=self.text.text,
            cursor=self.cursor.cursor,
            selection=self.cursor.selection_range(),
        )

    def set_state(self, state: CursorState) -> None:
        self.cursor.state = ensure_state(self.text, state)

    def replace_range(
        self, start: int, end: int, text: str, *, label: str
    ) -> BufferDelta:
        start, end = sorted((self.text.snap(start), self.text.snap(end)))
        with Transaction(self, label):
            removed = self.text.delete_range(start, end)
            inserted = self.text.insert(start, text)
            self.cursor.move_to(start + inserted)
        return BufferDelta(
            version=self.text.version,
            start=start,
            removed=removed,
            inserted=text,
            cursor=self.cursor.cursor,
            label=label,
        )

    def insert_text(self, text: str, *, at: Optional[int] = None) -> BufferDelta:
        position = self.cursor.cursor if at is None else at
        return self.replace_range(position, position, text, label="insert_text")

    def delete_range(
        self, start: int, end: int, *, label: str = "delete_range"
    ) -> BufferDelta:
        return self.replace_range(start, end, "", label=label)

    def selection_range(self) -> Optional[Range]:
        return self.cursor.selection_range()

    def selected_text(self) -> Optional[str]:
        selection = self.cursor.selection_range()
        if selection is None:
            return None
        return self.text.slice(*selection)

    def replace_selection(
        self, *, label: str = "replace_selection"
    ) -> Optional[str]:
        """Delete the active selection, if any, leaving the cursor at its start.

        Every content-changing verb that may act on a selection calls this
        first; the return value is the removed text or ``None``.
        """

        selection = self.cursor.selection_range()
        if selection is None:
            return None
        return self.delete_range(*selection, label=label).removed

    def load(self, text: str) -> None:
        """Swap in new content wholesale, clamping the cursor onto it."""

        with Transaction(self, "load"):
            self.text.replace_all(text)
            self.cursor.move_to(self.text.snap(self.cursor.cursor))


class Transaction(AbstractContextManager["Transaction"]):
    """Telemetry span around a single buffer mutation."""

    def __init__(self, buffer: Buffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self._span_cm: Optional[ContextManager[telemetry.SpanHandle]] = None

    def __enter__(self) -> "Transaction":
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component=True,
            metadata={"buffer": self.buffer.name},
        )
        self._span_cm.__enter__()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False


__all__ = ["Buffer", "BufferDelta", "Transaction"]
