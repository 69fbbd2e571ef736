"""Action vocabulary and the shared services every action handler sees."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, Optional

from editcore.buffer import Buffer, ClipboardPort, MemoryClipboard
from editcore.config import EditorSettings
from editcore.pointer import Viewport


class EditorAction(str, Enum):
    """Abstract actions, already decoded from device input."""

    INSERT_TEXT = "edit.insert_text"
    NEWLINE = "edit.newline"
    BACKSPACE = "edit.backspace"
    DELETE = "edit.delete"
    DELETE_TO_BEGINNING_OF_LINE = "edit.delete_to_beginning_of_line"
    DELETE_TO_END_OF_LINE = "edit.delete_to_end_of_line"
    DELETE_LINE = "edit.delete_line"
    TAB = "edit.tab"
    OUTDENT = "edit.outdent"
    MOVE_LINE_UP = "edit.move_line_up"
    MOVE_LINE_DOWN = "edit.move_line_down"

    MOVE_LEFT = "nav.move_left"
    MOVE_RIGHT = "nav.move_right"
    MOVE_UP = "nav.move_up"
    MOVE_DOWN = "nav.move_down"
    MOVE_WORD_LEFT = "nav.move_word_left"
    MOVE_WORD_RIGHT = "nav.move_word_right"
    MOVE_TO_BEGINNING_OF_LINE = "nav.move_to_beginning_of_line"
    MOVE_TO_END_OF_LINE = "nav.move_to_end_of_line"

    SELECT_LEFT = "select.left"
    SELECT_RIGHT = "select.right"
    SELECT_UP = "select.up"
    SELECT_DOWN = "select.down"
    SELECT_WORD_LEFT = "select.word_left"
    SELECT_WORD_RIGHT = "select.word_right"
    SELECT_TO_BEGINNING_OF_LINE = "select.to_beginning_of_line"
    SELECT_TO_END_OF_LINE = "select.to_end_of_line"
    SELECT_ALL = "select.all"

    COPY = "clipboard.copy"
    CUT = "clipboard.cut"
    PASTE = "clipboard.paste"

    INCREASE_FONT_SIZE = "view.increase_font_size"
    DECREASE_FONT_SIZE = "view.decrease_font_size"
    RESET_FONT_SIZE = "view.reset_font_size"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class ActionRequest:
    """What the handler is asked to do; ``payload`` carries typed text."""

    action: str
    payload: Optional[str] = None


@dataclass(slots=True)
class ActionResult:
    """Result returned from an action handler."""

    consumed: bool = True
    status: str = "ok"
    message: Optional[str] = None


class EditorBus:
    """Minimal event bus used for change notifications."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in list(self._subscribers.get(event, [])):
            callback(payload)


@dataclass(slots=True)
class EditorContext:
    """Shared services every action handler can access."""

    buffer: Buffer
    bus: EditorBus = field(default_factory=EditorBus)
    clipboard: ClipboardPort = field(default_factory=MemoryClipboard)
    settings: EditorSettings = field(default_factory=EditorSettings)
    viewport: Viewport = field(default_factory=Viewport)


NOOP = "noop"

__all__ = [
    "ActionRequest",
    "ActionResult",
    "EditorAction",
    "EditorBus",
    "EditorContext",
    "NOOP",
]
