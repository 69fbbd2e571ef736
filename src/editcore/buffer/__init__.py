"""Buffer abstractions: UTF-8 storage, cursor state and the clipboard port."""

from .buffer import Buffer, BufferDelta, Transaction
from .clipboard import ClipboardPort, MemoryClipboard, read_text
from .state import Caret, CursorModel, CursorState, Selection, select
from .sync import BufferSync, BufferValidationError, BufferView
from .text import TextBuffer
from .validation import ensure_state

__all__ = [
    "Buffer",
    "BufferDelta",
    "BufferSync",
    "BufferValidationError",
    "BufferView",
    "Caret",
    "ClipboardPort",
    "CursorModel",
    "CursorState",
    "MemoryClipboard",
    "Selection",
    "TextBuffer",
    "Transaction",
    "ensure_state",
    "read_text",
    "select",
]
