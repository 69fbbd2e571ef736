from __future__ import annotations

from typing import List, Tuple

from editcore.buffer import Buffer, Caret, MemoryClipboard, Selection
from editcore.config import EditorSettings
from editcore.engine import NOOP, EditorAction
from editcore.engine.manager import EditorEngine

A = EditorAction


def make_engine(
    text: str = "", clipboard: MemoryClipboard | None = None
) -> Tuple[EditorEngine, MemoryClipboard]:
    clipboard = clipboard or MemoryClipboard()
    engine = EditorEngine(
        Buffer.from_text(text), clipboard=clipboard, settings=EditorSettings()
    )
    return engine, clipboard


def test_select_all_then_cut_empties_buffer() -> None:
    engine, clipboard = make_engine("hello")

    engine.handle_action(A.SELECT_ALL)
    engine.handle_action(A.CUT)

    assert engine.buffer.content == ""
    assert engine.buffer.cursor.state == Caret(0)
    assert clipboard.get() == "hello"


def test_copy_writes_normalized_range_without_mutation() -> None:
    engine, clipboard = make_engine("hello world")
    engine.buffer.set_state(Selection(anchor=11, cursor=6))
    events: List[object] = []
    engine.bus.subscribe("clipboard.copy", events.append)

    engine.handle_action(A.COPY)

    assert clipboard.get() == "world"
    assert engine.buffer.content == "hello world"
    assert events == [{"text": "world"}]


def test_copy_and_cut_without_selection_leave_clipboard() -> None:
    engine, clipboard = make_engine("hello", MemoryClipboard("kept"))

    assert engine.handle_action(A.COPY).status == "no_selection"
    assert engine.handle_action(A.CUT).status == "no_selection"
    assert clipboard.get() == "kept"
    assert engine.buffer.content == "hello"


def test_paste_replaces_selection() -> None:
    engine, _ = make_engine("hello world", MemoryClipboard("there"))
    engine.buffer.set_state(Selection(anchor=6, cursor=11))

    engine.handle_action(A.PASTE)

    assert engine.buffer.content == "hello there"
    assert engine.buffer.cursor.state == Caret(11)


def test_paste_advances_by_byte_length() -> None:
    engine, _ = make_engine("", MemoryClipboard("é€"))

    engine.handle_action(A.PASTE)

    assert engine.buffer.cursor.cursor == 5


def test_paste_of_non_text_is_noop() -> None:
    engine, _ = make_engine("hello", MemoryClipboard(b"\x89PNG"))
    engine.buffer.set_state(Selection(anchor=0, cursor=5))
    changes: List[object] = []
    engine.bus.subscribe("editor.changed", changes.append)

    result = engine.handle_action(A.PASTE)

    assert result.status == NOOP
    assert result.message == "clipboard_empty"
    assert engine.buffer.content == "hello"
    assert changes == []


def test_paste_from_empty_clipboard_is_noop() -> None:
    engine, _ = make_engine("hello")

    assert engine.handle_action(A.PASTE).status == NOOP
