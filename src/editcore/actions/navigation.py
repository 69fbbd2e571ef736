"""Cursor motions and the plain/extending actions built on them.

Motions are pure functions ``(text, offset) -> offset`` over a
:class:`TextBuffer`. Plain actions apply a motion and drop the selection;
``select_*`` actions apply the same motion while keeping the anchor.
"""

from __future__ import annotations

from functools import partial
from typing import Callable

from editcore.buffer import TextBuffer
from editcore.engine.base import NOOP, ActionRequest, ActionResult, EditorContext

Motion = Callable[[TextBuffer, int], int]


def char_left(text: TextBuffer, offset: int) -> int:
    return text.prev_boundary(offset)


def char_right(text: TextBuffer, offset: int) -> int:
    return text.next_boundary(offset)


def beginning_of_line(text: TextBuffer, offset: int) -> int:
    return text.line_start(offset)


def end_of_line(text: TextBuffer, offset: int) -> int:
    return text.line_end(offset)


def column_of(text: TextBuffer, offset: int) -> int:
    """Character (code point) column of ``offset`` within its line."""

    return len(text.slice(text.line_start(offset), offset))


def offset_in_line(text: TextBuffer, line_start: int, column: int) -> int:
    """Offset of ``column`` on the line starting at ``line_start``, clamped."""

    line = text.slice(line_start, text.line_end(line_start))
    return line_start + len(line[:column].encode("utf-8"))


def line_up(text: TextBuffer, offset: int) -> int:
    start = text.line_start(offset)
    if start == 0:
        return text.snap(offset)
    previous_start = text.line_start(start - 1)
    return offset_in_line(text, previous_start, column_of(text, offset))


def line_down(text: TextBuffer, offset: int) -> int:
    end = text.line_end(offset)
    if end >= len(text):
        return text.snap(offset)
    return offset_in_line(text, end + 1, column_of(text, offset))


def _is_word_char(char: str) -> bool:
    return char.isalnum() or char == "_"


def word_left(text: TextBuffer, offset: int) -> int:
    chars = text.slice(0, offset)
    pos = len(chars)
    if pos == 0:
        return 0

    pos -= 1
    while pos > 0 and chars[pos].isspace():
        pos -= 1

    if pos > 0:
        in_word = _is_word_char(chars[pos])
        while pos > 0:
            previous = chars[pos - 1]
            if _is_word_char(previous) != in_word or previous.isspace():
                break
            pos -= 1

    return len(chars[:pos].encode("utf-8"))


def word_right(text: TextBuffer, offset: int) -> int:
    offset = text.snap(offset)
    chars = text.slice(offset, len(text))
    pos = 0

    while pos < len(chars) and chars[pos].isspace():
        pos += 1

    if pos < len(chars):
        in_word = _is_word_char(chars[pos])
        while pos < len(chars):
            current = chars[pos]
            if _is_word_char(current) != in_word or current.isspace():
                break
            pos += 1

    return offset + len(chars[:pos].encode("utf-8"))


def _move(context: EditorContext, motion: Motion) -> ActionResult:
    cursor = context.buffer.cursor
    before = cursor.state
    cursor.move_to(motion(context.buffer.text, cursor.cursor))
    return ActionResult(status="move" if cursor.state != before else NOOP)


def _extend(
    context: EditorContext, request: ActionRequest, motion: Motion
) -> ActionResult:
    del request
    cursor = context.buffer.cursor
    before = cursor.state
    cursor.extend_to(motion(context.buffer.text, cursor.cursor))
    return ActionResult(status="select" if cursor.state != before else NOOP)


def move_left(context: EditorContext, request: ActionRequest) -> ActionResult:
    del request
    return _move(context, char_left)


def move_right(context: EditorContext, request: ActionRequest) -> ActionResult:
    del request
    return _move(context, char_right)


def move_up(context: EditorContext, request: ActionRequest) -> ActionResult:
    del request
    return _move(context, line_up)


def move_down(context: EditorContext, request: ActionRequest) -> ActionResult:
    del request
    return _move(context, line_down)


def move_word_left(context: EditorContext, request: ActionRequest) -> ActionResult:
    del request
    return _move(context, word_left)


def move_word_right(context: EditorContext, request: ActionRequest) -> ActionResult:
    del request
    return _move(context, word_right)


def move_to_beginning_of_line(
    context: EditorContext, request: ActionRequest
) -> ActionResult:
    del request
    return _move(context, beginning_of_line)


def move_to_end_of_line(
    context: EditorContext, request: ActionRequest
) -> ActionResult:
    del request
    return _move(context, end_of_line)


select_left = partial(_extend, motion=char_left)
select_right = partial(_extend, motion=char_right)
select_up = partial(_extend, motion=line_up)
select_down = partial(_extend, motion=line_down)
select_word_left = partial(_extend, motion=word_left)
select_word_right = partial(_extend, motion=word_right)
select_to_beginning_of_line = partial(_extend, motion=beginning_of_line)
select_to_end_of_line = partial(_extend, motion=end_of_line)


def select_all(context: EditorContext, request: ActionRequest) -> ActionResult:
    del request
    buffer = context.buffer
    before = buffer.cursor.state
    buffer.cursor.select(0, len(buffer.text))
    return ActionResult(status="select" if buffer.cursor.state != before else NOOP)


__all__ = [
    "Motion",
    "beginning_of_line",
    "char_left",
    "char_right",
    "column_of",
    "end_of_line",
    "line_down",
    "line_up",
    "move_down",
    "move_left",
    "move_right",
    "move_to_beginning_of_line",
    "move_to_end_of_line",
    "move_up",
    "move_word_left",
    "move_word_right",
    "offset_in_line",
    "select_all",
    "select_down",
    "select_left",
    "select_right",
    "select_to_beginning_of_line",
    "select_to_end_of_line",
    "select_up",
    "select_word_left",
    "select_word_right",
    "word_left",
    "word_right",
]
