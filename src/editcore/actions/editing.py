"""Selection-aware edit actions."""

from __future__ import annotations

from editcore.buffer import Buffer
from editcore.engine.base import NOOP, ActionRequest, ActionResult, EditorContext

from .navigation import column_of, offset_in_line


def _insert(buffer: Buffer, text: str, *, label: str) -> ActionResult:
    replaced = buffer.replace_selection(label=f"{label}:replace_selection")
    if not text:
        return ActionResult(status=NOOP if replaced is None else "delete_selection")
    buffer.insert_text(text)
    return ActionResult(status=label)


def insert_text(context: EditorContext, request: ActionRequest) -> ActionResult:
    return _insert(context.buffer, request.payload or "", label="insert_text")


def newline(context: EditorContext, request: ActionRequest) -> ActionResult:
    del request
    return _insert(context.buffer, "\n", label="newline")


def tab(context: EditorContext, request: ActionRequest) -> ActionResult:
    del request
    return _insert(context.buffer, " " * context.settings.tab_width, label="tab")


def backspace(context: EditorContext, request: ActionRequest) -> ActionResult:
    del request
    buffer = context.buffer
    if buffer.replace_selection(label="backspace") is not None:
        return ActionResult(status="delete_selection")
    cursor = buffer.cursor.cursor
    if cursor == 0:
        return ActionResult(status=NOOP)
    buffer.delete_range(buffer.text.prev_boundary(cursor), cursor, label="backspace")
    return ActionResult(status="backspace")


def delete(context: EditorContext, request: ActionRequest) -> ActionResult:
    del request
    buffer = context.buffer
    if buffer.replace_selection(label="delete") is not None:
        return ActionResult(status="delete_selection")
    cursor = buffer.cursor.cursor
    if cursor >= len(buffer.text):
        return ActionResult(status=NOOP)
    buffer.delete_range(cursor, buffer.text.next_boundary(cursor), label="delete")
    return ActionResult(status="delete")


def delete_to_beginning_of_line(
    context: EditorContext, request: ActionRequest
) -> ActionResult:
    del request
    buffer = context.buffer
    buffer.cursor.clear_selection()
    cursor = buffer.cursor.cursor
    start = buffer.text.line_start(cursor)
    if start == cursor:
        return ActionResult(status=NOOP)
    buffer.delete_range(start, cursor, label="delete_to_beginning_of_line")
    return ActionResult(status="delete")


def delete_to_end_of_line(
    context: EditorContext, request: ActionRequest
) -> ActionResult:
    del request
    buffer = context.buffer
    buffer.cursor.clear_selection()
    cursor = buffer.cursor.cursor
    end = buffer.text.line_end(cursor)
    if end == cursor:
        return ActionResult(status=NOOP)
    buffer.delete_range(cursor, end, label="delete_to_end_of_line")
    return ActionResult(status="delete")


def delete_line(context: EditorContext, request: ActionRequest) -> ActionResult:
    del request
    buffer = context.buffer
    text = buffer.text
    buffer.cursor.clear_selection()
    cursor = buffer.cursor.cursor
    start, end = text.line_start(cursor), text.line_end(cursor)
    if end < len(text):
        end += 1
    elif start > 0:
        start -= 1
    if start == end:
        return ActionResult(status=NOOP)
    buffer.delete_range(start, end, label="delete_line")
    buffer.cursor.move_to(text.line_start(buffer.cursor.cursor))
    return ActionResult(status="delete_line")


def outdent(context: EditorContext, request: ActionRequest) -> ActionResult:
    del request
    buffer = context.buffer
    text = buffer.text
    buffer.cursor.clear_selection()
    cursor = buffer.cursor.cursor
    start = text.line_start(cursor)
    line = text.slice(start, text.line_end(cursor))
    indent = min(len(line) - len(line.lstrip(" ")), context.settings.tab_width)
    if indent == 0:
        return ActionResult(status=NOOP)
    buffer.delete_range(start, start + indent, label="outdent")
    buffer.cursor.move_to(max(start, cursor - indent))
    return ActionResult(status="outdent")


def move_line_up(context: EditorContext, request: ActionRequest) -> ActionResult:
    del request
    buffer = context.buffer
    text = buffer.text
    buffer.cursor.clear_selection()
    cursor = buffer.cursor.cursor
    start, end = text.line_start(cursor), text.line_end(cursor)
    if start == 0:
        return ActionResult(status=NOOP)
    column = column_of(text, cursor)
    previous_start = text.line_start(start - 1)
    current = text.slice(start, end)
    previous = text.slice(previous_start, start - 1)
    buffer.replace_range(
        previous_start, end, f"{current}\n{previous}", label="move_line_up"
    )
    buffer.cursor.move_to(offset_in_line(text, previous_start, column))
    return ActionResult(status="move_line")


def move_line_down(context: EditorContext, request: ActionRequest) -> ActionResult:
    del request
    buffer = context.buffer
    text = buffer.text
    buffer.cursor.clear_selection()
    cursor = buffer.cursor.cursor
    start, end = text.line_start(cursor), text.line_end(cursor)
    if end >= len(text):
        return ActionResult(status=NOOP)
    column = column_of(text, cursor)
    next_end = text.line_end(end + 1)
    current = text.slice(start, end)
    following = text.slice(end + 1, next_end)
    buffer.replace_range(
        start, next_end, f"{following}\n{current}", label="move_line_down"
    )
    moved_start = start + len(following.encode("utf-8")) + 1
    buffer.cursor.move_to(offset_in_line(text, moved_start, column))
    return ActionResult(status="move_line")


__all__ = [
    "backspace",
    "delete",
    "delete_line",
    "delete_to_beginning_of_line",
    "delete_to_end_of_line",
    "insert_text",
    "move_line_down",
    "move_line_up",
    "newline",
    "outdent",
    "tab",
]
