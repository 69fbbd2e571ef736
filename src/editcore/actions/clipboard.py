"""Copy, cut and paste through the host's clipboard port."""

from __future__ import annotations

from editcore.buffer import read_text
from editcore.engine.base import NOOP, ActionRequest, ActionResult, EditorContext


def copy(context: EditorContext, request: ActionRequest) -> ActionResult:
    del request
    text = context.buffer.selected_text()
    if text is None:
        return ActionResult(status="no_selection")
    context.clipboard.set(text)
    context.bus.emit("clipboard.copy", {"text": text})
    return ActionResult(status="copy")


def cut(context: EditorContext, request: ActionRequest) -> ActionResult:
    del request
    buffer = context.buffer
    text = buffer.selected_text()
    if text is None:
        return ActionResult(status="no_selection")
    context.clipboard.set(text)
    buffer.replace_selection(label="cut")
    context.bus.emit("clipboard.cut", {"text": text})
    return ActionResult(status="cut")


def paste(context: EditorContext, request: ActionRequest) -> ActionResult:
    del request
    text = read_text(context.clipboard)
    if text is None:
        return ActionResult(status=NOOP, message="clipboard_empty")
    buffer = context.buffer
    buffer.replace_selection(label="paste:replace_selection")
    if text:
        buffer.insert_text(text)
    return ActionResult(status="paste")


__all__ = ["copy", "cut", "paste"]
