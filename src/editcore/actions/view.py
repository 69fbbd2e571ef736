"""Font-size actions; the size feeds pointer hit-testing."""

from __future__ import annotations

from editcore.engine.base import NOOP, ActionRequest, ActionResult, EditorContext


def _result(changed: bool, context: EditorContext) -> ActionResult:
    if not changed:
        return ActionResult(status=NOOP)
    return ActionResult(status="font_size", message=f"{context.viewport.font_size:g}")


def increase_font_size(
    context: EditorContext, request: ActionRequest
) -> ActionResult:
    del request
    return _result(context.viewport.increase(), context)


def decrease_font_size(
    context: EditorContext, request: ActionRequest
) -> ActionResult:
    del request
    return _result(context.viewport.decrease(), context)


def reset_font_size(
    context: EditorContext, request: ActionRequest
) -> ActionResult:
    del request
    return _result(context.viewport.reset(), context)


__all__ = ["increase_font_size", "decrease_font_size", "reset_font_size"]
