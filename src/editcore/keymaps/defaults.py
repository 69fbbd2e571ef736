"""Built-in actions and the terminal key bindings that reach them."""

from __future__ import annotations

from typing import Iterable, Sequence

from editcore.actions import clipboard as clipboard_actions
from editcore.actions import editing as editing_actions
from editcore.actions import navigation as nav_actions
from editcore.actions import view as view_actions
from editcore.engine.base import EditorAction

from .models import ActionRef, Binding
from .registry import KeymapRegistry

A = EditorAction


def _action(action: EditorAction, handler, description: str) -> ActionRef:
    return ActionRef(id=action.value, handler=handler, description=description)


DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    _action(A.INSERT_TEXT, editing_actions.insert_text, "Insert typed text"),
    _action(A.NEWLINE, editing_actions.newline, "Insert a line break"),
    _action(A.BACKSPACE, editing_actions.backspace, "Delete character before cursor"),
    _action(A.DELETE, editing_actions.delete, "Delete character after cursor"),
    _action(
        A.DELETE_TO_BEGINNING_OF_LINE,
        editing_actions.delete_to_beginning_of_line,
        "Delete to line start",
    ),
    _action(
        A.DELETE_TO_END_OF_LINE,
        editing_actions.delete_to_end_of_line,
        "Delete to line end",
    ),
    _action(A.DELETE_LINE, editing_actions.delete_line, "Delete current line"),
    _action(A.TAB, editing_actions.tab, "Insert indentation"),
    _action(A.OUTDENT, editing_actions.outdent, "Remove indentation"),
    _action(A.MOVE_LINE_UP, editing_actions.move_line_up, "Move line up"),
    _action(A.MOVE_LINE_DOWN, editing_actions.move_line_down, "Move line down"),
    _action(A.MOVE_LEFT, nav_actions.move_left, "Cursor left"),
    _action(A.MOVE_RIGHT, nav_actions.move_right, "Cursor right"),
    _action(A.MOVE_UP, nav_actions.move_up, "Cursor up"),
    _action(A.MOVE_DOWN, nav_actions.move_down, "Cursor down"),
    _action(A.MOVE_WORD_LEFT, nav_actions.move_word_left, "Previous word"),
    _action(A.MOVE_WORD_RIGHT, nav_actions.move_word_right, "Next word"),
    _action(
        A.MOVE_TO_BEGINNING_OF_LINE,
        nav_actions.move_to_beginning_of_line,
        "Line start",
    ),
    _action(A.MOVE_TO_END_OF_LINE, nav_actions.move_to_end_of_line, "Line end"),
    _action(A.SELECT_LEFT, nav_actions.select_left, "Extend selection left"),
    _action(A.SELECT_RIGHT, nav_actions.select_right, "Extend selection right"),
    _action(A.SELECT_UP, nav_actions.select_up, "Extend selection up"),
    _action(A.SELECT_DOWN, nav_actions.select_down, "Extend selection down"),
    _action(
        A.SELECT_WORD_LEFT, nav_actions.select_word_left, "Extend selection a word left"
    ),
    _action(
        A.SELECT_WORD_RIGHT,
        nav_actions.select_word_right,
        "Extend selection a word right",
    ),
    _action(
        A.SELECT_TO_BEGINNING_OF_LINE,
        nav_actions.select_to_beginning_of_line,
        "Extend selection to line start",
    ),
    _action(
        A.SELECT_TO_END_OF_LINE,
        nav_actions.select_to_end_of_line,
        "Extend selection to line end",
    ),
    _action(A.SELECT_ALL, nav_actions.select_all, "Select everything"),
    _action(A.COPY, clipboard_actions.copy, "Copy selection"),
    _action(A.CUT, clipboard_actions.cut, "Cut selection"),
    _action(A.PASTE, clipboard_actions.paste, "Paste clipboard text"),
    _action(A.INCREASE_FONT_SIZE, view_actions.increase_font_size, "Larger text"),
    _action(A.DECREASE_FONT_SIZE, view_actions.decrease_font_size, "Smaller text"),
    _action(A.RESET_FONT_SIZE, view_actions.reset_font_size, "Default text size"),
)

# Key names follow Textual's spelling (``shift+left``, ``equals_sign``).
_KEYS: tuple[tuple[str, EditorAction], ...] = (
    ("enter", A.NEWLINE),
    ("backspace", A.BACKSPACE),
    ("delete", A.DELETE),
    ("ctrl+u", A.DELETE_TO_BEGINNING_OF_LINE),
    ("ctrl+k", A.DELETE_TO_END_OF_LINE),
    ("ctrl+shift+k", A.DELETE_LINE),
    ("tab", A.TAB),
    ("shift+tab", A.OUTDENT),
    ("alt+up", A.MOVE_LINE_UP),
    ("alt+down", A.MOVE_LINE_DOWN),
    ("left", A.MOVE_LEFT),
    ("right", A.MOVE_RIGHT),
    ("up", A.MOVE_UP),
    ("down", A.MOVE_DOWN),
    ("ctrl+left", A.MOVE_WORD_LEFT),
    ("ctrl+right", A.MOVE_WORD_RIGHT),
    ("home", A.MOVE_TO_BEGINNING_OF_LINE),
    ("end", A.MOVE_TO_END_OF_LINE),
    ("shift+left", A.SELECT_LEFT),
    ("shift+right", A.SELECT_RIGHT),
    ("shift+up", A.SELECT_UP),
    ("shift+down", A.SELECT_DOWN),
    ("ctrl+shift+left", A.SELECT_WORD_LEFT),
    ("ctrl+shift+right", A.SELECT_WORD_RIGHT),
    ("shift+home", A.SELECT_TO_BEGINNING_OF_LINE),
    ("shift+end", A.SELECT_TO_END_OF_LINE),
    ("ctrl+a", A.SELECT_ALL),
    ("ctrl+c", A.COPY),
    ("ctrl+x", A.CUT),
    ("ctrl+v", A.PASTE),
    ("ctrl+equals_sign", A.INCREASE_FONT_SIZE),
    ("ctrl+minus", A.DECREASE_FONT_SIZE),
    ("ctrl+0", A.RESET_FONT_SIZE),
)

DEFAULT_BINDINGS: tuple[Binding, ...] = tuple(
    Binding.parse(f"terminal.{key.replace('+', '.')}", key, action.value)
    for key, action in _KEYS
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    replace: bool = False,
    bindings: bool = True,
    extra_bindings: Iterable[Binding] | None = None,
    include_bindings: Sequence[str] | None = None,
    exclude_bindings: Sequence[str] | None = None,
) -> None:
    """Register built-in actions and, optionally, the terminal bindings."""

    for action in DEFAULT_ACTIONS:
        registry.register_action(action, replace=replace)

    if not bindings:
        return

    allowed = _build_filters(include_bindings, exclude_bindings)
    for binding in DEFAULT_BINDINGS:
        if _selected(binding.id, allowed):
            registry.register_binding(binding, replace=replace)

    for binding in extra_bindings or ():
        registry.register_binding(binding, replace=True)


def _build_filters(
    include: Sequence[str] | None, exclude: Sequence[str] | None
) -> tuple[set[str] | None, set[str]]:
    include_set = set(include) if include else None
    exclude_set = set(exclude or ())
    return include_set, exclude_set


def _selected(item_id: str, filters: tuple[set[str] | None, set[str]]) -> bool:
    include, exclude = filters
    if include is not None and item_id not in include:
        return False
    return item_id not in exclude


__all__ = ["load_default_keymaps", "DEFAULT_ACTIONS", "DEFAULT_BINDINGS"]
