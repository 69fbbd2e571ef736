"""Editing verbs dispatched by the engine."""

from .clipboard import copy, cut, paste
from .editing import (
    backspace,
    delete,
    delete_line,
    delete_to_beginning_of_line,
    delete_to_end_of_line,
    insert_text,
    move_line_down,
    move_line_up,
    newline,
    outdent,
    tab,
)
from .navigation import (
    move_down,
    move_left,
    move_right,
    move_to_beginning_of_line,
    move_to_end_of_line,
    move_up,
    move_word_left,
    move_word_right,
    select_all,
)
from .view import decrease_font_size, increase_font_size, reset_font_size

__all__ = [
    "backspace",
    "copy",
    "cut",
    "decrease_font_size",
    "delete",
    "delete_line",
    "delete_to_beginning_of_line",
    "delete_to_end_of_line",
    "increase_font_size",
    "insert_text",
    "move_down",
    "move_left",
    "move_line_down",
    "move_line_up",
    "move_right",
    "move_to_beginning_of_line",
    "move_to_end_of_line",
    "move_up",
    "move_word_left",
    "move_word_right",
    "newline",
    "outdent",
    "paste",
    "reset_font_size",
    "select_all",
    "tab",
]
