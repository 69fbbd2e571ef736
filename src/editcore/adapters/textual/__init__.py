"""Textual front-end for the editing core."""

from .controller import COMMAND_MODIFIERS, TextualEditorAdapter, TextualUIHooks
from .render import PLACEHOLDER, RenderedLine, is_placeholder, layout_lines

__all__ = [
    "COMMAND_MODIFIERS",
    "PLACEHOLDER",
    "RenderedLine",
    "TextualEditorAdapter",
    "TextualUIHooks",
    "is_placeholder",
    "layout_lines",
]
