"""Pure layout of an editor snapshot into per-line draw instructions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from editcore.engine.manager import EditorSnapshot

PLACEHOLDER = "Start typing..."


@dataclass(frozen=True, slots=True)
class RenderedLine:
    """One line of text with the caret and selection in character columns.

    ``selection`` is a half-open column range; ``newline_selected`` marks
    that the line break after the line lies inside the selection.
    """

    text: str
    caret: Optional[int] = None
    selection: Optional[Tuple[int, int]] = None
    newline_selected: bool = False


def _columns(line: bytes, byte_delta: int) -> int:
    return len(line[:byte_delta].decode("utf-8"))


def layout_lines(snapshot: EditorSnapshot) -> List[RenderedLine]:
    """Lay out ``snapshot`` line by line; the caret is hidden over a selection."""

    rendered: List[RenderedLine] = []
    selection = snapshot.selection
    total = len(snapshot.text.encode("utf-8"))
    start = 0
    for line in snapshot.text.split("\n"):
        encoded = line.encode("utf-8")
        end = start + len(encoded)

        caret = None
        if selection is None and start <= snapshot.cursor <= end:
            caret = _columns(encoded, snapshot.cursor - start)

        columns = None
        newline_selected = False
        if selection is not None:
            sel_start, sel_end = selection
            low, high = max(sel_start, start), min(sel_end, end)
            if low < high:
                columns = (
                    _columns(encoded, low - start),
                    _columns(encoded, high - start),
                )
            newline_selected = end < total and sel_start <= end < sel_end

        rendered.append(
            RenderedLine(
                text=line,
                caret=caret,
                selection=columns,
                newline_selected=newline_selected,
            )
        )
        start = end + 1
    return rendered


def is_placeholder(snapshot: EditorSnapshot) -> bool:
    return not snapshot.text


__all__ = ["PLACEHOLDER", "RenderedLine", "is_placeholder", "layout_lines"]
