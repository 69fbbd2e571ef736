"""Pointer-to-offset mapping under fixed monospace metrics."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from editcore.buffer import TextBuffer
from editcore.config import EditorSettings


@dataclass(frozen=True, slots=True)
class HitMetrics:
    """Fixed character cell size plus the padding in front of the text."""

    char_width: float
    line_height: float
    padding_top: float = 0.0
    padding_left: float = 0.0

    def __post_init__(self) -> None:
        if not self.char_width > 0 or not self.line_height > 0:
            raise ValueError("char_width and line_height must be positive")

    @classmethod
    def for_font_size(
        cls, font_size: float, settings: Optional[EditorSettings] = None
    ) -> "HitMetrics":
        settings = settings or EditorSettings()
        return cls(
            char_width=font_size * settings.char_width_ratio,
            line_height=font_size * settings.line_height_ratio,
            padding_top=settings.padding_top,
            padding_left=settings.padding_left,
        )

    @classmethod
    def cells(cls) -> "HitMetrics":
        """One terminal cell per character, no padding."""

        return cls(char_width=1.0, line_height=1.0)


def _relative(value: float, padding: float) -> float:
    return value - padding if value > padding else 0.0


def _index(distance: float, size: float, limit: int) -> int:
    """Whole cells in ``distance``, capped at ``limit`` (infinity included)."""

    cells = distance / size
    if not math.isfinite(cells) or cells >= limit:
        return limit
    return math.floor(cells)


def offset_at(text: TextBuffer, x: float, y: float, metrics: HitMetrics) -> int:
    """Return the boundary offset under the pointer at ``(x, y)``.

    Line and column are clamped to the content, and the column is turned
    into bytes by summing the encoded lengths of the characters before it.
    """

    rel_x = _relative(x, metrics.padding_left)
    rel_y = _relative(y, metrics.padding_top)

    line_index = _index(rel_y, metrics.line_height, text.line_count() - 1)
    start, end = text.line_bounds(line_index)
    line = text.slice(start, end)

    column = _index(rel_x, metrics.char_width, len(line))
    return start + len(line[:column].encode("utf-8"))


class Viewport:
    """Current font size, bounded by the editor settings."""

    def __init__(self, settings: Optional[EditorSettings] = None) -> None:
        self.settings = settings or EditorSettings()
        self.font_size = self.settings.font_size

    def metrics(self) -> HitMetrics:
        return HitMetrics.for_font_size(self.font_size, self.settings)

    def _set(self, size: float) -> bool:
        size = self.settings.clamp_font_size(size)
        if size == self.font_size:
            return False
        self.font_size = size
        return True

    def increase(self) -> bool:
        return self._set(self.font_size + self.settings.font_step)

    def decrease(self) -> bool:
        return self._set(self.font_size - self.settings.font_step)

    def reset(self) -> bool:
        return self._set(self.settings.font_size)


__all__ = ["HitMetrics", "Viewport", "offset_at"]
