"""Editor settings resolved from ``EDITCORE_*`` environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

ENV_PREFIX = "EDITCORE_"


def _env_number(
    environ: Mapping[str, str], name: str, fallback: float, *, minimum: float = 0
) -> float:
    raw = environ.get(f"{ENV_PREFIX}{name}")
    if raw is None:
        return fallback
    try:
        value = float(raw)
    except ValueError:
        return fallback
    if value < minimum:
        return fallback
    return value


@dataclass(frozen=True, slots=True)
class EditorSettings:
    """Fixed metrics and limits used by the editing core."""

    font_size: float = 24.0
    min_font_size: float = 8.0
    max_font_size: float = 72.0
    font_step: float = 2.0
    tab_width: int = 4
    padding_top: float = 40.0
    padding_left: float = 16.0
    char_width_ratio: float = 0.6
    line_height_ratio: float = 1.5

    def __post_init__(self) -> None:
        if self.min_font_size <= 0:
            raise ValueError("min_font_size must be positive")
        if self.min_font_size > self.max_font_size:
            raise ValueError("min_font_size cannot exceed max_font_size")
        if self.tab_width < 1:
            raise ValueError("tab_width must be at least 1")

    def clamp_font_size(self, size: float) -> float:
        return max(self.min_font_size, min(size, self.max_font_size))

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EditorSettings":
        env = os.environ if environ is None else environ
        defaults = cls()
        min_size = _env_number(env, "MIN_FONT_SIZE", defaults.min_font_size, minimum=1)
        max_size = _env_number(env, "MAX_FONT_SIZE", defaults.max_font_size, minimum=1)
        if min_size > max_size:
            min_size, max_size = defaults.min_font_size, defaults.max_font_size
        font_size = _env_number(env, "FONT_SIZE", defaults.font_size, minimum=1)
        return cls(
            font_size=max(min_size, min(font_size, max_size)),
            min_font_size=min_size,
            max_font_size=max_size,
            font_step=_env_number(env, "FONT_STEP", defaults.font_step, minimum=0.5),
            tab_width=int(_env_number(env, "TAB_WIDTH", defaults.tab_width, minimum=1)),
            padding_top=_env_number(env, "PADDING_TOP", defaults.padding_top),
            padding_left=_env_number(env, "PADDING_LEFT", defaults.padding_left),
        )


__all__ = ["EditorSettings", "ENV_PREFIX"]
