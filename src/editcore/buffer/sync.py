"""Adapter boundary types for exchanging content with collaborators."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, Tuple


@dataclass(frozen=True, slots=True)
class BufferView:
    """Read-only snapshot of a buffer and its cursor state."""

    version: int
    text: str
    cursor: int
    selection: Optional[Tuple[int, int]]


class BufferSync(Protocol):
    """How persistence or host layers exchange whole documents with the core."""

    def pull_buffer(self) -> BufferView:
        """Return the latest snapshot the host should persist or render."""
        ...

    def push_host_text(self, text: str) -> None:
        """Replace the content wholesale, e.g. after an external reload."""
        ...


class BufferValidationError(RuntimeError):
    """Raised when a collaborator hands the core content it cannot accept."""

    def __init__(self, message: str, *, offset: int | None = None) -> None:
        super().__init__(message)
        self.offset = offset


__all__ = ["BufferView", "BufferSync", "BufferValidationError"]
