"""Clipboard port consumed by copy, cut and paste."""

from __future__ import annotations

from typing import Optional, Protocol


class ClipboardPort(Protocol):
    """Plain-text clipboard provided by the host."""

    def get(self) -> Optional[object]:
        """Return the clipboard content, or ``None`` when empty."""
        ...

    def set(self, text: str) -> None: ...


class MemoryClipboard:
    """Process-local clipboard used by tests and terminal hosts."""

    def __init__(self, initial: Optional[object] = None) -> None:
        self._value = initial

    def get(self) -> Optional[object]:
        return self._value

    def set(self, text: str) -> None:
        self._value = text


def read_text(port: ClipboardPort) -> Optional[str]:
    """Return clipboard text, or ``None`` for empty or non-text content."""

    value = port.get()
    if isinstance(value, str):
        return value
    return None


__all__ = ["ClipboardPort", "MemoryClipboard", "read_text"]
