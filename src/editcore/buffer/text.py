"""UTF-8 byte storage with boundary-safe offsets."""

from __future__ import annotations

from typing import List

from .sync import BufferValidationError

_NEWLINE = ord("\n")


def _is_continuation(byte: int) -> bool:
    return byte & 0xC0 == 0x80


class TextBuffer:
    """Growable UTF-8 byte sequence.

    Every offset accepted by the public API is clamped to ``[0, len]`` and
    snapped backward to the nearest code-point boundary, so callers can
    never split a multi-byte character. ``"\\n"`` never occurs inside a
    multi-byte sequence, which lets line scans work on raw bytes.
    """

    def __init__(self, data: bytes | bytearray = b"") -> None:
        self._data = bytearray(data)
        self.version = 0

    @classmethod
    def from_text(cls, text: str) -> "TextBuffer":
        return cls(text.encode("utf-8"))

    @classmethod
    def from_bytes(cls, data: bytes) -> "TextBuffer":
        try:
            data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise BufferValidationError(
                "Content is not valid UTF-8", offset=exc.start
            ) from exc
        return cls(data)

    def __len__(self) -> int:
        return len(self._data)

    @property
    def text(self) -> str:
        return self._data.decode("utf-8")

    def to_bytes(self) -> bytes:
        return bytes(self._data)

    # -- boundaries -------------------------------------------------------

    def is_boundary(self, offset: int) -> bool:
        if offset < 0 or offset > len(self._data):
            return False
        return offset == len(self._data) or not _is_continuation(self._data[offset])

    def snap(self, offset: int) -> int:
        offset = max(0, min(offset, len(self._data)))
        while offset > 0 and not self.is_boundary(offset):
            offset -= 1
        return offset

    def next_boundary(self, offset: int) -> int:
        offset = self.snap(offset)
        size = len(self._data)
        if offset >= size:
            return size
        offset += 1
        while offset < size and _is_continuation(self._data[offset]):
            offset += 1
        return offset

    def prev_boundary(self, offset: int) -> int:
        offset = self.snap(offset)
        if offset == 0:
            return 0
        offset -= 1
        while offset > 0 and _is_continuation(self._data[offset]):
            offset -= 1
        return offset

    # -- lines ------------------------------------------------------------

    def line_start(self, offset: int) -> int:
        offset = self.snap(offset)
        return self._data.rfind(b"\n", 0, offset) + 1

    def line_end(self, offset: int) -> int:
        offset = self.snap(offset)
        found = self._data.find(b"\n", offset)
        return len(self._data) if found < 0 else found

    def line_count(self) -> int:
        return self._data.count(_NEWLINE) + 1

    def line_index(self, offset: int) -> int:
        return self._data.count(_NEWLINE, 0, self.snap(offset))

    def line_bounds(self, index: int) -> tuple[int, int]:
        """Return ``(start, end)`` of line ``index``, clamped to existing lines."""

        index = max(0, min(index, self.line_count() - 1))
        start = 0
        for _ in range(index):
            start = self._data.find(b"\n", start) + 1
        return start, self.line_end(start)

    def lines(self) -> List[str]:
        return self.text.split("\n")

    # -- content ----------------------------------------------------------

    def slice(self, start: int, end: int) -> str:
        start, end = sorted((self.snap(start), self.snap(end)))
        return self._data[start:end].decode("utf-8")

    def insert(self, at: int, text: str) -> int:
        """Splice ``text`` in at ``at``; return the inserted byte length."""

        encoded = text.encode("utf-8")
        if not encoded:
            return 0
        at = self.snap(at)
        self._data[at:at] = encoded
        self.version += 1
        return len(encoded)

    def delete_range(self, start: int, end: int) -> str:
        """Remove ``[start, end)`` and return the removed text."""

        start, end = sorted((self.snap(start), self.snap(end)))
        if start == end:
            return ""
        removed = self._data[start:end].decode("utf-8")
        del self._data[start:end]
        self.version += 1
        return removed

    def replace_all(self, text: str) -> None:
        self._data = bytearray(text.encode("utf-8"))
        self.version += 1


__all__ = ["TextBuffer"]
