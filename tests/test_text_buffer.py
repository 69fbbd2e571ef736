from __future__ import annotations

import pytest

from editcore.buffer import BufferValidationError, TextBuffer


def make_text(value: str = "aé€😀") -> TextBuffer:
    return TextBuffer.from_text(value)


def test_snap_steps_back_to_character_start() -> None:
    text = make_text()

    assert len(text) == 10
    assert text.snap(2) == 1
    assert text.snap(5) == 3
    assert text.snap(-4) == 0
    assert text.snap(99) == 10


def test_boundary_steps_cover_whole_characters() -> None:
    text = make_text()

    assert text.next_boundary(0) == 1
    assert text.next_boundary(1) == 3
    assert text.next_boundary(3) == 6
    assert text.next_boundary(6) == 10
    assert text.next_boundary(10) == 10
    assert text.prev_boundary(10) == 6
    assert text.prev_boundary(3) == 1
    assert text.prev_boundary(0) == 0


def test_line_queries() -> None:
    text = make_text("ab\ncd\n")

    assert text.line_count() == 3
    assert text.line_start(4) == 3
    assert text.line_end(4) == 5
    assert text.line_index(6) == 2
    assert text.line_bounds(1) == (3, 5)
    assert text.line_bounds(2) == (6, 6)
    assert text.line_bounds(9) == (6, 6)
    assert text.lines() == ["ab", "cd", ""]


def test_insert_and_delete_track_version() -> None:
    text = make_text("hello")

    assert text.insert(5, " world") == 6
    assert text.version == 1
    assert text.insert(0, "") == 0
    assert text.version == 1

    removed = text.delete_range(11, 5)

    assert removed == " world"
    assert text.text == "hello"
    assert text.version == 2


def test_slice_never_splits_characters() -> None:
    text = make_text("é€")

    assert text.slice(1, 4) == "é"
    assert text.slice(0, 5) == "é€"


def test_from_bytes_rejects_invalid_utf8() -> None:
    with pytest.raises(BufferValidationError) as excinfo:
        TextBuffer.from_bytes(b"ok\xff")

    assert excinfo.value.offset == 2
