from __future__ import annotations

import os
from pathlib import Path

import pytest

from editcore.adapters.storage import DEFAULT_PATH, DocumentFile
from editcore.buffer import Buffer, BufferValidationError, MemoryClipboard
from editcore.config import EditorSettings
from editcore.engine.manager import EditorEngine


def make_engine(text: str = "") -> EditorEngine:
    return EditorEngine(
        Buffer.from_text(text), clipboard=MemoryClipboard(), settings=EditorSettings()
    )


def touch_later(path: Path, seconds: float = 10.0) -> None:
    stamp = path.stat().st_mtime + seconds
    os.utime(path, (stamp, stamp))


def test_save_then_load_round_trips_utf8(tmp_path: Path) -> None:
    document = DocumentFile(tmp_path / "nested" / "doc.txt")

    document.save("héllo\n😀")

    assert document.exists()
    assert document.load() == "héllo\n😀"
    assert document.changed_on_disk() is False


def test_load_rejects_invalid_utf8(tmp_path: Path) -> None:
    path = tmp_path / "binary.txt"
    path.write_bytes(b"ok\xfe")

    with pytest.raises(BufferValidationError) as excinfo:
        DocumentFile(path).load()

    assert excinfo.value.offset == 2


def test_pull_into_reloads_external_changes(tmp_path: Path) -> None:
    path = tmp_path / "doc.txt"
    document = DocumentFile(path)
    engine = make_engine("draft")
    document.push_from(engine)

    assert document.pull_into(engine) is False

    path.write_text("edited elsewhere", encoding="utf-8")
    touch_later(path)

    assert document.pull_into(engine) is True
    assert engine.buffer.content == "edited elsewhere"
    assert document.pull_into(engine) is False


def test_missing_file_is_not_a_change(tmp_path: Path) -> None:
    document = DocumentFile(tmp_path / "absent.txt")

    assert document.exists() is False
    assert document.changed_on_disk() is False


def test_default_path_honours_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("EDITCORE_FILE", str(tmp_path / "env.txt"))
    assert DocumentFile.default().path == tmp_path / "env.txt"

    monkeypatch.delenv("EDITCORE_FILE")
    assert DocumentFile.default().path == DEFAULT_PATH.expanduser()
