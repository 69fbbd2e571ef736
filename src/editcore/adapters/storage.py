"""File persistence collaborator: load, save and external-change reload."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from editcore.buffer import BufferSync, BufferValidationError
from editcore.config import ENV_PREFIX
from editcore.runtime import telemetry

DEFAULT_PATH = Path("~/.editcore/scratch.txt")


class DocumentFile:
    """A UTF-8 file mirrored into an editor through :class:`BufferSync`."""

    def __init__(self, path: os.PathLike[str] | str) -> None:
        self.path = Path(path).expanduser()
        self.last_modified: Optional[float] = None

    @classmethod
    def default(cls) -> "DocumentFile":
        return cls(os.getenv(f"{ENV_PREFIX}FILE") or DEFAULT_PATH)

    def exists(self) -> bool:
        return self.path.is_file()

    def _mtime(self) -> Optional[float]:
        try:
            return self.path.stat().st_mtime
        except FileNotFoundError:
            return None

    def load(self) -> str:
        data = self.path.read_bytes()
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise BufferValidationError(
                f"{self.path} is not valid UTF-8", offset=exc.start
            ) from exc
        self.last_modified = self._mtime()
        return text

    def save(self, text: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_bytes(text.encode("utf-8"))
        self.last_modified = self._mtime()

    def changed_on_disk(self) -> bool:
        mtime = self._mtime()
        if mtime is None:
            return False
        return self.last_modified is None or mtime > self.last_modified

    def pull_into(self, target: BufferSync) -> bool:
        """Reload into ``target`` if the file changed since we last touched it."""

        if not self.changed_on_disk():
            return False
        target.push_host_text(self.load())
        telemetry.record_event(
            "storage.reload",
            data={"path": str(self.path)},
            logger_name="editcore.storage",
        )
        return True

    def push_from(self, source: BufferSync) -> None:
        self.save(source.pull_buffer().text)


__all__ = ["DEFAULT_PATH", "DocumentFile"]
