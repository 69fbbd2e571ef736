"""Executable Textual app that hosts the editing core."""

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass
from typing import List, Optional, Sequence

try:  # pragma: no cover - imported only when the front-end is run
    from rich.text import Text
    from textual import events
    from textual.app import App, ComposeResult
    from textual.widgets import Footer, Header, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use editcore.adapters.textual.app"
    ) from exc

from editcore.adapters.storage import DocumentFile
from editcore.buffer import Buffer, MemoryClipboard
from editcore.config import EditorSettings
from editcore.engine.manager import EditorEngine, EditorSnapshot
from editcore.runtime import telemetry

from .controller import TextualEditorAdapter, TextualUIHooks
from .render import PLACEHOLDER, RenderedLine, is_placeholder, layout_lines

SELECTION_STYLE = "reverse"
CARET_STYLE = "reverse blink"


class AppClipboard(MemoryClipboard):
    """In-process clipboard that also pushes copies to the terminal (OSC 52)."""

    def __init__(self, app: App[None]) -> None:
        super().__init__()
        self._app = app

    def set(self, text: str) -> None:
        super().set(text)
        self._app.copy_to_clipboard(text)


def render_text(lines: List[RenderedLine]) -> Text:
    """Build a Rich ``Text`` from laid-out lines."""

    output = Text()
    for index, line in enumerate(lines):
        if index:
            output.append("\n")
        row = Text(line.text)
        if line.selection is not None:
            row.stylize(SELECTION_STYLE, *line.selection)
        if line.newline_selected:
            row.append(" ", style=SELECTION_STYLE)
        if line.caret is not None:
            if line.caret < len(line.text):
                row.stylize(CARET_STYLE, line.caret, line.caret + 1)
            else:
                row.append(" ", style=CARET_STYLE)
        output.append_text(row)
    return output


def render_snapshot(snapshot: EditorSnapshot) -> Text:
    if is_placeholder(snapshot):
        placeholder = Text(" ", style=CARET_STYLE)
        placeholder.append(PLACEHOLDER, style="dim")
        return placeholder
    return render_text(layout_lines(snapshot))


class BufferView(Static):
    """Text area that turns mouse presses and drags into pointer calls."""

    def __init__(self, **kwargs: object) -> None:
        super().__init__("", **kwargs)
        self.adapter: TextualEditorAdapter | None = None

    def on_mouse_down(self, event: events.MouseDown) -> None:
        offset = event.get_content_offset(self)
        if self.adapter is None or offset is None or event.button != 1:
            return
        self.adapter.handle_mouse_down(offset.x, offset.y)
        self.capture_mouse()
        event.stop()

    def on_mouse_move(self, event: events.MouseMove) -> None:
        if self.adapter is None:
            return
        # Captured drags may leave the content region; clamp into it.
        region = self.content_region
        x = min(max(event.screen_x - region.x, 0), max(region.width - 1, 0))
        y = min(max(event.screen_y - region.y, 0), max(region.height - 1, 0))
        self.adapter.handle_mouse_move(x, y)

    def on_mouse_up(self, event: events.MouseUp) -> None:
        if self.adapter is None:
            return
        self.adapter.handle_mouse_up()
        self.release_mouse()
        event.stop()


@dataclass
class UIState:
    status_text: str = ""


class EditorApp(App[None]):
    """Minimal Textual UI embedding the editing core with autosave."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#buffer-view {
		height: 1fr;
		padding: 0 0;
		content-align: left top;
		overflow: auto;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+w", "quit", "Save & quit"),
        ("ctrl+q", "quit", "Save & quit"),
    ]

    def __init__(
        self,
        document: DocumentFile,
        *,
        settings: Optional[EditorSettings] = None,
    ) -> None:
        super().__init__()
        self._state = UIState()
        self.document = document
        self.settings = settings
        self.engine: EditorEngine | None = None
        self.adapter: TextualEditorAdapter | None = None
        self._buffer_widget: BufferView | None = None
        self._status_widget: Static | None = None
        self._saved_version = 0
        self.logger = telemetry.get_logger("editcore.app")

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        self._buffer_widget = BufferView(id="buffer-view")
        yield self._buffer_widget
        self._status_widget = Static("", id="status-line")
        yield self._status_widget
        yield Footer()

    def on_mount(self) -> None:
        self.engine = EditorEngine(
            Buffer(name=str(self.document.path)),
            clipboard=AppClipboard(self),
            settings=self.settings,
        )
        if self.document.exists():
            self.engine.load_text(self.document.load())
        hooks = TextualUIHooks(
            update_buffer=self._update_buffer,
            update_status=self._update_status,
            log=self.logger.debug,
        )
        self.adapter = TextualEditorAdapter(self.engine, hooks)
        if self._buffer_widget is not None:
            self._buffer_widget.adapter = self.adapter
        self._saved_version = self.engine.buffer.text.version
        self.engine.bus.subscribe("editor.changed", self._autosave)
        self.set_interval(0.1, self._check_reload)

    def on_unmount(self) -> None:
        if self.engine is not None:
            self.document.push_from(self.engine)

    def _check_reload(self) -> None:
        if self.engine is not None and self.document.pull_into(self.engine):
            self._update_status(f"reloaded {self.document.path}")

    def _autosave(self, payload: object) -> None:
        if not isinstance(payload, EditorSnapshot):
            return
        if payload.version != self._saved_version:
            self.document.save(payload.text)
            self._saved_version = payload.version

    def on_key(self, event: events.Key) -> None:
        if self.adapter is None:
            return
        result = self.adapter.handle_textual_key(
            event.key, character=event.character, printable=event.is_printable
        )
        if result is not None:
            event.stop()
            event.prevent_default()

    def _update_buffer(self, snapshot: EditorSnapshot) -> None:
        if self._buffer_widget:
            self._buffer_widget.update(render_snapshot(snapshot))

    def _update_status(self, status: str) -> None:
        self._state.status_text = status
        if self._status_widget:
            self._status_widget.update(status)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the editcore terminal editor.")
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="File to edit (default: $EDITCORE_FILE or ~/.editcore/scratch.txt)",
    )
    parser.add_argument(
        "--log-preset",
        choices=telemetry.PRESETS,
        default=os.environ.get("EDITCORE_LOG_PRESET", "quiet"),
        help="Telemetry preset (default: quiet, console logging off)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    telemetry.configure(preset=args.log_preset)
    document = DocumentFile(args.path) if args.path else DocumentFile.default()
    app = EditorApp(document, settings=EditorSettings.from_env())
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual run
    main()
