"""Editor engine: owns the editing state and dispatches actions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from editcore.buffer import Buffer, BufferView, ClipboardPort, MemoryClipboard
from editcore.config import EditorSettings
from editcore.keymaps import KeymapRegistry, load_default_keymaps
from editcore.pointer import IDLE, DragState, HitMetrics, Idle, Viewport, offset_at
from editcore.pointer import drag
from editcore.runtime import telemetry

from .base import ActionRequest, ActionResult, EditorAction, EditorBus, EditorContext

CHANGED = "editor.changed"


@dataclass(frozen=True, slots=True)
class EditorSnapshot:
    """State exposed to rendering and persistence layers."""

    version: int
    text: str
    cursor: int
    selection: Optional[Tuple[int, int]]
    font_size: float


class EditorEngine:
    """Applies one action at a time to a buffer and reports changes.

    The engine is synchronous and not thread-safe: hosts feeding it from
    several threads must serialize every call. ``editor.changed`` is
    emitted on the bus exactly once per call that altered the text, the
    cursor/selection or the font size.
    """

    def __init__(
        self,
        buffer: Optional[Buffer] = None,
        *,
        clipboard: Optional[ClipboardPort] = None,
        settings: Optional[EditorSettings] = None,
        registry: Optional[KeymapRegistry] = None,
        bus: Optional[EditorBus] = None,
        load_defaults: bool = True,
    ) -> None:
        self.settings = settings or EditorSettings.from_env()
        self.context = EditorContext(
            buffer=buffer or Buffer(),
            bus=bus or EditorBus(),
            clipboard=clipboard or MemoryClipboard(),
            settings=self.settings,
            viewport=Viewport(self.settings),
        )
        self.registry = registry or KeymapRegistry(logger_name="editcore.keymaps")
        if load_defaults and registry is None:
            load_default_keymaps(self.registry)
        self.drag_state: DragState = IDLE

    @property
    def buffer(self) -> Buffer:
        return self.context.buffer

    @property
    def bus(self) -> EditorBus:
        return self.context.bus

    @property
    def viewport(self) -> Viewport:
        return self.context.viewport

    def snapshot(self) -> EditorSnapshot:
        view = self.buffer.snapshot()
        return EditorSnapshot(
            version=view.version,
            text=view.text,
            cursor=view.cursor,
            selection=view.selection,
            font_size=self.viewport.font_size,
        )

    def handle_action(
        self, action: EditorAction | str, payload: Optional[str] = None
    ) -> ActionResult:
        action_id = str(action)
        action_ref = self.registry.get_action(action_id)
        before = self._fingerprint()
        with telemetry.span(
            name=f"action::{action_ref.telemetry_name}",
            component=True,
            metadata={"action": action_id, "buffer": self.buffer.name},
        ) as handle:
            outcome = action_ref(self.context, ActionRequest(action_id, payload))
            result = outcome if isinstance(outcome, ActionResult) else ActionResult()
            handle.add_metadata("status", result.status)
        self._notify_if_changed(before)
        return result

    def type_text(self, text: str) -> ActionResult:
        return self.handle_action(EditorAction.INSERT_TEXT, text)

    # -- pointer ----------------------------------------------------------

    def hit_test(
        self, x: float, y: float, metrics: Optional[HitMetrics] = None
    ) -> int:
        return offset_at(self.buffer.text, x, y, metrics or self.viewport.metrics())

    def pointer_down(
        self, x: float, y: float, metrics: Optional[HitMetrics] = None
    ) -> DragState:
        before = self._fingerprint()
        offset = self.hit_test(x, y, metrics)
        self.drag_state = drag.press(self.buffer, self.drag_state, offset)
        self._notify_if_changed(before)
        return self.drag_state

    def pointer_move(
        self, x: float, y: float, metrics: Optional[HitMetrics] = None
    ) -> DragState:
        if isinstance(self.drag_state, Idle):
            return self.drag_state
        before = self._fingerprint()
        offset = self.hit_test(x, y, metrics)
        self.drag_state = drag.drag_to(self.buffer, self.drag_state, offset)
        self._notify_if_changed(before)
        return self.drag_state

    def pointer_up(self) -> DragState:
        self.drag_state = drag.release(self.buffer, self.drag_state)
        return self.drag_state

    # -- host synchronisation ---------------------------------------------

    def pull_buffer(self) -> BufferView:
        return self.buffer.snapshot()

    def push_host_text(self, text: str) -> None:
        self.load_text(text)

    def load_text(self, text: str) -> None:
        """Replace the content wholesale (external reload)."""

        before = self._fingerprint()
        self.buffer.load(text)
        self.drag_state = IDLE
        telemetry.record_event(
            "buffer.load",
            data={"buffer": self.buffer.name, "bytes": len(self.buffer.text)},
            logger_name="editcore.engine",
        )
        self._notify_if_changed(before)

    def _fingerprint(self) -> tuple[object, ...]:
        return (
            self.buffer.text.version,
            self.buffer.cursor.state,
            self.viewport.font_size,
        )

    def _notify_if_changed(self, before: tuple[object, ...]) -> None:
        if self._fingerprint() != before:
            self.bus.emit(CHANGED, self.snapshot())


__all__ = ["CHANGED", "EditorEngine", "EditorSnapshot"]
