"""Textual adapter that turns key and mouse events into editor actions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from editcore.engine import ActionResult
from editcore.engine.manager import CHANGED, EditorEngine, EditorSnapshot
from editcore.keymaps import KeymapResolver, KeyStroke
from editcore.pointer import HitMetrics

# Modifiers that turn a printable key into a command rather than text.
COMMAND_MODIFIERS = frozenset({"ctrl", "alt", "meta", "super"})


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_buffer: Callable[[EditorSnapshot], None]
    update_status: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop


class TextualEditorAdapter:
    """Bridges an :class:`EditorEngine` to a Textual-friendly surface."""

    def __init__(
        self,
        engine: EditorEngine,
        hooks: TextualUIHooks,
        *,
        resolver: Optional[KeymapResolver] = None,
        metrics: Optional[HitMetrics] = None,
    ) -> None:
        self.engine = engine
        self.hooks = hooks
        self.resolver = resolver or KeymapResolver(
            engine.registry, logger_name="editcore.keymaps"
        )
        self.metrics = metrics or HitMetrics.cells()
        self._subscribe_events()
        self._refresh_buffer(engine.snapshot())

    def handle_textual_key(
        self, key: str, *, character: Optional[str] = None, printable: bool = False
    ) -> Optional[ActionResult]:
        """Dispatch a Textual key name; returns ``None`` when nothing handled it."""

        self._log_state("key ->", key=key, character=character)
        resolution = self.resolver.resolve(key)
        if resolution.match is not None:
            result = self.engine.handle_action(resolution.match.action.id)
        elif character and printable and not self._has_command_modifier(key):
            result = self.engine.type_text(character)
        else:
            self._log_state("unbound <-", key=key)
            return None
        self.hooks.update_status(result.message or result.status)
        self._log_state("result <-", status=result.status, message=result.message)
        return result

    def handle_mouse_down(self, x: float, y: float) -> None:
        state = self.engine.pointer_down(x, y, self.metrics)
        self._log_state("mouse down ->", x=x, y=y, drag=state)

    def handle_mouse_move(self, x: float, y: float) -> None:
        self.engine.pointer_move(x, y, self.metrics)

    def handle_mouse_up(self) -> None:
        state = self.engine.pointer_up()
        self._log_state("mouse up ->", drag=state)

    @staticmethod
    def _has_command_modifier(key: str) -> bool:
        try:
            stroke = KeyStroke.parse(key)
        except ValueError:
            return False
        return bool(COMMAND_MODIFIERS.intersection(stroke.modifiers))

    def _subscribe_events(self) -> None:
        bus = self.engine.bus
        bus.subscribe(CHANGED, self._on_changed)
        for event in ("clipboard.copy", "clipboard.cut"):
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _on_changed(self, payload: object) -> None:
        if isinstance(payload, EditorSnapshot):
            self._refresh_buffer(payload)

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name)
        self.hooks.handle_event(name, payload)

    def _refresh_buffer(self, snapshot: EditorSnapshot) -> None:
        self.hooks.update_buffer(snapshot)

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        buffer = self.engine.buffer
        return {
            "cursor": buffer.cursor.cursor,
            "selection": buffer.cursor.selection_range(),
            "buffer": buffer.name,
            "version": buffer.text.version,
        }


__all__ = ["COMMAND_MODIFIERS", "TextualEditorAdapter", "TextualUIHooks"]
