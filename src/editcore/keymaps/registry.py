"""Keymap registry responsible for storing actions and bindings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Optional

from editcore.runtime.telemetry import span

from .models import ActionRef, Binding


@dataclass(slots=True)
class RegistryStats:
    """Lightweight snapshot describing registry state."""

    action_count: int
    binding_count: int


class UnknownActionError(KeyError):
    """Raised when an action id has no registered handler."""

    def __init__(self, action_id: str) -> None:
        super().__init__(f"Action '{action_id}' is not registered")
        self.action_id = action_id


class KeymapConflictError(RuntimeError):
    """Raised when a new binding claims a keystroke that is already bound."""

    def __init__(self, binding: Binding, conflicts: Iterable[Binding]):
        conflicts_tuple = tuple(conflicts)
        message = (
            f"Binding '{binding.id}' conflicts with {[b.id for b in conflicts_tuple]}"
        )
        super().__init__(message)
        self.binding = binding
        self.conflicts = conflicts_tuple


class KeymapRegistry:
    """Owns action references and the keystroke bindings pointing at them."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._actions: Dict[str, ActionRef] = {}
        self._bindings: Dict[str, Binding] = {}
        self._by_signature: Dict[str, str] = {}
        self._logger_name = logger_name
        self._revision = 0

    def revision(self) -> int:
        return self._revision

    def has_action(self, action_id: str) -> bool:
        return action_id in self._actions

    def get_action(self, action_id: str) -> ActionRef:
        try:
            return self._actions[action_id]
        except KeyError:
            raise UnknownActionError(action_id) from None

    def get_binding(self, binding_id: str) -> Binding:
        try:
            return self._bindings[binding_id]
        except KeyError as exc:
            raise KeyError(f"Binding '{binding_id}' is not registered") from exc

    def binding_for(self, token: str) -> Optional[Binding]:
        binding_id = self._by_signature.get(token)
        if binding_id is None:
            return None
        return self._bindings[binding_id]

    def register_action(self, action: ActionRef, *, replace: bool = False) -> ActionRef:
        with span(
            "keymaps::register_action",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"action_id": action.id},
        ):
            if not replace and action.id in self._actions:
                raise ValueError(f"Action '{action.id}' already registered")
            self._actions[action.id] = action
            return action

    def register_binding(self, binding: Binding, *, replace: bool = False) -> Binding:
        with span(
            "keymaps::register_binding",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"binding_id": binding.id, "key": binding.key_signature},
        ) as handle:
            if binding.action_id not in self._actions:
                handle.add_metadata("missing_action", binding.action_id)
                raise UnknownActionError(binding.action_id)

            conflicts = self.detect_conflicts(binding)
            if conflicts and not replace:
                handle.add_metadata(
                    "conflicts", ",".join(conflict.id for conflict in conflicts)
                )
                raise KeymapConflictError(binding, conflicts)

            if replace:
                for conflict in conflicts:
                    self._remove(conflict)
            if binding.id in self._bindings:
                if not replace:
                    raise ValueError(f"Binding id '{binding.id}' already registered")
                self._remove(self._bindings[binding.id])

            self._bindings[binding.id] = binding
            self._by_signature[binding.key_signature] = binding.id
            self._revision += 1
            return binding

    def unregister_binding(self, binding_id: str) -> Optional[Binding]:
        binding = self._bindings.get(binding_id)
        if binding is None:
            return None
        self._remove(binding)
        self._revision += 1
        return binding

    def iter_actions(self) -> Iterator[ActionRef]:
        yield from self._actions.values()

    def iter_bindings(self, action_id: Optional[str] = None) -> Iterator[Binding]:
        for binding in self._bindings.values():
            if action_id is None or binding.action_id == action_id:
                yield binding

    def detect_conflicts(self, binding: Binding) -> list[Binding]:
        existing_id = self._by_signature.get(binding.key_signature)
        if existing_id is None or existing_id == binding.id:
            return []
        return [self._bindings[existing_id]]

    def stats(self) -> RegistryStats:
        return RegistryStats(
            action_count=len(self._actions),
            binding_count=len(self._bindings),
        )

    def _remove(self, binding: Binding) -> None:
        self._bindings.pop(binding.id, None)
        if self._by_signature.get(binding.key_signature) == binding.id:
            self._by_signature.pop(binding.key_signature, None)


__all__ = [
    "KeymapConflictError",
    "KeymapRegistry",
    "RegistryStats",
    "UnknownActionError",
]
