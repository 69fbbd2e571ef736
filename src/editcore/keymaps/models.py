"""Dataclasses describing key bindings and action metadata."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Iterable, Mapping

MODIFIERS = ("alt", "ctrl", "meta", "shift", "super")


def _normalize_modifiers(modifiers: Iterable[str]) -> tuple[str, ...]:
    values = tuple(m.strip().lower() for m in modifiers if m.strip())
    return tuple(sorted(dict.fromkeys(values)))


@dataclass(frozen=True, slots=True)
class KeyStroke:
    """Single normalized key press, e.g. ``ctrl+shift+k``."""

    key: str
    modifiers: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("key cannot be empty")
        object.__setattr__(self, "key", self.key.lower())
        object.__setattr__(self, "modifiers", _normalize_modifiers(self.modifiers))

    @property
    def token(self) -> str:
        if self.modifiers:
            return "+".join((*self.modifiers, self.key))
        return self.key

    @classmethod
    def parse(cls, spec: str) -> "KeyStroke":
        """Parse ``"shift+left"`` style strings; a trailing ``+`` is the key."""

        spec = spec.strip()
        if spec.endswith("+"):
            head, key = spec[:-1].rstrip("+"), "+"
        else:
            head, _, key = spec.rpartition("+")
        modifiers = [part for part in head.split("+") if part] if head else []
        unknown = [m for m in modifiers if m.lower() not in MODIFIERS]
        if unknown:
            raise ValueError(f"Unknown modifier(s) {unknown} in '{spec}'")
        return cls(key=key, modifiers=tuple(modifiers))


@dataclass(frozen=True, slots=True)
class ActionRef:
    """Callable metadata used during action dispatch."""

    id: str
    handler: Callable[..., object]
    telemetry_name: str | None = None
    description: str = ""
    metadata: Mapping[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ActionRef id cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))
        if self.telemetry_name is None:
            object.__setattr__(self, "telemetry_name", self.id)

    def __call__(self, *args: object, **kwargs: object) -> object:
        return self.handler(*args, **kwargs)


@dataclass(frozen=True, slots=True)
class Binding:
    """Associates a keystroke with an action id."""

    id: str
    stroke: KeyStroke
    action_id: str
    description: str = ""
    source: str | None = None

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("binding id cannot be empty")
        if not self.action_id:
            raise ValueError("binding action_id cannot be empty")

    @property
    def key_signature(self) -> str:
        return self.stroke.token

    @classmethod
    def parse(
        cls, binding_id: str, spec: str, action_id: str, description: str = ""
    ) -> "Binding":
        return cls(
            id=binding_id,
            stroke=KeyStroke.parse(spec),
            action_id=str(action_id),
            description=description,
        )


__all__ = ["ActionRef", "Binding", "KeyStroke", "MODIFIERS"]
