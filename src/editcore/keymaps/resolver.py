"""Keystroke resolution with telemetry instrumentation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

from editcore.runtime.telemetry import span

from .models import ActionRef, Binding, KeyStroke
from .registry import KeymapRegistry


@dataclass(frozen=True, slots=True)
class ResolutionMatch:
    """Resolved binding paired with its action."""

    binding: Binding
    action: ActionRef


@dataclass(frozen=True, slots=True)
class ResolutionResult:
    """Outcome returned from the resolver."""

    status: Literal["match", "miss"]
    token: str
    match: Optional[ResolutionMatch] = None


class KeymapResolver:
    """Maps host key names onto registered actions."""

    def __init__(
        self, registry: KeymapRegistry, *, logger_name: str | None = None
    ) -> None:
        self._registry = registry
        self._logger_name = logger_name

    def resolve(self, key: str | KeyStroke) -> ResolutionResult:
        try:
            stroke = key if isinstance(key, KeyStroke) else KeyStroke.parse(key)
        except ValueError:
            return ResolutionResult(status="miss", token=str(key))
        token = stroke.token
        with span(
            "keymaps::resolve",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"token": token},
        ) as handle:
            binding = self._registry.binding_for(token)
            if binding is None:
                handle.add_metadata("status", "miss")
                return ResolutionResult(status="miss", token=token)
            action = self._registry.get_action(binding.action_id)
            handle.add_metadata("status", "match")
            handle.add_metadata("binding_id", binding.id)
            return ResolutionResult(
                status="match",
                token=token,
                match=ResolutionMatch(binding=binding, action=action),
            )


__all__ = ["KeymapResolver", "ResolutionMatch", "ResolutionResult"]
