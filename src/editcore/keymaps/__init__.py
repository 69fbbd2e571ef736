"""Declarative action registry and default key bindings."""

from .models import ActionRef, Binding, KeyStroke
from .registry import (
    KeymapConflictError,
    KeymapRegistry,
    RegistryStats,
    UnknownActionError,
)
from .resolver import KeymapResolver, ResolutionMatch, ResolutionResult
from .defaults import load_default_keymaps

__all__ = [
    "ActionRef",
    "Binding",
    "KeyStroke",
    "KeymapConflictError",
    "KeymapRegistry",
    "RegistryStats",
    "UnknownActionError",
    "KeymapResolver",
    "ResolutionMatch",
    "ResolutionResult",
    "load_default_keymaps",
]
