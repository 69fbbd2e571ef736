"""Action vocabulary, handler context and change notifications.

The dispatching :class:`~editcore.engine.manager.EditorEngine` lives in
``editcore.engine.manager``.
"""

from .base import (
    NOOP,
    ActionRequest,
    ActionResult,
    EditorAction,
    EditorBus,
    EditorContext,
)

__all__ = [
    "NOOP",
    "ActionRequest",
    "ActionResult",
    "EditorAction",
    "EditorBus",
    "EditorContext",
]
