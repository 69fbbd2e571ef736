"""UI-agnostic plain-text editing core."""

__all__ = [
    "actions",
    "adapters",
    "buffer",
    "config",
    "engine",
    "keymaps",
    "pointer",
    "runtime",
]

__version__ = "0.1.0"
