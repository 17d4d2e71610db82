"""Core editor logic for Lightning (no terminal dependencies)."""

__all__ = [
    "buffer",
    "config",
    "controller",
    "errors",
    "focus",
    "history",
    "persistence",
    "theme",
]
