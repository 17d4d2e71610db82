"""Exception hierarchy for Lightning.

Persistence failures are recoverable: the controller catches them and turns
them into a status message instead of letting them reach the event loop.
"""

from __future__ import annotations


class LightningError(Exception):
    """Base class for all Lightning errors."""


class PersistenceError(LightningError):
    """A filesystem read or write failed."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class FileReadError(PersistenceError):
    """A file could not be read (missing, unreadable, or not text)."""


class FileWriteError(PersistenceError):
    """A file could not be written."""


class ConfigError(LightningError):
    """The user configuration file is malformed."""


__all__ = [
    "LightningError",
    "PersistenceError",
    "FileReadError",
    "FileWriteError",
    "ConfigError",
]
