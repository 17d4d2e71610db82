"""Filesystem and file-picker collaborators.

Both are injected into the controller so it can be driven without a terminal
or a real disk. Reads and writes are attempted exactly once per user action;
failures surface as ``FileReadError`` / ``FileWriteError``.
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Optional, Protocol

from lightning.core.errors import FileReadError, FileWriteError

logger = logging.getLogger(__name__)


class PickMode(Enum):
    """Which picker dialog an action needs."""

    OPEN = "open"  # pick an existing file
    SAVE = "save"  # choose a destination (may not exist yet)


class FileSystem(Protocol):
    def read_text(self, path: str) -> str:
        ...

    def write_text(self, path: str, text: str) -> None:
        ...


class FilePicker(Protocol):
    """Blocking picker. Either call returns None when the user cancels."""

    def pick_existing_file(self) -> Optional[str]:
        ...

    def choose_save_destination(self) -> Optional[str]:
        ...


class LocalFileSystem:
    """UTF-8 text files on the local disk."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def read_text(self, path: str) -> str:
        if not path:
            raise FileReadError(path, "no file name")
        try:
            return Path(path).read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("read failed for %s: %s", path, e)
            raise FileReadError(path, _reason(e)) from e

    def write_text(self, path: str, text: str) -> None:
        if not path:
            raise FileWriteError(path, "no file name")
        try:
            # newline="" keeps "\n" as written on every platform.
            with open(path, "w", encoding=self.encoding, newline="") as f:
                f.write(text)
        except (OSError, UnicodeEncodeError) as e:
            logger.warning("write failed for %s: %s", path, e)
            raise FileWriteError(path, _reason(e)) from e


def pick(picker: FilePicker, mode: PickMode) -> Optional[str]:
    if mode is PickMode.OPEN:
        return picker.pick_existing_file()
    return picker.choose_save_destination()


def _reason(e: Exception) -> str:
    if isinstance(e, OSError) and e.strerror:
        return e.strerror
    return str(e) or type(e).__name__


__all__ = ["PickMode", "FileSystem", "FilePicker", "LocalFileSystem", "pick"]
