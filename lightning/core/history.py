"""Recently opened files shown in the sidebar.

The history is an ordered, duplicate-free list of paths, most recently
displaced first. A path enters it only when another path replaces it as the
active file, so the file currently being edited is never a member.

Only the first ``window`` entries are visible and navigable; the cursor is an
index into that visible window.
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import PurePath
from typing import Iterable, Optional

logger = logging.getLogger(__name__)

DEFAULT_WINDOW = 10


class Direction(Enum):
    UP = -1
    DOWN = 1


class RecentFiles:
    """Deduplicated recent-path list with a wraparound cursor."""

    def __init__(self, paths: Optional[Iterable[str]] = None, *, window: int = DEFAULT_WINDOW) -> None:
        if window <= 0:
            raise ValueError("window must be positive")
        self.window = window
        self._paths: list[str] = []
        for p in paths or ():
            if p and p not in self._paths:
                self._paths.append(p)
        self.selected: int = 0

    def __len__(self) -> int:
        return len(self._paths)

    def __contains__(self, path: object) -> bool:
        return path in self._paths

    def __iter__(self):
        return iter(list(self._paths))

    @property
    def paths(self) -> list[str]:
        """All entries, most recent first (copy)."""
        return list(self._paths)

    @property
    def visible_count(self) -> int:
        return min(len(self._paths), self.window)

    def visible(self) -> list[str]:
        return self._paths[: self.window]

    def display_names(self) -> list[str]:
        """Final path component of each visible entry."""
        return [PurePath(p).name or p for p in self.visible()]

    def record(self, old_path: str, new_path: str) -> None:
        """Remember ``old_path`` as it is being replaced by ``new_path``.

        No-op when the path does not change, when ``old_path`` is already
        present, or when ``old_path`` is empty (an untitled buffer). A cursor
        below the top follows its entry down while it stays in the window.
        """
        if not old_path or old_path == new_path or old_path in self._paths:
            return
        self._paths.insert(0, old_path)
        if 0 < self.selected < self.visible_count - 1:
            self.selected += 1
        logger.debug("history: recorded %s (%d entries)", old_path, len(self._paths))

    def discard(self, path: str) -> None:
        """Drop ``path`` if present and keep the cursor on the same entry where possible."""
        if path in self._paths:
            index = self._paths.index(path)
            self._paths.remove(path)
            if index < self.selected:
                self.selected -= 1
            self.clamp()

    def clamp(self) -> None:
        k = self.visible_count
        if k == 0:
            self.selected = 0
        elif self.selected >= k:
            self.selected = k - 1
        elif self.selected < 0:
            self.selected = 0

    def navigate(self, direction: Direction) -> bool:
        """Move the cursor one step, wrapping within the visible window.

        Returns False (and changes nothing) when the window is empty.
        """
        k = self.visible_count
        if k == 0:
            return False
        self.selected = (self.selected + direction.value) % k
        return True

    def selected_path(self) -> Optional[str]:
        k = self.visible_count
        if k == 0 or not 0 <= self.selected < k:
            return None
        return self._paths[self.selected]


__all__ = ["RecentFiles", "Direction", "DEFAULT_WINDOW"]
