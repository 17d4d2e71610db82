"""Which pane receives keyboard input."""

from __future__ import annotations

from enum import Enum


class Focus(Enum):
    """Two-state focus machine.

    EDITOR forwards unbound keys to the text surface. SIDEBAR suppresses them
    and enables history navigation (Up/Down/Enter). The only transition is an
    explicit toggle.
    """

    EDITOR = "editor"
    SIDEBAR = "sidebar"

    def toggled(self) -> "Focus":
        return Focus.SIDEBAR if self is Focus.EDITOR else Focus.EDITOR

    @property
    def forwards_text(self) -> bool:
        return self is Focus.EDITOR


__all__ = ["Focus"]
