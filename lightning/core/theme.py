"""Accent palette for the focused pane border."""

from __future__ import annotations

from enum import Enum


class Theme(Enum):
    """Fixed, ordered set of palette variants.

    Declaration order is the cycling order: ``next()`` walks it and wraps
    from the last variant back to the first.
    """

    CALM = "calm"
    VIBE = "vibe"
    MODERN = "modern"
    PROFESSIONAL = "professional"
    CREATIVE = "creative"
    WARM = "warm"

    @classmethod
    def default(cls) -> "Theme":
        return cls.PROFESSIONAL

    @classmethod
    def parse(cls, value: str) -> "Theme":
        """Look up a variant by name, case-insensitively.

        Raises:
            ValueError: If ``value`` names no variant.
        """
        key = str(value or "").strip().lower()
        for theme in cls:
            if theme.value == key:
                return theme
        raise ValueError(f"Unknown theme '{value}'. Choose one of: {', '.join(t.value for t in cls)}")

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def accent_color(self) -> str:
        return ACCENT_COLORS[self]

    def next(self) -> "Theme":
        members = list(Theme)
        return members[(members.index(self) + 1) % len(members)]


# Bright ANSI palette, as hex so both Rich and Textual CSS accept it.
ACCENT_COLORS: dict[Theme, str] = {
    Theme.CALM: "#FFFF55",
    Theme.VIBE: "#5555FF",
    Theme.MODERN: "#55FFFF",
    Theme.PROFESSIONAL: "#00AAAA",
    Theme.CREATIVE: "#FF55FF",
    Theme.WARM: "#FF5555",
}


def advance(theme: Theme) -> Theme:
    """Return the variant after ``theme`` in the cycle."""
    return theme.next()


__all__ = ["Theme", "ACCENT_COLORS", "advance"]
