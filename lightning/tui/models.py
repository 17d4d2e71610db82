"""Widget IDs and display constants for the TUI.

Widget IDs live here so tests can query widgets without depending on the
layout in app.py.
"""

from __future__ import annotations

from rich.markup import escape


class WidgetIds:
    """Widget ID constants for stable test API."""

    EDITOR = "editor"
    SIDEBAR = "sidebar"
    STATUS = "status"

    # File picker
    FILE_PICKER = "file_picker"
    PICKER_TREE = "picker_tree"
    PICKER_NAME = "picker_name"
    PICKER_PATH = "picker_path"
    PICKER_ERROR = "picker_error"


EDITOR_TITLE = "lightning - text editor"
SIDEBAR_TITLE = "Recent"

# Shown along the bottom border of the editor pane.
SHORTCUTS: list[tuple[str, str]] = [
    ("Quit", "Ctrl+C"),
    ("Open", "Ctrl+O"),
    ("New", "Ctrl+N"),
    ("Save", "Ctrl+L"),
    ("Save As", "Ctrl+P"),
    ("Focus", "Ctrl+Space"),
    ("Theme", "Ctrl+T"),
]


def shortcut_line() -> str:
    """Shortcut hints as Textual markup."""
    return " ".join(f"{label} [bold]<{key}>[/]" for label, key in SHORTCUTS)


def editor_title(*, dirty: bool, path: str) -> str:
    marker = "*" if dirty else ""
    return f" {EDITOR_TITLE} {marker}| {escape(path)} |"


__all__ = [
    "WidgetIds",
    "EDITOR_TITLE",
    "SIDEBAR_TITLE",
    "SHORTCUTS",
    "shortcut_line",
    "editor_title",
]
