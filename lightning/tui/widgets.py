"""Custom Textual widgets for the editor layout and the file picker."""

from typing import Iterable, Optional
from pathlib import Path

from rich.text import Text
from textual.widgets import DirectoryTree, Static, TextArea
from textual.widgets.text_area import Document, DocumentNavigator, WrappedDocument

from lightning.tui.models import SIDEBAR_TITLE


class PickerTree(DirectoryTree):
    """DirectoryTree without hidden files and directories."""

    def filter_paths(self, paths: Iterable[Path]) -> Iterable[Path]:
        return [p for p in paths if not p.name.startswith(".")]


class LineDocument(Document):
    """Plain-text document that breaks lines on ``\\n`` only."""

    def __init__(self, text: str) -> None:
        super().__init__("")
        self._newline = "\n"
        self._lines = text.split("\n")


class EditorArea(TextArea):
    """TextArea that keeps form feeds and Unicode line separators inside a line.

    Textual's plain ``Document`` splits with ``str.splitlines()``, which would
    turn those characters into line breaks on the next save.
    """

    def _set_document(self, text: str, language: Optional[str]) -> None:
        super()._set_document(text, language)
        if type(self.document) is not Document or self.document.lines == text.split("\n"):
            return
        self.document = LineDocument(text)
        self.wrapped_document = WrappedDocument(self.document, tab_width=self.indent_width)
        self.navigator = DocumentNavigator(self.wrapped_document)
        self._build_highlight_map()
        self._rewrap_and_refresh_virtual_size()


class RecentSidebar(Static):
    """Recently opened files, file names only, cursor entry highlighted."""

    def __init__(self, **kwargs) -> None:
        super().__init__("", **kwargs)
        self.names: list[str] = []
        self.selected: int = 0

    def on_mount(self) -> None:
        self.border_title = f" {SIDEBAR_TITLE} "

    def show(self, names: list[str], selected: int, *, accent: Optional[str]) -> None:
        self.names = list(names)
        self.selected = selected
        self.styles.border = ("round", accent) if accent else ("round", "#808080")
        self.update(self.render_names())

    def render_names(self) -> Text:
        text = Text(no_wrap=True, overflow="ellipsis")
        for i, name in enumerate(self.names):
            if i:
                text.append("\n")
            if i == self.selected:
                text.append(name, style="bold black on white")
            else:
                text.append(name)
        return text


__all__ = ["EditorArea", "LineDocument", "PickerTree", "RecentSidebar"]
