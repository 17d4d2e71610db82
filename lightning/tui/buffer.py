"""Textual ``TextArea`` as the controller's text surface."""

from __future__ import annotations

from typing import Iterable

from textual.widgets import TextArea
from textual.widgets.text_area import EditHistory

from lightning.core.buffer import UNDO_DEPTH


class TextAreaBuffer:
    """Adapts a ``TextArea`` to the ``TextBuffer`` protocol.

    Key delivery is not part of this adapter: the app lets Textual route
    forwarded keys to the focused widget so cursor movement, undo and
    selection keep their native bindings.
    """

    def __init__(self, widget: TextArea) -> None:
        self.widget = widget
        widget.history = EditHistory(
            max_checkpoints=UNDO_DEPTH,
            checkpoint_timer=2.0,
            checkpoint_max_characters=100,
        )

    def load_lines(self, lines: Iterable[str]) -> None:
        # load_text also clears the undo history.
        self.widget.load_text("\n".join(lines))

    def lines(self) -> list[str]:
        text = self.widget.text
        if not text:
            return []
        return text.split("\n")


__all__ = ["TextAreaBuffer"]
