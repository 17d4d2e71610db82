"""Text surface contract used by the controller.

The controller never looks inside the editing surface: it only replaces the
whole content and reads it back as an ordered list of lines.
"""

from __future__ import annotations

from typing import Iterable, Protocol

UNDO_DEPTH = 10


class TextBuffer(Protocol):
    """Minimal surface the controller owns."""

    def load_lines(self, lines: Iterable[str]) -> None:
        """Replace the entire content."""
        ...

    def lines(self) -> list[str]:
        """Return the entire content as lines (no line terminators)."""
        ...


def buffer_text(buffer: TextBuffer) -> str:
    return "\n".join(buffer.lines())


def split_lines(text: str) -> list[str]:
    """Split on ``\\n`` only, dropping one ``\\r`` before it and a final empty piece.

    Form feeds, vertical tabs and Unicode separators stay inside their line so
    a load followed by a save writes the same bytes back.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


class LinesBuffer:
    """In-memory text surface for headless use and tests.

    ``forward_key`` understands just enough editing to stand in for a real
    widget: printable characters insert at the cursor, ``enter`` splits the
    line, ``backspace`` deletes backwards. Other keys are accepted and ignored.
    """

    def __init__(self, lines: Iterable[str] = ()) -> None:
        self._lines: list[str] = list(lines) or [""]
        self.row = 0
        self.col = 0
        self.received: list[str] = []

    def load_lines(self, lines: Iterable[str]) -> None:
        self._lines = list(lines) or [""]
        self.row = 0
        self.col = 0

    def lines(self) -> list[str]:
        if self._lines == [""]:
            return []
        return list(self._lines)

    def forward_key(self, press) -> None:
        self.received.append(press.key)
        line = self._lines[self.row]
        if press.key == "enter":
            self._lines[self.row] = line[: self.col]
            self._lines.insert(self.row + 1, line[self.col :])
            self.row += 1
            self.col = 0
        elif press.key == "backspace":
            if self.col > 0:
                self._lines[self.row] = line[: self.col - 1] + line[self.col :]
                self.col -= 1
            elif self.row > 0:
                prev = self._lines[self.row - 1]
                self._lines[self.row - 1] = prev + line
                del self._lines[self.row]
                self.row -= 1
                self.col = len(prev)
        elif press.is_printable:
            self._lines[self.row] = line[: self.col] + press.character + line[self.col :]
            self.col += len(press.character)


__all__ = ["TextBuffer", "LinesBuffer", "UNDO_DEPTH", "buffer_text", "split_lines"]
