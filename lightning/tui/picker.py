"""In-terminal file picker (open an existing file / choose a save target).

The picker is a ModalScreen that dismisses with the chosen absolute path, or
``None`` when the user cancels with Esc.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from rich.markup import escape
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import DirectoryTree, Input, Static

from lightning.core.persistence import PickMode
from lightning.tui.models import WidgetIds
from lightning.tui.widgets import PickerTree


def validate_file_name(name: str) -> tuple[bool, Optional[str]]:
    """
    Validate a file name typed into the save picker.

    Returns:
        (is_valid, error_message) - error_message is None if valid
    """
    if not name or not name.strip():
        return False, "File name cannot be empty"
    if name != name.strip():
        return False, "File name cannot start/end with spaces"
    if name.endswith(("/", "\\")):
        return False, "File name cannot end with a path separator"
    if name.strip() in {".", ".."} or Path(name).name in {"", ".", ".."}:
        return False, "File name cannot be '.' or '..'"
    if "\x00" in name:
        return False, "File name cannot contain NUL characters"
    return True, None


class FilePickerModal(ModalScreen[Optional[str]]):
    """Directory tree plus (in save mode) a file name input."""

    def __init__(self, *, mode: PickMode, start_dir: Optional[Path] = None, name: str = "") -> None:
        super().__init__()
        self.mode = mode
        base = Path(start_dir) if start_dir is not None else Path.cwd()
        try:
            base = base.expanduser().resolve()
        except OSError:
            base = Path.cwd()
        if not base.is_dir():
            base = Path.cwd()
        self._dir: Path = base
        self._name = name

    def compose(self) -> ComposeResult:
        title = "Open file" if self.mode is PickMode.OPEN else "Save as"
        with Vertical(id=WidgetIds.FILE_PICKER):
            yield Static(title, classes="title")
            yield Static(f"Directory: {escape(str(self._dir))}", id=WidgetIds.PICKER_PATH, classes="muted")
            yield PickerTree(str(self._dir), id=WidgetIds.PICKER_TREE)
            if self.mode is PickMode.SAVE:
                yield Input(value=self._name, placeholder="File name", id=WidgetIds.PICKER_NAME)
                yield Static("", id=WidgetIds.PICKER_ERROR, classes="error")
                yield Static("Enter on a folder: use it  •  Enter in name: save  •  Esc: cancel", classes="muted")
            else:
                yield Static("Enter: open file / expand folder  •  Esc: cancel", classes="muted")

    def on_mount(self) -> None:
        self.query_one(f"#{WidgetIds.PICKER_TREE}", DirectoryTree).focus()

    @property
    def directory(self) -> Path:
        return self._dir

    def choose(self, path: Path) -> None:
        """Accept ``path`` as the result (same as selecting it in the tree)."""
        self.dismiss(str(Path(path).expanduser().resolve()))

    def submit_name(self, name: str) -> bool:
        """Save mode: resolve ``name`` against the current directory and accept it."""
        ok, err = validate_file_name(name)
        if ok:
            target = Path(name).expanduser()
            if not target.is_absolute():
                target = self._dir / target
            if target.is_dir():
                ok, err = False, f"{target.name} is a directory"
        if not ok:
            self.query_one(f"#{WidgetIds.PICKER_ERROR}", Static).update(escape(err or ""))
            return False
        self.choose(target)
        return True

    def _set_dir(self, path: Path) -> None:
        self._dir = path
        self.query_one(f"#{WidgetIds.PICKER_PATH}", Static).update(f"Directory: {escape(str(self._dir))}")

    def on_directory_tree_file_selected(self, event: DirectoryTree.FileSelected) -> None:
        event.stop()
        path = Path(event.path)
        if self.mode is PickMode.OPEN:
            self.choose(path)
            return
        # Save mode: picking an existing file proposes overwriting it.
        self._set_dir(path.parent)
        inp = self.query_one(f"#{WidgetIds.PICKER_NAME}", Input)
        inp.value = path.name
        inp.focus()

    def on_directory_tree_directory_selected(self, event: DirectoryTree.DirectorySelected) -> None:
        event.stop()
        self._set_dir(Path(event.path))

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.submit_name(event.value)

    def on_key(self, event) -> None:  # type: ignore[override]
        if event.key == "escape":
            self.dismiss(None)
            event.stop()


__all__ = ["FilePickerModal", "validate_file_name"]
