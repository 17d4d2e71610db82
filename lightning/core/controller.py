"""Interaction controller: the editor's state machine.

One ``ApplicationState`` lives for the whole process. The controller turns one
key press at a time into at most one action, applies it fully, and only then
lets the caller render or read the next key.

Picker-driven actions (create, open, save-as) need a path from the user. With
a blocking ``FilePicker`` injected the controller asks for it directly;
without one it returns a ``PickRequest`` and the caller finishes the action
later through ``complete()``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import PurePath
from typing import Optional

from lightning.core.buffer import TextBuffer, buffer_text, split_lines
from lightning.core.config import DirtyPolicy, EditorConfig
from lightning.core.errors import FileReadError, FileWriteError
from lightning.core.focus import Focus
from lightning.core.history import Direction, RecentFiles
from lightning.core.persistence import FilePicker, FileSystem, LocalFileSystem, PickMode, pick
from lightning.core.theme import Theme

logger = logging.getLogger(__name__)


class Action(Enum):
    QUIT = "quit"
    CREATE = "create"
    SAVE = "save"
    OPEN = "open"
    SAVE_AS = "save_as"
    TOGGLE_FOCUS = "toggle_focus"
    ADVANCE_THEME = "advance_theme"
    NAVIGATE_UP = "navigate_up"
    NAVIGATE_DOWN = "navigate_down"
    SELECT = "select"


# Key names follow Textual's spelling. Terminals report Ctrl+Space as NUL,
# which Textual names "ctrl+@"; newer releases may say "ctrl+space".
GLOBAL_BINDINGS: dict[str, Action] = {
    "ctrl+c": Action.QUIT,
    "ctrl+q": Action.QUIT,
    "ctrl+n": Action.CREATE,
    "ctrl+l": Action.SAVE,
    "ctrl+o": Action.OPEN,
    "ctrl+p": Action.SAVE_AS,
    "ctrl+@": Action.TOGGLE_FOCUS,
    "ctrl+space": Action.TOGGLE_FOCUS,
    "ctrl+t": Action.ADVANCE_THEME,
}

SIDEBAR_BINDINGS: dict[str, Action] = {
    "up": Action.NAVIGATE_UP,
    "down": Action.NAVIGATE_DOWN,
    "enter": Action.SELECT,
}

PICKER_ACTIONS: dict[Action, PickMode] = {
    Action.CREATE: PickMode.SAVE,
    Action.OPEN: PickMode.OPEN,
    Action.SAVE_AS: PickMode.SAVE,
}


def resolve_action(key: str, focus: Focus) -> Optional[Action]:
    """Map a key name to an action given the current focus."""
    action = GLOBAL_BINDINGS.get(key)
    if action is not None:
        return action
    if focus is Focus.SIDEBAR:
        return SIDEBAR_BINDINGS.get(key)
    return None


class KeyKind(Enum):
    PRESS = "press"
    REPEAT = "repeat"
    RELEASE = "release"


@dataclass(frozen=True)
class KeyPress:
    key: str
    character: Optional[str] = None
    kind: KeyKind = KeyKind.PRESS

    @property
    def is_printable(self) -> bool:
        ch = self.character
        return bool(ch) and ch.isprintable()


@dataclass(frozen=True)
class StatusMessage:
    text: str
    level: str = "info"  # "info" | "error"

    @property
    def is_error(self) -> bool:
        return self.level == "error"


@dataclass(frozen=True)
class PickRequest:
    """An action waiting for the user to choose a path."""

    action: Action
    mode: PickMode


@dataclass(frozen=True)
class KeyOutcome:
    forward: bool = False
    action: Optional[Action] = None
    pending: Optional[PickRequest] = None


@dataclass
class ApplicationState:
    """Root state, mutated in place for the process lifetime."""

    current_path: str = ""
    recent: RecentFiles = field(default_factory=RecentFiles)
    dirty: bool = False
    exit: bool = False
    focus: Focus = Focus.EDITOR
    theme: Theme = field(default_factory=Theme.default)
    status: Optional[StatusMessage] = None

    @property
    def recent_files(self) -> list[str]:
        return self.recent.paths

    @property
    def selected_recent_index(self) -> int:
        return self.recent.selected

    @property
    def display_name(self) -> str:
        return PurePath(self.current_path).name if self.current_path else ""

    @classmethod
    def from_config(cls, config: EditorConfig) -> "ApplicationState":
        return cls(recent=RecentFiles(window=config.history_window), theme=config.theme)


class Controller:
    """Owns the state and the collaborators; applies one action at a time."""

    def __init__(
        self,
        buffer: TextBuffer,
        *,
        state: Optional[ApplicationState] = None,
        filesystem: Optional[FileSystem] = None,
        picker: Optional[FilePicker] = None,
        config: Optional[EditorConfig] = None,
    ) -> None:
        self.config = config or EditorConfig()
        self.state = state if state is not None else ApplicationState.from_config(self.config)
        self.buffer = buffer
        self.fs: FileSystem = filesystem if filesystem is not None else LocalFileSystem()
        self.picker = picker
        self._clean_text = buffer_text(buffer)

    # -----------------------
    # Input
    # -----------------------
    def handle_key(self, press: KeyPress) -> KeyOutcome:
        """Route one key event.

        The returned outcome says whether the caller must deliver the key to
        the text surface (editor focus and not a global binding). Delivery is
        the caller's job so a widget can process the key natively.
        """
        action = resolve_action(press.key, self.state.focus)
        forward = self.state.focus.forwards_text and action is None
        if press.kind is not KeyKind.PRESS:
            return KeyOutcome(forward=forward)
        if self.config.dirty_policy is DirtyPolicy.KEYPRESS:
            self.state.dirty = True
        pending = self.perform(action) if action is not None else None
        return KeyOutcome(forward=forward, action=action, pending=pending)

    def feed(self, press: KeyPress) -> KeyOutcome:
        """Headless convenience: route the key and deliver it to the buffer."""
        outcome = self.handle_key(press)
        if outcome.forward:
            self.buffer.forward_key(press)  # type: ignore[attr-defined]
            self.refresh_dirty()
        return outcome

    def refresh_dirty(self) -> None:
        """Recompute dirty from content (content policy only)."""
        if self.config.dirty_policy is DirtyPolicy.CONTENT:
            self.state.dirty = buffer_text(self.buffer) != self._clean_text

    # -----------------------
    # Actions
    # -----------------------
    def perform(self, action: Action) -> Optional[PickRequest]:
        """Apply ``action``. Returns a request when a path is still needed."""
        logger.debug("action %s (focus=%s)", action.value, self.state.focus.value)
        if action is Action.QUIT:
            self.state.exit = True
        elif action is Action.TOGGLE_FOCUS:
            self.state.focus = self.state.focus.toggled()
        elif action is Action.ADVANCE_THEME:
            self.state.theme = self.state.theme.next()
        elif action is Action.NAVIGATE_UP:
            self._navigate(Direction.UP)
        elif action is Action.NAVIGATE_DOWN:
            self._navigate(Direction.DOWN)
        elif action is Action.SELECT:
            self.select_recent()
        elif action is Action.SAVE and self.state.current_path:
            self.save()
        else:
            if action is Action.SAVE:
                # Untitled buffer: nowhere to save yet.
                action = Action.SAVE_AS
            request = PickRequest(action, PICKER_ACTIONS[action])
            if self.picker is None:
                return request
            self.complete(action, pick(self.picker, request.mode))
        return None

    def complete(self, action: Action, path: Optional[str]) -> bool:
        """Finish a picker-driven action. ``None`` means the user cancelled."""
        if not path:
            logger.debug("%s cancelled", action.value)
            return False
        if action is Action.CREATE:
            return self.create(path)
        if action is Action.OPEN:
            return self.open(path)
        if action is Action.SAVE_AS:
            return self.save_as(path)
        raise ValueError(f"{action} does not take a path")

    def _navigate(self, direction: Direction) -> None:
        if self.state.focus is not Focus.SIDEBAR:
            return
        self.state.recent.navigate(direction)

    def select_recent(self) -> bool:
        """Load the history entry under the cursor (sidebar focus only)."""
        if self.state.focus is not Focus.SIDEBAR:
            return False
        path = self.state.recent.selected_path()
        if path is None:
            return False
        if not self.change_path(path):
            return False
        self.state.recent.selected = 0
        self._info(f"Opened {self.state.display_name}")
        return True

    # -----------------------
    # Persistence
    # -----------------------
    def change_path(self, new_path: str) -> bool:
        """Make ``new_path`` the active file and load it from disk.

        The file is read first: if that fails, the old path and the old buffer
        stay together and an error status is set.
        """
        try:
            text = self.fs.read_text(new_path)
        except FileReadError as e:
            self._error(f"Could not read {e.path}: {e.reason}")
            return False
        recent = self.state.recent
        recent.record(self.state.current_path, new_path)
        recent.discard(new_path)
        self.state.current_path = new_path
        self._load(text)
        return True

    def create(self, path: str) -> bool:
        if not self._write(path, ""):
            return False
        if not self.change_path(path):
            return False
        self.state.dirty = False
        self._info(f"Created {self.state.display_name}")
        return True

    def open(self, path: str) -> bool:
        if not self.change_path(path):
            return False
        self.state.dirty = False
        self._info(f"Opened {self.state.display_name}")
        return True

    def save(self) -> bool:
        path = self.state.current_path
        text = buffer_text(self.buffer)
        if not self._write(path, text):
            return False
        self._clean_text = text
        self.state.dirty = False
        self._info(f"Saved {self.state.display_name}")
        return True

    def save_as(self, path: str) -> bool:
        if not self._write(path, buffer_text(self.buffer)):
            return False
        # Re-read what landed on disk rather than trusting the buffer.
        if not self.change_path(path):
            return False
        self.state.dirty = False
        self._info(f"Saved {self.state.display_name}")
        return True

    def _write(self, path: str, text: str) -> bool:
        try:
            self.fs.write_text(path, text)
        except FileWriteError as e:
            self._error(f"Could not write {e.path}: {e.reason}")
            return False
        return True

    def _load(self, text: str) -> None:
        self.buffer.load_lines(split_lines(text))
        self._clean_text = buffer_text(self.buffer)
        self.refresh_dirty()

    def _info(self, text: str) -> None:
        self.state.status = StatusMessage(text, "info")

    def _error(self, text: str) -> None:
        logger.warning(text)
        self.state.status = StatusMessage(text, "error")


__all__ = [
    "Action",
    "ApplicationState",
    "Controller",
    "GLOBAL_BINDINGS",
    "KeyKind",
    "KeyOutcome",
    "KeyPress",
    "PickRequest",
    "SIDEBAR_BINDINGS",
    "StatusMessage",
    "resolve_action",
]
