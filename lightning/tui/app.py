from __future__ import annotations

from pathlib import Path
from typing import Optional

from rich.markup import escape
from textual import events
from textual.app import App, ComposeResult
from textual.containers import Horizontal
from textual.screen import ModalScreen
from textual.widgets import Static, TextArea

from lightning.core.config import EditorConfig
from lightning.core.controller import Controller, KeyPress, PickRequest, StatusMessage
from lightning.core.focus import Focus
from lightning.core.persistence import FileSystem
from lightning.tui.buffer import TextAreaBuffer
from lightning.tui.debug import DebugLogger
from lightning.tui.models import WidgetIds, editor_title, shortcut_line
from lightning.tui.picker import FilePickerModal
from lightning.tui.widgets import EditorArea, RecentSidebar

UNFOCUSED_BORDER = "#808080"


class LightningApp(App):
    """
    Lightning - single-file terminal text editor.

    Every key goes through the controller first. Keys it forwards reach the
    TextArea through Textual's normal dispatch; everything else stops here.
    """

    CSS_PATH = "theme.tcss"
    TITLE = "lightning"
    # Ctrl+P is Save As here, not the command palette.
    ENABLE_COMMAND_PALETTE = False

    def __init__(
        self,
        *,
        path: Optional[str] = None,
        config: Optional[EditorConfig] = None,
        filesystem: Optional[FileSystem] = None,
    ) -> None:
        super().__init__()
        self.config = config or EditorConfig()
        self._initial_path = path
        self.editor = EditorArea(id=WidgetIds.EDITOR, show_line_numbers=True, tab_behavior="indent")
        self.sidebar = RecentSidebar(id=WidgetIds.SIDEBAR)
        self.status_line = Static("", id=WidgetIds.STATUS, classes="muted")
        self.buffer = TextAreaBuffer(self.editor)
        self.controller = Controller(self.buffer, filesystem=filesystem, config=self.config)
        self._debug_logger = DebugLogger(self)
        self._shown_status: Optional[StatusMessage] = None

    @property
    def state(self):
        return self.controller.state

    def _dbg(self, *, event: str, data: Optional[dict[str, object]] = None) -> None:
        self._debug_logger.log(event=event, data=data)

    # -----------------------
    # Compose
    # -----------------------
    def compose(self) -> ComposeResult:
        with Horizontal(id="panes"):
            yield self.editor
            yield self.sidebar
        yield self.status_line

    def on_mount(self) -> None:
        self.editor.border_subtitle = shortcut_line()
        if self._initial_path:
            self.controller.open(self._initial_path)
        self._sync_view()

    def on_unmount(self) -> None:
        self._debug_logger.close()

    # -----------------------
    # Input
    # -----------------------
    async def on_event(self, event: events.Event) -> None:
        if (
            isinstance(event, events.Key)
            and not event.is_forwarded
            and not isinstance(self.screen, ModalScreen)
        ):
            if not self._route_key(event):
                return
        await super().on_event(event)

    def _route_key(self, event: events.Key) -> bool:
        """Run a key through the controller. True means let the TextArea have it."""
        outcome = self.controller.handle_key(KeyPress(key=event.key, character=event.character))
        self._dbg(
            event="key",
            data={
                "key": event.key,
                "action": outcome.action.value if outcome.action else None,
                "forward": outcome.forward,
            },
        )
        if self.state.exit:
            self.exit()
            return False
        if outcome.pending is not None:
            self._open_picker(outcome.pending)
        self._sync_view()
        return outcome.forward

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        self.controller.refresh_dirty()
        self._sync_view()

    # -----------------------
    # Picker
    # -----------------------
    def _picker_start_dir(self) -> Path:
        if self.state.current_path:
            parent = Path(self.state.current_path).expanduser().parent
            if parent.is_dir():
                return parent
        if self.config.start_dir and Path(self.config.start_dir).is_dir():
            return Path(self.config.start_dir)
        return Path.cwd()

    def _open_picker(self, request: PickRequest) -> None:
        self._dbg(event="picker.open", data={"action": request.action.value, "mode": request.mode.value})

        def _done(path: Optional[str]) -> None:
            self._dbg(event="picker.done", data={"action": request.action.value, "path": path})
            self.controller.complete(request.action, path)
            self._sync_view()

        name = Path(self.state.current_path).name if self.state.current_path else ""
        self.push_screen(
            FilePickerModal(mode=request.mode, start_dir=self._picker_start_dir(), name=name),
            _done,
        )

    # -----------------------
    # Rendering
    # -----------------------
    def _sync_view(self) -> None:
        state = self.state
        accent = state.theme.accent_color

        self.editor.border_title = editor_title(dirty=state.dirty, path=state.current_path)
        self.editor.styles.border = ("round", accent if state.focus is Focus.EDITOR else UNFOCUSED_BORDER)

        self.sidebar.show(
            state.recent.display_names(),
            state.recent.selected,
            accent=accent if state.focus is Focus.SIDEBAR else None,
        )

        if not isinstance(self.screen, ModalScreen):
            if state.focus is Focus.EDITOR:
                if self.focused is not self.editor:
                    self.set_focus(self.editor)
            elif self.focused is self.editor:
                self.set_focus(None)

        self.status_line.update(escape(state.status.text) if state.status else "")
        if state.status is not None and state.status is not self._shown_status:
            self._shown_status = state.status
            if state.status.is_error:
                self.notify(escape(state.status.text), severity="error")


__all__ = ["LightningApp"]
