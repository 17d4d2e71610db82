"""Debug event sink for the TUI.

Events are kept in memory when ``LIGHTNING_TUI_DEBUG`` is set and streamed as
NDJSON to ``LIGHTNING_TUI_DEBUG_FILE`` when that is set too. The sink never
raises: a broken debug file must not take the editor down.
"""

import json
import os
import time
from typing import Optional, TextIO

MAX_EVENTS = 500


def debug_enabled() -> bool:
    v = (os.getenv("LIGHTNING_TUI_DEBUG") or "").strip().lower()
    return v in {"1", "true", "yes", "y", "on"}


class DebugLogger:
    """In-memory debug events with optional file streaming."""

    def __init__(self, app) -> None:
        """
        Args:
            app: The LightningApp instance (read for focus/path context).
        """
        self.app = app
        self._events: list[dict[str, object]] = []
        self._file_path: Optional[str] = None
        self._file: Optional[TextIO] = None

    def log(self, *, event: str, data: Optional[dict[str, object]] = None) -> None:
        if not debug_enabled():
            return
        state = getattr(getattr(self.app, "controller", None), "state", None)
        payload: dict[str, object] = {
            "t": float(time.time()),
            "event": str(event),
            "focus": getattr(getattr(state, "focus", None), "value", None),
            "path": getattr(state, "current_path", None),
            "data": data or {},
        }
        self._events.append(payload)
        # Long sessions: keep the most recent half once the cap is hit.
        if len(self._events) > MAX_EVENTS:
            self._events = self._events[-(MAX_EVENTS // 2):]

        file_path = os.getenv("LIGHTNING_TUI_DEBUG_FILE")
        if not file_path:
            return
        try:
            if self._file is None or self._file_path != file_path:
                self.close()
                self._file_path = file_path
                self._file = open(file_path, "a", encoding="utf-8", buffering=1)
            self._file.write(json.dumps(payload, ensure_ascii=False, separators=(",", ":")) + "\n")
            self._file.flush()
        except OSError:
            return

    def close(self) -> None:
        """Flush and close the debug file, if open."""
        try:
            if self._file is not None:
                self._file.flush()
                self._file.close()
        except OSError:
            pass
        finally:
            self._file = None
            self._file_path = None

    @property
    def events(self) -> list[dict[str, object]]:
        return self._events.copy()


__all__ = ["DebugLogger", "debug_enabled"]
