"""
User configuration for Lightning.

The file is optional. Without it every setting takes its built-in default,
which matches the editor's historical behavior. Values can be overridden per
run from the command line.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from lightning.core.errors import ConfigError
from lightning.core.history import DEFAULT_WINDOW
from lightning.core.theme import Theme


class DirtyPolicy(Enum):
    """When the unsaved-changes marker is raised."""

    KEYPRESS = "keypress"  # any accepted keypress, even ones that change nothing
    CONTENT = "content"  # only when the text differs from what was loaded/saved


def _user_config_dir(app_name: str = "lightning") -> Path:
    """
    Return an OS-appropriate user config directory.

    - macOS: ~/Library/Application Support/<app_name>/
    - Linux/Unix: $XDG_CONFIG_HOME/<app_name>/ or ~/.config/<app_name>/
    - Windows: %APPDATA%\\<app_name>\\
    """
    home = Path.home()
    plat = sys.platform.lower()

    if plat == "darwin":
        return home / "Library" / "Application Support" / app_name

    if plat.startswith("win"):
        appdata = os.environ.get("APPDATA")
        if appdata:
            return Path(appdata) / app_name
        return home / app_name

    xdg = os.environ.get("XDG_CONFIG_HOME")
    base = Path(xdg) if xdg else (home / ".config")
    return base / app_name


def default_config_path() -> Path:
    return _user_config_dir("lightning") / "config.yaml"


@dataclass
class EditorConfig:
    theme: Theme = field(default_factory=Theme.default)
    dirty_policy: DirtyPolicy = DirtyPolicy.KEYPRESS
    history_window: int = DEFAULT_WINDOW
    start_dir: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "theme": self.theme.value,
            "dirty_policy": self.dirty_policy.value,
            "history_window": int(self.history_window),
            "start_dir": self.start_dir,
        }

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "EditorConfig":
        cfg = EditorConfig()
        if d.get("theme") is not None:
            try:
                cfg.theme = Theme.parse(str(d["theme"]))
            except ValueError as e:
                raise ConfigError(str(e)) from e
        if d.get("dirty_policy") is not None:
            try:
                cfg.dirty_policy = DirtyPolicy(str(d["dirty_policy"]).strip().lower())
            except ValueError as e:
                choices = ", ".join(p.value for p in DirtyPolicy)
                raise ConfigError(f"dirty_policy must be one of: {choices}") from e
        if d.get("history_window") is not None:
            window = d["history_window"]
            if isinstance(window, bool) or not isinstance(window, int) or window <= 0:
                raise ConfigError(f"history_window must be a positive integer, got {window!r}")
            cfg.history_window = window
        if d.get("start_dir"):
            cfg.start_dir = str(Path(str(d["start_dir"])).expanduser())
        return cfg


def load_config(path: Optional[Path] = None) -> EditorConfig:
    """Load configuration from YAML.

    An explicit ``path`` must exist. The default location is optional and a
    missing file yields the defaults.

    Raises:
        ConfigError: The file is unreadable, not YAML, or has invalid values.
    """
    p = Path(path) if path is not None else default_config_path()
    if not p.exists():
        if path is not None:
            raise ConfigError(f"Config file not found: {p}")
        return EditorConfig()
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (yaml.YAMLError, OSError) as e:
        raise ConfigError(f"Could not load config {p}: {e}") from e
    if data is None:
        return EditorConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"Config {p} must be a mapping, got {type(data).__name__}")
    return EditorConfig.from_dict(data)


__all__ = ["DirtyPolicy", "EditorConfig", "default_config_path", "load_config"]
