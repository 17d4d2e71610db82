from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from lightning.core.config import DirtyPolicy, EditorConfig, default_config_path, load_config
from lightning.core.errors import ConfigError
from lightning.core.history import DEFAULT_WINDOW
from lightning.core.theme import Theme


def test_defaults_match_editor_behavior():
    cfg = EditorConfig()
    assert cfg.theme is Theme.PROFESSIONAL
    assert cfg.dirty_policy is DirtyPolicy.KEYPRESS
    assert cfg.history_window == DEFAULT_WINDOW == 10
    assert cfg.start_dir is None


def test_default_path_uses_xdg_config_home(tmp_path: Path, monkeypatch):
    monkeypatch.setattr("sys.platform", "linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert default_config_path() == tmp_path / "lightning" / "config.yaml"


def test_missing_default_file_returns_defaults(tmp_path: Path, monkeypatch):
    monkeypatch.setattr("sys.platform", "linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert load_config() == EditorConfig()


def test_missing_explicit_file_raises(tmp_path: Path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / "nope.yaml")


def test_empty_file_returns_defaults(tmp_path: Path):
    p = tmp_path / "config.yaml"
    p.write_text("", encoding="utf-8")
    assert load_config(p) == EditorConfig()


def test_load_values(tmp_path: Path):
    p = tmp_path / "config.yaml"
    p.write_text(
        "theme: Warm\ndirty_policy: content\nhistory_window: 5\nstart_dir: ~/notes\n",
        encoding="utf-8",
    )
    cfg = load_config(p)
    assert cfg.theme is Theme.WARM
    assert cfg.dirty_policy is DirtyPolicy.CONTENT
    assert cfg.history_window == 5
    assert cfg.start_dir == str(Path("~/notes").expanduser())


@pytest.mark.parametrize(
    "body",
    [
        "theme: neon\n",
        "dirty_policy: sometimes\n",
        "history_window: 0\n",
        "history_window: ten\n",
        "history_window: true\n",
        "- just\n- a list\n",
        ":\n- [\n",
    ],
)
def test_invalid_files_raise(tmp_path: Path, body: str):
    p = tmp_path / "config.yaml"
    p.write_text(body, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(p)


def test_to_dict_loads_back(tmp_path: Path):
    cfg = EditorConfig(theme=Theme.VIBE, dirty_policy=DirtyPolicy.CONTENT, history_window=3)
    p = tmp_path / "config.yaml"
    p.write_text(yaml.safe_dump(cfg.to_dict()), encoding="utf-8")
    assert load_config(p) == cfg
