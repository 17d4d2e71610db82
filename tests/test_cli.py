"""Integration tests for the lightning CLI."""

from pathlib import Path

import yaml
from typer.testing import CliRunner

from lightning.cli import app


runner = CliRunner()


class TestCLI:
    """Integration tests for CLI commands."""

    def test_help(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "edit" in result.stdout
        assert "themes" in result.stdout

    def test_edit_help(self):
        result = runner.invoke(app, ["edit", "--help"])
        assert result.exit_code == 0
        assert "--dirty-policy" in result.stdout
        assert "--log-file" in result.stdout

    def test_themes_lists_palette_in_order(self):
        result = runner.invoke(app, ["themes"])
        assert result.exit_code == 0
        out = result.stdout
        positions = [out.index(name) for name in ["Calm", "Vibe", "Modern", "Professional", "Creative", "Warm"]]
        assert positions == sorted(positions)
        assert "(default)" in out

    def test_config_show_with_file(self, tmp_path: Path):
        cfg = tmp_path / "config.yaml"
        cfg.write_text("theme: calm\nhistory_window: 4\n", encoding="utf-8")
        result = runner.invoke(app, ["config", "show", "--config", str(cfg)])
        assert result.exit_code == 0
        assert "Calm" in result.stdout
        assert "4" in result.stdout

    def test_config_show_invalid_file_exits_1(self, tmp_path: Path):
        cfg = tmp_path / "config.yaml"
        cfg.write_text("dirty_policy: maybe\n", encoding="utf-8")
        result = runner.invoke(app, ["config", "show", "--config", str(cfg)])
        assert result.exit_code == 1
        assert "Invalid configuration" in result.stdout

    def test_config_show_missing_explicit_file_exits_1(self, tmp_path: Path):
        result = runner.invoke(app, ["config", "show", "--config", str(tmp_path / "missing.yaml")])
        assert result.exit_code == 1

    def test_config_export(self, tmp_path: Path, monkeypatch):
        monkeypatch.setattr("sys.platform", "linux")
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
        out = tmp_path / "exported.yaml"
        result = runner.invoke(app, ["config", "export", str(out)])
        assert result.exit_code == 0
        data = yaml.safe_load(out.read_text(encoding="utf-8"))
        assert data == {
            "theme": "professional",
            "dirty_policy": "keypress",
            "history_window": 10,
            "start_dir": None,
        }

    def test_edit_rejects_bad_theme_before_launching(self):
        result = runner.invoke(app, ["edit", "--theme", "neon"])
        assert result.exit_code == 1
        assert "Unknown theme" in result.stdout
