"""Shared option handling for CLI commands."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from lightning.core.config import DirtyPolicy, EditorConfig, load_config
from lightning.core.errors import ConfigError
from lightning.core.theme import Theme

console = Console()


def resolve_config(
    config_file: Optional[Path],
    *,
    theme: Optional[str] = None,
    dirty_policy: Optional[str] = None,
) -> EditorConfig:
    """Load the config file and apply command-line overrides; exit 1 on error."""
    try:
        cfg = load_config(config_file)
        if theme is not None:
            try:
                cfg.theme = Theme.parse(theme)
            except ValueError as e:
                raise ConfigError(str(e)) from e
        if dirty_policy is not None:
            try:
                cfg.dirty_policy = DirtyPolicy(dirty_policy.strip().lower())
            except ValueError as e:
                choices = ", ".join(p.value for p in DirtyPolicy)
                raise ConfigError(f"--dirty-policy must be one of: {choices}") from e
    except ConfigError as e:
        console.print(f"[bold red]❌ Invalid configuration:[/] {e}")
        raise typer.Exit(1)
    return cfg


def configure_logging(log_file: Optional[Path], *, verbose: bool = False) -> None:
    """Send log records to ``log_file``; the TUI owns the terminal otherwise."""
    if log_file is None:
        logging.getLogger("lightning").addHandler(logging.NullHandler())
        return
    logging.basicConfig(
        filename=str(log_file),
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
