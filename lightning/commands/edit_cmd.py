"""Editor command: launches the Textual TUI."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from lightning.commands.options import configure_logging, resolve_config


def edit(
    path: Optional[Path] = typer.Argument(None, help="File to open at start"),
    config_file: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config file"),
    theme: Optional[str] = typer.Option(None, "--theme", help="Initial accent theme"),
    dirty_policy: Optional[str] = typer.Option(
        None, "--dirty-policy", help="When to mark unsaved changes: keypress or content"
    ),
    log_file: Optional[Path] = typer.Option(None, "--log-file", help="Write logs to this file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug-level logging (with --log-file)"),
) -> None:
    """Launch the Lightning editor."""
    cfg = resolve_config(config_file, theme=theme, dirty_policy=dirty_policy)
    configure_logging(log_file, verbose=verbose)

    initial: Optional[str] = None
    if path is not None:
        initial = str(path.expanduser().resolve())

    try:
        from lightning.tui.app import LightningApp
    except Exception as e:  # pragma: no cover
        raise typer.Exit(f"Failed to import TUI dependencies: {e}")

    LightningApp(path=initial, config=cfg).run()
