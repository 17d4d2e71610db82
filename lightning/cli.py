#!/usr/bin/env python3
"""
Lightning - single-file terminal text editor
Main CLI entry point
"""

from __future__ import annotations

import typer

from lightning.commands import config_cmd, edit_cmd, themes_cmd

app = typer.Typer(
    name="lightning",
    help="Edit one text file in the terminal, with a sidebar of recently opened files",
    no_args_is_help=True,
    add_completion=True,
)

app.command(name="edit", help="Launch the editor (optionally opening PATH)")(edit_cmd.edit)
app.command(name="themes", help="List the accent themes in cycling order")(themes_cmd.themes)

app.add_typer(config_cmd.app, name="config", help="Inspect configuration")


@app.callback()
def callback() -> None:
    """
    Lightning - single-file terminal text editor

      edit [PATH]    - Open the editor (Ctrl+O open, Ctrl+L save, Ctrl+Q quit)
      themes         - Show the accent palette
      config show    - Show the effective configuration
    """
    pass


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
