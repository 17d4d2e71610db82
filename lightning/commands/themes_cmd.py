"""Themes command: show the accent palette."""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from lightning.core.theme import Theme

console = Console()


def themes() -> None:
    """List accent themes in the order Ctrl+T cycles through them."""
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Theme")
    table.add_column("Accent")
    table.add_column("", justify="center")

    default = Theme.default()
    for i, theme in enumerate(Theme, 1):
        label = f"{theme.label} (default)" if theme is default else theme.label
        table.add_row(str(i), label, theme.accent_color, Text("████", style=theme.accent_color))
    console.print(table)
