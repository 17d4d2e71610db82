"""Config command for Lightning CLI."""

from pathlib import Path
from typing import Optional

import typer
import yaml
from rich.console import Console

from lightning.commands.options import resolve_config
from lightning.core.config import default_config_path

app = typer.Typer()
console = Console()


@app.command("show")
def show(config_file: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config file")):
    """Show the effective configuration."""
    cfg = resolve_config(config_file)
    source = config_file or default_config_path()
    exists = Path(source).exists()

    console.print("\n[bold]Current Configuration:[/]")
    console.print(f"  Source: [cyan]{source}[/]{'' if exists else ' [dim](not found, using defaults)[/]'}")
    console.print(f"  Theme: [cyan]{cfg.theme.label}[/]")
    console.print(f"  Dirty policy: [cyan]{cfg.dirty_policy.value}[/]")
    console.print(f"  History window: [cyan]{cfg.history_window}[/]")
    console.print(f"  Start directory: [cyan]{cfg.start_dir or '(current directory)'}[/]")
    console.print()


@app.command("export")
def export(output_path: Path = typer.Argument(Path("lightning_config.yaml"), help="Where to write the template")):
    """Write the effective configuration as a YAML template."""
    cfg = resolve_config(None)
    with open(output_path, "w", encoding="utf-8") as f:
        yaml.safe_dump(cfg.to_dict(), f, default_flow_style=False, sort_keys=False)
    console.print(f"[bold green]✔[/] Configuration template exported to [underline]{output_path}[/]")
