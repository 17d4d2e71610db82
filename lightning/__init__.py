"""Lightning - a single-file terminal text editor."""

__version__ = "0.1.0"
__description__ = "Single-file terminal text editor with a recent-files sidebar"

from lightning.cli import app, main

__all__ = ["app", "main", "__version__"]
