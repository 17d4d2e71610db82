"""Typer command modules for the Lightning CLI."""
