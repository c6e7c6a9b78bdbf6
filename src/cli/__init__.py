"""Command-line layer (Typer + Rich)."""

__version__ = "0.1.0"
