"""CLI interactiva (Typer + Rich)."""
