"""CLI layer: prompts, Rich components and the Typer entry point."""
