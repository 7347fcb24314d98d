"""Typer entry point.

The command takes no arguments: configuration comes from the environment
(`FILE_PATH`, `TODO_D2_*`) and everything else happens in the interactive
menu.
"""

from __future__ import annotations

import typer
from rich.console import Console

from adapters.json_storage import JsonFileStorage
from cli.app import TodoApp
from cli.prompting import Terminal
from cli.ui_components import print_banner
from core.config import AppSettings, load_config
from core.domain.errors import StorageError
from core.logging import configure_logging, get_logger
from core.services.todo_service import RunOutcome

EXIT_CANCELLED = 1
EXIT_STORAGE_ERROR = 2

app = typer.Typer(add_completion=False, help="Keep a todo list in a local JSON file.")

logger = get_logger("cli")


@app.command()
def todo() -> None:
    """Open the interactive todo menu."""

    console = Console()
    settings = AppSettings()
    configure_logging(settings.log_level)
    config = load_config(settings)
    logger.debug("Using todo file %s", config.storage_path)

    print_banner(console)
    todo_app = TodoApp(config=config, storage=JsonFileStorage(), terminal=Terminal(console=console))

    try:
        outcome = todo_app.run()
    except StorageError as exc:
        console.print(str(exc), style="red", markup=False, highlight=False)
        raise typer.Exit(code=EXIT_STORAGE_ERROR) from exc

    if outcome is RunOutcome.CANCELLED:
        raise typer.Exit(code=EXIT_CANCELLED)
    console.print("done")


def run() -> None:
    app()
