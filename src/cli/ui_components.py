"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar el bucle de la aplicación con detalles visuales.
- Permite reutilizar paneles/tablas y probarlos sin terminal real.
"""

from __future__ import annotations

from typing import Iterable

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import Todo


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida."""

    title = Text("TODO-D2", style="bold cyan")
    subtitle = Text("Add todos • Complete todos • Stored as JSON", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_todos_table(todos: Iterable[Todo], *, title: str = "Incomplete Todos") -> Table:
    """Tabla Rich con las tareas dadas, en su orden."""

    table = Table(title=title)
    table.add_column("#", style="cyan", no_wrap=True)
    table.add_column("Todo", style="white")
    table.add_column("Status", no_wrap=True)
    for idx, item in enumerate(todos, start=1):
        status_style = "green" if item.is_done else "yellow"
        table.add_row(str(idx), Text(item.todo), Text(item.status.value, style=status_style))
    return table


def incomplete_summary(count: int) -> str:
    return f"You have {count} incomplete todos in your todo list"
