"""Tests for Rich UI components."""

import io

from rich.console import Console

from cli.ui_components import build_todos_table, incomplete_summary, print_banner
from core.domain.models import Todo, TodoStatus


def render(renderable) -> str:
    console = Console(file=io.StringIO(), width=100, color_system=None)
    console.print(renderable)
    return console.file.getvalue()


def test_todos_table_lists_rows_in_order():
    table = build_todos_table(
        [Todo(id="1", todo="buy milk"), Todo(id="2", todo="walk dog", status=TodoStatus.DONE)]
    )
    assert table.row_count == 2
    output = render(table)
    assert output.index("buy milk") < output.index("walk dog")
    assert "Incomplete" in output
    assert "Done" in output


def test_banner_mentions_app_name():
    console = Console(file=io.StringIO(), width=100, color_system=None)
    print_banner(console)
    assert "TODO-D2" in console.file.getvalue()


def test_incomplete_summary():
    assert incomplete_summary(3) == "You have 3 incomplete todos in your todo list"


def test_todos_table_does_not_parse_markup():
    output = render(build_todos_table([Todo(id="1", todo="fix [/] bug"), Todo(id="2", todo="read [bold]docs")]))
    assert "fix [/] bug" in output
    assert "read [bold]docs" in output
