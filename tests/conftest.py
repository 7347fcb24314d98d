"""Shared fixtures: scripted terminals and an in-memory storage."""

from __future__ import annotations

import io
from pathlib import Path
from typing import Callable, Iterable

import pytest
from rich.console import Console

from cli.prompting import Terminal
from core.domain.errors import StorageError
from core.domain.models import Config, Todo, TodoCollection, TodoStatus


class ScriptedTerminal(Terminal):
    """Terminal fed from a list of lines; raises EOFError when they run out."""

    def output(self) -> str:
        return self.console.file.getvalue()


def make_terminal(lines: Iterable[str]) -> ScriptedTerminal:
    pending = iter(lines)

    def read_line() -> str:
        try:
            return next(pending)
        except StopIteration:
            raise EOFError from None

    console = Console(file=io.StringIO(), width=120, color_system=None)
    return ScriptedTerminal(console=console, read_line=read_line)


class MemoryStorage:
    """Keeps saved snapshots instead of writing files."""

    def __init__(self, initial: TodoCollection | None = None, *, fail_on_save: bool = False) -> None:
        self.initial = initial or TodoCollection()
        self.fail_on_save = fail_on_save
        self.snapshots: list[TodoCollection] = []

    def load(self, path: Path) -> TodoCollection:
        return self.initial.model_copy(deep=True)

    def save(self, collection: TodoCollection, path: Path) -> None:
        if self.fail_on_save:
            raise StorageError(f"could not write {path}: disk full")
        self.snapshots.append(collection.model_copy(deep=True))


@pytest.fixture
def terminal_factory() -> Callable[[Iterable[str]], ScriptedTerminal]:
    return make_terminal


@pytest.fixture
def config(tmp_path: Path) -> Config:
    return Config(storage_path=tmp_path / "todos.json")


@pytest.fixture
def mixed_collection() -> TodoCollection:
    return TodoCollection(
        [
            Todo(id="1", todo="todo one", status=TodoStatus.DONE),
            Todo(id="2", todo="todo two", status=TodoStatus.INCOMPLETE),
            Todo(id="3", todo="todo three", status=TodoStatus.DONE),
        ]
    )
