"""Todo-list operations behind the interactive menu.

The CLI loop only asks questions and prints; deciding which actions are
available and how the collection changes lives here so it can be reused
and tested without a terminal.
"""

from __future__ import annotations

from enum import Enum

from core.domain.models import Todo, TodoCollection


class MenuAction(str, Enum):
    """Top-level menu entries, in display order."""

    ADD = "add a new todo"
    COMPLETE = "complete a todo"
    EXIT = "exit"

    def __str__(self) -> str:
        return self.value


class RunOutcome(str, Enum):
    """How an interactive session ended."""

    EXITED = "exited"
    CANCELLED = "cancelled"


def get_unfinished(collection: TodoCollection) -> list[Todo]:
    """Todos still `Incomplete`, in insertion order."""

    return collection.unfinished()


def list_options(unfinished_count: int) -> list[MenuAction]:
    """Actions offered for the given number of unfinished todos.

    Completing is only offered when something is left to complete. `EXIT`
    is not part of this list; the menu appends it as the final entry.
    """

    if unfinished_count == 0:
        return [MenuAction.ADD]
    return [MenuAction.ADD, MenuAction.COMPLETE]


def menu_entries(unfinished_count: int) -> list[MenuAction]:
    return [*list_options(unfinished_count), MenuAction.EXIT]


def add_todo(collection: TodoCollection, text: str) -> Todo:
    """Build a todo from user text and append it.

    Raises:
        TodoValidationError: when `text` is empty.
    """

    return collection.add(Todo.create(text))


def complete_todo(collection: TodoCollection, todo_id: str) -> Todo:
    """Mark the todo with `todo_id` as done.

    Raises:
        TodoNotFoundError: when no todo has that id.
    """

    return collection.complete(todo_id)
