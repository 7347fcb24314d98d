"""Tests for menu option listing and collection operations."""

import pytest

from core.domain.errors import TodoNotFoundError, TodoValidationError
from core.domain.models import TodoCollection, TodoStatus
from core.services.todo_service import (
    MenuAction,
    add_todo,
    complete_todo,
    get_unfinished,
    list_options,
    menu_entries,
)


def test_list_options_zero():
    assert list_options(0) == [MenuAction.ADD]


@pytest.mark.parametrize("count", [1, 2, 50])
def test_list_options_some(count):
    assert list_options(count) == [MenuAction.ADD, MenuAction.COMPLETE]


def test_menu_entries_end_with_exit():
    assert menu_entries(0) == [MenuAction.ADD, MenuAction.EXIT]
    assert menu_entries(3)[-1] is MenuAction.EXIT
    assert len(menu_entries(3)) == 3


def test_menu_action_labels():
    assert [str(a) for a in MenuAction] == ["add a new todo", "complete a todo", "exit"]


def test_get_unfinished(mixed_collection):
    unfinished = get_unfinished(mixed_collection)
    assert [(t.id, t.todo) for t in unfinished] == [("2", "todo two")]


def test_add_todo_appends():
    collection = TodoCollection()
    created = add_todo(collection, "buy milk")
    assert collection.get(created.id) is created
    assert created.status is TodoStatus.INCOMPLETE


def test_add_todo_empty_leaves_collection_unchanged():
    collection = TodoCollection()
    with pytest.raises(TodoValidationError):
        add_todo(collection, "")
    assert len(collection) == 0


def test_complete_todo_flow():
    collection = TodoCollection()
    created = add_todo(collection, "buy milk")
    assert len(list_options(len(get_unfinished(collection)))) == 2

    complete_todo(collection, created.id)

    assert created.status is TodoStatus.DONE
    assert len(list_options(len(get_unfinished(collection)))) == 1


def test_complete_todo_unknown_id():
    with pytest.raises(TodoNotFoundError):
        complete_todo(TodoCollection(), "nope")
