"""Interactive application loop.

One cycle: show what is left, ask for an action, apply it to the in-memory
collection, persist the whole collection. The loop owns the collection for
the whole run; storage only ever sees complete snapshots.
"""

from __future__ import annotations

from dataclasses import dataclass

from cli.prompting import Cancel, Terminal, select_option
from cli.ui_components import build_todos_table, incomplete_summary
from core.domain.errors import TodoNotFoundError, TodoValidationError
from core.domain.models import Config, Todo, TodoCollection
from core.interfaces.storage import TodoStorage
from core.logging import get_logger
from core.services.todo_service import (
    MenuAction,
    RunOutcome,
    add_todo,
    complete_todo,
    get_unfinished,
    menu_entries,
)

logger = get_logger("app")

ADD_PROMPT = "Enter todo: "
COMPLETE_PROMPT = "Pick a todo to mark as complete"


@dataclass
class TodoApp:
    """Runs the menu until the user exits or cancels.

    `StorageError` is not handled here; it ends the run and reaches the
    entry point.
    """

    config: Config
    storage: TodoStorage
    terminal: Terminal

    def run(self) -> RunOutcome:
        todos = self.storage.load(self.config.storage_path)
        logger.debug("Session started with %d todos", len(todos))

        while True:
            unfinished = get_unfinished(todos)
            if unfinished:
                self.terminal.console.print(build_todos_table(unfinished))

            entries = menu_entries(len(unfinished))
            choice = select_option(self.terminal, entries, incomplete_summary(len(unfinished)))
            if isinstance(choice, Cancel):
                return RunOutcome.CANCELLED

            action = entries[choice]
            if action is MenuAction.EXIT:
                return RunOutcome.EXITED

            if action is MenuAction.ADD:
                outcome = self._add(todos)
            else:
                outcome = self._complete(todos, unfinished)
            if outcome is not None:
                return outcome

            self.storage.save(todos, self.config.storage_path)

    def _add(self, todos: TodoCollection) -> RunOutcome | None:
        answer = self.terminal.ask(ADD_PROMPT)
        if isinstance(answer, Cancel):
            return RunOutcome.CANCELLED

        try:
            created = add_todo(todos, answer.text)
        except TodoValidationError as exc:
            self.terminal.say(str(exc), style="red")
            return None

        logger.info("Added todo %s", created.id)
        self.terminal.say("Todo added", style="green")
        return None

    def _complete(self, todos: TodoCollection, unfinished: list[Todo]) -> RunOutcome | None:
        choice = select_option(self.terminal, [item.todo for item in unfinished], COMPLETE_PROMPT)
        if isinstance(choice, Cancel):
            return RunOutcome.CANCELLED

        todo_id = unfinished[choice].id
        try:
            complete_todo(todos, todo_id)
        except TodoNotFoundError as exc:
            self.terminal.say(str(exc), style="red")
            return None

        logger.info("Completed todo %s", todo_id)
        self.terminal.say("Todo completed", style="green")
        return None
