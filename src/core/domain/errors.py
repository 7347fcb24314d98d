"""Error taxonomy shared by the core, adapters and CLI.

Validation and not-found errors are recoverable inside the menu loop;
storage errors abort the run and reach the entry point.
"""

from __future__ import annotations


class TodoError(Exception):
    """Base error for the todo application."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"There is an error: {self.message}"


class TodoValidationError(TodoError):
    """A todo could not be built from the given input."""


class TodoNotFoundError(TodoError):
    """No todo in the collection has the requested id."""


class StorageError(TodoError):
    """The storage file could not be created, read or written."""
