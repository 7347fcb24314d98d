"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras y estrictas (Pydantic v2).
- El dominio no conoce ficheros, CLI ni consola: solo conceptos del problema.
"""

from core.domain.errors import (
    StorageError,
    TodoError,
    TodoNotFoundError,
    TodoValidationError,
)
from core.domain.models import Config, Todo, TodoCollection, TodoStatus

__all__ = [
    "Config",
    "StorageError",
    "Todo",
    "TodoCollection",
    "TodoError",
    "TodoNotFoundError",
    "TodoStatus",
    "TodoValidationError",
]
