"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- El mismo modelo valida lo que se lee del fichero JSON y lo que escribe el
  usuario en el menú.

Nota:
- Estos modelos describen *qué* es una tarea, no *cómo* se guarda.
"""

from __future__ import annotations

import uuid
from enum import Enum
from pathlib import Path
from typing import Iterator

from pydantic import BaseModel, Field, RootModel, model_validator
from pydantic.config import ConfigDict

from core.domain.errors import TodoNotFoundError, TodoValidationError


class TodoStatus(str, Enum):
    """Estado de una tarea. Los valores son las etiquetas que se guardan en disco."""

    INCOMPLETE = "Incomplete"
    DONE = "Done"


class Todo(BaseModel):
    """Una tarea individual.

    Reglas:
    - `id` es opaco, se genera al crear la tarea y no cambia nunca.
    - `todo` nunca está vacío.
    """

    id: str = Field(
        ...,
        min_length=1,
        frozen=True,
        description="Identificador único (UUID4 en texto).",
    )
    todo: str = Field(
        ...,
        min_length=1,
        description="Texto de la tarea.",
    )
    status: TodoStatus = Field(
        default=TodoStatus.INCOMPLETE,
        description="Estado actual de la tarea.",
    )

    @classmethod
    def create(cls, text: str) -> "Todo":
        """Crea una tarea nueva con id fresco y estado `Incomplete`.

        El texto no se recorta: el menú ya entrega la línea sin espacios.
        """

        if len(text) == 0:
            raise TodoValidationError("todo cannot be empty")
        return cls(id=str(uuid.uuid4()), todo=text, status=TodoStatus.INCOMPLETE)

    @property
    def is_done(self) -> bool:
        return self.status is TodoStatus.DONE


class TodoCollection(RootModel[list[Todo]]):
    """Lista ordenada de tareas (orden de inserción, ids únicos).

    Se carga entera desde el almacenamiento y se guarda entera tras cada
    cambio; nunca se parchea en disco.
    """

    root: list[Todo] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_unique_ids(self) -> "TodoCollection":
        seen: set[str] = set()
        for item in self.root:
            if item.id in seen:
                raise ValueError(f"duplicate todo id: {item.id}")
            seen.add(item.id)
        return self

    def __iter__(self) -> Iterator[Todo]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def get(self, todo_id: str) -> Todo | None:
        for item in self.root:
            if item.id == todo_id:
                return item
        return None

    def add(self, todo: Todo) -> Todo:
        if self.get(todo.id) is not None:
            raise TodoValidationError(f"duplicate todo id: {todo.id}")
        self.root.append(todo)
        return todo

    def unfinished(self) -> list[Todo]:
        """Subconjunto `Incomplete`, en el mismo orden."""

        return [item for item in self.root if item.status is TodoStatus.INCOMPLETE]

    def complete(self, todo_id: str) -> Todo:
        """Marca como `Done` solo la tarea con ese id.

        Las demás tareas no se tocan.
        """

        item = self.get(todo_id)
        if item is None:
            raise TodoNotFoundError("todo not found")
        item.status = TodoStatus.DONE
        return item


class Config(BaseModel):
    """Configuración resuelta una vez al arrancar; inmutable después."""

    model_config = ConfigDict(frozen=True)

    storage_path: Path = Field(
        ...,
        description="Ruta del fichero JSON con las tareas.",
    )
