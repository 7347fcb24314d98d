"""Contrato del proveedor de almacenamiento.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite que el bucle de la aplicación se pruebe con un almacenamiento
  en memoria sin tocar el disco.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from core.domain.models import TodoCollection


@runtime_checkable
class TodoStorage(Protocol):
    """Contrato mínimo para leer y escribir la colección completa.

    Reglas de diseño:
    - Sin caché: cada llamada toca el almacenamiento.
    - Siempre se lee y se escribe la colección entera.
    - Los fallos de entorno se elevan como `StorageError`.
    """

    def load(self, path: Path) -> TodoCollection:
        """Carga la colección; crea el almacenamiento vacío si no existe."""

        ...

    def save(self, collection: TodoCollection, path: Path) -> None:
        """Reemplaza por completo el contenido guardado."""

        ...
