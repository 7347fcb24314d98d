"""Persistencia JSON de la colección de tareas.

Por qué JSON:
- Formato legible y editable a mano (lista de objetos `id`/`todo`/`status`).
- Cada guardado reescribe el documento completo con formato estable.

Política de recuperación:
- Un fichero vacío, con bytes no UTF-8, con JSON inválido o que no valida contra el modelo se
  trata como "sin tareas". Se pierde su contenido al siguiente guardado;
  es un compromiso aceptado para que la herramienta siga siendo usable
  tras una edición manual rota.
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError

from core.domain.errors import StorageError
from core.domain.models import TodoCollection
from core.logging import get_logger

logger = get_logger("storage")


class JsonFileStorage:
    """Proveedor de almacenamiento respaldado por un único fichero JSON."""

    encoding = "utf-8"

    def load(self, path: Path) -> TodoCollection:
        if not path.exists():
            self._create_empty(path)
            return TodoCollection()

        try:
            data = path.read_bytes()
        except OSError as exc:
            raise StorageError(f"could not read {path}: {exc}") from exc

        try:
            collection = TodoCollection.model_validate_json(data.decode(self.encoding))
        except (UnicodeDecodeError, ValidationError) as exc:
            return self._discard_malformed(path, data, exc)

        logger.debug("Loaded %d todos from %s", len(collection), path)
        return collection

    def save(self, collection: TodoCollection, path: Path) -> None:
        try:
            payload = collection.model_dump(mode="json")
            text = json.dumps(payload, ensure_ascii=False, indent=2) + "\n"
        except (TypeError, ValueError) as exc:
            raise StorageError(f"could not serialize todos: {exc}") from exc

        try:
            path.write_text(text, encoding=self.encoding)
        except OSError as exc:
            raise StorageError(f"could not write {path}: {exc}") from exc

        logger.debug("Saved %d todos to %s", len(collection), path)

    def _create_empty(self, path: Path) -> None:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.touch()
        except OSError as exc:
            raise StorageError(f"could not create {path}: {exc}") from exc
        logger.info("Created empty todo file at %s", path)

    def _discard_malformed(
        self, path: Path, data: bytes, exc: UnicodeDecodeError | ValidationError
    ) -> TodoCollection:
        """Contenido ilegible (bytes no UTF-8, JSON roto o esquema inválido).

        Se devuelve una colección vacía a propósito; no es un error de E/S.
        """

        if data.strip():
            logger.warning(
                "Ignoring malformed todo file %s (%s); starting with an empty list",
                path,
                type(exc).__name__,
            )
        return TodoCollection()
