"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- La ruta del fichero se resuelve una sola vez y viaja como `Config`
  explícito, así los tests pueden inyectar su propia ruta.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.models import Config

DEFAULT_STORAGE_PATH = Path("todos.json")


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "todo-d2"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "todo-d2"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "todo-d2"
    return Path.home() / ".config" / "todo-d2"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - `FILE_PATH` se acepta sin prefijo por compatibilidad con instalaciones
      existentes.
    """

    model_config = SettingsConfigDict(
        env_prefix="TODO_D2_",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    file_path: Path = Field(
        default=DEFAULT_STORAGE_PATH,
        validation_alias=AliasChoices("FILE_PATH", "TODO_D2_FILE_PATH"),
        description="Ruta del fichero JSON con las tareas.",
    )
    log_level: str = Field(
        default="WARNING",
        min_length=1,
        description="Nivel de logging (DEBUG, INFO, WARNING, ERROR).",
    )


def load_config(settings: AppSettings | None = None) -> Config:
    """Resuelve la `Config` inmutable a partir de los settings."""

    settings = settings or AppSettings()
    return Config(storage_path=settings.file_path)
