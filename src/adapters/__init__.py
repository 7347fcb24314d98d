"""Adaptadores concretos de los contratos del Core."""

from adapters.json_storage import JsonFileStorage

__all__ = ["JsonFileStorage"]
