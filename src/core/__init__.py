"""Core del gestor de tareas: dominio, contratos, configuración y servicios."""
