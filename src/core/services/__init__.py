"""Servicios del Core: lógica de la aplicación sin consola ni ficheros."""
