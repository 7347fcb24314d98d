"""Lanzador del gestor de tareas dentro de `src/`.

Por qué existe:
- `cd src && python -m main` abre el menú interactivo sin instalar nada,
  porque `cli`, `core` y `adapters` están en el mismo directorio.
- Instalado con pip, el mismo `run()` queda expuesto como `todo-d2`.
"""

from __future__ import annotations

import sys

# Workaround for UnicodeEncodeError on Windows terminals (cp1252 vs utf-8).
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
