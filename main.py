"""Ejecuta cambiadns desde un checkout, sin `pip install -e .`.

    python main.py

La elevación relanza este mismo fichero por su ruta absoluta
(`adapters.elevation.relaunch_arguments`), así que el shim tiene que poder
arrancar desde cualquier directorio de trabajo (UAC arranca en System32).
"""

from __future__ import annotations

import os
import sys

SRC_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "src")


if __name__ == "__main__":
    if SRC_DIR not in sys.path:
        sys.path.insert(0, SRC_DIR)

    from cli.main import run  # noqa: E402

    run()
