"""Privilegios de administrador en Windows (ctypes + shell32).

- `is_administrator`: `IsUserAnAdmin()`; fuera de Windows, euid 0.
- `relaunch_elevated`: vuelve a lanzar el mismo programa con el verbo `runas`
  (diálogo UAC). No espera al nuevo proceso.
"""

from __future__ import annotations

import ctypes
import os
import subprocess
import sys

from core.log import get_logger

log = get_logger(__name__)

_SW_SHOWNORMAL = 1

# ShellExecuteW devuelve un valor <= 32 cuando falla.
_SHELL_EXECUTE_ERRORS = {
    0: "out of memory or resources",
    2: "file not found",
    3: "path not found",
    5: "access denied or elevation declined",
    8: "out of memory",
    31: "no application associated",
}


class ElevationError(RuntimeError):
    """No se pudo relanzar el proceso con privilegios elevados."""


def is_administrator() -> bool:
    if sys.platform == "win32":
        try:
            return bool(ctypes.windll.shell32.IsUserAnAdmin())  # type: ignore[attr-defined]
        except (AttributeError, OSError):
            return False
    geteuid = getattr(os, "geteuid", None)
    return geteuid is not None and geteuid() == 0


def relaunch_arguments(argv: list[str] | None = None, *, frozen: bool | None = None) -> list[str]:
    """Argumentos para relanzar este mismo programa con `sys.executable`.

    - Build congelado (PyInstaller): el propio ejecutable, mismos argumentos.
    - Script de desarrollo (`python main.py`): la ruta absoluta del script.
    - Resto (console script, `python -m cli`): `-m cli`.
    """

    argv = list(sys.argv if argv is None else argv)
    frozen = getattr(sys, "frozen", False) if frozen is None else frozen
    script, rest = (argv[0] if argv else ""), argv[1:]

    if frozen:
        return rest
    if script.endswith(".py") and os.path.basename(script) != "__main__.py":
        return [os.path.abspath(script), *rest]
    return ["-m", "cli", *rest]


def relaunch_elevated() -> None:
    if sys.platform != "win32":
        raise ElevationError("elevation via ShellExecute is only available on Windows")

    params = subprocess.list2cmdline(relaunch_arguments())
    log.info("relaunching elevated: %s %s", sys.executable, params)
    try:
        code = ctypes.windll.shell32.ShellExecuteW(  # type: ignore[attr-defined]
            None, "runas", sys.executable, params, os.getcwd(), _SW_SHOWNORMAL
        )
    except (AttributeError, OSError) as exc:
        raise ElevationError(str(exc)) from exc

    if code <= 32:
        reason = _SHELL_EXECUTE_ERRORS.get(code, "unknown error")
        raise ElevationError(f"ShellExecuteW failed ({code}): {reason}")
