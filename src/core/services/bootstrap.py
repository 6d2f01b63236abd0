"""Puerta de privilegios del proceso.

Se llama una sola vez al principio del entrypoint. Devuelve un tipo suma:
- `Elevated`: el llamante continúa.
- `Relaunched`: se pidió (o se intentó pedir) una copia elevada; el llamante
  termina sin hacer nada más, haya funcionado o no.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from adapters.elevation import ElevationError, is_administrator, relaunch_elevated
from core.log import get_logger

log = get_logger(__name__)


@dataclass(frozen=True)
class Elevated:
    pass


@dataclass(frozen=True)
class Relaunched:
    error: str | None = None


ElevationStatus = Elevated | Relaunched


def ensure_elevated(
    report: Callable[[str], None],
    *,
    is_admin: Callable[[], bool] = is_administrator,
    relaunch: Callable[[], None] = relaunch_elevated,
) -> ElevationStatus:
    """Comprueba privilegios y, si faltan, relanza el programa elevado.

    `report` recibe los mensajes para el operador (la CLI los imprime).
    """

    if is_admin():
        report("Privilegi di amministratore confermati.\n")
        return Elevated()

    report("Riavvio con privilegi di amministratore...")
    try:
        relaunch()
    except ElevationError as exc:
        log.info("elevation failed: %s", exc)
        report(
            "Errore: impossibile ottenere i privilegi di amministratore. "
            f"Dettagli: {exc}"
        )
        return Relaunched(error=str(exc))
    return Relaunched()
