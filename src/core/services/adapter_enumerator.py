"""Selección de las interfaces sobre las que tiene sentido cambiar DNS.

Este módulo no sabe de dónde salen las interfaces (PowerShell, fakes): recibe
un `InterfaceSource`, lo consulta una vez y aplica el filtro y el orden.
"""

from __future__ import annotations

from typing import Iterable

from core.domain.models import InterfaceKind, NetworkAdapter, OperationalState
from core.interfaces.network import InterfaceSource
from core.log import get_logger

log = get_logger(__name__)

_ELIGIBLE_KINDS = frozenset({InterfaceKind.WIRED, InterfaceKind.WIRELESS})


def is_eligible(adapter: NetworkAdapter) -> bool:
    """Activa, cableada o Wi-Fi, y con al menos un gateway distinto de 0.0.0.0."""

    return (
        adapter.state is OperationalState.UP
        and adapter.kind in _ELIGIBLE_KINDS
        and adapter.has_default_gateway
    )


def select_eligible_adapters(adapters: Iterable[NetworkAdapter]) -> list[NetworkAdapter]:
    """Filtra y ordena por nombre (ascendente, orden estable)."""

    return sorted((a for a in adapters if is_eligible(a)), key=lambda a: a.name)


async def list_eligible_adapters(source: InterfaceSource) -> list[NetworkAdapter]:
    adapters = await source.fetch_interfaces()
    eligible = select_eligible_adapters(adapters)
    log.debug("%d of %d interfaces are eligible", len(eligible), len(adapters))
    return eligible
