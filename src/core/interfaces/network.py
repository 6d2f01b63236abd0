"""Contratos de red: enumeración de interfaces y ejecución de comandos.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite sustituir PowerShell/netsh por fakes en los tests sin tocar el Core.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import CommandInvocation, CommandResult, NetworkAdapter


@runtime_checkable
class CommandRunner(Protocol):
    """Ejecuta un programa externo y devuelve un resultado, nunca lanza.

    Reglas de diseño:
    - `run` es asíncrono: la espera del proceso no bloquea el event loop.
    - Un exit code distinto de 0 o un fallo al arrancar se devuelven como
      `ExternalCommandError`.
    """

    async def run(self, invocation: CommandInvocation) -> CommandResult:
        ...


@runtime_checkable
class InterfaceSource(Protocol):
    """Fuente de interfaces de red del sistema operativo (sin filtrar)."""

    async def fetch_interfaces(self) -> list[NetworkAdapter]:
        """Consulta el sistema una vez y devuelve todas las interfaces conocidas."""

        ...
