"""Fuente de interfaces de red: PowerShell (`Get-NetAdapter` + `Get-NetRoute`).

Una sola consulta por ejecución. El filtrado (estado, tipo, gateway) NO se
delega al sistema: se devuelve todo y lo decide el Core.
"""

from __future__ import annotations

import base64
import json
from typing import Any

from pydantic import BaseModel, Field, ValidationError
from pydantic.config import ConfigDict

from core.config import AppSettings
from core.domain.models import (
    CommandInvocation,
    ExternalCommandError,
    InterfaceKind,
    NetworkAdapter,
    OperationalState,
)
from core.interfaces.network import CommandRunner, InterfaceSource
from core.log import get_logger

log = get_logger(__name__)

# Las rutas por defecto dan los gateways (NextHop) de cada ifIndex. Un NextHop
# 0.0.0.0 o :: es una ruta on-link, no un gateway: el de IPv6 se descarta aquí,
# el de IPv4 lo descarta el filtro del Core. La salida se fuerza a UTF-8 (sin
# BOM) para no depender de la página de códigos de la consola.
LIST_INTERFACES_SCRIPT = """\
[Console]::OutputEncoding = New-Object System.Text.UTF8Encoding $false
$routes = @(Get-NetRoute -DestinationPrefix '0.0.0.0/0','::/0' -ErrorAction SilentlyContinue)
@(Get-NetAdapter -IncludeHidden | ForEach-Object {
    $index = $_.ifIndex
    [pscustomobject]@{
        Name = $_.Name
        InterfaceDescription = $_.InterfaceDescription
        InterfaceType = [int]$_.InterfaceType
        Status = [string]$_.Status
        Gateways = @($routes | Where-Object { $_.ifIndex -eq $index -and $_.NextHop -ne '::' } | ForEach-Object { $_.NextHop })
    }
}) | ConvertTo-Json -Depth 3
"""

QUERY_OUTPUT_ENCODING = "utf-8"


class InterfaceQueryError(RuntimeError):
    """La consulta de interfaces al sistema falló o devolvió datos ilegibles."""


class RawInterface(BaseModel):
    """Un elemento del JSON emitido por `LIST_INTERFACES_SCRIPT`."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    name: str = Field(..., alias="Name", min_length=1)
    description: str | None = Field(default=None, alias="InterfaceDescription")
    interface_type: int | None = Field(default=None, alias="InterfaceType")
    status: str | None = Field(default=None, alias="Status")
    gateways: Any = Field(default=None, alias="Gateways")

    def to_adapter(self) -> NetworkAdapter:
        return NetworkAdapter(
            name=self.name,
            description=self.description or "",
            kind=InterfaceKind.from_if_type(self.interface_type),
            state=OperationalState.from_status(self.status),
            gateways=self.gateways,
        )


def encode_script(script: str) -> str:
    """Codifica un script para `-EncodedCommand` (UTF-16LE + base64)."""

    return base64.b64encode(script.encode("utf-16-le")).decode("ascii")


def parse_interfaces(payload: str) -> list[NetworkAdapter]:
    """Convierte la salida JSON de PowerShell en `NetworkAdapter`.

    `ConvertTo-Json` emite un objeto suelto cuando solo hay una interfaz y
    nada cuando no hay ninguna.
    """

    text = payload.lstrip("\ufeff").strip()
    if not text:
        return []
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise InterfaceQueryError(f"invalid JSON from interface query: {exc}") from exc

    items = data if isinstance(data, list) else [data]
    try:
        return [RawInterface.model_validate(item).to_adapter() for item in items]
    except ValidationError as exc:
        raise InterfaceQueryError(f"unexpected interface record: {exc}") from exc


class PowerShellInterfaceSource(InterfaceSource):
    """Implementación Windows de `InterfaceSource`."""

    def __init__(
        self,
        runner: CommandRunner,
        settings: AppSettings | None = None,
    ) -> None:
        self._runner = runner
        self._settings = settings or AppSettings()

    def build_invocation(self) -> CommandInvocation:
        return CommandInvocation(
            executable=self._settings.powershell_executable,
            arguments=(
                "-NoProfile -NonInteractive -ExecutionPolicy Bypass "
                f"-EncodedCommand {encode_script(LIST_INTERFACES_SCRIPT)}"
            ),
            encoding=QUERY_OUTPUT_ENCODING,
        )

    async def fetch_interfaces(self) -> list[NetworkAdapter]:
        result = await self._runner.run(self.build_invocation())
        if isinstance(result, ExternalCommandError):
            raise InterfaceQueryError(result.message)

        adapters = parse_interfaces(result.stdout)
        log.debug("interface query returned %d adapters", len(adapters))
        return adapters
