"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a PowerShell, netsh ni a la consola.
- Normaliza lo que devuelve el sistema operativo (JSON de PowerShell) en
  estructuras estables.

Nota:
- Estos modelos describen *qué* es una interfaz o una invocación, no *cómo*
  se obtiene o se ejecuta.
"""

from __future__ import annotations

import subprocess
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic.config import ConfigDict

_IF_TYPE_ETHERNET = 6
_IF_TYPE_WIRELESS_80211 = 71


class InterfaceKind(str, Enum):
    """Tipo de interfaz tal y como se muestra al operador."""

    WIRED = "Ethernet"
    WIRELESS = "Wireless80211"
    OTHER = "Other"

    @classmethod
    def from_if_type(cls, if_type: int | None) -> "InterfaceKind":
        """Traduce el ifType IANA (6, 71, ...) a un tipo conocido."""

        if if_type == _IF_TYPE_ETHERNET:
            return cls.WIRED
        if if_type == _IF_TYPE_WIRELESS_80211:
            return cls.WIRELESS
        return cls.OTHER


class OperationalState(str, Enum):
    UP = "Up"
    DOWN = "Down"
    OTHER = "Other"

    @classmethod
    def from_status(cls, status: str | None) -> "OperationalState":
        """Traduce el `Status` de `Get-NetAdapter` ("Up", "Disconnected", ...)."""

        value = (status or "").strip().lower()
        if value == "up":
            return cls.UP
        if value in ("down", "disconnected", "disabled"):
            return cls.DOWN
        return cls.OTHER


class NetworkAdapter(BaseModel):
    """Instantánea de solo lectura de una interfaz de red del sistema.

    Por qué existe:
    - Se crea una vez en la enumeración y nunca se muta.
    - El índice mostrado al operador se resuelve contra esta lista.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        ...,
        min_length=1,
        description="Nombre de la interfaz (único en la máquina).",
    )
    description: str = Field(
        default="",
        description="Descripción del hardware/driver.",
    )
    kind: InterfaceKind = Field(
        default=InterfaceKind.OTHER,
        description="Cableada, inalámbrica u otra.",
    )
    state: OperationalState = Field(
        default=OperationalState.OTHER,
        description="Estado operativo.",
    )
    gateways: list[str] = Field(
        default_factory=list,
        description="Direcciones de gateway en forma textual.",
    )

    @field_validator("gateways", mode="before")
    @classmethod
    def _coerce_gateways(cls, value: Any) -> Any:
        # PowerShell serializa un único elemento como escalar y "sin datos" como null.
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return value

    @property
    def has_default_gateway(self) -> bool:
        return any(gateway != "0.0.0.0" for gateway in self.gateways)


class DnsMode(str, Enum):
    STATIC = "static"
    AUTOMATIC = "automatic"


class DnsConfigurationRequest(BaseModel):
    """Petición de cambio de DNS construida justo antes de aplicarla."""

    model_config = ConfigDict(frozen=True)

    adapter_name: str = Field(..., min_length=1)
    mode: DnsMode
    primary: str | None = None
    secondary: str | None = None

    @model_validator(mode="after")
    def _static_requires_primary(self) -> "DnsConfigurationRequest":
        if self.mode is DnsMode.STATIC and not (self.primary or "").strip():
            raise ValueError("static DNS requires a non-blank primary address")
        return self


class CommandInvocation(BaseModel):
    """Una llamada a un programa externo: ejecutable + cadena de argumentos.

    Los argumentos se mantienen como una única cadena porque `netsh` depende
    del entrecomillado exacto de `name="<adaptador>"`.
    """

    model_config = ConfigDict(frozen=True)

    executable: str = Field(..., min_length=1)
    arguments: str = ""
    encoding: str | None = Field(
        default=None,
        description="Codificación de la salida del hijo; None = la del runner.",
    )

    @property
    def command_line(self) -> str:
        program = subprocess.list2cmdline([self.executable])
        if not self.arguments:
            return program
        return f"{program} {self.arguments}"


class CommandOutput(BaseModel):
    """Resultado de una invocación terminada con código 0."""

    model_config = ConfigDict(frozen=True)

    invocation: CommandInvocation
    stdout: str = ""
    stderr: str = ""
    exit_code: int = 0


class CommandFailureReason(str, Enum):
    START_FAILED = "start_failed"
    NON_ZERO_EXIT = "non_zero_exit"


class ExternalCommandError(BaseModel):
    """Fallo de una invocación externa, propagado como valor de retorno.

    Por qué un valor y no una excepción:
    - El motivo del fallo viaja por returns ordinarios hasta la capa que lo
      imprime (la sesión), sin saltos de control.
    """

    model_config = ConfigDict(frozen=True)

    invocation: CommandInvocation
    reason: CommandFailureReason
    detail: str = Field(
        default="",
        description="stderr capturado (exit != 0) o el error del sistema (arranque).",
    )
    exit_code: int | None = None

    @property
    def message(self) -> str:
        if self.reason is CommandFailureReason.START_FAILED:
            return f"Impossibile avviare il processo. {self.detail}".rstrip()
        return f"Errore durante l'esecuzione del comando: {self.detail}"


CommandResult = CommandOutput | ExternalCommandError


class DnsOperationResult(BaseModel):
    """Salida agregada de una operación DNS (una o dos invocaciones)."""

    model_config = ConfigDict(frozen=True)

    outputs: list[CommandOutput] = Field(default_factory=list)
    error: ExternalCommandError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
