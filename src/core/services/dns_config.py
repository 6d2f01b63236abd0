"""Operaciones de configuración DNS sobre un adaptador (netsh).

Las tres formas de comando son el contrato con la pila de red de Windows y se
reproducen literalmente (nombres de argumento, orden y comillas del nombre):

- interface ip set dns name="<adaptador>" source=static addr=<primario>
- interface ip add dns name="<adaptador>" addr=<secundario> index=2
- interface ip set dns name="<adaptador>" source=dhcp

Éxito significa exit code 0; no se interpreta nada más. Un primario aplicado
no se revierte si después falla el secundario.
"""

from __future__ import annotations

from core.config import AppSettings
from core.domain.models import (
    CommandInvocation,
    CommandOutput,
    DnsConfigurationRequest,
    DnsMode,
    DnsOperationResult,
    ExternalCommandError,
)
from core.interfaces.network import CommandRunner
from core.log import get_logger

log = get_logger(__name__)


def set_static_dns_arguments(adapter_name: str, primary: str) -> str:
    return f'interface ip set dns name="{adapter_name}" source=static addr={primary}'


def add_secondary_dns_arguments(adapter_name: str, secondary: str) -> str:
    return f'interface ip add dns name="{adapter_name}" addr={secondary} index=2'


def set_automatic_dns_arguments(adapter_name: str) -> str:
    return f'interface ip set dns name="{adapter_name}" source=dhcp'


class DnsConfigurator:
    """Construye las invocaciones de netsh y las ejecuta en orden."""

    def __init__(self, runner: CommandRunner, settings: AppSettings | None = None) -> None:
        self._runner = runner
        self._settings = settings or AppSettings()

    def _invocation(self, arguments: str) -> CommandInvocation:
        return CommandInvocation(executable=self._settings.netsh_executable, arguments=arguments)

    async def _run_all(self, invocations: list[CommandInvocation]) -> DnsOperationResult:
        outputs: list[CommandOutput] = []
        for invocation in invocations:
            result = await self._runner.run(invocation)
            if isinstance(result, ExternalCommandError):
                return DnsOperationResult(outputs=outputs, error=result)
            outputs.append(result)
        return DnsOperationResult(outputs=outputs)

    async def set_static_dns(
        self,
        adapter_name: str,
        primary: str,
        secondary: str | None = None,
    ) -> DnsOperationResult:
        invocations = [self._invocation(set_static_dns_arguments(adapter_name, primary))]
        if secondary is not None and secondary.strip():
            invocations.append(self._invocation(add_secondary_dns_arguments(adapter_name, secondary)))

        log.info("static DNS on %s: %s", adapter_name, ", ".join(i.arguments for i in invocations))
        return await self._run_all(invocations)

    async def set_automatic_dns(self, adapter_name: str) -> DnsOperationResult:
        log.info("automatic DNS on %s", adapter_name)
        return await self._run_all([self._invocation(set_automatic_dns_arguments(adapter_name))])

    async def apply(self, request: DnsConfigurationRequest) -> DnsOperationResult:
        if request.mode is DnsMode.AUTOMATIC:
            return await self.set_automatic_dns(request.adapter_name)
        # El validador del modelo garantiza un primario no vacío en modo estático.
        return await self.set_static_dns(
            request.adapter_name,
            request.primary or "",
            request.secondary,
        )
