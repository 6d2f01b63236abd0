"""Ejecución de programas externos (netsh, PowerShell).

Por qué un wrapper:
- Estandariza captura de stdout/stderr, decodificación y la traducción de
  fallos a `ExternalCommandError`.
- Facilita testeo: la sesión y las operaciones DNS reciben un `CommandRunner`
  que se puede sustituir por un fake.
"""

from __future__ import annotations

import asyncio
import locale
import shlex
import subprocess
import sys
from typing import Any

from core.config import AppSettings
from core.domain.models import (
    CommandFailureReason,
    CommandInvocation,
    CommandOutput,
    CommandResult,
    ExternalCommandError,
)
from core.interfaces.network import CommandRunner
from core.log import get_logger

log = get_logger(__name__)


def build_process_args(invocation: CommandInvocation) -> str | list[str]:
    """Argumentos para `subprocess`.

    En Windows la línea de comandos llega tal cual a `CreateProcess`, así el
    entrecomillado de `name="..."` no pasa por `list2cmdline`.
    """

    if sys.platform == "win32":
        return invocation.command_line
    return [invocation.executable, *shlex.split(invocation.arguments)]


def default_output_encoding() -> str:
    """Las utilidades de consola de Windows (netsh) escriben en la página OEM."""

    if sys.platform == "win32":
        return "oem"
    return locale.getpreferredencoding(False)


def _decode(data: bytes | None, encoding: str) -> str:
    if not data:
        return ""
    return data.decode(encoding, errors="replace")


def _popen_kwargs() -> dict[str, Any]:
    if sys.platform == "win32":
        return {"creationflags": subprocess.CREATE_NO_WINDOW}
    return {}


class ProcessRunner(CommandRunner):
    """`CommandRunner` basado en `subprocess`, esperado desde un hilo."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        self._settings = settings or AppSettings()

    @property
    def encoding(self) -> str:
        return self._settings.output_encoding or default_output_encoding()

    def encoding_for(self, invocation: CommandInvocation) -> str:
        return invocation.encoding or self.encoding

    async def run(self, invocation: CommandInvocation) -> CommandResult:
        log.debug("exec: %s", invocation.command_line)
        try:
            completed = await asyncio.to_thread(self._spawn, invocation)
        except OSError as exc:
            log.info("could not start %s: %s", invocation.executable, exc)
            return ExternalCommandError(
                invocation=invocation,
                reason=CommandFailureReason.START_FAILED,
                detail=str(exc),
            )

        encoding = self.encoding_for(invocation)
        stdout = _decode(completed.stdout, encoding)
        stderr = _decode(completed.stderr, encoding)
        log.debug("exit %s: %s", completed.returncode, invocation.executable)

        if completed.returncode != 0:
            log.info(
                "%s exited with %s: %s",
                invocation.executable,
                completed.returncode,
                stderr.strip(),
            )
            return ExternalCommandError(
                invocation=invocation,
                reason=CommandFailureReason.NON_ZERO_EXIT,
                detail=stderr,
                exit_code=completed.returncode,
            )

        return CommandOutput(
            invocation=invocation,
            stdout=stdout,
            stderr=stderr,
            exit_code=completed.returncode,
        )

    def _spawn(self, invocation: CommandInvocation) -> subprocess.CompletedProcess[bytes]:
        # run() drena stdout y stderr a la vez (communicate), sin riesgo de pipe lleno.
        return subprocess.run(
            build_process_args(invocation),
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            check=False,
            **_popen_kwargs(),
        )
