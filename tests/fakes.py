"""Fakes for the OS-facing collaborators (process runner, interface source)."""

from __future__ import annotations

import io

from rich.console import Console

from adapters.powershell_interfaces import InterfaceQueryError
from core.domain.models import (
    CommandFailureReason,
    CommandInvocation,
    CommandOutput,
    CommandResult,
    ExternalCommandError,
    InterfaceKind,
    NetworkAdapter,
    OperationalState,
)


class FakeRunner:
    """Records invocations and answers with canned results.

    `failures` maps a 0-based call number to `(exit_code, stderr)`;
    `stdouts` maps a call number to the stdout of a successful call.
    """

    def __init__(
        self,
        *,
        failures: dict[int, tuple[int, str]] | None = None,
        stdouts: dict[int, str] | None = None,
    ) -> None:
        self.invocations: list[CommandInvocation] = []
        self._failures = failures or {}
        self._stdouts = stdouts or {}

    @property
    def arguments(self) -> list[str]:
        return [i.arguments for i in self.invocations]

    async def run(self, invocation: CommandInvocation) -> CommandResult:
        call = len(self.invocations)
        self.invocations.append(invocation)
        if call in self._failures:
            exit_code, stderr = self._failures[call]
            return ExternalCommandError(
                invocation=invocation,
                reason=CommandFailureReason.NON_ZERO_EXIT,
                detail=stderr,
                exit_code=exit_code,
            )
        return CommandOutput(invocation=invocation, stdout=self._stdouts.get(call, "Ok.\n"))


class FakeInterfaceSource:
    def __init__(self, adapters: list[NetworkAdapter]) -> None:
        self._adapters = adapters
        self.calls = 0

    async def fetch_interfaces(self) -> list[NetworkAdapter]:
        self.calls += 1
        return list(self._adapters)


class FailingInterfaceSource:
    def __init__(self, detail: str) -> None:
        self._detail = detail

    async def fetch_interfaces(self) -> list[NetworkAdapter]:
        raise InterfaceQueryError(self._detail)


def make_adapter(
    name: str,
    *,
    kind: InterfaceKind = InterfaceKind.WIRED,
    state: OperationalState = OperationalState.UP,
    gateways: list[str] | None = None,
    description: str = "Test NIC",
) -> NetworkAdapter:
    return NetworkAdapter(
        name=name,
        description=description,
        kind=kind,
        state=state,
        gateways=["192.168.1.1"] if gateways is None else gateways,
    )


def scripted_input(*lines: str):
    """`read_line` replacement; raises EOFError once the script is exhausted."""

    pending = list(lines)

    def read_line() -> str:
        if not pending:
            raise EOFError
        return pending.pop(0)

    return read_line


def capture_console() -> Console:
    return Console(file=io.StringIO(), width=200, color_system=None, force_terminal=False)


def console_text(console: Console) -> str:
    return console.file.getvalue()  # type: ignore[attr-defined]
