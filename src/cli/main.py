"""Entrypoint de la CLI (Typer).

Orden fijo: configuración -> logging -> privilegios -> sesión. Nada de red se
toca antes de pasar la puerta de privilegios. El exit code es 0 en todos los
caminos: el resultado se comunica solo por texto.
"""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.text import Text

from adapters.powershell_interfaces import PowerShellInterfaceSource
from adapters.process_runner import ProcessRunner
from cli.session import DnsSession
from cli.ui_components import build_header
from core.config import AppSettings
from core.log import configure_logging
from core.services.bootstrap import Relaunched, ensure_elevated
from core.services.dns_config import DnsConfigurator

app = typer.Typer(
    add_completion=False,
    help="Elenca le schede di rete attive e imposta DNS statici o automatici (DHCP).",
)

_console = Console()


@app.command()
def configure() -> None:
    """Interactive DNS configuration for one network adapter."""

    settings = AppSettings()
    configure_logging(settings.log_level)

    status = ensure_elevated(lambda message: _console.print(Text(message), highlight=False))
    if isinstance(status, Relaunched):
        return

    _console.print(build_header(settings))

    runner = ProcessRunner(settings)
    session = DnsSession(
        console=_console,
        source=PowerShellInterfaceSource(runner, settings),
        configurator=DnsConfigurator(runner, settings),
        settings=settings,
    )
    asyncio.run(session.run())


def run() -> None:
    app()


if __name__ == "__main__":
    run()
