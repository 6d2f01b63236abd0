"""Sesión interactiva: elegir adaptador, elegir modo, aplicar DNS.

Flujo (sin vuelta atrás):
    listado -> selección -> modo -> {valores DNS -> estático | automático} -> fin

Cualquier entrada inválida termina la sesión con un mensaje; no se vuelve a
preguntar. Los fallos de los comandos externos se imprimen y la sesión
termina con normalidad.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Callable

from rich.console import Console
from rich.text import Text

from adapters.powershell_interfaces import InterfaceQueryError
from cli.ui_components import build_adapters_table, build_dns_summary_panel
from core.config import AppSettings
from core.domain.models import (
    DnsConfigurationRequest,
    DnsMode,
    DnsOperationResult,
    NetworkAdapter,
)
from core.interfaces.network import InterfaceSource
from core.services.adapter_enumerator import list_eligible_adapters
from core.services.dns_config import DnsConfigurator


_SELECTION_RE = re.compile(r"\s*[+-]?[0-9]+\s*", re.ASCII)


class SessionOutcome(str, Enum):
    """Estado terminal alcanzado por una sesión."""

    ENUMERATION_EMPTY = "enumeration_empty"
    ENUMERATION_FAILED = "enumeration_failed"
    INVALID_SELECTION = "invalid_selection"
    APPLIED = "applied"
    COMMAND_FAILED = "command_failed"


def parse_selection(raw: str, count: int) -> int | None:
    """Índice 0-based para una respuesta 1-based, o None si no es válida."""

    # Solo dígitos ASCII con signo opcional: int() aceptaría también "1_0" o "١".
    if not _SELECTION_RE.fullmatch(raw):
        return None
    number = int(raw)
    if number < 1 or number > count:
        return None
    return number - 1


def value_or_default(raw: str, default: str) -> str:
    """Una respuesta en blanco toma el valor por defecto; si no, tal cual."""

    return default if not raw.strip() else raw


class DnsSession:
    def __init__(
        self,
        *,
        console: Console,
        source: InterfaceSource,
        configurator: DnsConfigurator,
        settings: AppSettings | None = None,
        read_line: Callable[[], str] | None = None,
    ) -> None:
        self._console = console
        self._source = source
        self._configurator = configurator
        self._settings = settings or AppSettings()
        self._read_line = read_line or (lambda: console.input())

    def _say(self, message: str, style: str | None = None) -> None:
        self._console.print(Text(message, style=style or ""), highlight=False)

    def _ask(self, prompt: str) -> str:
        self._say(prompt)
        try:
            return self._read_line()
        except EOFError:
            return ""

    async def run(self) -> SessionOutcome:
        self._say("Elenco delle schede di rete connesse a Internet:\n")
        try:
            adapters = await list_eligible_adapters(self._source)
        except InterfaceQueryError as exc:
            self._say(f"Errore durante la lettura delle schede di rete: {exc}", "red")
            return SessionOutcome.ENUMERATION_FAILED

        if not adapters:
            self._say("Nessuna scheda di rete connessa a Internet trovata.", "yellow")
            return SessionOutcome.ENUMERATION_EMPTY

        self._console.print(build_adapters_table(adapters))

        adapter = self._select_adapter(adapters)
        if adapter is None:
            self._say("Selezione non valida.", "red")
            return SessionOutcome.INVALID_SELECTION
        self._say(f"\nHai selezionato: {adapter.name}")

        self._say("\nVuoi impostare un nuovo DNS o ripristinare la configurazione automatica?")
        self._say("   1. Imposta un nuovo DNS")
        choice = self._ask("   2. Ripristina DNS automatico")

        if choice == "2":
            return await self._apply_automatic(adapter.name)
        if choice != "1":
            self._say("Scelta non valida. Operazione annullata.", "red")
            return SessionOutcome.INVALID_SELECTION
        return await self._apply_static(adapter.name)

    def _select_adapter(self, adapters: list[NetworkAdapter]) -> NetworkAdapter | None:
        raw = self._ask("Seleziona il numero dell'adattatore per configurare i DNS:")
        index = parse_selection(raw, len(adapters))
        return None if index is None else adapters[index]

    async def _apply_automatic(self, adapter_name: str) -> SessionOutcome:
        request = DnsConfigurationRequest(adapter_name=adapter_name, mode=DnsMode.AUTOMATIC)
        result = await self._configurator.apply(request)
        return self._report(
            result,
            success="DNS ripristinato alla configurazione automatica con successo.",
            failure="Errore durante il ripristino del DNS automatico",
        )

    async def _apply_static(self, adapter_name: str) -> SessionOutcome:
        primary_default = self._settings.default_primary_dns
        secondary_default = self._settings.default_secondary_dns

        primary = value_or_default(
            self._ask(
                "\nInserisci il DNS primario "
                f"(premi Invio per usare il valore predefinito: {primary_default}):"
            ),
            primary_default,
        )
        secondary = value_or_default(
            self._ask(
                "Inserisci il DNS secondario "
                f"(premi Invio per usare il valore predefinito: {secondary_default}):"
            ),
            secondary_default,
        )

        self._console.print(build_dns_summary_panel(adapter_name, primary, secondary))
        request = DnsConfigurationRequest(
            adapter_name=adapter_name,
            mode=DnsMode.STATIC,
            primary=primary,
            secondary=secondary,
        )
        result = await self._configurator.apply(request)
        return self._report(
            result,
            success="DNS configurati con successo.",
            failure="Errore durante la configurazione dei DNS",
        )

    def _report(self, result: DnsOperationResult, *, success: str, failure: str) -> SessionOutcome:
        for output in result.outputs:
            if output.stdout.strip():
                self._say(output.stdout.rstrip(), "dim")

        if result.error is not None:
            self._say(f"{failure}: {result.error.message}", "red")
            return SessionOutcome.COMMAND_FAILED

        self._say(success, "green")
        return SessionOutcome.APPLIED
