"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar el flujo de la sesión con detalles visuales.
- Los textos se imprimen sin markup: nombres de adaptador y salidas de netsh
  pueden contener corchetes.
"""

from __future__ import annotations

from typing import Sequence

from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table
from rich.text import Text

from core.config import AppSettings
from core.domain.models import NetworkAdapter


def build_header(settings: AppSettings) -> Rule:
    """Cabecera de una línea con los DNS que se usarán si se pulsa Invio."""

    defaults = f"{settings.default_primary_dns} / {settings.default_secondary_dns}"
    title = Text.assemble(("cambiadns", "bold cyan"), ("  predefiniti: ", "dim"), (defaults, "cyan"))
    return Rule(title, style="cyan")


def build_adapters_table(adapters: Sequence[NetworkAdapter]) -> Table:
    """Tabla numerada (desde 1) con las interfaces seleccionables."""

    table = Table(title="Schede di rete")
    table.add_column("#", style="bold", justify="right", no_wrap=True)
    table.add_column("Nome", style="cyan", no_wrap=True)
    table.add_column("Descrizione", style="white")
    table.add_column("Tipo", style="magenta", no_wrap=True)
    table.add_column("Stato", style="green", no_wrap=True)
    for number, adapter in enumerate(adapters, start=1):
        table.add_row(
            str(number),
            Text(adapter.name),
            Text(adapter.description),
            adapter.kind.value,
            adapter.state.value,
        )
    return table


def build_dns_summary_panel(adapter_name: str, primary: str, secondary: str) -> Panel:
    body = Text()
    body.append("DNS Primario: ", style="bold")
    body.append(primary + "\n")
    body.append("DNS Secondario: ", style="bold")
    body.append(secondary)
    return Panel(body, title=Text(f"Impostazione DNS su {adapter_name}"), border_style="yellow")
