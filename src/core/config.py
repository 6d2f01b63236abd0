"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (procesos, PowerShell) lean config de forma consistente.

Nota: solo variables de entorno; la herramienta no lee ni escribe ficheros.
"""

from __future__ import annotations

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="CAMBIADNS_",
        extra="ignore",
        case_sensitive=False,
    )

    netsh_executable: str = Field(
        default="netsh",
        min_length=1,
        description="Utilidad de configuración de red de Windows.",
    )
    powershell_executable: str = Field(
        default="powershell",
        min_length=1,
        description="Intérprete usado para enumerar las interfaces.",
    )

    default_primary_dns: str = Field(
        default="1.1.1.1",
        min_length=1,
        description="DNS primario cuando el operador deja la respuesta en blanco.",
    )
    default_secondary_dns: str = Field(
        default="8.8.8.8",
        min_length=1,
        description="DNS secundario cuando el operador deja la respuesta en blanco.",
    )

    output_encoding: str | None = Field(
        default=None,
        description=(
            "Codificación de stdout/stderr de los procesos hijos "
            "(None = `oem` en Windows, la del locale en otros sistemas)."
        ),
    )
    log_level: str = Field(
        default="WARNING",
        description="Umbral de logging (DEBUG, INFO, WARNING, ERROR).",
    )

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value!r}")
        return level
