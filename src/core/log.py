"""Logging de diagnóstico (Rich).

La transcripción interactiva va por `Console`; esto es solo para diagnóstico
y sale por stderr a través de `RichHandler`.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_ROOT = "cambiadns"


def configure_logging(level: str = "WARNING") -> None:
    """Instala un único `RichHandler` en el logger raíz de la aplicación."""

    logger = logging.getLogger(_ROOT)
    logger.setLevel(level)
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.addHandler(
        RichHandler(
            console=Console(stderr=True),
            show_path=False,
            markup=False,
            rich_tracebacks=True,
        )
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"{_ROOT}.{name}")
