"""Permite `python -m cli` (también usado al relanzar con privilegios)."""

from __future__ import annotations

from cli.main import run

run()
