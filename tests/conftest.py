"""Shared pytest fixtures."""

from __future__ import annotations

import pytest

from core.config import AppSettings
from tests.fakes import FakeRunner, capture_console


@pytest.fixture
def settings(monkeypatch):
    """Settings with the documented defaults, ignoring the caller's environment."""
    for name in (
        "CAMBIADNS_NETSH_EXECUTABLE",
        "CAMBIADNS_POWERSHELL_EXECUTABLE",
        "CAMBIADNS_DEFAULT_PRIMARY_DNS",
        "CAMBIADNS_DEFAULT_SECONDARY_DNS",
        "CAMBIADNS_OUTPUT_ENCODING",
        "CAMBIADNS_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    return AppSettings(output_encoding="utf-8")


@pytest.fixture
def runner():
    return FakeRunner()


@pytest.fixture
def console():
    return capture_console()
