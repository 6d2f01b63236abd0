"""Tests for the Typer entry point wiring (privilege gate, exit status)."""

from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

import cli.main as cli_main
from cli.ui_components import build_header
from core.services.bootstrap import Elevated, Relaunched
from tests.fakes import FakeRunner, capture_console, console_text

ETHERNET0 = {
    "Name": "Ethernet0",
    "InterfaceDescription": "Intel(R) Ethernet",
    "InterfaceType": 6,
    "Status": "Up",
    "Gateways": ["192.168.1.1"],
}


@pytest.fixture
def fake_runner(monkeypatch):
    runner = FakeRunner(stdouts={0: json.dumps([ETHERNET0])})
    monkeypatch.setattr(cli_main, "ProcessRunner", lambda settings: runner)
    return runner


def test_relaunched_process_does_no_network_work(monkeypatch, fake_runner):
    monkeypatch.setattr(cli_main, "ensure_elevated", lambda report: Relaunched())

    result = CliRunner().invoke(cli_main.app, [])

    assert result.exit_code == 0
    assert fake_runner.invocations == []


def test_elevated_run_restores_automatic_dns(monkeypatch, fake_runner):
    monkeypatch.setattr(cli_main, "ensure_elevated", lambda report: Elevated())

    result = CliRunner().invoke(cli_main.app, [], input="1\n2\n")

    assert result.exit_code == 0, result.output
    assert [i.executable for i in fake_runner.invocations] == ["powershell", "netsh"]
    assert fake_runner.arguments[1] == 'interface ip set dns name="Ethernet0" source=dhcp'
    assert "Ethernet0" in result.output


def test_invalid_selection_still_exits_zero(monkeypatch, fake_runner):
    monkeypatch.setattr(cli_main, "ensure_elevated", lambda report: Elevated())

    result = CliRunner().invoke(cli_main.app, [], input="5\n")

    assert result.exit_code == 0
    assert len(fake_runner.invocations) == 1
    assert "Selezione non valida." in result.output


def test_header_names_the_tool_and_its_defaults(settings):
    console = capture_console()

    console.print(build_header(settings))

    out = console_text(console)
    assert "cambiadns" in out
    assert "predefiniti: 1.1.1.1 / 8.8.8.8" in out
