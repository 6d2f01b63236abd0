"""Tests for the privilege gate and the relaunch command line."""

from __future__ import annotations

import os
import sys

import pytest

from adapters.elevation import ElevationError, relaunch_arguments, relaunch_elevated
from core.services.bootstrap import Elevated, Relaunched, ensure_elevated


class Recorder:
    def __init__(self) -> None:
        self.messages: list[str] = []
        self.relaunches = 0

    def report(self, message: str) -> None:
        self.messages.append(message)

    def relaunch(self) -> None:
        self.relaunches += 1


def test_elevated_process_continues():
    rec = Recorder()
    status = ensure_elevated(rec.report, is_admin=lambda: True, relaunch=rec.relaunch)

    assert status == Elevated()
    assert rec.relaunches == 0
    assert rec.messages == ["Privilegi di amministratore confermati.\n"]


def test_non_elevated_process_relaunches_once():
    rec = Recorder()
    status = ensure_elevated(rec.report, is_admin=lambda: False, relaunch=rec.relaunch)

    assert status == Relaunched()
    assert rec.relaunches == 1
    assert rec.messages == ["Riavvio con privilegi di amministratore..."]


def test_relaunch_failure_is_reported_and_still_exits():
    rec = Recorder()

    def declined() -> None:
        raise ElevationError("ShellExecuteW failed (5): access denied or elevation declined")

    status = ensure_elevated(rec.report, is_admin=lambda: False, relaunch=declined)

    assert isinstance(status, Relaunched)
    assert "access denied" in status.error
    assert rec.messages[-1].startswith(
        "Errore: impossibile ottenere i privilegi di amministratore. Dettagli: "
    )


class TestRelaunchArguments:
    def test_frozen_build_keeps_arguments_only(self):
        assert relaunch_arguments(["cambiadns.exe", "--help"], frozen=True) == ["--help"]

    def test_dev_script_is_relaunched_by_path(self):
        args = relaunch_arguments(["main.py"], frozen=False)
        assert args == [os.path.abspath("main.py")]

    def test_module_entry_point(self):
        assert relaunch_arguments([os.path.join("src", "cli", "__main__.py")], frozen=False) == ["-m", "cli"]

    def test_console_script(self):
        assert relaunch_arguments(["/usr/local/bin/cambiadns"], frozen=False) == ["-m", "cli"]


@pytest.mark.skipif(sys.platform == "win32", reason="non-Windows relaunch path")
def test_relaunch_outside_windows_fails():
    with pytest.raises(ElevationError):
        relaunch_elevated()
