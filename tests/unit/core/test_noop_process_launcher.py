"""Tests for the dry-run launcher."""

from pathlib import Path

import pytest

from tsh.core.process import NoopProcessLauncher


def test_prints_command_instead_of_running(capsys: pytest.CaptureFixture[str]) -> None:
    launcher = NoopProcessLauncher()

    status = launcher.run("/bin/echo", ["echo", "hello world"], cwd=Path("/w"), env={})

    assert status == 0
    assert capsys.readouterr().err == "[DRY RUN] Would run: /bin/echo 'hello world'\n"
