"""Tests for the `tsh` command line entry point."""

from pathlib import Path

from click.testing import CliRunner

from tsh.cli.cli import cli
from tsh.core.environment import FakeEnvironment
from tests.fakes.process_launcher import FakeProcessLauncher
from tests.test_utils.context_builders import build_test_context, make_executable


def test_end_of_input_exits_zero_with_message() -> None:
    runner = CliRunner()
    ctx = build_test_context()

    result = runner.invoke(cli, [], input="", obj=ctx)

    assert result.exit_code == 0
    assert "Exiting shell...." in result.output


def test_exit_command_exits_zero() -> None:
    runner = CliRunner()
    ctx = build_test_context()

    result = runner.invoke(cli, [], input="exit\n", obj=ctx)

    assert result.exit_code == 0
    assert "Exiting shell" not in result.output


def test_env_lists_environment() -> None:
    runner = CliRunner()
    ctx = build_test_context(environment=FakeEnvironment({"HOME": "/home/tsh", "LANG": "C"}))

    result = runner.invoke(cli, [], input="env\nexit\n", obj=ctx)

    assert result.exit_code == 0
    assert "HOME=/home/tsh\nLANG=C\n" in result.output


def test_cp_copies_file(tmp_path: Path) -> None:
    runner = CliRunner()
    (tmp_path / "a.txt").write_bytes(b"hello\x00world\n")
    ctx = build_test_context(cwd=tmp_path)

    result = runner.invoke(cli, [], input="cp a.txt b.txt\nexit\n", obj=ctx)

    assert result.exit_code == 0
    assert (tmp_path / "b.txt").read_bytes() == b"hello\x00world\n"


def test_cp_missing_source_terminates_with_status_one(tmp_path: Path) -> None:
    runner = CliRunner()
    launcher = FakeProcessLauncher()
    ctx = build_test_context(cwd=tmp_path, launcher=launcher)

    result = runner.invoke(cli, [], input="cp nope.txt b.txt\nenv\n", obj=ctx)

    assert result.exit_code == 1
    assert "Error: cannot open 'nope.txt'" in result.output
    assert "Exiting shell" not in result.output


def test_spawn_failure_terminates_with_status_one(tmp_path: Path) -> None:
    runner = CliRunner()
    make_executable(tmp_path / "bin" / "ls")
    launcher = FakeProcessLauncher(spawn_error="fork error: Resource temporarily unavailable")
    env = FakeEnvironment({"PATH": str(tmp_path / "bin")})
    ctx = build_test_context(environment=env, launcher=launcher, cwd=tmp_path)

    result = runner.invoke(cli, [], input="ls\n", obj=ctx)

    assert result.exit_code == 1
    assert "Error: fork error" in result.output


def test_command_not_found_keeps_running() -> None:
    runner = CliRunner()
    ctx = build_test_context(environment=FakeEnvironment({"PATH": "/nonexistent"}))

    result = runner.invoke(cli, [], input="frobnicate\n", obj=ctx)

    assert result.exit_code == 0
    assert "Command not found: frobnicate" in result.output
    assert "Exiting shell...." in result.output


def test_prompt_option_overrides_config() -> None:
    runner = CliRunner()
    ctx = build_test_context()

    result = runner.invoke(cli, ["--prompt", "tsh> "], input="", obj=ctx)

    assert result.output == "tsh> Exiting shell....\n"


def test_no_repeat_count_forwards_numeric_argument(tmp_path: Path) -> None:
    runner = CliRunner()
    make_executable(tmp_path / "bin" / "sleep")
    launcher = FakeProcessLauncher()
    env = FakeEnvironment({"PATH": str(tmp_path / "bin")})
    ctx = build_test_context(environment=env, launcher=launcher, cwd=tmp_path)

    result = runner.invoke(cli, ["--no-repeat-count"], input="sleep 2\n", obj=ctx)

    assert result.exit_code == 0
    assert [call.argv for call in launcher.calls] == [["sleep", "2"]]


def test_dry_run_prints_instead_of_spawning(tmp_path: Path) -> None:
    runner = CliRunner()
    make_executable(tmp_path / "bin" / "ls")
    launcher = FakeProcessLauncher()
    env = FakeEnvironment({"PATH": str(tmp_path / "bin")})
    ctx = build_test_context(environment=env, launcher=launcher, cwd=tmp_path)

    result = runner.invoke(cli, ["--dry-run"], input="ls 2 -l\n", obj=ctx)

    assert result.exit_code == 0
    assert launcher.calls == []
    assert result.output.count(f"[DRY RUN] Would run: {tmp_path / 'bin'}/ls -l") == 2


def test_malformed_config_file_is_fatal(tmp_path: Path) -> None:
    runner = CliRunner()
    config_path = tmp_path / "config.toml"
    config_path.write_text("repeat_count = 3\n", encoding="utf-8")

    result = runner.invoke(cli, ["--config", str(config_path)], input="")

    assert result.exit_code == 1
    assert "Error: 'repeat_count' must be true or false" in result.output


def test_help_documents_builtins_and_repeat_count() -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["-h"])

    assert result.exit_code == 0
    assert "cp SRC DST" in result.output
    assert "Repeat count" in result.output
