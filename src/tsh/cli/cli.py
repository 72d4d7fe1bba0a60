import dataclasses
import logging
import os
import sys
from pathlib import Path
from typing import NoReturn

import click

from tsh.cli.output import user_output
from tsh.core.config import load_config
from tsh.core.context import ShellContext, create_context
from tsh.core.errors import ShellError
from tsh.core.process import NoopProcessLauncher
from tsh.core.session import run_session

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


def _fail(message: str) -> NoReturn:
    user_output(click.style("Error: ", fg="red") + message)
    raise SystemExit(1)


@click.command("tsh", context_settings=CONTEXT_SETTINGS)
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Config file to load (default: ~/.tsh/config.toml).",
)
@click.option("--prompt", default=None, help="Prompt shown before each line.")
@click.option(
    "--repeat-count/--no-repeat-count",
    default=None,
    help="Treat a numeric first argument as a repeat count (default: on).",
)
@click.option("--dry-run", is_flag=True, help="Print commands instead of running them.")
@click.option("--debug", is_flag=True, help="Log resolution and process details to stderr.")
@click.version_option(package_name="tsh")
@click.pass_context
def cli(
    ctx: click.Context,
    config_path: Path | None,
    prompt: str | None,
    repeat_count: bool | None,
    dry_run: bool,
    debug: bool,
) -> None:
    """Interactive command interpreter.

    Reads commands from stdin, one per line, and runs them until `exit` or
    end-of-input.

    Builtins: exit, env, cp SRC DST.

    Repeat count: if an external command's first argument is a positive
    integer N, the command runs N times in a row and N is not passed to it
    (`ls 3` runs `ls` three times). Use --no-repeat-count to pass it through.
    """
    if debug or os.getenv("TSH_DEBUG"):
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        try:
            config = load_config(config_path)
        except ValueError as e:
            _fail(str(e))
        ctx.obj = create_context(dry_run=dry_run, config=config)

    shell_ctx: ShellContext = ctx.obj
    shell_ctx = dataclasses.replace(
        shell_ctx,
        config=shell_ctx.config.with_overrides(prompt=prompt, repeat_count=repeat_count),
    )
    if dry_run:
        shell_ctx = dataclasses.replace(shell_ctx, launcher=NoopProcessLauncher())

    try:
        status = run_session(shell_ctx, sys.stdin)
    except ShellError as e:
        _fail(str(e))

    ctx.exit(status)


def main() -> None:
    """CLI entry point used by the `tsh` console script."""
    cli()
