"""Output helpers with clear intent.

user_output: diagnostics for the person at the terminal (stderr).
machine_output: data the shell itself produces (stdout), e.g. the prompt or `env`.

click.echo flushes after every write, so our output is on the terminal before
a child process writes to the inherited stdout.
"""

from typing import Any

import click


def user_output(message: Any = "", nl: bool = True) -> None:
    """Write a diagnostic message to stderr."""
    click.echo(message, err=True, nl=nl)


def machine_output(message: Any = "", nl: bool = True) -> None:
    """Write shell output to stdout."""
    click.echo(message, nl=nl)
