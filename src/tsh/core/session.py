"""The read-eval loop.

Per line: tokenize, dispatch builtins, otherwise resolve and execute.
Empty lines re-prompt. End-of-input prints the exit message and ends the
session with status 0, as does `exit`.

Recoverable problems (command not found, a child that fails to exec, a
non-fatal copy error) are reported in one line and the loop continues.
SpawnError and fatal CopyError propagate to the caller.
"""

import logging
from typing import TextIO

from tsh.cli.output import machine_output, user_output
from tsh.core.builtins import BuiltinOutcome, dispatch_builtin
from tsh.core.context import ShellContext
from tsh.core.errors import CopyError
from tsh.core.executor import execute_command
from tsh.core.resolver import resolve_command
from tsh.core.tokenizer import tokenize

logger = logging.getLogger(__name__)


def handle_line(line: str, ctx: ShellContext) -> bool:
    """Evaluate one input line.

    Returns:
        False if the session should end, True to keep reading
    """
    argv = tokenize(line)
    if not argv:
        return True

    try:
        outcome = dispatch_builtin(argv, ctx)
    except CopyError as e:
        if ctx.config.fatal_copy_errors:
            raise
        user_output(f"Error: {e}")
        return True

    if outcome is BuiltinOutcome.EXIT:
        return False
    if outcome is BuiltinOutcome.HANDLED:
        return True

    path = resolve_command(argv[0], ctx.environment, ctx.cwd, ctx.config.search_path_var)
    if path is None:
        user_output(f"Command not found: {argv[0]}")
        return True

    result = execute_command(argv, path, ctx)
    logger.debug("%s finished with %r", argv[0], result.exit_codes)
    return True


def run_session(ctx: ShellContext, input_stream: TextIO) -> int:
    """Prompt, read and evaluate lines until `exit` or end-of-input.

    Returns:
        Exit status for the interpreter process

    Raises:
        SpawnError: If a child process cannot be created
        CopyError: If `cp` fails and copy errors are configured as fatal
    """
    while True:
        machine_output(ctx.config.prompt, nl=False)
        line = input_stream.readline()
        if not line:
            machine_output(ctx.config.exit_message)
            return 0
        if not handle_line(line, ctx):
            return 0
