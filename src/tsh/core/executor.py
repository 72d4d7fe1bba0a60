"""Run a resolved external command, honoring the repeat count.

Repeat count: when an external command's first argument is a positive
integer N, the command runs N times in a row and that argument is not passed
to the program. ``ls 3`` runs ``ls`` three times; ``ls 0`` and ``ls abc``
run it once with the argument forwarded. ShellConfig.repeat_count turns this
off.
"""

import logging
from dataclasses import dataclass

from tsh.core.context import ShellContext

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExecutionResult:
    """Outcome of executing one command line."""

    path: str
    argv: list[str]  # As passed to the child, repeat count removed
    repeat_count: int
    exit_codes: list[int]

    @property
    def succeeded(self) -> bool:
        return all(code == 0 for code in self.exit_codes)


def parse_repeat_count(argv: list[str]) -> int | None:
    """Return argv[1] as a repeat count, or None if it is not one.

    Only plain ASCII digits with a value above zero count. Signs, spaces and
    trailing garbage do not.
    """
    if len(argv) < 2:
        return None
    token = argv[1]
    if not (token.isascii() and token.isdigit()):
        return None
    count = int(token)
    if count == 0:
        return None
    return count


def execute_command(argv: list[str], path: str, ctx: ShellContext) -> ExecutionResult:
    """Spawn ``path`` once per repetition, waiting for each run to finish.

    Args:
        argv: Argument vector as typed; argv[0] is the command name
        path: Location returned by the resolver
        ctx: Session context supplying the launcher, cwd and environment

    Returns:
        ExecutionResult with one exit status per repetition

    Raises:
        SpawnError: If a child process cannot be created
    """
    count = parse_repeat_count(argv) if ctx.config.repeat_count else None
    child_argv = [argv[0], *argv[2:]] if count is not None else list(argv)
    repetitions = count if count is not None else 1

    env = ctx.environment.as_dict() if ctx.config.inherit_environment else {}

    exit_codes: list[int] = []
    for i in range(repetitions):
        logger.debug("run %d/%d of %s", i + 1, repetitions, path)
        exit_codes.append(ctx.launcher.run(path, child_argv, cwd=ctx.cwd, env=env))

    return ExecutionResult(
        path=path,
        argv=child_argv,
        repeat_count=repetitions,
        exit_codes=exit_codes,
    )
