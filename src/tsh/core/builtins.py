"""Commands handled inside the interpreter instead of by a child process.

Matching is exact and case-sensitive on argv[0], and happens before path
resolution, so a builtin shadows any program of the same name.
"""

import logging
import shutil
from enum import Enum
from pathlib import Path

from tsh.cli.output import machine_output
from tsh.core.context import ShellContext
from tsh.core.environment import Environment
from tsh.core.errors import CopyError

logger = logging.getLogger(__name__)

BUILTIN_NAMES = frozenset({"exit", "env", "cp"})


class BuiltinOutcome(Enum):
    """What the session should do after dispatch."""

    NOT_BUILTIN = "not_builtin"
    HANDLED = "handled"
    EXIT = "exit"


def print_environment(environment: Environment) -> None:
    """Write each environment entry as KEY=VALUE, one per line."""
    for name, value in environment.entries():
        machine_output(f"{name}={value}")


def copy_file(src: str, dst: str, cwd: Path) -> None:
    """Copy the bytes of ``src`` into ``dst``, creating or truncating it.

    The source is opened first, so a missing source never creates or
    truncates the destination.

    Raises:
        CopyError: If either file cannot be opened
    """
    try:
        src_file = (cwd / src).open("rb")
    except OSError as e:
        raise CopyError(f"cannot open '{src}': {e.strerror or e}") from e

    with src_file:
        try:
            dst_file = (cwd / dst).open("wb")
        except OSError as e:
            raise CopyError(f"cannot open '{dst}': {e.strerror or e}") from e
        with dst_file:
            shutil.copyfileobj(src_file, dst_file)


def dispatch_builtin(argv: list[str], ctx: ShellContext) -> BuiltinOutcome:
    """Run ``argv`` if it names a builtin.

    ``cp`` is only a builtin with exactly two operands; any other form falls
    through to normal resolution (and so may run an external ``cp``).

    Raises:
        CopyError: If ``cp`` cannot open one of its files
    """
    name = argv[0]
    if name not in BUILTIN_NAMES:
        return BuiltinOutcome.NOT_BUILTIN

    if name == "exit":
        return BuiltinOutcome.EXIT

    if name == "env":
        print_environment(ctx.environment)
        return BuiltinOutcome.HANDLED

    if name == "cp" and len(argv) == 3:
        logger.debug("builtin cp %s -> %s", argv[1], argv[2])
        copy_file(argv[1], argv[2], ctx.cwd)
        return BuiltinOutcome.HANDLED

    return BuiltinOutcome.NOT_BUILTIN
