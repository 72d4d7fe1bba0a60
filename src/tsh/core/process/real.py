"""Real process launching using subprocess."""

import errno
import logging
import os
import subprocess
from pathlib import Path

from tsh.cli.output import user_output
from tsh.core.errors import SpawnError
from tsh.core.process.abc import ProcessLauncher

logger = logging.getLogger(__name__)

# Only EAGAIN is unambiguous: ENOMEM can also come from the execve in the
# child, which is an exec failure and must not end the session.
_SPAWN_ERRNOS = frozenset({errno.EAGAIN})


class RealProcessLauncher(ProcessLauncher):
    """Production implementation using subprocess.run().

    The child inherits stdin, stdout and stderr. subprocess reports a failed
    exec back to the parent as an OSError, and an argument it cannot pass at
    all (an embedded NUL) as a ValueError. Both are reported here and turned
    into exit status 1; the session carries on.
    """

    def run(
        self,
        path: str,
        argv: list[str],
        *,
        cwd: Path,
        env: dict[str, str],
    ) -> int:
        # A bare name would make subprocess search PATH again.
        executable = path if os.path.dirname(path) else os.path.join(".", path)
        logger.debug("spawning %s argv=%r cwd=%s", executable, argv, cwd)

        try:
            result = subprocess.run(argv, executable=executable, cwd=cwd, env=env, check=False)
        except OSError as e:
            if e.errno in _SPAWN_ERRNOS:
                raise SpawnError(f"fork error: {e.strerror}") from e
            user_output(f"Error: {path}: {e.strerror or e}")
            return 1
        except ValueError as e:
            # Embedded NUL bytes are rejected before any child is created.
            user_output(f"Error: {path}: {e}")
            return 1

        logger.debug("%s exited with status %d", executable, result.returncode)
        return result.returncode
