"""No-op launcher for dry-run mode."""

import shlex
from pathlib import Path

from tsh.cli.output import user_output
from tsh.core.process.abc import ProcessLauncher


class NoopProcessLauncher(ProcessLauncher):
    """Prints what would run instead of spawning anything.

    Usage:
        launcher = NoopProcessLauncher()
        launcher.run("/bin/ls", ["ls", "-l"], cwd=Path.cwd(), env={})
        # prints: [DRY RUN] Would run: /bin/ls -l
    """

    def run(
        self,
        path: str,
        argv: list[str],
        *,
        cwd: Path,
        env: dict[str, str],
    ) -> int:
        user_output(f"[DRY RUN] Would run: {shlex.join([path, *argv[1:]])}")
        return 0
