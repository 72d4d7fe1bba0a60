"""Abstract interface for running a child process to completion."""

from abc import ABC, abstractmethod
from pathlib import Path


class ProcessLauncher(ABC):
    """Spawns one child process and blocks until it exits.

    This interface enables dependency injection for testing. The real
    implementation uses subprocess. Fakes record calls in memory.
    """

    @abstractmethod
    def run(
        self,
        path: str,
        argv: list[str],
        *,
        cwd: Path,
        env: dict[str, str],
    ) -> int:
        """Run ``path`` with ``argv`` and wait for it.

        Args:
            path: Executable location as returned by the resolver. May be
                relative to ``cwd``.
            argv: Argument vector for the child; argv[0] is the command name
                as typed
            cwd: Working directory for the child
            env: Complete environment for the child (may be empty)

        Returns:
            The child's exit status. A child that could not start its program
            counts as exit status 1.

        Raises:
            SpawnError: If no child process could be created
        """
        ...
