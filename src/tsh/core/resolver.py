"""Map a command name to an executable location.

Resolution order:

1. Search-path variable unset: nothing resolves, not even files in the
   working directory.
2. Variable set but empty: only ``command`` itself in the working directory.
3. Otherwise each directory of the search path, left to right, then
   ``command`` in the working directory as a last resort.

Working-directory matches return the bare command string; nothing is
prefixed with ``./``.
"""

import logging
import os
import stat
from pathlib import Path

from tsh.core.environment import Environment

logger = logging.getLogger(__name__)


def is_executable_file(candidate: Path) -> bool:
    """Return True if ``candidate`` is a regular file we may execute.

    Directories pass an X_OK access check, so the regular-file test matters.
    """
    try:
        return candidate.is_file() and os.access(candidate, os.X_OK)
    except (OSError, ValueError):
        return False


def is_owner_executable_file(candidate: Path) -> bool:
    """Return True if ``candidate`` is a regular file with the owner-execute bit."""
    try:
        mode = candidate.stat().st_mode
    except (OSError, ValueError):
        return False
    return stat.S_ISREG(mode) and bool(mode & stat.S_IXUSR)


def split_search_path(search_path: str) -> list[str]:
    """Split a search path on ':' dropping empty segments."""
    return [directory for directory in search_path.split(":") if directory]


def resolve_command(
    command: str,
    environment: Environment,
    cwd: Path,
    search_path_var: str = "PATH",
) -> str | None:
    """Find the executable for ``command``.

    Args:
        command: Command name as typed (argv[0])
        environment: Source of the search-path variable, read on every call
        cwd: Directory that relative candidates are checked against
        search_path_var: Name of the search-path variable

    Returns:
        The first matching location, or None if nothing matches. Never raises.
    """
    if not command:
        return None

    search_path = environment.get(search_path_var)
    if search_path is None:
        logger.debug("%s is unset; not resolving %r", search_path_var, command)
        return None

    if search_path:
        for directory in split_search_path(search_path):
            candidate = f"{directory}/{command}"
            if is_executable_file(cwd / candidate):
                logger.debug("resolved %r to %s", command, candidate)
                return candidate
            logger.debug("miss: %s", candidate)

    if is_owner_executable_file(cwd / command):
        logger.debug("resolved %r in working directory", command)
        return command

    return None
