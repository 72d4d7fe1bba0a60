"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from tsh.core.config import ShellConfig, load_config
from tsh.core.environment import Environment, RealEnvironment
from tsh.core.process import NoopProcessLauncher, ProcessLauncher, RealProcessLauncher


@dataclass(frozen=True)
class ShellContext:
    """Immutable context holding all dependencies for a shell session.

    Created at CLI entry point and threaded through the session.
    Frozen to prevent accidental modification at runtime.
    """

    environment: Environment
    launcher: ProcessLauncher
    config: ShellConfig
    cwd: Path  # Working directory at startup; there is no `cd` builtin


def create_context(
    *,
    dry_run: bool,
    config_path: Path | None = None,
    config: ShellConfig | None = None,
) -> ShellContext:
    """Create production context with real implementations.

    Args:
        dry_run: If True, commands are printed instead of spawned
        config_path: Config file to load (defaults to ~/.tsh/config.toml)
        config: Already-loaded config; skips reading config_path

    Returns:
        ShellContext with real implementations

    Raises:
        ValueError: If the config file is malformed
    """
    if config is None:
        config = load_config(config_path)

    launcher: ProcessLauncher = RealProcessLauncher()
    if dry_run:
        launcher = NoopProcessLauncher()

    return ShellContext(
        environment=RealEnvironment(),
        launcher=launcher,
        config=config,
        cwd=Path.cwd(),
    )
