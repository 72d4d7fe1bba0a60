"""Child process launching.

This subpackage provides the spawn-and-wait primitive used by the executor,
with a no-op wrapper for dry runs.
"""

from tsh.core.process.abc import ProcessLauncher
from tsh.core.process.noop import NoopProcessLauncher
from tsh.core.process.real import RealProcessLauncher

__all__ = [
    "ProcessLauncher",
    "NoopProcessLauncher",
    "RealProcessLauncher",
]
