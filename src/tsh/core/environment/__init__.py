"""Environment variable access.

The interpreter never touches os.environ directly. It goes through an
Environment so tests can substitute a FakeEnvironment.
"""

from tsh.core.environment.abc import Environment
from tsh.core.environment.fake import FakeEnvironment
from tsh.core.environment.real import RealEnvironment

__all__ = [
    "Environment",
    "FakeEnvironment",
    "RealEnvironment",
]
