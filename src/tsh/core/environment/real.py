"""Production environment backed by os.environ."""

import os

from tsh.core.environment.abc import Environment


class RealEnvironment(Environment):
    """Reads the live process environment on every call."""

    def get(self, name: str) -> str | None:
        return os.environ.get(name)

    def entries(self) -> list[tuple[str, str]]:
        return list(os.environ.items())
