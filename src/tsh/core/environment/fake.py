"""In-memory environment for tests."""

from tsh.core.environment.abc import Environment


class FakeEnvironment(Environment):
    """Environment backed by a dict supplied at construction.

    Constructor Injection:
    - All state is provided via constructor parameters
    - No mutations occur (immutable after construction)

    Examples:
        # PATH unset entirely
        >>> env = FakeEnvironment()
        >>> env.get("PATH") is None
        True

        # PATH set but empty
        >>> env = FakeEnvironment({"PATH": ""})
        >>> env.get("PATH")
        ''
    """

    def __init__(self, variables: dict[str, str] | None = None) -> None:
        """Initialize with the variables to expose, in enumeration order.

        Args:
            variables: Mapping of name to value. Insertion order is the
                order entries() reports.
        """
        self._variables = dict(variables or {})

    def get(self, name: str) -> str | None:
        return self._variables.get(name)

    def entries(self) -> list[tuple[str, str]]:
        return list(self._variables.items())
