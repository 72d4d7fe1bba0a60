"""Abstract read-only view of the process environment."""

from abc import ABC, abstractmethod


class Environment(ABC):
    """Read-only environment lookup for dependency injection.

    Implementations must not cache: a value read now reflects the
    environment as it is now, so a change between two commands is seen by
    the second one.
    """

    @abstractmethod
    def get(self, name: str) -> str | None:
        """Return the value of ``name``, or None when it is not set.

        An empty string means the variable is set but empty, which is not
        the same as unset.
        """
        ...

    @abstractmethod
    def entries(self) -> list[tuple[str, str]]:
        """Return all (name, value) pairs in native enumeration order."""
        ...

    def as_dict(self) -> dict[str, str]:
        """Return a snapshot of the environment as a dict."""
        return dict(self.entries())
