"""Errors raised by the interpreter core.

Command-not-found is not an error here: the resolver returns None and the
session reports it. Only conditions that may end the session are exceptions.
"""


class ShellError(Exception):
    """Base class for interpreter errors. The message is a single line."""


class SpawnError(ShellError):
    """The OS could not create a child process. Always fatal."""


class CopyError(ShellError):
    """The `cp` builtin could not open its source or destination."""
