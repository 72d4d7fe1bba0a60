"""Split a raw input line into an argument vector."""

import re

# Only space and newline separate tokens. Tabs are ordinary characters.
_DELIMITERS = re.compile(r"[ \n]+")


def tokenize(line: str) -> list[str]:
    """Return the whitespace-delimited tokens of ``line``.

    Consecutive delimiters collapse, so no empty tokens are produced. There is
    no quoting or escaping: a token can never contain a space.

    Examples:
        >>> tokenize("ls  -la\\n")
        ['ls', '-la']
        >>> tokenize("   \\n")
        []
    """
    return [token for token in _DELIMITERS.split(line) if token]
