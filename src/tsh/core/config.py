"""Shell configuration data structures and loading.

Provides immutable config data loaded from ~/.tsh/config.toml. A missing
file is not an error: every key has a default.
"""

import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class ShellConfig:
    """Immutable interpreter configuration.

    Loaded once at CLI entry point and stored in ShellContext.
    """

    prompt: str
    exit_message: str
    search_path_var: str
    repeat_count: bool
    inherit_environment: bool
    fatal_copy_errors: bool

    @staticmethod
    def default() -> "ShellConfig":
        return ShellConfig(
            prompt="$ ",
            exit_message="Exiting shell....",
            search_path_var="PATH",
            repeat_count=True,
            inherit_environment=True,
            fatal_copy_errors=True,
        )

    def with_overrides(self, **overrides: Any) -> "ShellConfig":
        """Return a copy with the non-None overrides applied.

        Used by the CLI, where an omitted flag arrives as None.
        """
        applied = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **applied)


_STR_KEYS = ("prompt", "exit_message", "search_path_var")
_BOOL_KEYS = ("repeat_count", "inherit_environment", "fatal_copy_errors")


def default_config_path() -> Path:
    """Get the path to the user's config file."""
    return Path.home() / ".tsh" / "config.toml"


def load_config(path: Path | None = None) -> ShellConfig:
    """Load config.toml if present; otherwise return defaults.

    Example config:
      prompt = "tsh> "
      repeat_count = false
      fatal_copy_errors = false

    Args:
        path: Config file path (defaults to ~/.tsh/config.toml)

    Returns:
        ShellConfig with file values layered over the defaults

    Raises:
        ValueError: If the file is not valid TOML or a key has the wrong type
    """
    config_path = path if path is not None else default_config_path()
    defaults = ShellConfig.default()

    if not config_path.exists():
        return defaults

    try:
        data = tomllib.loads(config_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid TOML in {config_path}: {e}") from e

    values: dict[str, Any] = {}
    for key in _STR_KEYS:
        if key in data:
            if not isinstance(data[key], str):
                raise ValueError(f"'{key}' must be a string in {config_path}")
            values[key] = data[key]
    for key in _BOOL_KEYS:
        if key in data:
            if not isinstance(data[key], bool):
                raise ValueError(f"'{key}' must be true or false in {config_path}")
            values[key] = data[key]

    if values.get("search_path_var") == "":
        raise ValueError(f"'search_path_var' must not be empty in {config_path}")

    return replace(defaults, **values)
