"""Environment variable loaders for configuration."""

from __future__ import annotations

import os
import shlex

from .errors import ConfigurationError


def optional_env_var(name: str) -> str | None:
    """Return a stripped environment variable, treating blank values as unset."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


def split_command(name: str, value: str) -> tuple[str, ...]:
    """Split a shell-style command line taken from ``name``."""

    try:
        parts = tuple(shlex.split(value))
    except ValueError as exc:
        raise ConfigurationError(f"Invalid command in {name}: {value!r}") from exc
    if not parts:
        raise ConfigurationError(f"Empty command in {name}")
    return parts
