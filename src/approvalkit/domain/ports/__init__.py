"""Domain port definitions for adapters."""

from __future__ import annotations

from .filesystem import FileSystem
from .reporting import Reporter

__all__ = [
    "FileSystem",
    "Reporter",
]
