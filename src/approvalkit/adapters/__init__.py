"""Concrete collaborators for the reconciliation core."""

from __future__ import annotations

from .filesystem import LocalFileSystem
from .naming import ApprovalContext, ApprovalNamer, CallerNotFoundError, CallSite

__all__ = [
    "ApprovalContext",
    "ApprovalNamer",
    "CallSite",
    "CallerNotFoundError",
    "LocalFileSystem",
]
