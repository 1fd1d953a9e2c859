"""Application configuration helpers."""

from __future__ import annotations

from .approvals import (
    DEFAULT_APPROVALS_DIR,
    DEFAULT_COMBINATION_EXTENSION,
    ApprovalsConfig,
    get_approvals_config,
)
from .errors import ConfigurationError
from .logging import configure_logging

__all__ = [
    "DEFAULT_APPROVALS_DIR",
    "DEFAULT_COMBINATION_EXTENSION",
    "ApprovalsConfig",
    "ConfigurationError",
    "configure_logging",
    "get_approvals_config",
]
