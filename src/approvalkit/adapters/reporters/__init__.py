"""Reporter implementations and their composition."""

from __future__ import annotations

from .assertion import PytestReporter
from .chain import FirstWorkingReporter
from .defaults import default_reporter, reporters_for_os
from .diff_tool import DiffToolReporter
from .throws import ThrowsReporter

__all__ = [
    "DiffToolReporter",
    "FirstWorkingReporter",
    "PytestReporter",
    "ThrowsReporter",
    "default_reporter",
    "reporters_for_os",
]
