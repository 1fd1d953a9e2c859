"""Default reporter selection for the current platform."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Final

from .assertion import PytestReporter
from .chain import FirstWorkingReporter
from .diff_tool import DiffToolReporter
from .throws import ThrowsReporter

if TYPE_CHECKING:
    from approvalkit.config import ApprovalsConfig
    from approvalkit.domain.ports import Reporter

WINDOWS_DIFF_TOOLS: Final[tuple[tuple[str, ...], ...]] = (
    ("WinMergeU.exe",),
    ("TortoiseGitMerge.exe",),
    ("kdiff3.exe",),
)


def reporters_for_os(os_name: str, *, config: ApprovalsConfig | None = None) -> tuple[Reporter, ...]:
    """Return the ordered reporters worth trying on ``os_name`` (an ``os.name`` value)."""

    reporters: list[Reporter] = []
    if config is not None and config.diff_command:
        reporters.append(DiffToolReporter(command=config.diff_command))
    if os_name == "nt":
        reporters.extend(DiffToolReporter(command=command) for command in WINDOWS_DIFF_TOOLS)
    reporters.append(PytestReporter())
    return tuple(reporters)


def default_reporter(
    config: ApprovalsConfig | None = None,
    *,
    os_name: str = os.name,
) -> FirstWorkingReporter:
    return FirstWorkingReporter(
        *reporters_for_os(os_name, config=config),
        fallback=ThrowsReporter(),
    )


__all__ = ["WINDOWS_DIFF_TOOLS", "default_reporter", "reporters_for_os"]
