"""Composite reporter delegating to the first available member."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from .throws import ThrowsReporter

if TYPE_CHECKING:
    from pathlib import Path

    from approvalkit.domain.ports import Reporter


log = getLogger(__name__)


class FirstWorkingReporter:
    """Try reporters in order and hand the mismatch to the first available one.

    Availability is checked again on every mismatch since it may depend on the
    environment (installed tools, importable test frameworks). When no member is
    available the ``fallback`` reports instead; it defaults to ``ThrowsReporter``
    so a mismatch is never silently accepted. Exceptions from the selected
    reporter propagate unchanged.
    """

    __slots__ = ("_fallback", "_reporters")

    def __init__(self, *reporters: Reporter, fallback: Reporter | None = None) -> None:
        self._reporters: tuple[Reporter, ...] = reporters
        self._fallback: Reporter = fallback or ThrowsReporter()

    @property
    def reporters(self) -> tuple[Reporter, ...]:
        return self._reporters

    def is_available(self) -> bool:
        return any(reporter.is_available() for reporter in self._reporters) or (
            self._fallback.is_available()
        )

    def mismatch(self, approved: Path, received: Path) -> None:
        reporter = self.select()
        log.debug("Reporting mismatch of %s with %s", received, type(reporter).__name__)
        reporter.mismatch(approved, received)

    def select(self) -> Reporter:
        """Return the reporter that would handle a mismatch right now."""

        for reporter in self._reporters:
            if reporter.is_available():
                return reporter
        log.debug("No reporter available, falling back to %s", type(self._fallback).__name__)
        return self._fallback

    def __repr__(self) -> str:
        members = ", ".join(type(reporter).__name__ for reporter in self._reporters)
        return f"FirstWorkingReporter({members}, fallback={type(self._fallback).__name__})"


__all__ = ["FirstWorkingReporter"]
