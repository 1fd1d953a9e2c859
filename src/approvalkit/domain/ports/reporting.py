"""Port for surfacing approval mismatches."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import Path


@runtime_checkable
class Reporter(Protocol):
    """Strategy notified whenever received output differs from the approved reference.

    ``is_available`` must be cheap and free of side effects: it is asked before each
    potential use and must not assume a mismatch happened. ``mismatch`` receives the
    approved and received locations, either of which may not exist when only one
    side is present. Implementations signal the discrepancy by raising (an
    ``AssertionError`` for assertion-style reporters, ``subprocess.CalledProcessError``
    for external commands) or through whatever side effect reaches the developer.
    """

    def is_available(self) -> bool: ...

    def mismatch(self, approved: Path, received: Path) -> None: ...


__all__ = ["Reporter"]
