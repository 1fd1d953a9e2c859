"""Fallback reporter that fails with a plain assertion error."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from approvalkit.adapters.filesystem import LocalFileSystem
from approvalkit.domain.outcome import (
    ContentMismatchError,
    EntryFailure,
    MissingApprovedError,
    MissingReceivedError,
    Outcome,
)
from approvalkit.domain.pairing import EntryPair

if TYPE_CHECKING:
    from pathlib import Path

    from approvalkit.domain.ports import FileSystem


@dataclass(frozen=True, slots=True)
class ThrowsReporter:
    """Always available; raises an ``ApprovalFailure`` describing the mismatch."""

    fs: FileSystem = field(default_factory=LocalFileSystem)

    def is_available(self) -> bool:
        return True

    def mismatch(self, approved: Path, received: Path) -> None:
        pair = EntryPair(approved=approved, received=received)
        if not self.fs.is_file(approved):
            failure = EntryFailure(pair=pair, outcome=Outcome.MISSING_APPROVED)
            raise MissingApprovedError(
                f"{failure.describe()}, received output stored in {received}",
                failures=(failure,),
            )
        if not self.fs.is_file(received):
            failure = EntryFailure(pair=pair, outcome=Outcome.MISSING_RECEIVED)
            raise MissingReceivedError(
                f"{failure.describe()}, approved file is {approved}",
                failures=(failure,),
            )
        failure = EntryFailure(pair=pair, outcome=Outcome.MISMATCH)
        expected = self.fs.read_text(approved)
        actual = self.fs.read_text(received)
        raise ContentMismatchError(
            f"{received} differs from {approved}: expected: <{expected}> but was: <{actual}>",
            failures=(failure,),
        )


__all__ = ["ThrowsReporter"]
