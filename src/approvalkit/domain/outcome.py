"""Reconciliation outcomes and the failures they raise."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .pairing import EntryPair


class Outcome(StrEnum):
    """Classification of one entry pair within a reconciliation pass."""

    MATCH = "match"
    MISMATCH = "mismatch"
    MISSING_APPROVED = "missing_approved"
    MISSING_RECEIVED = "missing_received"


def classify(approved: str | None, actual: str | None) -> Outcome:
    """Classify an entry from its approved and actual content (``None`` when absent)."""

    if approved is None and actual is None:
        return Outcome.MATCH
    if approved is None:
        return Outcome.MISSING_APPROVED
    if actual is None:
        return Outcome.MISSING_RECEIVED
    if approved == actual:
        return Outcome.MATCH
    return Outcome.MISMATCH


@dataclass(frozen=True, slots=True)
class EntryFailure:
    """A pair that did not match, with the reason it failed."""

    pair: EntryPair
    outcome: Outcome

    @property
    def name(self) -> str:
        return self.pair.name

    def describe(self) -> str:
        match self.outcome:
            case Outcome.MISSING_APPROVED:
                return f"missing file <{self.name}>"
            case Outcome.MISSING_RECEIVED:
                return f"no output produced for <{self.name}>"
            case _:
                return f"content differs for <{self.name}>"


class ApprovalFailure(AssertionError):
    """Raised when received output does not match its approved reference."""

    def __init__(self, message: str, *, failures: Sequence[EntryFailure] = ()) -> None:
        super().__init__(message)
        self.failures: tuple[EntryFailure, ...] = tuple(failures)

    @classmethod
    def from_failures(cls, failures: Sequence[EntryFailure]) -> ApprovalFailure:
        """Build the failure matching the first offending entry, listing all of them."""

        if not failures:
            raise ValueError("An approval failure needs at least one failing entry")
        error_type = _ERROR_BY_OUTCOME.get(failures[0].outcome, ContentMismatchError)
        details = "; ".join(failure.describe() for failure in failures)
        if len(failures) == 1:
            message = f"Approval failed: {details}"
        else:
            message = f"Approval failed for {len(failures)} entries: {details}"
        return error_type(message, failures=failures)


class MissingApprovedError(ApprovalFailure):
    """Received output exists but no approved reference does."""


class MissingReceivedError(ApprovalFailure):
    """An approved reference exists but the program produced nothing for it."""


class ContentMismatchError(ApprovalFailure):
    """Approved and received content both exist and differ."""


_ERROR_BY_OUTCOME: dict[Outcome, type[ApprovalFailure]] = {
    Outcome.MISSING_APPROVED: MissingApprovedError,
    Outcome.MISSING_RECEIVED: MissingReceivedError,
    Outcome.MISMATCH: ContentMismatchError,
}


__all__ = [
    "ApprovalFailure",
    "ContentMismatchError",
    "EntryFailure",
    "MissingApprovedError",
    "MissingReceivedError",
    "Outcome",
    "classify",
]
