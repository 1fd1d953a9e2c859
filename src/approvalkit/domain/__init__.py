"""Reconciliation core: pairing, outcomes, the verification workflow and combinations."""

from __future__ import annotations

from .combinations import call_with_all_combinations, header_row
from .outcome import (
    ApprovalFailure,
    ContentMismatchError,
    EntryFailure,
    MissingApprovedError,
    MissingReceivedError,
    Outcome,
    classify,
)
from .pairing import EntryPair, have_same_content, pair_entries
from .reconciliation import ReconciliationReport, Reconciler, compare_entries

__all__ = [
    "ApprovalFailure",
    "ContentMismatchError",
    "EntryFailure",
    "EntryPair",
    "MissingApprovedError",
    "MissingReceivedError",
    "Outcome",
    "ReconciliationReport",
    "Reconciler",
    "call_with_all_combinations",
    "classify",
    "compare_entries",
    "have_same_content",
    "header_row",
]
