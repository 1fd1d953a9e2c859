from __future__ import annotations

from pathlib import Path

import pytest

from approvalkit.domain.outcome import (
    ApprovalFailure,
    ContentMismatchError,
    EntryFailure,
    MissingApprovedError,
    MissingReceivedError,
    Outcome,
    classify,
)
from approvalkit.domain.pairing import EntryPair


def _failure(name: str, outcome: Outcome) -> EntryFailure:
    pair = EntryPair(approved=Path("a") / name, received=Path("r") / name, relative=Path(name))
    return EntryFailure(pair=pair, outcome=outcome)


@pytest.mark.parametrize(
    ("approved", "actual", "expected"),
    [
        (None, None, Outcome.MATCH),
        ("same", "same", Outcome.MATCH),
        ("", "", Outcome.MATCH),
        ("A", "", Outcome.MISMATCH),
        (None, "x", Outcome.MISSING_APPROVED),
        (None, "", Outcome.MISSING_APPROVED),
        ("A", None, Outcome.MISSING_RECEIVED),
    ],
)
def test_classify(approved: str | None, actual: str | None, expected: Outcome) -> None:
    assert classify(approved, actual) is expected


def test_failure_descriptions_distinguish_missing_from_differing() -> None:
    assert _failure("sample.xml", Outcome.MISSING_APPROVED).describe() == "missing file <sample.xml>"
    assert _failure("sample.xml", Outcome.MISMATCH).describe() == "content differs for <sample.xml>"
    assert (
        _failure("sample.xml", Outcome.MISSING_RECEIVED).describe()
        == "no output produced for <sample.xml>"
    )


def test_from_failures_uses_the_first_failure_for_the_error_type() -> None:
    failures = (
        _failure("a.xml", Outcome.MISSING_APPROVED),
        _failure("b.xml", Outcome.MISMATCH),
    )

    error = ApprovalFailure.from_failures(failures)

    assert isinstance(error, MissingApprovedError)
    assert isinstance(error, AssertionError)
    assert error.failures == failures
    assert "missing file <a.xml>" in str(error)
    assert "content differs for <b.xml>" in str(error)
    assert "2 entries" in str(error)


@pytest.mark.parametrize(
    ("outcome", "error_type"),
    [
        (Outcome.MISMATCH, ContentMismatchError),
        (Outcome.MISSING_RECEIVED, MissingReceivedError),
    ],
)
def test_from_failures_error_types(outcome: Outcome, error_type: type[ApprovalFailure]) -> None:
    error = ApprovalFailure.from_failures((_failure("x.txt", outcome),))

    assert type(error) is error_type
    assert "x.txt" in str(error)


def test_from_failures_requires_failures() -> None:
    with pytest.raises(ValueError, match="at least one"):
        ApprovalFailure.from_failures(())
