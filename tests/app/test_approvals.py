from __future__ import annotations

from pathlib import Path

import pytest

from approvalkit import Approvals, CombinationApprovals
from approvalkit.adapters.naming import ApprovalContext
from approvalkit.adapters.reporters import FirstWorkingReporter
from approvalkit.config import ApprovalsConfig
from approvalkit.domain.outcome import ContentMismatchError, MissingApprovedError
from tests.support.reporters import RecordingReporter


@pytest.fixture
def approvals(tmp_path: Path, reporter: RecordingReporter) -> Approvals:
    return Approvals(reporter).in_folder(tmp_path)


def test_approval_files_are_named_after_the_calling_test(tmp_path: Path) -> None:
    context = Approvals().in_folder(tmp_path).context()

    assert context == ApprovalContext(
        folder=tmp_path,
        base_name="test_approval_files_are_named_after_the_calling_test",
    )


def test_default_folder_sits_beside_the_test_module() -> None:
    context = Approvals(config=ApprovalsConfig(approvals_dir="snapshots")).context()

    here = Path(__file__).resolve()
    assert context.folder == here.parent / "snapshots" / here.stem


def test_builder_methods_return_copies(reporter: RecordingReporter) -> None:
    base = Approvals()
    custom = base.report_to(reporter).write_to("custom").with_extension(".json")

    assert base.reporter is None
    assert base.file_name is None
    assert custom.reporter is reporter
    assert custom.in_folder("somewhere").context().approved_path == Path(
        "somewhere/custom.approved.json"
    )


def test_verify_passes_for_approved_content(approvals: Approvals, tmp_path: Path) -> None:
    (tmp_path / "test_verify_passes_for_approved_content.approved").write_text("my string")

    report = approvals.verify("my string")

    assert report.succeeded


def test_verify_without_approved_file_writes_received(
    approvals: Approvals, tmp_path: Path, reporter: RecordingReporter
) -> None:
    received = tmp_path / "first_run.received"

    with pytest.raises(MissingApprovedError):
        approvals.write_to("first_run").verify("new output")

    assert received.read_text() == "new output"
    assert reporter.calls == [(tmp_path / "first_run.approved", received)]


def test_master_folder_scenarios(
    approvals: Approvals, tmp_path: Path, reporter: RecordingReporter
) -> None:
    actual = tmp_path / "output"
    actual.mkdir()
    (actual / "sample.xml").write_text("actual")
    folders = approvals.write_to("folder")
    context = folders.context()
    context.approved_folder.mkdir()
    (context.approved_folder / "sample.xml").write_text("expected")

    with pytest.raises(ContentMismatchError, match="sample.xml"):
        folders.verify_against_master_folder(actual)

    assert context.received_file("sample.xml").read_text() == "actual"
    assert reporter.calls == [
        (context.approved_file("sample.xml"), context.received_file("sample.xml"))
    ]

    context.approved_file("sample.xml").write_text("actual")
    report = folders.verify_against_master_folder(actual)

    assert report.succeeded
    assert not context.received_file("sample.xml").exists()


def test_default_reporter_is_built_from_config(tmp_path: Path) -> None:
    approvals = Approvals(config=ApprovalsConfig(diff_command=("meld",))).in_folder(tmp_path)

    reconciler = approvals._reconciler()  # noqa: SLF001

    assert isinstance(reconciler.reporter, FirstWorkingReporter)
    assert reconciler.reporter.reporters[0].command == ("meld",)  # type: ignore[attr-defined]


# combinations


def test_combinations_use_the_combination_extension(
    tmp_path: Path, reporter: RecordingReporter
) -> None:
    approvals = CombinationApprovals(reporter).in_folder(tmp_path).write_to("concat")

    with pytest.raises(MissingApprovedError):
        approvals.named_arguments("number", "letter").verify_all_combinations(
            lambda n, s: f"{n}{s}", [1, 2], ["a", "b"]
        )

    assert (tmp_path / "concat.received.csv").read_text() == (
        "result, number, letter\n1a, 1, a\n1b, 1, b\n2a, 2, a\n2b, 2, b\n"
    )


def test_combinations_pass_once_approved(tmp_path: Path, reporter: RecordingReporter) -> None:
    (tmp_path / "square.approved.csv").write_text("1, 1\n4, 2\n9, 3\n")
    approvals = CombinationApprovals(reporter).in_folder(tmp_path).write_to("square")

    report = approvals.verify_all_combinations(lambda x: x * x, [1, 2, 3])

    assert report.succeeded
    assert reporter.calls == []


def test_combination_extension_can_be_overridden(tmp_path: Path) -> None:
    approvals = CombinationApprovals(config=ApprovalsConfig(combination_extension=".txt"))

    context = approvals.in_folder(tmp_path).write_to("x").context()

    assert context.approved_path == tmp_path / "x.approved.txt"
    assert approvals.with_extension("").in_folder(tmp_path).write_to("x").context().extension == ""
