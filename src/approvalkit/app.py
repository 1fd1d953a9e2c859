"""Entry points used from tests to verify output against approved files."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from logging import getLogger
from pathlib import Path
from typing import TYPE_CHECKING, Self

from approvalkit.adapters.filesystem import LocalFileSystem
from approvalkit.adapters.naming import (
    APPROVED_SUFFIX,
    RECEIVED_SUFFIX,
    ApprovalContext,
    ApprovalNamer,
)
from approvalkit.adapters.reporters import default_reporter
from approvalkit.config import ApprovalsConfig, get_approvals_config
from approvalkit.domain.combinations import call_with_all_combinations, header_row
from approvalkit.domain.reconciliation import ReconciliationReport, Reconciler, compare_entries

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from approvalkit.domain.ports import FileSystem, Reporter


log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Approvals:
    """Verify program output against the approved files of the calling test.

    Instances are immutable; ``report_to``, ``write_to``, ``in_folder`` and
    ``with_extension`` return adjusted copies. Unless overridden, approval files
    live in ``<test dir>/<approvals dir>/<test module>/`` and are named after the
    test function.
    """

    reporter: Reporter | None = None
    config: ApprovalsConfig = field(default_factory=get_approvals_config)
    fs: FileSystem = field(default_factory=LocalFileSystem)
    file_name: str | None = None
    folder: Path | None = None
    extension: str | None = None

    def report_to(self, reporter: Reporter) -> Self:
        return replace(self, reporter=reporter)

    def write_to(self, file_name: str) -> Self:
        return replace(self, file_name=file_name)

    def in_folder(self, folder: Path | str) -> Self:
        return replace(self, folder=Path(folder))

    def with_extension(self, extension: str) -> Self:
        return replace(self, extension=extension)

    def context(self) -> ApprovalContext:
        """Resolve the approval locations for the current call site."""

        extension = self.extension if self.extension is not None else self._default_extension()
        if self.folder is not None and self.file_name is not None:
            return ApprovalContext(folder=self.folder, base_name=self.file_name, extension=extension)

        namer = ApprovalNamer(self.config.approvals_dir)
        call_site = namer.find_call_site()
        return ApprovalContext(
            folder=self.folder or namer.folder_for(call_site.module_file),
            base_name=self.file_name or call_site.test_name,
            extension=extension,
        )

    def verify(self, value: object) -> ReconciliationReport:
        """Compare ``str(value)`` with the approved file."""

        context = self.context()
        return self._reconciler().verify_content(
            value,
            approved=context.approved_path,
            received=context.received_path,
        )

    def verify_against_master_folder(self, actual_root: Path | str) -> ReconciliationReport:
        """Compare every file under ``actual_root`` with the approved folder."""

        context = self.context()
        return self._reconciler().verify_folder(
            Path(actual_root),
            approved_root=context.approved_folder,
            received_root=context.received_folder,
        )

    def _default_extension(self) -> str:
        return ""

    def _reconciler(self) -> Reconciler:
        reporter = self.reporter or default_reporter(self.config)
        log.debug("Using reporter %r", reporter)
        return Reconciler(reporter=reporter, fs=self.fs)


@dataclass(frozen=True, slots=True)
class CombinationApprovals(Approvals):
    """Verify a function against every combination of its argument values."""

    header: str | None = None

    def named_arguments(self, *names: str) -> Self:
        return replace(self, header=header_row(names))

    def verify_all_combinations(
        self,
        func: Callable[..., object],
        *arg_lists: Iterable[object],
    ) -> ReconciliationReport:
        """Call ``func`` for each combination of ``arg_lists`` and verify the table."""

        table = call_with_all_combinations(func, *arg_lists, header=self.header)
        return self.verify(table)

    def _default_extension(self) -> str:
        return self.config.combination_extension


def compare_approvals(
    approved: Path,
    received: Path,
    *,
    fs: FileSystem | None = None,
) -> ReconciliationReport:
    """Compare two approval files or folders in place without reporting or writing."""

    report = compare_entries(approved, received, fs=fs or LocalFileSystem())
    log.info(
        "Compared %s with %s: entries=%s, failures=%s",
        approved,
        received,
        len(report.pairs),
        len(report.failures),
    )
    return report


def approve_received(folder: Path, *, fs: FileSystem | None = None) -> list[Path]:
    """Promote every received file below ``folder`` to its approved counterpart.

    ``name.received.ext`` becomes ``name.approved.ext``; files inside a
    ``name.received`` directory move to the same relative path in ``name.approved``.
    Returns the approved paths written.
    """

    effective_fs = fs or LocalFileSystem()
    promoted: list[Path] = []
    for received in list(effective_fs.iter_files(folder)):
        relative = received.relative_to(folder)
        approved_relative = _approved_counterpart(relative)
        if approved_relative is None:
            continue
        approved = folder / approved_relative
        effective_fs.move(received, approved)
        log.info("Approved %s", approved)
        promoted.append(approved)
    return promoted


def _approved_counterpart(relative: Path) -> Path | None:
    marker = f".{RECEIVED_SUFFIX}"
    parts = list(relative.parts)
    for index, part in enumerate(parts):
        stem, found, rest = part.rpartition(marker)
        if found and stem and (not rest or rest.startswith(".")):
            parts[index] = f"{stem}.{APPROVED_SUFFIX}{rest}"
            return Path(*parts)
    return None


__all__ = ["Approvals", "CombinationApprovals", "approve_received", "compare_approvals"]
