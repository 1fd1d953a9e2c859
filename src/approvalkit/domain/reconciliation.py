"""Reconciliation of actual program output against approved references.

A pass evaluates one entry (a single content string) or every pair produced by
``pair_entries`` for a directory tree. Each entry is settled the same way:

- matching entries lose any stale received artifact left by an earlier failing run
- differing entries, and entries without an approved reference, get the actual
  content written to their received location and are handed to the reporter
- entries with an approved reference but no actual output drop their stale
  received artifact and are handed to the reporter

A directory pass always settles every entry before raising, and removes received
artifacts that no longer correspond to any entry.
"""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from .outcome import ApprovalFailure, EntryFailure, Outcome, classify
from .pairing import EntryPair, pair_entries

if TYPE_CHECKING:
    from pathlib import Path

    from approvalkit.domain.ports import FileSystem, Reporter


log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ReconciliationReport:
    """Pairs visited by a pass and the ones that failed."""

    pairs: tuple[EntryPair, ...]
    failures: tuple[EntryFailure, ...] = ()

    @property
    def succeeded(self) -> bool:
        return not self.failures


@dataclass(slots=True)
class Reconciler:
    """Run approval checks and drive their filesystem and reporter side effects."""

    reporter: Reporter
    fs: FileSystem

    def verify_content(
        self,
        actual: object,
        *,
        approved: Path,
        received: Path,
    ) -> ReconciliationReport:
        """Check ``actual`` against the approved file, writing ``received`` on mismatch."""

        entry = EntryPair(approved=approved, received=received)
        failure = self._settle(
            entry,
            approved_content=self._read_optional(approved),
            actual_content=str(actual),
        )
        if failure is None:
            log.debug("Approved %s", approved)
            return ReconciliationReport(pairs=(entry,))

        log.info("Approval failed: %s", failure.describe())
        self.reporter.mismatch(entry.approved, entry.received)
        raise ApprovalFailure.from_failures((failure,))

    def verify_folder(
        self,
        actual_root: Path,
        *,
        approved_root: Path,
        received_root: Path,
    ) -> ReconciliationReport:
        """Check every file under ``actual_root`` against the approved tree.

        Received artifacts mirror the relative layout of ``actual_root`` below
        ``received_root``. If the reporter raised for any entry, the first such
        exception is re-raised once all entries are settled; otherwise an
        ``ApprovalFailure`` describing every failing entry is raised.
        """

        pairs = pair_entries(approved_root, actual_root, fs=self.fs)
        failures: list[EntryFailure] = []
        first_reporter_error: BaseException | None = None

        for pair in pairs:
            entry = EntryPair(
                approved=pair.approved,
                received=received_root / pair.relative,
                relative=pair.relative,
            )
            failure = self._settle(
                entry,
                approved_content=self._read_optional(pair.approved),
                actual_content=self._read_optional(pair.received),
            )
            if failure is None:
                continue
            failures.append(failure)
            try:
                self.reporter.mismatch(entry.approved, entry.received)
            except (KeyboardInterrupt, SystemExit):
                raise
            # pytest outcome exceptions derive from BaseException
            except BaseException as exc:  # noqa: BLE001
                log.debug("Reporter failed for %s: %s", entry.name, exc)
                if first_reporter_error is None:
                    first_reporter_error = exc

        self._remove_orphans(received_root, pairs)

        log.info(
            "Reconciled %s against %s: entries=%s, failures=%s",
            actual_root,
            approved_root,
            len(pairs),
            len(failures),
        )
        if first_reporter_error is not None:
            if len(failures) > 1:
                first_reporter_error.add_note(_summary(failures))
            raise first_reporter_error
        if failures:
            raise ApprovalFailure.from_failures(failures)
        return ReconciliationReport(pairs=pairs)

    def _settle(
        self,
        entry: EntryPair,
        *,
        approved_content: str | None,
        actual_content: str | None,
    ) -> EntryFailure | None:
        outcome = classify(approved_content, actual_content)
        log.debug("Entry %s: %s", entry.name, outcome)
        if outcome is Outcome.MATCH:
            self._remove_stale(entry.received)
            return None
        if actual_content is None:
            self._remove_stale(entry.received)
        else:
            self.fs.write_text(entry.received, actual_content)
        return EntryFailure(pair=entry, outcome=outcome)

    def _remove_stale(self, received: Path) -> None:
        if self.fs.exists(received):
            log.debug("Removing stale received file %s", received)
            self.fs.delete(received)

    def _remove_orphans(self, received_root: Path, pairs: tuple[EntryPair, ...]) -> None:
        # received artifacts left by entries that are no longer produced or approved
        expected = {pair.relative for pair in pairs}
        for path in list(self.fs.iter_files(received_root)):
            if path.relative_to(received_root) not in expected:
                log.debug("Removing orphaned received file %s", path)
                self.fs.delete(path)

    def _read_optional(self, path: Path) -> str | None:
        return _read_optional(path, fs=self.fs)


def compare_entries(approved: Path, received: Path, *, fs: FileSystem) -> ReconciliationReport:
    """Compare two existing files or trees in place, without side effects."""

    pairs = pair_entries(approved, received, fs=fs)
    failures: list[EntryFailure] = []
    for pair in pairs:
        outcome = classify(
            _read_optional(pair.approved, fs=fs),
            _read_optional(pair.received, fs=fs),
        )
        if outcome is not Outcome.MATCH:
            failures.append(EntryFailure(pair=pair, outcome=outcome))
    return ReconciliationReport(pairs=pairs, failures=tuple(failures))


def _read_optional(path: Path, *, fs: FileSystem) -> str | None:
    if not fs.is_file(path):
        return None
    return fs.read_text(path)


def _summary(failures: list[EntryFailure]) -> str:
    details = "; ".join(failure.describe() for failure in failures)
    return f"{len(failures)} entries failed approval: {details}"


__all__ = ["ReconciliationReport", "Reconciler", "compare_entries"]
