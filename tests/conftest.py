from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from approvalkit.adapters.filesystem import LocalFileSystem
from approvalkit.domain.reconciliation import Reconciler
from tests.support.reporters import RecordingReporter

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


@pytest.fixture(autouse=True)
def _isolated_approvals_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in ("APPROVALS_DIR", "APPROVALS_DIFF_TOOL", "APPROVALS_COMBINATION_EXTENSION"):
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture(autouse=True)
def _restore_package_log_level() -> Iterator[None]:
    package_logger = logging.getLogger("approvalkit")
    level = package_logger.level
    yield
    package_logger.setLevel(level)


@pytest.fixture
def fs() -> LocalFileSystem:
    return LocalFileSystem()


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def reconciler(reporter: RecordingReporter, fs: LocalFileSystem) -> Reconciler:
    return Reconciler(reporter=reporter, fs=fs)


@pytest.fixture
def roots(tmp_path: Path) -> tuple[Path, Path, Path]:
    """Approved, actual and received roots below ``tmp_path`` (none created yet)."""

    return tmp_path / "approved", tmp_path / "actual", tmp_path / "received"
