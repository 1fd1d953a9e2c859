"""Reporter failing the running pytest test with a unified diff."""

from __future__ import annotations

import difflib
from dataclasses import dataclass, field
from importlib import util
from typing import TYPE_CHECKING

from approvalkit.adapters.filesystem import LocalFileSystem

if TYPE_CHECKING:
    from pathlib import Path

    from approvalkit.domain.ports import FileSystem


@dataclass(frozen=True, slots=True)
class PytestReporter:
    """Available whenever pytest can be imported; fails the current test on mismatch."""

    fs: FileSystem = field(default_factory=LocalFileSystem)
    context_lines: int = 3

    def is_available(self) -> bool:
        return util.find_spec("pytest") is not None

    def mismatch(self, approved: Path, received: Path) -> None:
        import pytest  # noqa: PLC0415

        pytest.fail(self.render(approved, received), pytrace=False)

    def render(self, approved: Path, received: Path) -> str:
        expected = self._read(approved)
        actual = self._read(received)
        diff = difflib.unified_diff(
            expected.splitlines(keepends=True),
            actual.splitlines(keepends=True),
            fromfile=str(approved) if self.fs.is_file(approved) else f"{approved} (missing)",
            tofile=str(received),
            n=self.context_lines,
        )
        return f"{received} differs from {approved}\n" + "".join(diff)

    def _read(self, path: Path) -> str:
        return self.fs.read_text(path) if self.fs.is_file(path) else ""


__all__ = ["PytestReporter"]
