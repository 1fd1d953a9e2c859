"""Reporter launching an external diff/merge program."""

from __future__ import annotations

import shutil
import subprocess
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from approvalkit.adapters.filesystem import LocalFileSystem

if TYPE_CHECKING:
    from pathlib import Path

    from approvalkit.domain.ports import FileSystem


log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DiffToolReporter:
    """Open the received and approved files side by side in ``command``.

    The tool is called as ``command... received approved`` and blocks until it exits;
    a non-zero exit status raises ``subprocess.CalledProcessError``. Missing files are
    created empty for the tool and removed again unless the user saved content into them.
    """

    command: tuple[str, ...]
    fs: FileSystem = field(default_factory=LocalFileSystem)

    def __post_init__(self) -> None:
        if not self.command:
            raise ValueError("Diff tool command must not be empty")

    def is_available(self) -> bool:
        return shutil.which(self.command[0]) is not None

    def mismatch(self, approved: Path, received: Path) -> None:
        # Merge tools need both files to exist before they can open them.
        placeholders = [path for path in (approved, received) if not self.fs.exists(path)]
        for path in placeholders:
            self.fs.write_text(path, "")
        args = [*self.command, str(received), str(approved)]
        log.info("Launching diff tool: %s", " ".join(args))
        try:
            subprocess.run(args, check=True)  # noqa: S603
        finally:
            self._discard_untouched(placeholders)

    def _discard_untouched(self, placeholders: list[Path]) -> None:
        # an empty approved file is indistinguishable from approved empty output
        for path in placeholders:
            if self.fs.is_file(path) and not self.fs.read_text(path):
                log.debug("Removing unused placeholder %s", path)
                self.fs.delete(path)


__all__ = ["DiffToolReporter"]
