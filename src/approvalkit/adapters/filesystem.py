"""Local disk implementation of the filesystem port."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Iterator

ENCODING: Final[str] = "utf-8"
# Undecodable bytes survive a read/write round trip unchanged.
ERRORS: Final[str] = "surrogateescape"


class LocalFileSystem:
    """``FileSystem`` backed by ``pathlib``."""

    def exists(self, path: Path) -> bool:
        return path.exists()

    def is_file(self, path: Path) -> bool:
        return path.is_file()

    def is_dir(self, path: Path) -> bool:
        return path.is_dir()

    def iter_files(self, root: Path) -> Iterator[Path]:
        if not root.is_dir():
            return
        for path in sorted(root.rglob("*")):
            if path.is_file():
                yield path

    def read_text(self, path: Path) -> str:
        with path.open(encoding=ENCODING, errors=ERRORS, newline="") as handle:
            return handle.read()

    def write_text(self, path: Path, content: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding=ENCODING, errors=ERRORS, newline="") as handle:
            handle.write(content)

    def delete(self, path: Path) -> None:
        path.unlink()

    def move(self, source: Path, target: Path) -> None:
        target.parent.mkdir(parents=True, exist_ok=True)
        source.replace(target)


__all__ = ["LocalFileSystem"]
