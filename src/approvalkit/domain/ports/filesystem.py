"""Port for the filesystem operations the reconciliation core relies on."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


@runtime_checkable
class FileSystem(Protocol):
    """Minimal file access contract.

    Required operations (``read_text`` of an existing file, ``write_text``, ``delete``)
    raise ``OSError`` on failure. ``iter_files`` on a missing root yields nothing.
    """

    def exists(self, path: Path) -> bool: ...

    def is_file(self, path: Path) -> bool: ...

    def is_dir(self, path: Path) -> bool: ...

    def iter_files(self, root: Path) -> Iterator[Path]: ...

    def read_text(self, path: Path) -> str: ...

    def write_text(self, path: Path, content: str) -> None: ...

    def delete(self, path: Path) -> None: ...

    def move(self, source: Path, target: Path) -> None: ...


__all__ = ["FileSystem"]
