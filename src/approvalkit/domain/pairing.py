"""Pairing of approved and received entries.

Given two roots, each either a single file or a directory tree, build every
``(approved, received)`` location pair that a reconciliation pass must evaluate:

1) two existing regular files form exactly one pair
2) otherwise every file found under either root is paired with the location the
   same relative path resolves to under the other root, whether or not it exists
3) files present on both sides are discovered twice and collapsed into one pair

Pairing is read-only; nothing here touches the filesystem beyond listing it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from pathlib import Path, PurePosixPath
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from approvalkit.domain.ports import FileSystem


log = getLogger(__name__)

_SAME_ENTRY = Path()


@dataclass(frozen=True, slots=True)
class EntryPair:
    """One approved/received location pair under evaluation."""

    approved: Path
    received: Path
    relative: Path = field(default=_SAME_ENTRY, compare=False)

    @property
    def name(self) -> str:
        """Human readable identity of the entry, relative to its roots."""

        if self.relative == _SAME_ENTRY:
            return self.approved.name
        return PurePosixPath(*self.relative.parts).as_posix()


def pair_entries(
    approved_root: Path,
    received_root: Path,
    *,
    fs: FileSystem,
) -> tuple[EntryPair, ...]:
    """Return all pairs to evaluate for ``approved_root`` against ``received_root``."""

    if fs.is_file(approved_root) and fs.is_file(received_root):
        return (EntryPair(approved=approved_root, received=received_root),)

    from_approved = (
        _pair_from(approved_file, root=approved_root, counterpart_root=received_root)
        for approved_file in _files_under(approved_root, fs=fs)
    )
    from_received = (
        _swap(_pair_from(received_file, root=received_root, counterpart_root=approved_root))
        for received_file in _files_under(received_root, fs=fs)
    )
    pairs = _distinct((*from_approved, *from_received))
    log.debug(
        "Paired %s entries between %s and %s",
        len(pairs),
        approved_root,
        received_root,
    )
    return tuple(sorted(pairs, key=_ordering_key))


def _files_under(root: Path, *, fs: FileSystem) -> Iterable[Path]:
    if fs.is_file(root):
        return (root,)
    return fs.iter_files(root)


def _pair_from(found: Path, *, root: Path, counterpart_root: Path) -> EntryPair:
    relative = found.relative_to(root)
    return EntryPair(approved=found, received=counterpart_root / relative, relative=relative)


def _swap(pair: EntryPair) -> EntryPair:
    return EntryPair(approved=pair.received, received=pair.approved, relative=pair.relative)


def _distinct(pairs: Iterable[EntryPair]) -> list[EntryPair]:
    seen: set[EntryPair] = set()
    unique: list[EntryPair] = []
    for pair in pairs:
        if pair in seen:
            continue
        seen.add(pair)
        unique.append(pair)
    return unique


def _ordering_key(pair: EntryPair) -> tuple[str, str, str]:
    return (pair.name, str(pair.approved), str(pair.received))


def have_same_content(pair: EntryPair, *, fs: FileSystem) -> bool:
    """Return whether both sides of ``pair`` are regular files with identical content."""

    if not (fs.is_file(pair.approved) and fs.is_file(pair.received)):
        return False
    return fs.read_text(pair.approved) == fs.read_text(pair.received)


__all__ = ["EntryPair", "have_same_content", "pair_entries"]
