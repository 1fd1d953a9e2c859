"""Naming of approval files for the calling test."""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from types import FrameType

APPROVED_SUFFIX: Final[str] = "approved"
RECEIVED_SUFFIX: Final[str] = "received"
TEST_PREFIX: Final[str] = "test"


class CallerNotFoundError(RuntimeError):
    """Raised when no test function can be found on the call stack."""


@dataclass(frozen=True, slots=True)
class ApprovalContext:
    """Approved/received locations for one call site.

    Files are named ``<base>.approved<ext>`` and ``<base>.received<ext>`` inside
    ``folder``; folder approvals use the same names, without extension, as
    directories.
    """

    folder: Path
    base_name: str
    extension: str = ""

    @property
    def approved_path(self) -> Path:
        return self.folder / f"{self.base_name}.{APPROVED_SUFFIX}{self.extension}"

    @property
    def received_path(self) -> Path:
        return self.folder / f"{self.base_name}.{RECEIVED_SUFFIX}{self.extension}"

    @property
    def approved_folder(self) -> Path:
        return self.folder / f"{self.base_name}.{APPROVED_SUFFIX}"

    @property
    def received_folder(self) -> Path:
        return self.folder / f"{self.base_name}.{RECEIVED_SUFFIX}"

    def approved_file(self, relative: Path | str) -> Path:
        return self.approved_folder / relative

    def received_file(self, relative: Path | str) -> Path:
        return self.received_folder / relative


@dataclass(frozen=True, slots=True)
class CallSite:
    """The test function a verification was called from."""

    module_file: Path
    function_name: str
    class_name: str | None = None

    @property
    def test_name(self) -> str:
        if self.class_name:
            return f"{self.class_name}.{self.function_name}"
        return self.function_name


class ApprovalNamer:
    """Derive approval folders and base names from the calling test."""

    def __init__(self, approvals_dir: str) -> None:
        self.approvals_dir = approvals_dir

    def folder_for(self, module_file: Path) -> Path:
        """``<module dir>/<approvals dir>/<module stem>``."""

        return module_file.parent / self.approvals_dir / module_file.stem

    def context_for(self, call_site: CallSite, *, extension: str = "") -> ApprovalContext:
        return ApprovalContext(
            folder=self.folder_for(call_site.module_file),
            base_name=call_site.test_name,
            extension=extension,
        )

    def find_call_site(self) -> CallSite:
        frame = inspect.currentframe()
        try:
            while frame is not None:
                call_site = _call_site_of(frame)
                if call_site is not None:
                    return call_site
                frame = frame.f_back
        finally:
            del frame
        raise CallerNotFoundError(
            "No test function found on the call stack; name the approval explicitly"
        )


def _call_site_of(frame: FrameType) -> CallSite | None:
    code = frame.f_code
    if not code.co_name.startswith(TEST_PREFIX):
        return None
    owner = frame.f_locals.get("self", frame.f_locals.get("cls"))
    class_name: str | None = None
    if isinstance(owner, type):
        class_name = owner.__name__
    elif owner is not None:
        class_name = type(owner).__name__
    return CallSite(
        module_file=Path(code.co_filename).resolve(),
        function_name=code.co_name,
        class_name=class_name,
    )


__all__ = [
    "APPROVED_SUFFIX",
    "RECEIVED_SUFFIX",
    "ApprovalContext",
    "ApprovalNamer",
    "CallSite",
    "CallerNotFoundError",
]
