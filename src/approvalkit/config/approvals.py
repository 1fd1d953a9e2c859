"""Approval storage and reporter configuration values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .env import optional_env_var, split_command
from .errors import ConfigurationError

DEFAULT_APPROVALS_DIR: Final[str] = "approvals"
DEFAULT_COMBINATION_EXTENSION: Final[str] = ".csv"


@dataclass(frozen=True, slots=True)
class ApprovalsConfig:
    """Where approval files live and which reporters to prefer."""

    approvals_dir: str = DEFAULT_APPROVALS_DIR
    diff_command: tuple[str, ...] | None = None
    combination_extension: str = DEFAULT_COMBINATION_EXTENSION

    def __post_init__(self) -> None:
        if not self.approvals_dir.strip():
            raise ConfigurationError("Approvals directory name must not be blank")
        if self.combination_extension and not self.combination_extension.startswith("."):
            raise ConfigurationError(
                f"Combination extension must start with a dot: {self.combination_extension!r}"
            )


def get_approvals_config() -> ApprovalsConfig:
    approvals_dir = optional_env_var("APPROVALS_DIR") or DEFAULT_APPROVALS_DIR
    diff_tool = optional_env_var("APPROVALS_DIFF_TOOL")
    extension = optional_env_var("APPROVALS_COMBINATION_EXTENSION")
    return ApprovalsConfig(
        approvals_dir=approvals_dir,
        diff_command=split_command("APPROVALS_DIFF_TOOL", diff_tool) if diff_tool else None,
        combination_extension=extension if extension is not None else DEFAULT_COMBINATION_EXTENSION,
    )
