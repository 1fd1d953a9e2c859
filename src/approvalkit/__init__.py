from __future__ import annotations

from importlib import metadata

from approvalkit.app import Approvals, CombinationApprovals

try:
    __version__ = metadata.version("approvalkit")
except metadata.PackageNotFoundError:
    __version__ = "0.0.0+local"

__all__ = ["Approvals", "CombinationApprovals", "__version__"]
