"""Log output for the approvalkit command line."""

from __future__ import annotations

import logging
from typing import Final

PACKAGE_LOGGER: Final[str] = "approvalkit"
LOG_FORMAT: Final[str] = "%(levelname)-7s %(name)s: %(message)s"


def configure_logging(*, verbose: bool = False, force: bool = False) -> logging.Logger:
    """Send records to stderr and set the verbosity of approvalkit's own loggers.

    Third-party loggers stay at WARNING. The ``approvalkit`` logger reports one
    line per pass at INFO; ``verbose`` lowers it to DEBUG so every compared entry,
    reporter choice and removed received file is listed.
    """

    logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT, force=force)
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    return package_logger
