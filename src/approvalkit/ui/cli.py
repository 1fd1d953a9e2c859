from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from approvalkit.app import approve_received, compare_approvals
from approvalkit.config import configure_logging

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Review approval test artifacts")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every compared entry",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    check = subparsers.add_parser(
        "check",
        help="Compare an approved file or folder with a received one",
    )
    check.add_argument("approved", type=Path, help="Approved file or folder")
    check.add_argument("received", type=Path, help="Received file or folder")

    approve = subparsers.add_parser(
        "approve",
        help="Promote all received files below a folder to approved files",
    )
    approve.add_argument("folder", type=Path, help="Folder holding approval files")

    return parser.parse_args(list(argv))


def _check(approved: Path, received: Path) -> int:
    if not approved.exists() and not received.exists():
        raise ValueError(f"Neither {approved} nor {received} exists")
    report = compare_approvals(approved, received)
    for failure in report.failures:
        log.error("%s", failure.describe())
    return 0 if report.succeeded else 1


def _approve(folder: Path) -> int:
    if not folder.is_dir():
        raise ValueError(f"Not a folder: {folder}")
    promoted = approve_received(folder)
    log.info("Approved %s file(s)", len(promoted))
    return 0


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        parsed_args = _parse_args(args_list)
    except ValueError:
        log.exception("CLI validation error")
        sys.exit(2)

    configure_logging(verbose=parsed_args.verbose)

    try:
        if parsed_args.command == "check":
            status = _check(parsed_args.approved, parsed_args.received)
        elif parsed_args.command == "approve":
            status = _approve(parsed_args.folder)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301
    except ValueError:
        log.exception("CLI validation error")
        sys.exit(2)
    except Exception:
        log.exception("Fatal error while reviewing approvals")
        sys.exit(1)

    sys.exit(status)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console script entry point."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
