"""Exhaustive invocation of a function over combinations of its arguments.

The table produced here is plain text meant to be approved like any other
content: one row per combination, ``result, arg1, arg2, ...``, in nested loop
order (first argument varies slowest, last argument fastest).
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from itertools import product
from logging import getLogger
from typing import Final

log = getLogger(__name__)

MAX_ARGUMENT_LISTS: Final[int] = 5
DEFAULT_DELIMITER: Final[str] = ", "
RESULT_COLUMN: Final[str] = "result"


def header_row(names: Sequence[str], *, delimiter: str = DEFAULT_DELIMITER) -> str:
    """Render the header naming the result column and each argument."""

    return delimiter.join((RESULT_COLUMN, *names)) + "\n"


def call_with_all_combinations(
    func: Callable[..., object],
    *arg_lists: Iterable[object],
    header: str | None = None,
    delimiter: str = DEFAULT_DELIMITER,
) -> str:
    """Call ``func`` on the cartesian product of ``arg_lists`` and render every result.

    An exception raised for one combination does not stop the others; it is
    rendered in the result column as ``ExceptionType: message``.
    """

    if not 1 <= len(arg_lists) <= MAX_ARGUMENT_LISTS:
        raise ValueError(
            f"Expected between 1 and {MAX_ARGUMENT_LISTS} argument lists, got {len(arg_lists)}"
        )
    materialized = tuple(tuple(values) for values in arg_lists)

    rows: list[str] = [header] if header else []
    failed = 0
    for combination in product(*materialized):
        try:
            result = str(func(*combination))
        except Exception as exc:  # noqa: BLE001
            failed += 1
            result = _render_failure(exc)
        rows.append(delimiter.join((result, *(str(value) for value in combination))) + "\n")

    log.debug(
        "Called %s on %s combinations (%s failed)",
        getattr(func, "__name__", func),
        len(rows) - (1 if header else 0),
        failed,
    )
    return "".join(rows)


def _render_failure(exc: Exception) -> str:
    message = str(exc)
    if not message:
        return type(exc).__name__
    return f"{type(exc).__name__}: {message}"


__all__ = [
    "DEFAULT_DELIMITER",
    "MAX_ARGUMENT_LISTS",
    "call_with_all_combinations",
    "header_row",
]
