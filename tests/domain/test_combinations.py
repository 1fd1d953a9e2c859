from __future__ import annotations

import pytest

from approvalkit.domain.combinations import call_with_all_combinations, header_row


def test_rows_follow_nested_loop_order() -> None:
    table = call_with_all_combinations(lambda n, s: f"{n}{s}", [1, 2], ["a", "b"])

    assert table == "1a, 1, a\n1b, 1, b\n2a, 2, a\n2b, 2, b\n"


def test_single_argument_list() -> None:
    table = call_with_all_combinations(str.upper, ["x", "y"])

    assert table.splitlines() == ["X, x", "Y, y"]


def test_five_argument_lists_cover_the_full_product() -> None:
    table = call_with_all_combinations(
        lambda a, b, c, d, e: a + b + c + d + e,
        [0, 1],
        [0, 10],
        [0, 100],
        [0],
        range(2),
    )

    rows = table.splitlines()
    assert len(rows) == 16
    assert rows[0] == "0, 0, 0, 0, 0, 0"
    assert rows[-1] == "112, 1, 10, 100, 0, 1"


@pytest.mark.parametrize("count", [0, 6])
def test_argument_list_count_is_bounded(count: int) -> None:
    with pytest.raises(ValueError, match="between 1 and 5"):
        call_with_all_combinations(lambda *args: args, *([[1]] * count))


def test_failures_are_recorded_and_evaluation_continues() -> None:
    def divide(a: int, b: int) -> float:
        return a / b

    table = call_with_all_combinations(divide, [1], [0, 2])

    assert table == "ZeroDivisionError: division by zero, 1, 0\n0.5, 1, 2\n"


def test_header_is_emitted_first() -> None:
    header = header_row(["left", "right"])

    table = call_with_all_combinations(max, [1], [2], header=header)

    assert table == "result, left, right\n2, 1, 2\n"


def test_generators_are_materialized_once() -> None:
    table = call_with_all_combinations(
        lambda a, b: a * b,
        (value for value in (1, 2)),
        (value for value in (3, 4)),
    )

    assert table.splitlines() == ["3, 1, 3", "4, 1, 4", "6, 2, 3", "8, 2, 4"]


def test_custom_delimiter() -> None:
    table = call_with_all_combinations(len, ["ab"], delimiter=";")

    assert table == "2;ab\n"
