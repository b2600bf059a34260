from collections import Counter, deque

import pytest

from modnine.pmergeme import (
    INT_MAX,
    InputError,
    format_container,
    main,
    merge_insert_sort,
    parse_input,
    sort_deque,
    sort_list,
)

SAMPLES = [
    [],
    [7],
    [2, 1],
    [3, 5, 9, 7, 4],
    [5, 5, 5, 1, 1],
    [10, 9, 8, 7, 6, 5, 4, 3, 2, 1, 0],
    [0, 2147483647, 42, 42, 17, 3],
]


@pytest.mark.parametrize("values", SAMPLES)
def test_merge_insert_sort_orders_values(values):
    result = merge_insert_sort(values)
    assert all(a <= b for a, b in zip(result, result[1:]))
    assert Counter(result) == Counter(values)


@pytest.mark.parametrize("values", SAMPLES)
def test_merge_insert_sort_matches_builtin(values):
    assert merge_insert_sort(values) == sorted(values)


def test_merge_insert_sort_does_not_mutate_input():
    values = [4, 3, 2, 1]
    merge_insert_sort(values)
    assert values == [4, 3, 2, 1]


@pytest.mark.parametrize("values", SAMPLES)
def test_list_and_deque_agree(values):
    as_list = sort_list(values)
    as_deque = sort_deque(deque(values))
    assert isinstance(as_deque, deque)
    assert list(as_deque) == as_list


def test_parse_input_accepts_digits():
    assert parse_input(["3", "5", "9"]) == [3, 5, 9]


def test_parse_input_empty_argument_is_zero():
    assert parse_input([""]) == [0]


@pytest.mark.parametrize("arg", ["-1", "1.5", "abc", "4a", " 3"])
def test_parse_input_rejects_non_numeric(arg):
    with pytest.raises(InputError, match="non numeric"):
        parse_input(["1", arg])


def test_parse_input_rejects_out_of_range():
    with pytest.raises(InputError, match="invalid int"):
        parse_input([str(INT_MAX + 1)])


def test_parse_input_accepts_int_max():
    assert parse_input([str(INT_MAX)]) == [INT_MAX]


def test_format_container_trailing_space():
    assert format_container("Before: ", [3, 5, 9]) == "Before: 3 5 9 "


def test_format_container_empty():
    assert format_container("After: ", []) == "After: "


def test_main_without_arguments(capsys):
    assert main([]) == 1
    assert "Usage" in capsys.readouterr().err


def test_main_rejects_bad_input(capsys):
    assert main(["3", "x"]) == 1
    assert capsys.readouterr().err.strip() == "Error: non numeric"


def test_main_prints_before_and_after(capsys):
    assert main(["3", "5", "9", "7", "4"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Before: 3 5 9 7 4 "
    assert lines[1] == "After: 3 4 5 7 9 "
    assert lines[2].startswith(
        "Time to process a range of 5 elements with std::vector : "
    )
    assert lines[3].startswith(
        "Time to process a range of 5 elements with std::deque  : "
    )
    assert lines[2].endswith(" us") and lines[3].endswith(" us")