"""Sort positive integers with a pair-and-insert merge-insertion scheme."""

from __future__ import annotations

import string
import sys
import time
from bisect import bisect_left, insort_left
from collections import deque
from collections.abc import Iterable, Sequence

INT_MAX = 2**31 - 1


class InputError(Exception):
    """An argument is not a valid non-negative integer."""


def parse_input(args: Iterable[str]) -> list[int]:
    """Convert command-line arguments into integers.

    Every argument must consist of digits only; an empty argument reads as 0.
    Raises InputError for non-numeric text or values beyond the int range.
    """
    values: list[int] = []
    for arg in args:
        if any(c not in string.digits for c in arg):
            raise InputError("Error: non numeric")
        value = int(arg) if arg else 0
        if value > INT_MAX:
            raise InputError("Error: invalid int")
        values.append(value)
    return values


def merge_insert_sort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order.

    Elements are paired; the larger of each pair (and an odd leftover) form a
    sorted main chain, then each smaller element is inserted before the first
    chain element not less than it.
    """
    items = list(values)
    if len(items) <= 1:
        return items
    main_chain: list[int] = []
    pending: list[int] = []
    pairs = zip(items[0::2], items[1::2])
    for a, b in pairs:
        main_chain.append(max(a, b))
        pending.append(min(a, b))
    if len(items) % 2:
        main_chain.append(items[-1])
    main_chain.sort()
    for value in pending:
        insort_left(main_chain, value)
    return main_chain


def sort_list(values: Iterable[int]) -> list[int]:
    """Sort into a new list."""
    return merge_insert_sort(values)


def sort_deque(values: Iterable[int]) -> deque[int]:
    """Sort into a new deque."""
    return deque(merge_insert_sort(values))


def format_container(label: str, values: Iterable[int]) -> str:
    """Render ``label`` followed by each value and a trailing space."""
    return label + "".join(f"{value} " for value in values)


def _timed(sorter, values: Sequence[int]):
    start = time.perf_counter_ns()
    result = sorter(values)
    elapsed_us = (time.perf_counter_ns() - start) // 1000
    return result, elapsed_us


def main(argv: list[str] | None = None) -> int:
    """Sort the integers given on the command line and report timings."""
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print("Usage: PmergeMe <int> <int> ...", file=sys.stderr)
        return 1
    try:
        values = parse_input(args)
    except InputError as exc:
        print(exc, file=sys.stderr)
        return 1

    print(format_container("Before: ", values))
    as_list, list_us = _timed(sort_list, values)
    as_deque, deque_us = _timed(sort_deque, deque(values))
    print(format_container("After: ", as_list))
    print(
        f"Time to process a range of {len(as_list)}"
        f" elements with std::vector : {list_us} us"
    )
    print(
        f"Time to process a range of {len(as_deque)}"
        f" elements with std::deque  : {deque_us} us"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())