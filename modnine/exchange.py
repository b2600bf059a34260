"""Historical exchange-rate table: parsing, validation and lookup."""

from __future__ import annotations

import string
from bisect import bisect_left
from collections.abc import Mapping
from os import PathLike

DEFAULT_DATA_FILE = "data.csv"
FIRST_DATA_DATE = "2009-01-02"

_DIGIT_POSITIONS = frozenset({0, 1, 2, 3, 5, 6, 8, 9})


class ExchangeDataError(Exception):
    """The rate table could not be read or holds malformed entries."""


def rate_for_date(date: str, data: Mapping[str, float]) -> float | None:
    """Return the rate in force on ``date``, or None when no data covers it.

    The closest earlier entry is used when ``date`` has no entry of its own.
    A date that matches the very first entry of the table yields None.
    """
    keys = sorted(data)
    if not keys or date < keys[0]:
        return None
    index = bisect_left(keys, date)
    if index < len(keys) and keys[index] == date:
        return None if index == 0 else data[date]
    return data[keys[index - 1]]


def is_valid_value(value: str) -> bool:
    """Tell whether ``value`` is an unsigned decimal: digits and at most one dot."""
    if not value or value.startswith("."):
        return False
    if any(c not in string.digits and c != "." for c in value):
        return False
    return value.count(".") <= 1


def is_valid_date_format(date: str) -> bool:
    """Tell whether ``date`` follows the YYYY-MM-DD character pattern.

    Only the characters present are checked: digits where the pattern has
    digits, dashes everywhere else, so shorter strings can pass.
    """
    for position, char in enumerate(date):
        if position in _DIGIT_POSITIONS:
            if char not in string.digits:
                return False
        elif char != "-":
            return False
    return True


def parse_rates(content: str) -> dict[str, float]:
    """Parse ``date,rate`` lines starting at the first known data date.

    A trailing line without a newline is ignored.
    """
    start = content.find(FIRST_DATA_DATE)
    remaining = content[start:] if start != -1 else ""
    rates: dict[str, float] = {}
    while remaining:
        comma = remaining.find(",")
        if comma == -1:
            break
        newline = remaining.find("\n", comma + 1)
        if newline == -1:
            break
        record = remaining[:newline]
        separator = record.find(",")
        if separator == -1:
            break
        date = record[:separator]
        if not is_valid_date_format(date):
            raise ExchangeDataError("Error date in the data file")
        value_text = record[separator + 1:]
        if not is_valid_value(value_text):
            raise ExchangeDataError("Error value in the data file")
        rates[date] = float(value_text)
        remaining = remaining[newline + 1:]
    return dict(sorted(rates.items()))


def load_rates(path: str | PathLike[str] = DEFAULT_DATA_FILE) -> dict[str, float]:
    """Read and parse the rate table stored at ``path``."""
    try:
        with open(path, encoding="utf-8", errors="replace", newline="") as handle:
            content = handle.read()
    except OSError as exc:
        raise ExchangeDataError("Error: could not open file.") from exc
    return parse_rates(content)