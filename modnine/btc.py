"""Value bitcoin amounts at historical exchange rates."""

from __future__ import annotations

import string
import sys
from collections.abc import Iterator, Mapping
from os import PathLike
from typing import TextIO

from modnine.exchange import (
    DEFAULT_DATA_FILE,
    ExchangeDataError,
    is_valid_date_format,
    is_valid_value,
    load_rates,
    rate_for_date,
)

HEADER = "date | value"
MAX_VALUE = 1000.0

_THIRTY_DAY_MONTHS = frozenset({4, 6, 9, 11})


def is_valid_date(date: str) -> bool:
    """Tell whether ``date`` is a real YYYY-MM-DD calendar date.

    Every year divisible by four counts as a leap year.
    """
    if len(date) != 10 or date[4] != "-" or date[7] != "-":
        return False
    if any(c not in string.digits for c in date[:4] + date[5:7] + date[8:]):
        return False
    year, month, day = int(date[:4]), int(date[5:7]), int(date[8:])
    if not 1 <= month <= 12 or day < 1:
        return False
    if month == 2:
        limit = 29 if year % 4 == 0 else 28
    elif month in _THIRTY_DAY_MONTHS:
        limit = 30
    else:
        limit = 31
    return day <= limit


def _split_lines(content: str) -> list[str]:
    if not content:
        return []
    lines = content.split("\n")
    if content.endswith("\n"):
        lines.pop()
    return lines


def _convert_line(line: str, data: Mapping[str, float]) -> str:
    pipe = line.find("|")
    if pipe == -1 or pipe < 10 or len(line) <= pipe + 2:
        return f"Error: bad input => {line}"
    date = line[:pipe - 1]
    value_text = line[pipe + 2:]
    if not is_valid_date_format(date) or not is_valid_date(date):
        return f"Error: bad input => {date}"
    if not is_valid_value(value_text):
        return f"Error: bad value => {value_text}"
    value = float(value_text)
    if value < 0.0:
        return "Error: not a positive number."
    if value > MAX_VALUE:
        return "Error: too large a number."
    rate = rate_for_date(date, data)
    if rate is None:
        return f"Error: no available data for :{date}"
    return f"{date} => {value:g} = {value * rate:g}"


def convert_lines(content: str, data: Mapping[str, float]) -> Iterator[str]:
    """Yield one output line per input line of a ``date | value`` document.

    Raises ValueError when the header is missing.
    """
    if HEADER not in content:
        raise ValueError(f"missing {HEADER!r} header")
    for line in _split_lines(content[len(HEADER) + 1:]):
        yield _convert_line(line, data)


def display_bitcoins(
    path: str | PathLike[str],
    data: Mapping[str, float],
    out: TextIO | None = None,
) -> None:
    """Convert the input file at ``path`` and write the result to ``out``."""
    stream = sys.stdout if out is None else out
    with open(path, encoding="utf-8", errors="replace", newline="") as handle:
        content = handle.read()
    for line in convert_lines(content, data):
        print(line, file=stream)


def main(argv: list[str] | None = None) -> int:
    """Run the converter on one input file, using ``data.csv`` for rates."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print("Must have 2 arguments")
        return 0
    try:
        data = load_rates(DEFAULT_DATA_FILE)
    except ExchangeDataError as exc:
        print(exc, file=sys.stderr)
        return 1
    try:
        display_bitcoins(args[0], data)
    except OSError:
        print("Erreur : impossible d'ouvrir le fichier.", file=sys.stderr)
    except ValueError:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())