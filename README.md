# modnine

Three small command-line tools in one package: a bitcoin value converter
(`btc`), a reverse Polish notation calculator (`rpn`) and a merge-insertion
sorter (`pmergeme`). No third-party dependencies.

## Installation

```
pip install .
```

## btc

Values bitcoin amounts at historical exchange rates.

```
btc input.txt
```

The rate table is always read from `data.csv` in the current directory. It
holds lines of `date,rate`; parsing starts at the first occurrence of
`2009-01-02`, and a last line without a trailing newline is ignored. If the
table cannot be opened, `Error: could not open file.` is printed to standard
error; a malformed date or rate in it prints `Error date in the data file` or
`Error value in the data file`. In all three cases the exit status is 1.

The input file must contain a `date | value` header, followed by lines such as:

```
date | value
2011-01-03 | 3
2011-01-03 | 1.2
2012-01-11 | -1
2001-42-42
2012-01-11 | 2000
```

Each line produces one line of output:

- `date => value = result` for a valid line, where the rate used is the one
  for that date, or for the closest earlier date in the table;
- `Error: bad input => ...` when the line has no ` | ` separator in the
  expected place, or the date is not a real `YYYY-MM-DD` date (every year
  divisible by four is treated as a leap year);
- `Error: bad value => ...` when the value is not an unsigned decimal (digits
  with at most one dot, not starting with a dot), which includes negative
  numbers;
- `Error: too large a number.` for values above 1000;
- `Error: no available data for :date` for dates before the first entry of
  the table, and for the first entry's date itself.

Called with anything other than one argument, `btc` prints
`Must have 2 arguments` and exits with status 0. An input file that cannot be
opened prints `Erreur : impossible d'ouvrir le fichier.` to standard error; an
input file without the header produces no output.

## rpn

Evaluates one expression in reverse Polish notation. Tokens are separated by
whitespace; operands are single digits and the operators are `+`, `-`, `*`
and `/` (integer division, truncating toward zero).

```
rpn "8 9 * 9 - 9 - 9 - 4 - 1 +"
```

prints `42`. Errors are printed to standard error as `Error: ...` with exit
status 1: `Invalid token: <token>`, `Not enough operands`,
`Invalid expression` (not exactly one value left) and `Division by zero`.
Without exactly one argument a usage line is printed and the status is 1.

## pmergeme

Sorts non-negative integers given as arguments, once into a list and once
into a deque, and reports how long each took in microseconds.

```
pmergeme 3 5 9 7 4
```

```
Before: 3 5 9 7 4 
After: 3 4 5 7 9 
Time to process a range of 5 elements with std::vector : 12 us
Time to process a range of 5 elements with std::deque  : 9 us
```

Every argument must consist of digits only (an empty argument counts as 0);
otherwise `Error: non numeric` is printed. Values above 2147483647 print
`Error: invalid int`. Both errors, and a call with no arguments, exit with
status 1.

## Library use

The same functionality is available from Python:

- `modnine.exchange`: `parse_rates`, `load_rates`, `rate_for_date`
  (returns `None` when no rate applies), `is_valid_value`,
  `is_valid_date_format` and `ExchangeDataError`.
- `modnine.btc`: `is_valid_date`, `convert_lines` (yields the output lines,
  raises `ValueError` when the header is missing) and `display_bitcoins`.
- `modnine.rpn`: `evaluate_rpn`, `apply_operation`, `operator_code`, the
  `Operator` enum and `RPNError`.
- `modnine.pmergeme`: `parse_input`, `merge_insert_sort`, `sort_list`,
  `sort_deque`, `format_container` and `InputError`.

```python
from modnine.rpn import evaluate_rpn
from modnine.pmergeme import merge_insert_sort

evaluate_rpn("1 2 * 2 / 2 * 2 4 - +")  # 0
merge_insert_sort([3, 5, 9, 7, 4])     # [3, 4, 5, 7, 9]
```

## Running the tests

```
pip install .[test]
pytest
```