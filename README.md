# ninekit

Three small command-line tools. Each one can also be used as a library.

- `btc` values amounts of bitcoin at historical exchange rates.
- `rpn` evaluates reverse Polish notation expressions.
- `pmergeme` sorts integers with Ford-Johnson merge-insertion sort.

## Installation

```
pip install .
```

To run the tests, install the test extra and then run pytest:

```
pip install .[test]
pytest
```

## btc: historical bitcoin prices

```
btc input.txt
```

`btc` takes exactly one argument, the input file. It reads its rates from a file named `data.csv` in the directory of the program as it was invoked, that is, the directory part of `sys.argv[0]`.

### The rate database

- **Header.** The first line must start with `date` and end with `exchange_rate`. The text between those two words must not be empty. That text is the delimiter for every later row, as in `date,exchange_rate`.
- **Rows.** Each later row has the form `YYYY-MM-DD<delimiter>rate`.
- **Rates.** A rate must be a finite, non-negative number. C-style literals are accepted, including hexadecimal floats.
- **Failures.** A missing delimiter, a bad date, a duplicate date or a bad rate stops the program.

### The input file

- **Header.** The first line must be exactly `date | value`.
- **Lines.** Each later line has the form `YYYY-MM-DD | amount`.
- **Amounts.** An amount is read in single precision. It must be greater than 0 and at most 1000.

### Output

For each valid line, `btc` prints `date => amount = result` on standard output. The result is the amount multiplied by the latest rate on or before that date. If no rate is that early, the rate used is 0. Results are printed in `%g` form.

A line that cannot be processed is reported on standard error as `Error: ...`. Processing then goes on with the next line. Such lines do not change the exit status.

### Dates

A date is `YYYY-MM-DD`:

- the year is any number of digits, up to 429496;
- the month and the day have two digits each;
- the day must exist in that month, with leap years counted.

`parse_date` turns a date into the integer `YYYYMMDD`.

### From Python

```python
from ninekit.exchange import BitcoinExchange, ExchangeError, parse_amount, parse_date

exchanger = BitcoinExchange.from_csv("data.csv")
exchanger.convert("2.5", "2011-01-03")            # amount validated with parse_amount
exchanger.rate_at(parse_date("2011-01-03"))       # latest rate on or before the date

table = BitcoinExchange({"2020-01-01": 100.0, 20200201: 200.0})
table.convert(1.5, "2020-01-15")                  # 150.0
```

The `BitcoinExchange` constructor takes a mapping from dates to rates. Each date may be a string or a `YYYYMMDD` integer.

`convert` checks amounts given as strings. Amounts given as floats are used as they are, without the range check.

All validation failures raise `ExchangeError`.

The command-line flow is also available as functions in `ninekit.btc`:

- `run(database_path, input_path, out, err)` processes a whole input file and returns an exit status;
- `process_lines(exchanger, lines, out, err)` processes lines that have already been read and returns the number of bad lines.

### Exit status

| Status | Meaning |
|--------|---------|
| 0 | success |
| 2 | wrong number of arguments |
| 3 | invalid rate database or input header |
| 4 | a file could not be opened or read |
| 5 | out of memory |

## rpn: reverse Polish notation calculator

```
rpn "8 9 * 9 - 9 - 9 - 4 - 1 +"
```

The command prints `42`.

- **Operands** are single digits.
- **Operators** are `+`, `-`, `*` and `/`.
- **Tokens** are single characters separated by whitespace.

The result is printed in `%g` form. Division by zero gives `inf`, `-inf` or `nan`; it is not an error.

```python
from ninekit.rpn import RPNError, evaluate, tokenize

evaluate("1 2 * 2 / 2 * 2 4 - +")   # 0.0
tokenize("3 4 +")                   # ['3', '4', '+']
```

`evaluate` raises `RPNError` in these cases:

- the expression is empty;
- a token is longer than one character;
- a token is an unknown symbol;
- there are too few or too many operands.

### Exit status

| Status | Meaning |
|--------|---------|
| 0 | success |
| 1 | wrong number of arguments |
| 2 | invalid expression |

## pmergeme: merge-insertion sort

```
pmergeme 3 5 9 7 4
```

Each argument must be a decimal integer from 0 to 4294967295. Leading whitespace and a sign are allowed.

The command prints:

1. the sequence before sorting;
2. the sequence after sorting;
3. the processor time taken to sort a `list`;
4. the processor time taken to sort a `collections.deque`.

Times are given in milliseconds.

```python
from collections import deque
from ninekit.pmerge import jacobsthal_bounds, merge_insertion_sort, sort_in_place

merge_insertion_sort([5, 3, 9, 1])   # [1, 3, 5, 9]
d = deque([4, 2, 8])
sort_in_place(d)                     # d is now deque([2, 4, 8])
jacobsthal_bounds(6)                 # [3, 5, 6]
```

`ninekit.pmerge_cli.parse_arguments(args)` turns argument strings into integers. On failure it raises `InputError`, whose `kind` is an `ErrorKind`. The value of an `ErrorKind` is the command's exit status:

| Status | Meaning |
|--------|---------|
| 0 | success |
| 1 | empty input |
| 2 | a number is out of range |
| 3 | an argument is not a number |
| 4 | memory allocation failed |
| 5 | processor time unavailable |

## Errors

Every command prints its error messages to standard error, each starting with `Error:`.