"""Command that values the amounts of an input file at historical rates."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

from .exchange import BitcoinExchange, ExchangeError

INPUT_HEADER = "date | value"
DATABASE_NAME = "data.csv"
_SEPARATOR = " | "


def _strip_newlines(stream: Iterable[str]) -> Iterator[str]:
    for raw in stream:
        yield raw[:-1] if raw.endswith("\n") else raw


def process_lines(
    exchanger: BitcoinExchange, lines: Iterable[str], out: TextIO, err: TextIO
) -> int:
    """Value each 'date | amount' line; report bad lines to err and return their count."""
    failures = 0
    for line in lines:
        date, found, amount = line.partition(_SEPARATOR)
        if not found:
            failures += 1
            print("Error: The entry has no delimeter", file=err)
            continue
        try:
            value = exchanger.convert(amount, date)
        except ExchangeError as exc:
            failures += 1
            print(f"Error: {exc}", file=err)
            continue
        print(f"{date} => {amount} = {value:g}", file=out)
    return failures


def run(database_path, input_path, out: TextIO | None = None, err: TextIO | None = None) -> int:
    """Load the rate database, process the input file and return an exit status."""
    out = sys.stdout if out is None else out
    err = sys.stderr if err is None else err
    try:
        exchanger = BitcoinExchange.from_csv(database_path)
        with open(input_path, encoding="utf-8", errors="surrogateescape", newline="\n") as stream:
            lines = _strip_newlines(stream)
            if next(lines, None) != INPUT_HEADER:
                raise ExchangeError("Invalid header in the input database")
            process_lines(exchanger, lines, out, err)
    except ExchangeError as exc:
        print(f"Error: {exc}", file=err)
        return 3
    except OSError as exc:
        print(f"Error: {exc.strerror or exc}", file=err)
        return 4
    except MemoryError:
        print("Error: memory allocation failed", file=err)
        return 5
    return 0


def main(argv=None) -> int:
    """Value the file named on the command line using data.csv beside the program."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Error: Wrong parameters number", file=sys.stderr)
        return 2
    program = sys.argv[0] if sys.argv else ""
    database = os.path.join(os.path.dirname(program), DATABASE_NAME)
    return run(database, args[0], sys.stdout, sys.stderr)


if __name__ == "__main__":
    raise SystemExit(main())