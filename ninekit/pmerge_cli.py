"""Command that sorts its integer arguments and reports the time taken."""

from __future__ import annotations

import re
import sys
import time
from collections import deque
from enum import IntEnum

from .pmerge import sort_in_place

_UNSIGNED_MAX = 4294967295
_LEADING_INTEGER = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)", re.ASCII)


class ErrorKind(IntEnum):
    """Failure kinds; the value is the exit status."""

    NONE = 0
    EMPTY_INPUT = 1
    NUM_OUT_OF_RANGE = 2
    IS_NOT_NUM = 3
    MEM = 4
    TIME = 5

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    ErrorKind.NONE: "",
    ErrorKind.EMPTY_INPUT: "empty input",
    ErrorKind.NUM_OUT_OF_RANGE: "one or more elements are out of range",
    ErrorKind.IS_NOT_NUM: "one or more elements are not numbers",
    ErrorKind.MEM: "memory allocations failed",
    ErrorKind.TIME: "processor time is not available",
}


class InputError(Exception):
    """Raised when the arguments cannot be turned into numbers to sort."""

    def __init__(self, kind: ErrorKind) -> None:
        super().__init__(kind.message)
        self.kind = kind


def _parse_one(text: str) -> int:
    match = _LEADING_INTEGER.match(text)
    if match is None:
        value, rest = 0, text
    else:
        value, rest = int(match.group(1)), text[match.end():]
    if value < 0 or value > _UNSIGNED_MAX:
        raise InputError(ErrorKind.NUM_OUT_OF_RANGE)
    if rest:
        raise InputError(ErrorKind.IS_NOT_NUM)
    return value


def parse_arguments(args) -> list[int]:
    """Parse decimal arguments into unsigned 32-bit integers."""
    texts = list(args)
    if not texts:
        raise InputError(ErrorKind.EMPTY_INPUT)
    return [_parse_one(text) for text in texts]


def _timed_sort(seq) -> float:
    start = time.process_time()
    sort_in_place(seq)
    return (time.process_time() - start) * 1000.0


def main(argv=None) -> int:
    """Sort the numbers given on the command line with a list and a deque."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        numbers = parse_arguments(args)
        values = list(numbers)
        queue = deque(numbers)
        print("Before: " + " ".join(map(str, values)))
        elapsed = _timed_sort(values)
        print("After:  " + " ".join(map(str, values)))
        print(f"Time to process a range of {len(values)} elements with list: {elapsed:.6f}ms")
        elapsed = _timed_sort(queue)
        print(f"Time to process a range of {len(queue)} elements with deque: {elapsed:.6f}ms")
    except InputError as exc:
        kind = exc.kind
    except MemoryError:
        kind = ErrorKind.MEM
    else:
        return int(ErrorKind.NONE)
    print(f"Error: {kind.message}", file=sys.stderr)
    return int(kind)


if __name__ == "__main__":
    raise SystemExit(main())