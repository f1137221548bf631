"""Evaluator for reverse Polish expressions of single-digit operands."""

from __future__ import annotations

import math
import operator
import re
import sys
from collections.abc import Callable

_SEPARATORS = re.compile(r"[ \t\n\v\f\r]+")
_DIGITS = frozenset("0123456789")


class RPNError(Exception):
    """Raised for expressions that cannot be evaluated."""


def _divide(left: float, right: float) -> float:
    if right:
        return left / right
    if left == 0 or math.isnan(left):
        return math.nan
    return math.copysign(math.inf, left) * math.copysign(1.0, right)


_OPERATIONS: dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _divide,
}


def tokenize(expression: str) -> list[str]:
    """Split an expression into single-character tokens separated by whitespace."""
    if not expression:
        raise RPNError("Empty expression")
    tokens = [token for token in _SEPARATORS.split(expression) if token]
    for token in tokens:
        if len(token) != 1:
            raise RPNError("Operators and operands must be a single character")
    return tokens


def evaluate(expression: str) -> float:
    """Evaluate the expression, reading it from its last token backwards."""
    tokens = reversed(tokenize(expression))
    pending: list[list] = []
    for token in tokens:
        if token in _DIGITS:
            value = float(token)
        elif token in _OPERATIONS:
            pending.append([_OPERATIONS[token], None])
            continue
        else:
            raise RPNError("Unknown symbol")
        while pending and pending[-1][1] is not None:
            operation, right = pending.pop()
            value = operation(value, right)
        if not pending:
            if next(tokens, None) is not None:
                raise RPNError("Invalid expression")
            return value
        pending[-1][1] = value
    raise RPNError("Invalid expression")


def main(argv=None) -> int:
    """Evaluate the single expression given on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Error: Wrong argument count", file=sys.stderr)
        return 1
    try:
        result = evaluate(args[0])
    except RPNError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2
    print(f"{result:g}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())