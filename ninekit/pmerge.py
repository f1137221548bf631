"""Ford-Johnson merge-insertion sort."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Callable, Iterable, MutableSequence
from typing import Any, TypeVar

T = TypeVar("T")


def jacobsthal_bounds(count: int) -> list[int]:
    """Return the upper bounds of the insertion groups for `count` pending elements.

    The bounds follow the Jacobsthal-derived sequence 3, 5, 11, 21, ... and the
    last one is clipped to `count`. Fewer than two elements need no groups.
    """
    if count < 2:
        return []
    bounds: list[int] = []
    k = 2
    while not bounds or bounds[-1] < count:
        bounds.append(min(((1 << (k + 1)) + (-1) ** k) // 3, count))
        k += 1
    return bounds


def _ordered_pair(first: Any, second: Any, key: Callable[[Any], Any]) -> tuple[Any, Any]:
    """Return (larger, smaller); equal keys keep their original order reversed."""
    if key(first) > key(second):
        return first, second
    return second, first


def _ford_johnson(items: list, key: Callable[[Any], Any]) -> list:
    if len(items) < 2:
        return list(items)

    extra = items[-1:] if len(items) % 2 else []
    pairs = [
        _ordered_pair(first, second, key) for first, second in zip(items[0::2], items[1::2])
    ]
    pairs = _ford_johnson(pairs, lambda pair: key(pair[0]))

    chain = [pairs[0][1]] + [large for large, _ in pairs]
    pending = [small for _, small in pairs] + extra
    # Position in the chain of each pending element's larger partner.
    positions = list(range(1, len(pairs) + 1))

    lower = 1
    for upper in jacobsthal_bounds(len(pending)):
        for index in range(upper - 1, lower - 1, -1):
            value = pending[index]
            limit = positions[index] if index < len(positions) else len(chain)
            at = bisect_left(chain, key(value), 0, limit, key=key)
            chain.insert(at, value)
            positions = [pos + 1 if pos >= at else pos for pos in positions]
        lower = upper
    return chain


def merge_insertion_sort(values: Iterable[T]) -> list[T]:
    """Return the values in ascending order, sorted by merge insertion."""
    return _ford_johnson(list(values), lambda value: value)


def sort_in_place(seq: MutableSequence) -> None:
    """Sort a mutable sequence such as a list or a deque in place."""
    result = merge_insertion_sort(seq)
    seq.clear()
    seq.extend(result)