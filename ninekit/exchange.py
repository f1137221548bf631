"""Historical exchange rates and conversion of amounts at a given date."""

from __future__ import annotations

import math
import re
import struct
from bisect import bisect_right
from collections.abc import Iterable, Iterator, Mapping
from typing import Union

DateLike = Union[str, int]

_DATE = re.compile(r"([0-9]+)-([0-9]{2})-([0-9]{2})", re.ASCII)
_MAX_YEAR = 429496

# A C-style floating point literal, optionally preceded by C whitespace.
_NUMBER = re.compile(
    r"[ \t\n\v\f\r]*"
    r"(?P<num>[+-]?(?:"
    r"0x(?:[0-9a-f]+\.?[0-9a-f]*|\.[0-9a-f]+)(?:p[+-]?[0-9]+)?"
    r"|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?"
    r"|inf(?:inity)?"
    r"|nan(?:\([0-9a-z_]*\))?"
    r"))",
    re.IGNORECASE | re.ASCII,
)

_DATE_WORD = "date"
_RATE_WORD = "exchange_rate"
_MAX_AMOUNT = 1000.0


class ExchangeError(Exception):
    """Raised for malformed dates, amounts or rate databases."""


def _is_leap(year: int) -> bool:
    return year % 400 == 0 or (year % 100 != 0 and year % 4 == 0)


def _month_days(year: int, month: int) -> int:
    if month == 2:
        return 29 if _is_leap(year) else 28
    if month < 8:
        return 31 if month % 2 else 30
    return 30 if month % 2 else 31


def parse_date(text: str) -> int:
    """Turn a 'YYYY-MM-DD' date into the sortable integer YYYYMMDD."""
    match = _DATE.fullmatch(text)
    if match is not None:
        year, month, day = (int(part) for part in match.groups())
        if year <= _MAX_YEAR and 1 <= month <= 12 and 1 <= day <= _month_days(year, month):
            return year * 10000 + month * 100 + day
    raise ExchangeError(f"Bad date => '{text}'")


def _scan_number(text: str) -> tuple[float, str, bool]:
    """Read a leading number; return its value, the unread rest and an overflow flag."""
    match = _NUMBER.match(text)
    if match is None:
        return 0.0, text, False
    literal = match.group("num")
    rest = text[match.end():]
    bare = literal.lower().lstrip("+-")
    sign = -1.0 if literal.startswith("-") else 1.0
    if bare.startswith("nan"):
        return math.nan, rest, False
    if bare.startswith("inf"):
        return sign * math.inf, rest, False
    try:
        value = float.fromhex(literal) if bare.startswith("0x") else float(literal)
    except OverflowError:
        return sign * math.inf, rest, True
    return value, rest, math.isinf(value)


def _to_single(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def parse_amount(text: str) -> float:
    """Parse an amount in single precision; it must lie in (0, 1000]."""
    if not text:
        raise ExchangeError("The currency string is empty")
    value, rest, overflow = _scan_number(text)
    if rest:
        raise ExchangeError("The value must not have following symbols")
    if not overflow and math.isfinite(value):
        try:
            value = _to_single(value)
        except OverflowError:
            overflow = True
    if overflow:
        raise ExchangeError("The value is out of range")
    if not math.isfinite(value):
        raise ExchangeError("The value is non-finite")
    if value <= 0.0 or value > _MAX_AMOUNT:
        raise ExchangeError("The value is out of range")
    return value


def _parse_rate(text: str) -> float:
    if not text:
        raise ExchangeError("The rate string is empty")
    value, rest, overflow = _scan_number(text)
    if overflow:
        raise ExchangeError(f"The rate value is out of range => '{text}'")
    if rest:
        raise ExchangeError(f"Unrecognized symbol in the rate string => '{text}'")
    if not math.isfinite(value):
        raise ExchangeError(f"The rate value must be a finite number => '{text}'")
    if value < 0:
        raise ExchangeError(f"The rate value must be a non-negative number => '{text}'")
    return value


def _header_delimiter(header: str) -> str:
    if not header.startswith(_DATE_WORD):
        raise ExchangeError(
            "No 'date' entry in the rate database's header or something precedes it"
        )
    if not header.endswith(_RATE_WORD):
        raise ExchangeError(
            "No 'exchange_rate' entry in the rate database's header or something following it"
        )
    rate_pos = len(header) - len(_RATE_WORD)
    start = len(_DATE_WORD)
    if rate_pos == start:
        raise ExchangeError(
            "Empty delimeter between the data and the exchange_rate words in the header"
        )
    return header[start:rate_pos] if rate_pos > start else header[start:]


def _strip_newlines(stream: Iterable[str]) -> Iterator[str]:
    for raw in stream:
        yield raw[:-1] if raw.endswith("\n") else raw


def _as_date(date: DateLike) -> int:
    return parse_date(date) if isinstance(date, str) else int(date)


class BitcoinExchange:
    """A table of exchange rates keyed by date."""

    def __init__(self, rates: Mapping[DateLike, float] | None = None) -> None:
        table = {_as_date(date): float(rate) for date, rate in (rates or {}).items()}
        self._dates = sorted(table)
        self._rates = [table[date] for date in self._dates]

    @classmethod
    def from_csv(cls, path) -> "BitcoinExchange":
        """Load rates from a file whose header is 'date<delimiter>exchange_rate'."""
        with open(path, encoding="utf-8", errors="surrogateescape", newline="\n") as stream:
            lines = _strip_newlines(stream)
            header = next(lines, None)
            if header is None:
                raise ExchangeError("No header line in the rate database file")
            delimiter = _header_delimiter(header)
            rates: dict[int, float] = {}
            for line in lines:
                date_text, found, rate_text = line.partition(delimiter)
                if not found:
                    raise ExchangeError("No delimeter found in the rate database's entry")
                date = parse_date(date_text)
                if date in rates:
                    raise ExchangeError(f"The date duplicate => '{date_text}'")
                rates[date] = _parse_rate(rate_text)
        return cls(rates)

    def rate_at(self, date: DateLike) -> float:
        """Return the latest rate on or before the date, or 0 if there is none."""
        index = bisect_right(self._dates, _as_date(date))
        return self._rates[index - 1] if index else 0.0

    def convert(self, amount: str | float, date: DateLike) -> float:
        """Value an amount at a date; string amounts are validated first."""
        day = _as_date(date)
        value = parse_amount(amount) if isinstance(amount, str) else float(amount)
        return self.rate_at(day) * value