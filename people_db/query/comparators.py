"""Deterministic record comparators.

Every factory takes `ascending` and returns a three-way comparator (`-1`, `0`, `1`) suitable for
`functools.cmp_to_key`. Descending order is the ascending result multiplied by `-1`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from people_db.query.schema import Record

Comparator = Callable[[Record, Record], int]


def _cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def _date_parts(record: Record) -> tuple[int, int, int]:
    """Return `(day, month, year)`; records without a birth date sort as the smallest date."""

    if record.b_date is None:
        return 0, 0, 0
    day, month, year = (int(part) for part in record.b_date.split("."))
    return day, month, year


def _comparator(key: Callable[[Record], Any], ascending: bool) -> Comparator:
    sign = 1 if ascending else -1

    def compare(a: Record, b: Record) -> int:
        return sign * _cmp(key(a), key(b))

    return compare


def by_first_name(ascending: bool = True) -> Comparator:
    return _comparator(lambda record: record.first_name, ascending)


def by_last_name(ascending: bool = True) -> Comparator:
    return _comparator(lambda record: record.last_name, ascending)


def _month_day(record: Record) -> tuple[int, int]:
    day, month, _ = _date_parts(record)
    return month, day


def by_birth_date(ascending: bool = True) -> Comparator:
    """Order by birthday within the year (month, then day); the year is ignored."""

    return _comparator(_month_day, ascending)


def _birth_order(record: Record) -> tuple[int, int, int]:
    day, month, year = _date_parts(record)
    return year, month, day


def by_age(ascending: bool = True) -> Comparator:
    """Order by age.

    Ascending age runs from the oldest person to the youngest, i.e. earliest full birth date first;
    `ascending=False` puts the youngest first.
    """

    return _comparator(_birth_order, ascending)
