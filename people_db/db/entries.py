"""Chainable result view over filtered records."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from functools import cmp_to_key

from people_db.query.comparators import (
    Comparator,
    by_age,
    by_birth_date,
    by_first_name,
    by_last_name,
)
from people_db.query.schema import Record


class _SortBy:
    """Sort operations bound to an `Entries` instance."""

    def __init__(self, entries: Entries) -> None:
        self._entries = entries

    def _sorted(self, comparator: Comparator) -> Entries:
        # `sorted` is stable: equal keys keep their relative order.
        return Entries(sorted(self._entries, key=cmp_to_key(comparator)))

    def first_name(self, ascending: bool = True) -> Entries:
        return self._sorted(by_first_name(ascending))

    def last_name(self, ascending: bool = True) -> Entries:
        return self._sorted(by_last_name(ascending))

    def b_date(self, ascending: bool = True) -> Entries:
        return self._sorted(by_birth_date(ascending))

    def age(self, ascending: bool = True) -> Entries:
        return self._sorted(by_age(ascending))


class _FilterBy:
    """Visibility filters bound to an `Entries` instance."""

    def __init__(self, entries: Entries) -> None:
        self._entries = entries

    def _filtered(self, predicate: Callable[[Record], bool]) -> Entries:
        return Entries(record for record in self._entries if predicate(record))

    def private(self) -> Entries:
        return self._filtered(lambda record: record.private is True)

    def public(self) -> Entries:
        return self._filtered(lambda record: record.private is False)


class Entries(list[Record]):
    """A list of records with chainable `sort_by` and `filter_by` operations.

    Every operation returns a new `Entries`; the receiver is left untouched:

        db.filter("#Jean").filter_by.public().sort_by.age(ascending=False)
    """

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Entries(super().__getitem__(index))
        return super().__getitem__(index)

    def __add__(self, other: Iterable[Record]) -> Entries:
        return Entries([*self, *other])

    def __mul__(self, count: int) -> Entries:
        return Entries(super().__mul__(count))

    __rmul__ = __mul__

    @property
    def sort_by(self) -> _SortBy:
        return _SortBy(self)

    @property
    def filter_by(self) -> _FilterBy:
        return _FilterBy(self)

    def ids(self) -> list[str]:
        return [record.id for record in self]
