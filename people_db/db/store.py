"""In-memory people store with query-driven filtering."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from pydantic import ValidationError

from people_db.db.entries import Entries
from people_db.query.context import Matcher, MatchContext, Predicate
from people_db.query.matchers import DEFAULT_MATCHERS
from people_db.query.normalize import FilterMode, parse_filter_mode
from people_db.query.schema import Record, record_from_obj

logger = logging.getLogger(__name__)


class StoreError(ValueError):
    """Base class for record store errors."""


class InvalidRecordError(StoreError):
    """Raised when a raw record does not have the shape required for matching."""


class DuplicateRecordError(StoreError):
    """Raised when a record id is already present in the store."""


RawRecord = Mapping[str, Any] | Record


class PeopleDB:
    """An insertion-ordered collection of person records keyed by id.

    Queries passed to `filter` are self-describing: each registered matcher is asked in order whether
    it recognizes the query. The filter mode is captured once per `filter` call, so predicates built
    for that call never observe a later mode change.
    """

    def __init__(
            self,
            records: RawRecord | Iterable[RawRecord] | None = None,
            *,
            filter_mode: FilterMode | str = FilterMode.strict,
            matchers: Iterable[tuple[str, Matcher]] = DEFAULT_MATCHERS,
    ) -> None:
        self._records: dict[str, Record] = {}
        self._filter_mode = parse_filter_mode(filter_mode)
        self._matchers: tuple[tuple[str, Matcher], ...] = tuple(matchers)

        if records is None:
            return
        if isinstance(records, (Mapping, Record)):
            records = [records]
        for record in records:
            self.add(record)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records.values())

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._records

    @property
    def filter_mode(self) -> str:
        return self._filter_mode.value

    @filter_mode.setter
    def filter_mode(self, mode: str) -> None:
        """Set the matching strictness by name.

        Raises:
            UnsupportedModeError: If `mode` is not a recognized name; the current mode is kept.
        """

        self._filter_mode = parse_filter_mode(mode)
        logger.info("filter mode changed mode=%s", self._filter_mode)

    def add(self, record: RawRecord) -> Record:
        """Validate and insert a record.

        Raises:
            InvalidRecordError: If the record does not validate against `Record`.
            DuplicateRecordError: If a record with the same id is already stored.
        """

        try:
            parsed = record_from_obj(record)
        except ValidationError as exc:
            raise InvalidRecordError(f"invalid record: {exc}") from exc

        if parsed.id in self._records:
            raise DuplicateRecordError(f"duplicate record id: {parsed.id!r}")

        self._records[parsed.id] = parsed
        return parsed

    def get(self, record_id: str) -> Record | None:
        return self._records.get(record_id)

    def all(self) -> Entries:
        return Entries(self._records.values())

    def match_context(self) -> MatchContext:
        return MatchContext(mode=self._filter_mode)

    def predicates(
            self,
            query: object,
            context: MatchContext | None = None,
    ) -> Iterator[tuple[str, Predicate]]:
        """Yield `(matcher_name, predicate)` for every matcher that recognizes `query`, in order."""

        ctx = context or self.match_context()
        for name, matcher in self._matchers:
            predicate = matcher(query, ctx)
            if predicate is not None:
                yield name, predicate

    def filter(self, query: object) -> Entries:
        """Return the records selected by the first recognizing matcher that selects anything.

        A query no matcher recognizes yields an empty result.
        """

        accepted = False
        for name, predicate in self.predicates(query, self.match_context()):
            accepted = True
            selected = Entries(record for record in self if predicate(record))
            if selected:
                logger.debug("filter matcher=%s query=%r matched=%d", name, query, len(selected))
                return selected

        if not accepted:
            logger.info("no matcher accepted query=%r", query)
        return Entries()
