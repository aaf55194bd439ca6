"""Partial birth-date query grammar.

Stored birth dates are fixed-width `DD.MM.YYYY` strings. A query selects any partial combination:

    D[.-]M[.-]YYYY : exact date
    D[.-]M         : day + month, any year
    M              : month only (a bare 1-2 digit number is always a month)
    D.             : day only (trailing dot)
    YYYY           : year only

D and M are 1-2 digits and are zero-padded before comparison. A repeated separator must be the same
character (`5.3-1990` is rejected).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum

from people_db.query.context import MatchContext, Predicate
from people_db.query.errors import GrammarError
from people_db.query.schema import Record

_DATE_QUERY_RE = re.compile(
    r"(?:(?P<d>\d{1,2})(?:(?P<sep>[.-])(?P<m>\d{1,2})(?:(?P=sep)(?P<y>\d{4}))?)?"
    r"|(?P<day>\d{1,2})\."
    r"|(?P<year>\d{4}))",
    flags=re.ASCII,
)


class DateShape(StrEnum):
    """Recognized partial-date query shapes."""

    full = "full"
    day_month = "day_month"
    month = "month"
    day = "day"
    year = "year"


@dataclass(frozen=True)
class DateQuery:
    """A parsed date query. Fields not selected by `shape` are `None`."""

    shape: DateShape
    day: str | None = None
    month: str | None = None
    year: str | None = None


def _pad(value: str | None) -> str | None:
    return value.zfill(2) if value else value


def parse_date_query(query: object) -> DateQuery | None:
    """Parse a birth-date query.

    Numbers are converted with `str()` first (`5` is month `05`, `1985` is year `1985`).

    Returns:
        The parsed `DateQuery`, or `None` if the input is not a date query.

    Raises:
        GrammarError: If the pattern matched but no shape accounts for the captured groups.
    """

    if isinstance(query, bool) or not isinstance(query, (str, int, float)):
        return None

    if isinstance(query, float) and query.is_integer():
        query = int(query)

    match = _DATE_QUERY_RE.fullmatch(str(query))
    if not match:
        return None

    d = _pad(match.group("d"))
    m = _pad(match.group("m"))
    y = match.group("y")
    day = _pad(match.group("day"))
    year = match.group("year")

    if d and m and y:
        return DateQuery(DateShape.full, day=d, month=m, year=y)
    if d and m:
        return DateQuery(DateShape.day_month, day=d, month=m)
    if d:
        return DateQuery(DateShape.month, month=d)
    if day:
        return DateQuery(DateShape.day, day=day)
    if year:
        return DateQuery(DateShape.year, year=year)

    raise GrammarError(f"unreachable grammar state for date query {query!r}")


def date_predicate(parsed: DateQuery) -> Predicate:
    """Build a predicate over `Record.b_date` for a parsed date query."""

    match parsed.shape:
        case DateShape.full:
            expected = f"{parsed.day}.{parsed.month}.{parsed.year}"
            return lambda record: record.b_date == expected
        case DateShape.day_month:
            prefix = f"{parsed.day}.{parsed.month}"
            return lambda record: _field(record, 0, 5) == prefix
        case DateShape.month:
            return lambda record: _field(record, 3, 5) == parsed.month
        case DateShape.day:
            return lambda record: _field(record, 0, 2) == parsed.day
        case DateShape.year:
            return lambda record: _field(record, 6, 10) == parsed.year

    raise GrammarError(f"unreachable grammar state for date shape {parsed.shape!r}")


def _field(record: Record, start: int, end: int) -> str | None:
    if record.b_date is None:
        return None
    return record.b_date[start:end]


def match_bdate(query: object, context: MatchContext) -> Predicate | None:
    """Build a birth-date predicate, or return `None` if `query` is not a date query."""

    parsed = parse_date_query(query)
    if parsed is None:
        return None
    return date_predicate(parsed)
