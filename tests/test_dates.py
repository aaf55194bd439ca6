"""Tests for the partial birth-date query grammar."""

from __future__ import annotations

import pytest

from people_db.query.context import MatchContext
from people_db.query.dates import (
    DateQuery,
    DateShape,
    date_predicate,
    match_bdate,
    parse_date_query,
)
from people_db.query.errors import GrammarError
from people_db.query.schema import Record

CTX = MatchContext()


def _record(b_date: str | None) -> Record:
    return Record(id="x", name="Ann Lee", bDate=b_date)


def test_parse_shapes() -> None:
    assert parse_date_query("13.07.1990") == DateQuery(DateShape.full, day="13", month="07", year="1990")
    assert parse_date_query("5-3-1985") == DateQuery(DateShape.full, day="05", month="03", year="1985")
    assert parse_date_query("13.07") == DateQuery(DateShape.day_month, day="13", month="07")
    assert parse_date_query("5-3") == DateQuery(DateShape.day_month, day="05", month="03")
    assert parse_date_query("7") == DateQuery(DateShape.month, month="07")
    assert parse_date_query("13.") == DateQuery(DateShape.day, day="13")
    assert parse_date_query("1990") == DateQuery(DateShape.year, year="1990")


def test_numbers_are_converted_to_strings() -> None:
    assert parse_date_query(3) == DateQuery(DateShape.month, month="03")
    assert parse_date_query(1985) == DateQuery(DateShape.year, year="1985")
    assert parse_date_query(13.07) == DateQuery(DateShape.day_month, day="13", month="07")
    assert parse_date_query(12.0) == DateQuery(DateShape.month, month="12")


@pytest.mark.parametrize(
    "query",
    ["", "Ann", "5.3-1985", "13-", "123", "12345", "1.2.85", "13.07.", " 13", True, None, ["13"]],
)
def test_rejects_non_date_queries(query: object) -> None:
    assert parse_date_query(query) is None
    assert match_bdate(query, CTX) is None


def test_full_date_matches_exactly() -> None:
    predicate = match_bdate("13.07.1990", CTX)
    assert predicate is not None
    assert predicate(_record("13.07.1990"))
    assert not predicate(_record("13.07.1991"))


def test_day_month_ignores_year() -> None:
    predicate = match_bdate("13.07", CTX)
    assert predicate is not None
    assert predicate(_record("13.07.1990"))
    assert predicate(_record("13.07.2001"))
    assert not predicate(_record("13.08.1990"))


def test_day_only_needs_trailing_dot() -> None:
    predicate = match_bdate("13.", CTX)
    assert predicate is not None
    assert predicate(_record("13.01.1950"))
    assert predicate(_record("13.12.2020"))
    assert not predicate(_record("12.13.2020"))


def test_bare_number_is_a_month() -> None:
    predicate = match_bdate("5", CTX)
    assert predicate is not None
    assert predicate(_record("01.05.1970"))
    assert not predicate(_record("05.01.1970"))


def test_invalid_month_never_matches() -> None:
    predicate = match_bdate("13", CTX)
    assert predicate is not None
    assert not predicate(_record("13.07.1990"))
    assert not predicate(_record("01.12.1990"))


def test_year_only() -> None:
    predicate = match_bdate(1990, CTX)
    assert predicate is not None
    assert predicate(_record("01.01.1990"))
    assert predicate(_record("31.12.1990"))
    assert not predicate(_record("01.01.1991"))


def test_record_without_birth_date_never_matches() -> None:
    for query in ("13.07.1990", "13.07", "13.", "7", "1990"):
        predicate = match_bdate(query, CTX)
        assert predicate is not None
        assert not predicate(_record(None))


def test_unknown_shape_is_a_grammar_error() -> None:
    with pytest.raises(GrammarError):
        date_predicate(DateQuery("bogus"))
