"""Tests for the person record schema."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from people_db.query.schema import Record, Role, record_from_obj, split_name


def test_defaults_fill_missing_fields() -> None:
    record = Record.model_validate({"id": "1"})
    assert record.name == ""
    assert record.nick == ()
    assert record.alias == ()
    assert record.b_name == ""
    assert record.b_date is None
    assert record.roles == ()
    assert record.private is None


def test_null_fields_are_treated_as_missing() -> None:
    record = Record.model_validate(
        {"id": "1", "name": None, "nick": None, "alias": None, "bName": None, "roles": [{"name": None}]}
    )
    assert record.name == ""
    assert record.nick == ()
    assert len(record.roles) == 1
    assert record.roles[0].name == ""
    assert isinstance(record.roles[0], Role)


def test_raw_keys_map_to_attributes() -> None:
    record = Record.model_validate(
        {"id": "1", "name": "Ann Lee", "bName": "Ann Smith", "bDate": "05.03.1985", "_private": True}
    )
    assert record.b_name == "Ann Smith"
    assert record.b_date == "05.03.1985"
    assert record.private is True
    assert record.first_name == "Ann"
    assert record.last_name == "Lee"


def test_extra_keys_are_kept() -> None:
    record = Record.model_validate({"id": "1", "height": 170})
    assert record.model_extra == {"height": 170}


@pytest.mark.parametrize("b_date", ["5.3.1985", "05-03-1985", "1985-03-05", "05.03.85"])
def test_b_date_must_be_fixed_width(b_date: str) -> None:
    with pytest.raises(ValidationError):
        Record.model_validate({"id": "1", "bDate": b_date})


def test_records_are_immutable() -> None:
    record = Record(id="1", name="Ann Lee")
    with pytest.raises(ValidationError):
        record.name = "Bob"


def test_record_from_obj_passes_records_through() -> None:
    record = Record(id="1")
    assert record_from_obj(record) is record
    assert record_from_obj({"id": "1"}) == record


def test_split_name_keeps_empty_tokens() -> None:
    assert split_name("Jean  Paul") == ["Jean", "", "Paul"]
    assert split_name("") == [""]
