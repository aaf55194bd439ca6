"""Person record schema (Pydantic models).

Records are read-only from the query layer's point of view. Missing name-like fields are filled with
empty values so that pattern generation never has to special-case absent keys.
"""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

_BDATE_RE = re.compile(r"\d{2}\.\d{2}\.\d{4}")


def split_name(name: str) -> list[str]:
    """Split a name into tokens on single spaces (first token = first name, last = last name)."""

    return name.split(" ")


class Role(BaseModel):
    """A part performed by a person in a work."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str = ""
    nick: tuple[str, ...] = ()
    movie: str = ""

    @field_validator("name", "movie", mode="before")
    @classmethod
    def none_as_empty_str(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("nick", mode="before")
    @classmethod
    def none_as_empty_seq(cls, value: Any) -> Any:
        return () if value is None else value


class Record(BaseModel):
    """A person entry.

    Field names follow the raw record keys via aliases (`bName`, `bDate`, `_private`); Python
    attribute names are snake_case. Unknown keys are kept but never used for matching.
    """

    model_config = ConfigDict(extra="allow", frozen=True, populate_by_name=True)

    id: str
    name: str = ""
    nick: tuple[str, ...] = ()
    alias: tuple[str, ...] = ()
    b_name: str = Field(default="", alias="bName")
    b_date: str | None = Field(default=None, alias="bDate")
    roles: tuple[Role, ...] = ()
    private: bool | None = Field(default=None, alias="_private")

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("name", "b_name", mode="before")
    @classmethod
    def none_as_empty_str(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("nick", "alias", "roles", mode="before")
    @classmethod
    def none_as_empty_seq(cls, value: Any) -> Any:
        return () if value is None else value

    @field_validator("b_date")
    @classmethod
    def validate_b_date(cls, value: str | None) -> str | None:
        """Validate the fixed-width `DD.MM.YYYY` birth date shape."""

        if value is not None and not _BDATE_RE.fullmatch(value):
            raise ValueError("bDate must be in DD.MM.YYYY form")
        return value

    @property
    def first_name(self) -> str:
        return split_name(self.name)[0]

    @property
    def last_name(self) -> str:
        return split_name(self.name)[-1]


def record_from_obj(obj: Any) -> Record:
    """Validate and parse a Record from a raw mapping (or pass a Record through)."""

    if isinstance(obj, Record):
        return obj
    return Record.model_validate(obj)
