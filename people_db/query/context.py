"""Matching context passed explicitly into every matcher call."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from people_db.query.normalize import FilterMode, normalizer_for
from people_db.query.schema import Record

Predicate = Callable[[Record], bool]


@dataclass(frozen=True)
class MatchContext:
    """Snapshot of the settings a matcher needs to build a predicate.

    Matchers read the context once, when the predicate is built; the predicate never sees later
    changes to the store's mode.
    """

    mode: FilterMode = FilterMode.strict

    @property
    def normalize(self) -> Callable[[str], str]:
        return normalizer_for(self.mode)


Matcher = Callable[[object, MatchContext], Predicate | None]
