"""Default matcher registry.

A raw query is self-describing: the store asks each matcher in order. A matcher that does not
recognize the query returns `None`; the first predicate that selects any record wins, so an id hit
on `"1985"` shadows a year match on the same query.
"""

from __future__ import annotations

from people_db.query.context import Matcher
from people_db.query.dates import match_bdate
from people_db.query.ids import match_id
from people_db.query.names import match_name

DEFAULT_MATCHERS: tuple[tuple[str, Matcher], ...] = (
    ("id", match_id),
    ("bdate", match_bdate),
    ("name", match_name),
)
