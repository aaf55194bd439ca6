"""Record id matching."""

from __future__ import annotations

from people_db.query.context import MatchContext, Predicate
from people_db.query.schema import Record


def match_id(query: object, context: MatchContext) -> Predicate | None:
    """Build a predicate comparing record ids to a string query.

    Returns:
        `None` for non-string queries; otherwise a predicate that is true when the record id equals
        the query at the context's normalization level.
    """

    if not isinstance(query, str):
        return None

    fn = context.normalize
    expected = fn(query)

    def predicate(record: Record) -> bool:
        return fn(record.id) == expected

    return predicate
