"""Application composition root.

Wires settings and logging into a ready-to-query `PeopleDB`.
"""

from __future__ import annotations

from collections.abc import Iterable

from people_db.config.logging import configure_logging
from people_db.config.settings import Settings, load_settings
from people_db.db.store import PeopleDB, RawRecord


def create_db(
        settings: Settings | None = None,
        records: RawRecord | Iterable[RawRecord] | None = None,
) -> PeopleDB:
    """Create a store using the configured default filter mode.

    When `settings` is omitted they are loaded from the environment and logging is configured from
    them.
    """

    if settings is None:
        settings = load_settings()
        configure_logging(settings.log_level)
    return PeopleDB(records, filter_mode=settings.filter_mode)
