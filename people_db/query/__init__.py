"""Query matching and ordering.

The query layer turns a raw query value into a record predicate (id, birth date, or name grammar)
and provides deterministic comparators for sorting records.
"""
