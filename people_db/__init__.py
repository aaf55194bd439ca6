"""In-memory people database with a small query language.

Records are matched by id, by partial birth date, or by a flag-driven name grammar, under one of
three string-normalization strictness levels. Results can be chained through `sort_by` and
`filter_by` helpers.
"""
