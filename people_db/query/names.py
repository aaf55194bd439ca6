"""Flag-driven name query grammar.

A name query is an optional flag, an optional single space, and the query text:

    $q     : first + ' ' + last | any name token | any nick | any alias
    #$q    : first name | any nick | any alias
    +$q    : any name token
    .$q    : last name
    *$q    : any birth-name token
    -$q    : roleFirst + ' ' + roleLast | roleNick + ' ' + roleLast | any role-name token | any role nick
    -#$q   : role first name | any role nick
    -+$q   : any role-name token
    -.$q   : role last name
    -$$q   : role movie

The query matches a record when the query text is one of the patterns generated for its flag.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

from people_db.query.context import MatchContext, Predicate
from people_db.query.errors import GrammarError
from people_db.query.schema import Record, Role, split_name


class NameFlag(StrEnum):
    """Field selectors recognized at the start of a name query."""

    none = ""
    first = "#"
    tokens = "+"
    last = "."
    birth = "*"
    role = "-"
    role_first = "-#"
    role_tokens = "-+"
    role_last = "-."
    role_movie = "-$"


_NAME_QUERY_RE = re.compile(r"(?:(?P<flag>-#|-\+|-\.|-\$|-|#|\+|\.|\*) ?)?(?P<text>.+)")


@dataclass(frozen=True)
class NameQuery:
    """A parsed name query."""

    flag: NameFlag
    text: str


@dataclass(frozen=True)
class _Fields:
    """Tokenized name-like fields of a record, ready for pattern generation."""

    name: list[str]
    nick: tuple[str, ...]
    alias: tuple[str, ...]
    b_name: list[str]
    role_names: list[list[str]]
    role_nicks: list[tuple[str, ...]]
    role_movies: list[str]


def parse_name_query(query: object) -> NameQuery | None:
    """Split a query into its flag and text, or return `None` if it is not a name query."""

    if not isinstance(query, str):
        return None

    match = _NAME_QUERY_RE.fullmatch(query)
    if not match:
        return None
    return NameQuery(flag=NameFlag(match.group("flag") or ""), text=match.group("text"))


def _collect_fields(record: Record, fn: Callable[[str], str]) -> _Fields:
    roles: tuple[Role, ...] = record.roles
    return _Fields(
        name=split_name(fn(record.name)),
        nick=tuple(fn(n) for n in record.nick),
        alias=tuple(fn(a) for a in record.alias),
        b_name=split_name(fn(record.b_name)),
        role_names=[split_name(fn(role.name)) for role in roles],
        role_nicks=[tuple(fn(n) for n in role.nick) for role in roles],
        role_movies=[fn(role.movie) for role in roles],
    )


def _full_name(tokens: list[str]) -> list[str]:
    return [f"{tokens[0]} {tokens[-1]}"] if len(tokens) > 1 else []


def _default_patterns(f: _Fields) -> list[str]:
    return [*_full_name(f.name), *f.name, *f.nick, *f.alias]


def _first_name_patterns(f: _Fields) -> list[str]:
    return [f.name[0], *f.nick, *f.alias]


def _name_token_patterns(f: _Fields) -> list[str]:
    return list(f.name)


def _last_name_patterns(f: _Fields) -> list[str]:
    return [f.name[-1]]


def _birth_name_patterns(f: _Fields) -> list[str]:
    return list(f.b_name)


def _role_patterns(f: _Fields) -> list[str]:
    patterns: list[str] = []
    for tokens in f.role_names:
        patterns.extend(_full_name(tokens))
    for tokens, nicks in zip(f.role_names, f.role_nicks):
        if len(tokens) > 1:
            patterns.extend(f"{nick} {tokens[-1]}" for nick in nicks)
    patterns.extend(token for tokens in f.role_names for token in tokens)
    patterns.extend(nick for nicks in f.role_nicks for nick in nicks)
    return patterns


def _role_first_name_patterns(f: _Fields) -> list[str]:
    return [
        *(tokens[0] for tokens in f.role_names),
        *(nick for nicks in f.role_nicks for nick in nicks),
    ]


def _role_token_patterns(f: _Fields) -> list[str]:
    return [token for tokens in f.role_names for token in tokens]


def _role_last_name_patterns(f: _Fields) -> list[str]:
    return [tokens[-1] for tokens in f.role_names]


def _role_movie_patterns(f: _Fields) -> list[str]:
    return list(f.role_movies)


_PATTERN_BUILDERS: dict[NameFlag, Callable[[_Fields], list[str]]] = {
    NameFlag.none: _default_patterns,
    NameFlag.first: _first_name_patterns,
    NameFlag.tokens: _name_token_patterns,
    NameFlag.last: _last_name_patterns,
    NameFlag.birth: _birth_name_patterns,
    NameFlag.role: _role_patterns,
    NameFlag.role_first: _role_first_name_patterns,
    NameFlag.role_tokens: _role_token_patterns,
    NameFlag.role_last: _role_last_name_patterns,
    NameFlag.role_movie: _role_movie_patterns,
}

if set(_PATTERN_BUILDERS) != set(NameFlag):
    raise GrammarError("every name flag needs a pattern builder")


def _identity(text: str) -> str:
    return text


def create_patterns(
        flag: NameFlag | str,
        record: Record,
        fn: Callable[[str], str] = _identity,
) -> list[str]:
    """Generate the candidate strings a name query with `flag` is compared against.

    Args:
        flag: The query flag (a `NameFlag` or its string form).
        record: The record to generate patterns for.
        fn: Normalization applied to every string field before tokenizing.

    Raises:
        GrammarError: If `flag` is not a recognized name flag.
    """

    try:
        builder = _PATTERN_BUILDERS[NameFlag(flag)]
    except ValueError as exc:
        raise GrammarError(f"unreachable grammar state for name flag {flag!r}") from exc
    return builder(_collect_fields(record, fn))


def match_name(query: object, context: MatchContext) -> Predicate | None:
    """Build a name predicate, or return `None` if `query` is not a name query."""

    parsed = parse_name_query(query)
    if parsed is None:
        return None

    fn = context.normalize
    flag = parsed.flag
    expected = fn(parsed.text)

    def predicate(record: Record) -> bool:
        return expected in create_patterns(flag, record, fn)

    return predicate
