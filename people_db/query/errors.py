"""Errors shared by the query grammars."""

from __future__ import annotations


class GrammarError(RuntimeError):
    """Raised when a grammar reaches a state it has no handler for (a programming error)."""
