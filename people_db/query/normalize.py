"""String normalization levels used when comparing queries against record fields.

Three levels, each a superset of the previous transform:
    - `strict`: identity.
    - `normalize`: diacritics stripped, case preserved.
    - `adjustment`: diacritics stripped, then lower-cased.
"""

from __future__ import annotations

import unicodedata
from collections.abc import Callable
from enum import StrEnum


class UnsupportedModeError(ValueError):
    """Raised when a filter mode name is not one of the recognized levels."""


class FilterMode(StrEnum):
    """Supported matching strictness levels."""

    strict = "strict"
    normalize = "normalize"
    adjustment = "adjustment"


# Latin letters with no canonical decomposition.
_DEBURRED_LETTERS: dict[int, str] = str.maketrans(
    {
        "Ð": "D", "ð": "d",
        "Đ": "D", "đ": "d",
        "Ħ": "H", "ħ": "h",
        "ı": "i",
        "Ĳ": "IJ", "ĳ": "ij",
        "ĸ": "k",
        "Ŀ": "L", "ŀ": "l",
        "Ł": "L", "ł": "l",
        "ŉ": "'n",
        "Ŋ": "N", "ŋ": "n",
        "Ø": "O", "ø": "o",
        "Œ": "Oe", "œ": "oe",
        "Þ": "Th", "þ": "th",
        "Ŧ": "T", "ŧ": "t",
        "Æ": "Ae", "æ": "ae",
        "ß": "ss",
        "ſ": "s",
    }
)


def deburr(text: str) -> str:
    """Strip diacritics from Latin letters (`"Belmondó"` -> `"Belmondo"`).

    Canonical decomposition splits accented letters into base letter + combining marks; the marks
    are dropped and the rest is recomposed. Letters that never decompose (e.g. `ø`, `ł`, `ß`) are
    mapped through a fixed table. Case is preserved.
    """

    decomposed = unicodedata.normalize("NFD", text)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return unicodedata.normalize("NFC", stripped).translate(_DEBURRED_LETTERS)


def _identity(text: str) -> str:
    return text


def _fold(text: str) -> str:
    return deburr(text).lower()


_NORMALIZERS: dict[FilterMode, Callable[[str], str]] = {
    FilterMode.strict: _identity,
    FilterMode.normalize: deburr,
    FilterMode.adjustment: _fold,
}


def normalizer_for(mode: FilterMode) -> Callable[[str], str]:
    """Return the string transform for a strictness level."""

    return _NORMALIZERS[mode]


def normalize(mode: FilterMode, text: str) -> str:
    """Normalize `text` at the given strictness level."""

    return _NORMALIZERS[mode](text)


def parse_filter_mode(name: str | FilterMode) -> FilterMode:
    """Map a mode name to a `FilterMode`.

    Raises:
        UnsupportedModeError: If `name` is not one of `strict`, `normalize`, `adjustment`.
    """

    try:
        return FilterMode(name)
    except ValueError as exc:
        raise UnsupportedModeError(f"unsupported mode: {name!r}") from exc
