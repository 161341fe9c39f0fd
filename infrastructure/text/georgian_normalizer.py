"""Normalizer that folds case, diacritics and Georgian/Latin script differences."""
from __future__ import annotations

import re

from domain.interfaces import TextNormalizer
from infrastructure.text.transliteration import (
    COMBINING_MARKS,
    GEORGIAN_TO_LATIN,
    LATIN_DIACRITICS,
    LATIN_TO_GEORGIAN,
)

_WHITESPACE_RE = re.compile(r"\s+")
_TOKEN_RE = re.compile(r"[^\W_]+")

_DIACRITICS_TABLE = str.maketrans(
    {**LATIN_DIACRITICS, **{chr(code): None for code in COMBINING_MARKS}}
)
_GEORGIAN_TABLE = str.maketrans(GEORGIAN_TO_LATIN)
_LONGEST_SPELLING = max(len(spelling) for spelling in LATIN_TO_GEORGIAN)


def normalize(text: str | None) -> str:
    """Return the canonical Latin skeleton of ``text``.

    Lowercases, trims, collapses whitespace, strips Latin diacritics and
    transliterates Georgian letters. Characters outside the tables are kept
    as they are, so the function never fails on odd input.
    """
    if not text:
        return ""
    # Whitespace last: dropped combining marks can leave adjacent spaces.
    folded = str(text).lower().translate(_DIACRITICS_TABLE).translate(_GEORGIAN_TABLE)
    return _WHITESPACE_RE.sub(" ", folded).strip()


def to_georgian(latin: str) -> str:
    """Spell a Latin skeleton in Georgian letters, longest spelling first."""
    out: list[str] = []
    index = 0
    length = len(latin)
    while index < length:
        for size in range(_LONGEST_SPELLING, 0, -1):
            chunk = latin[index : index + size]
            letter = LATIN_TO_GEORGIAN.get(chunk) if len(chunk) == size else None
            if letter is not None:
                out.append(letter)
                index += size
                break
        else:
            out.append(latin[index])
            index += 1
    return "".join(out)


def tokenize(text: str) -> list[str]:
    """Split text on anything that is not a letter or a digit."""
    return _TOKEN_RE.findall(text)


class GeorgianLatinNormalizer(TextNormalizer):
    """Compare text in a Latin skeleton and in its Georgian spelling."""

    def normalize(self, text: str | None) -> str:
        return normalize(text)

    def variants(self, text: str | None) -> tuple[str, ...]:
        latin = normalize(text)
        if not latin:
            return ()
        georgian = to_georgian(latin)
        if georgian == latin:
            return (latin,)
        return (latin, georgian)

    def tokenize(self, text: str) -> list[str]:
        return tokenize(text)


__all__ = ["GeorgianLatinNormalizer", "normalize", "to_georgian", "tokenize"]
