"""Ladder scorer comparing a normalized query with a normalized field."""
from __future__ import annotations

from functools import lru_cache

from domain.entities import MatchTier
from domain.interfaces import FuzzyMatcher, TextNormalizer

EXACT_POINTS = 100.0
PREFIX_POINTS = 80.0
WORD_POINTS = 60.0
SUBSTRING_POINTS = 40.0


def _contains_run(tokens: tuple[str, ...], needle: tuple[str, ...]) -> bool:
    size = len(needle)
    if not size or size > len(tokens):
        return False
    return any(tokens[i : i + size] == needle for i in range(len(tokens) - size + 1))


def _windows(tokens: tuple[str, ...], size: int) -> list[str]:
    if not tokens:
        return []
    if len(tokens) <= size:
        return [" ".join(tokens)]
    return [" ".join(tokens[i : i + size]) for i in range(len(tokens) - size + 1)]


class LadderScorer:
    """Additive scoring ladder; every rung that holds contributes.

    ===========================================  ======
    field equals the query                        100
    field starts with the query                    80
    query words form a run of field words          60
    query is a substring of the field              40
    fuzzy match against a window of field words   <=24
    ===========================================  ======
    """

    def __init__(self, normalizer: TextNormalizer, fuzzy: FuzzyMatcher, cache_size: int = 16384) -> None:
        self._fuzzy = fuzzy
        self._tokens = lru_cache(maxsize=cache_size)(lambda text: tuple(normalizer.tokenize(text)))

    @property
    def fuzzy(self) -> FuzzyMatcher:
        return self._fuzzy

    def evaluate(self, query: str, field: str) -> tuple[float, MatchTier | None]:
        """Return the score of ``query`` against ``field`` and the strongest rung hit."""
        if not query or not field:
            return 0.0, None

        score = 0.0
        tiers: list[MatchTier] = []
        if field == query:
            score += EXACT_POINTS
            tiers.append(MatchTier.EXACT)
        if field.startswith(query):
            score += PREFIX_POINTS
            tiers.append(MatchTier.PREFIX)

        query_tokens = self._tokens(query)
        field_tokens = self._tokens(field)
        if _contains_run(field_tokens, query_tokens):
            score += WORD_POINTS
            tiers.append(MatchTier.WORD)
        if query in field:
            score += SUBSTRING_POINTS
            tiers.append(MatchTier.SUBSTRING)

        if query_tokens:
            needle = " ".join(query_tokens)
            candidates = _windows(field_tokens, len(query_tokens))
        else:
            needle, candidates = query, [field]
        fuzzy = max((self._fuzzy.bonus(needle, candidate) for candidate in candidates), default=0.0)
        if fuzzy > 0:
            score += fuzzy
            tiers.append(MatchTier.FUZZY)

        return score, (tiers[0] if tiers else None)

    def score(self, query: str, field: str) -> float:
        return self.evaluate(query, field)[0]

    def score_words(self, words: list[str], field: str) -> float:
        """Sum the per-word scores so partial multi-word matches still count."""
        return sum(self.score(word, field) for word in words)


__all__ = [
    "EXACT_POINTS",
    "LadderScorer",
    "PREFIX_POINTS",
    "SUBSTRING_POINTS",
    "WORD_POINTS",
]
