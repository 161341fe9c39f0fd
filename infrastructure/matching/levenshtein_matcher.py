"""Fuzzy matcher based on normalized Levenshtein similarity."""
from __future__ import annotations

from rapidfuzz.distance import Levenshtein, Prefix

from domain.interfaces import FuzzyMatcher


class LevenshteinMatcher(FuzzyMatcher):
    """Reward candidates within a bounded edit distance of the query.

    ``similarity = 1 - distance / max(len(query), len(candidate))``. The run
    component counts the shared prefix, since typos tend to sit late in a word.
    """

    name = "levenshtein"

    def __init__(
        self,
        min_length: int = 3,
        threshold: float = 0.7,
        weight: float = 15.0,
        run_points: float = 3.0,
        max_run: int = 3,
    ) -> None:
        self.min_length = min_length
        self.threshold = threshold
        self.weight = weight
        self.run_points = run_points
        self.max_run = max_run

    def bonus(self, query: str, candidate: str) -> float:
        if len(query) < self.min_length or not candidate:
            return 0.0
        similarity = Levenshtein.normalized_similarity(query, candidate)
        if similarity <= self.threshold:
            return 0.0
        shared = Prefix.similarity(query, candidate)
        return similarity * self.weight + min(shared, self.max_run) * self.run_points


__all__ = ["LevenshteinMatcher"]
