"""Fuzzy matcher based on in-order character coverage."""
from __future__ import annotations

from domain.interfaces import FuzzyMatcher


class CoverageMatcher(FuzzyMatcher):
    """Reward candidates that contain most query characters in order.

    The query is walked left to right; each character is looked up in the
    candidate after the position of the previous hit. Misses are skipped
    without moving the cursor. ``coverage = hits / len(query)`` must exceed
    ``threshold`` for any bonus to apply; the bonus is ``coverage * weight``
    plus ``run_points`` for every character of the longest stretch of hits at
    adjacent candidate positions, capped at ``max_run``.
    """

    name = "coverage"

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

    def coverage(self, query: str, candidate: str) -> tuple[float, int]:
        """Return ``(coverage, longest_run)`` of ``query`` inside ``candidate``."""
        if not query or not candidate:
            return 0.0, 0
        hits = 0
        cursor = 0
        previous = -2
        run = 0
        longest = 0
        for char in query:
            index = candidate.find(char, cursor)
            if index == -1:
                run = 0
                continue
            hits += 1
            run = run + 1 if index == previous + 1 else 1
            longest = max(longest, run)
            previous = index
            cursor = index + 1
        return hits / len(query), longest

    def bonus(self, query: str, candidate: str) -> float:
        if len(query) < self.min_length:
            return 0.0
        coverage, longest = self.coverage(query, candidate)
        if coverage <= self.threshold:
            return 0.0
        return coverage * self.weight + min(longest, self.max_run) * self.run_points


__all__ = ["CoverageMatcher"]
