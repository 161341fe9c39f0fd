"""Ranks catalog entries against a free-text query."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Mapping, Sequence

from application.services.scoring import LadderScorer
from domain.entities import CatalogEntry, MatchTier, Query, ScoredEntry, SearchField
from domain.interfaces import TextNormalizer

logger = logging.getLogger(__name__)

DEFAULT_FIELD_WEIGHTS: dict[SearchField, float] = {
    SearchField.NAME: 1.0,
    SearchField.BRAND: 0.9,
    SearchField.CATEGORY: 0.5,
    SearchField.DESCRIPTION: 0.5,
}


@dataclass(frozen=True, slots=True)
class _PreparedQuery:
    query: Query
    phrase: tuple[str, ...]
    words: tuple[tuple[str, ...], ...]


class CatalogRanker:
    """Score every entry across its searchable fields and sort by relevance.

    The entry score is the best weighted field score. A field score is the
    phrase score plus, for multi-word queries, the sum of per-word scores;
    each piece takes its best value over all Latin/Georgian variant pairs.
    """

    def __init__(
        self,
        normalizer: TextNormalizer,
        scorer: LadderScorer,
        field_weights: Mapping[SearchField, float] | None = None,
        cache_size: int = 16384,
    ) -> None:
        self._normalizer = normalizer
        self._scorer = scorer
        weights = dict(field_weights or DEFAULT_FIELD_WEIGHTS)
        self._fields = sorted(
            (field for field, weight in weights.items() if weight > 0),
            key=lambda field: weights[field],
            reverse=True,
        )
        self._weights = weights
        self._variants = lru_cache(maxsize=cache_size)(normalizer.variants)

    @property
    def scorer(self) -> LadderScorer:
        return self._scorer

    @property
    def field_weights(self) -> dict[SearchField, float]:
        return dict(self._weights)

    def build_query(self, text: str | None) -> Query:
        normalized = self._normalizer.normalize(text)
        return Query(
            text=text or "",
            normalized=normalized,
            words=self._normalizer.tokenize(normalized),
        )

    def _prepare(self, query: Query) -> _PreparedQuery:
        words = query.words if len(query.words) > 1 else []
        return _PreparedQuery(
            query=query,
            phrase=self._normalizer.variants(query.normalized),
            words=tuple(self._normalizer.variants(word) for word in words),
        )

    def _best_pair(self, queries: tuple[str, ...], fields: tuple[str, ...]) -> tuple[float, MatchTier | None]:
        best: tuple[float, MatchTier | None] = (0.0, None)
        for query_variant in queries:
            for field_variant in fields:
                result = self._scorer.evaluate(query_variant, field_variant)
                if result[0] > best[0]:
                    best = result
        return best

    def _field_score(self, prepared: _PreparedQuery, text: str) -> tuple[float, MatchTier | None]:
        field_variants = self._variants(text)
        if not field_variants:
            return 0.0, None
        score, tier = self._best_pair(prepared.phrase, field_variants)
        words_score = sum(self._best_pair(variants, field_variants)[0] for variants in prepared.words)
        if words_score > 0 and tier is None:
            tier = MatchTier.PARTIAL
        return score + words_score, tier

    def score_entry(self, query: Query, entry: CatalogEntry) -> ScoredEntry:
        """Score a single entry; a zero score means it is excluded."""
        return self._score_prepared(self._prepare(query), entry)

    def _score_prepared(self, prepared: _PreparedQuery, entry: CatalogEntry) -> ScoredEntry:
        best = ScoredEntry(entry=entry, score=0.0)
        for field in self._fields:
            text = entry.field_text(field)
            if not text:
                continue
            raw, tier = self._field_score(prepared, text)
            weighted = raw * self._weights[field]
            if weighted > best.score:
                best = ScoredEntry(entry=entry, score=weighted, matched_field=field, tier=tier)
        return best

    def rank(self, query_text: str | None, catalog: Sequence[CatalogEntry]) -> list[ScoredEntry]:
        """Return entries scoring above zero, best first, catalog order on ties."""
        if not query_text or not query_text.strip() or not catalog:
            return []
        query = self.build_query(query_text)
        if query.is_empty:
            return []

        prepared = self._prepare(query)
        results = [scored for scored in (self._score_prepared(prepared, entry) for entry in catalog) if scored.score > 0]
        results.sort(key=lambda scored: scored.score, reverse=True)
        logger.debug("Query %r matched %d of %d entries.", query.normalized, len(results), len(catalog))
        return results


__all__ = ["CatalogRanker", "DEFAULT_FIELD_WEIGHTS"]
