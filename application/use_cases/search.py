"""Use cases that run product search over the current catalog snapshot."""
from __future__ import annotations

import logging
from functools import lru_cache
from typing import Sequence

from application.services.ranking import CatalogRanker
from application.use_cases.filter_results import ResultFilters, SortOrder, apply_filters, sort_results
from domain.entities import CatalogEntry, ScoredEntry

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def _default_ranker() -> CatalogRanker:
    from infrastructure.config import ContainerConfig, build_default_container  # noqa: PLC0415

    return build_default_container(ContainerConfig.from_env()).ranker


def rank(
    query_text: str | None,
    catalog: Sequence[CatalogEntry],
    *,
    ranker: CatalogRanker | None = None,
) -> list[ScoredEntry]:
    """Rank ``catalog`` against ``query_text``; empty query or catalog gives ``[]``."""

    return (ranker or _default_ranker()).rank(query_text, catalog)


def suggest(
    query_text: str | None,
    catalog: Sequence[CatalogEntry],
    *,
    ranker: CatalogRanker | None = None,
    limit: int = 10,
) -> list[ScoredEntry]:
    """Top matches for the search-as-you-type dropdown."""

    return rank(query_text, catalog, ranker=ranker)[: max(limit, 0)]


def search_products(
    query_text: str | None,
    catalog: Sequence[CatalogEntry],
    *,
    ranker: CatalogRanker | None = None,
    filters: ResultFilters | None = None,
    sort_by: SortOrder | str = SortOrder.RELEVANCE,
    limit: int | None = None,
) -> list[ScoredEntry]:
    """Full results page: rank, then filter, then reorder and truncate."""

    ranked = rank(query_text, catalog, ranker=ranker)
    filtered = apply_filters(ranked, filters)
    ordered = sort_results(filtered, sort_by)
    if len(filtered) != len(ranked):
        logger.debug("Filters kept %d of %d ranked results.", len(filtered), len(ranked))
    return ordered if limit is None else ordered[: max(limit, 0)]


__all__ = ["rank", "search_products", "suggest"]
