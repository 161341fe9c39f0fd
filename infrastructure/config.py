"""Dependency wiring for the StoreSearch application."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Callable, Literal, Mapping, TypeVar

from application.services.catalog_snapshot import CatalogSnapshot
from application.services.ranking import DEFAULT_FIELD_WEIGHTS, CatalogRanker
from application.services.scoring import LadderScorer
from domain.entities import SearchField
from domain.interfaces import CatalogSource, FuzzyMatcher, TextNormalizer
from infrastructure.catalog.http_catalog_source import HttpCatalogConfig, HttpCatalogSource
from infrastructure.catalog.in_memory_catalog_source import InMemoryCatalogSource
from infrastructure.catalog.json_catalog_source import JsonFileCatalogSource
from infrastructure.matching.coverage_matcher import CoverageMatcher
from infrastructure.matching.levenshtein_matcher import LevenshteinMatcher
from infrastructure.text.georgian_normalizer import GeorgianLatinNormalizer


FuzzyStrategy = Literal["coverage", "levenshtein"]

ENV_PREFIX = "STORESEARCH_"


@dataclass(slots=True)
class Container:
    """Simple container bundling the concrete search stack."""

    normalizer: TextNormalizer
    fuzzy_matcher: FuzzyMatcher
    scorer: LadderScorer
    ranker: CatalogRanker
    catalog: CatalogSnapshot
    catalog_source: CatalogSource
    suggestion_limit: int = 10


_N = TypeVar("_N", int, float)


def _read_number(env: Mapping[str, str], key: str, cast: Callable[[str], _N], default: _N) -> _N:
    raw = env.get(f"{ENV_PREFIX}{key}")
    if raw is None:
        return default
    try:
        return cast(raw)
    except ValueError as exc:
        raise ValueError(f"Invalid numeric setting {ENV_PREFIX}{key}={raw!r}") from exc


@dataclass(slots=True)
class ContainerConfig:
    """Configuration for the search stack and the catalog loader."""

    fuzzy_strategy: FuzzyStrategy = "coverage"
    field_weights: Mapping[SearchField, float] = field(default_factory=lambda: dict(DEFAULT_FIELD_WEIGHTS))
    suggestion_limit: int = 10
    catalog_path: str | None = None
    catalog_url: str | None = None
    request_timeout: float = 10.0

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ContainerConfig":
        """Read ``STORESEARCH_*`` variables, falling back to defaults."""
        env = os.environ if environ is None else environ
        cfg = cls()
        cfg.fuzzy_strategy = env.get(f"{ENV_PREFIX}FUZZY_STRATEGY", cfg.fuzzy_strategy)  # type: ignore[assignment]
        cfg.catalog_path = env.get(f"{ENV_PREFIX}CATALOG_PATH") or None
        cfg.catalog_url = env.get(f"{ENV_PREFIX}CATALOG_URL") or None
        cfg.suggestion_limit = _read_number(env, "SUGGESTION_LIMIT", int, cfg.suggestion_limit)
        cfg.request_timeout = _read_number(env, "REQUEST_TIMEOUT", float, cfg.request_timeout)
        weights = dict(cfg.field_weights)
        for search_field in SearchField:
            weights[search_field] = _read_number(env, f"WEIGHT_{search_field.name}", float, weights[search_field])
        cfg.field_weights = weights
        return cfg


_FUZZY_FACTORIES: dict[FuzzyStrategy, Callable[[], FuzzyMatcher]] = {
    "coverage": CoverageMatcher,
    "levenshtein": LevenshteinMatcher,
}


def _build_catalog_source(cfg: ContainerConfig) -> CatalogSource:
    if cfg.catalog_url:
        return HttpCatalogSource(HttpCatalogConfig(base_url=cfg.catalog_url, timeout=cfg.request_timeout))
    if cfg.catalog_path:
        return JsonFileCatalogSource(cfg.catalog_path)
    return InMemoryCatalogSource()


def _validate_field_weights(weights: Mapping[SearchField, float]) -> None:
    if any(weight < 0 for weight in weights.values()):
        raise ValueError("field weights must not be negative")
    name = weights.get(SearchField.NAME, 0.0)
    brand = weights.get(SearchField.BRAND, 0.0)
    if brand > name:
        raise ValueError(f"brand weight {brand} must not exceed name weight {name}")
    for secondary in (SearchField.CATEGORY, SearchField.DESCRIPTION):
        weight = weights.get(secondary, 0.0)
        if weight > 0 and weight >= brand:
            raise ValueError(f"{secondary.value} weight {weight} must stay below brand weight {brand}")


def build_default_container(config: ContainerConfig | None = None) -> Container:
    """Instantiate the default search stack.

    Exactly one fuzzy strategy is built and shared by every call site.
    """

    cfg = config or ContainerConfig()
    try:
        fuzzy_matcher = _FUZZY_FACTORIES[cfg.fuzzy_strategy]()
    except KeyError as exc:
        raise ValueError(f"Unknown fuzzy strategy '{cfg.fuzzy_strategy}'") from exc
    if cfg.suggestion_limit < 1:
        raise ValueError("suggestion_limit must be positive")
    _validate_field_weights(cfg.field_weights)

    normalizer = GeorgianLatinNormalizer()
    scorer = LadderScorer(normalizer, fuzzy_matcher)
    ranker = CatalogRanker(normalizer, scorer, field_weights=cfg.field_weights)

    return Container(
        normalizer=normalizer,
        fuzzy_matcher=fuzzy_matcher,
        scorer=scorer,
        ranker=ranker,
        catalog=CatalogSnapshot(),
        catalog_source=_build_catalog_source(cfg),
        suggestion_limit=cfg.suggestion_limit,
    )


__all__ = ["Container", "ContainerConfig", "FuzzyStrategy", "build_default_container"]
