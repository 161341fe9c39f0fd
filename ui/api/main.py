"""FastAPI layer that exposes product search over the catalog snapshot."""
from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException, Query as FastAPIQuery
from pydantic import BaseModel

from application.use_cases.filter_results import ResultFilters, SortOrder, filter_options
from application.use_cases.refresh_catalog import refresh_catalog
from application.use_cases.search import search_products, suggest
from domain.entities import ScoredEntry
from domain.interfaces import CatalogLoadError
from infrastructure.config import Container, ContainerConfig, build_default_container
from ui.logging_utils import setup_logging

logger = logging.getLogger(__name__)


class ProductHit(BaseModel):
    id: str
    name: str
    brand: str | None = None
    category: str | None = None
    price: float | None = None
    available: bool = True
    score: float
    matched_field: str | None = None
    match_tier: str | None = None


class SearchResponse(BaseModel):
    query: str
    total: int
    results: list[ProductHit]


class FilterOption(BaseModel):
    name: str
    count: int
    category: str


class FilterOptionsResponse(BaseModel):
    success: bool = True
    data: list[FilterOption]


class RefreshResponse(BaseModel):
    entries: int
    version: int


class HealthResponse(BaseModel):
    status: str
    catalog_entries: int
    fuzzy_strategy: str


def _to_hit(result: ScoredEntry) -> ProductHit:
    entry = result.entry
    return ProductHit(
        id=entry.id,
        name=entry.name,
        brand=entry.brand,
        category=entry.category,
        price=entry.price,
        available=entry.available,
        score=round(result.score, 3),
        matched_field=result.matched_field.value if result.matched_field else None,
        match_tier=result.tier.value if result.tier else None,
    )


def _split(values: str | None) -> list[str]:
    return [value.strip() for value in (values or "").split(",") if value.strip()]


def create_app(container: Container | None = None) -> FastAPI:
    container = container or build_default_container(ContainerConfig.from_env())
    app = FastAPI(title="StoreSearch API")

    try:
        refresh_catalog(container.catalog, container.catalog_source)
    except CatalogLoadError:
        logger.warning("Starting with an empty catalog.")

    @app.get("/health", response_model=HealthResponse)
    def health_endpoint() -> HealthResponse:
        return HealthResponse(
            status="ok",
            catalog_entries=len(container.catalog.current()),
            fuzzy_strategy=container.fuzzy_matcher.name,
        )

    @app.get("/suggest", response_model=SearchResponse)
    def suggest_endpoint(q: str = FastAPIQuery("", description="Text typed so far")) -> SearchResponse:
        results = suggest(q, container.catalog.current(), ranker=container.ranker, limit=container.suggestion_limit)
        return SearchResponse(query=q, total=len(results), results=[_to_hit(result) for result in results])

    @app.get("/search", response_model=SearchResponse)
    def search_endpoint(
        q: str = FastAPIQuery("", description="User query"),
        brands: str | None = FastAPIQuery(None, description="Comma separated brands"),
        genders: str | None = FastAPIQuery(None, description="Comma separated genders"),
        types: str | None = FastAPIQuery(None, description="Comma separated product types"),
        price_min: float | None = None,
        price_max: float | None = None,
        sort_by: SortOrder = SortOrder.RELEVANCE,
        limit: int = FastAPIQuery(50, ge=1, le=500),
    ) -> SearchResponse:
        filters = ResultFilters(
            brands=_split(brands),
            genders=_split(genders),
            types=_split(types),
            price_min=price_min,
            price_max=price_max,
        )
        results = search_products(
            q,
            container.catalog.current(),
            ranker=container.ranker,
            filters=filters,
            sort_by=sort_by,
        )
        return SearchResponse(query=q, total=len(results), results=[_to_hit(result) for result in results[:limit]])

    @app.get("/filters/options", response_model=FilterOptionsResponse)
    def filter_options_endpoint() -> FilterOptionsResponse:
        options = filter_options(container.catalog.current())
        data = [
            FilterOption(name=name, count=count, category=category)
            for category in ("genders", "types", "brands")
            for name, count in options[category].items()
        ]
        return FilterOptionsResponse(data=data)

    @app.post("/catalog/refresh", response_model=RefreshResponse)
    def refresh_endpoint() -> RefreshResponse:
        try:
            snapshot = refresh_catalog(container.catalog, container.catalog_source)
        except CatalogLoadError as exc:
            raise HTTPException(status_code=502, detail=str(exc)) from exc
        return RefreshResponse(entries=len(snapshot), version=container.catalog.version)

    return app


setup_logging()
app = create_app()
