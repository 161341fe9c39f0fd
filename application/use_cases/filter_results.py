"""Post-rank predicate filters and sort orders used by the results page."""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Sequence

from domain.entities import CatalogEntry, ScoredEntry

# Georgian facet labels shown in the UI and the catalog values they stand for.
GENDER_ALIASES: dict[str, frozenset[str]] = {
    "მამრობითი": frozenset({"male", "men"}),
    "მდედრობითი": frozenset({"female", "women"}),
    "უნისექს": frozenset({"unisex"}),
}

TYPE_ALIASES: dict[str, frozenset[str]] = {
    "სავარჯიშო": frozenset({"running"}),
    "ფეხბურთი": frozenset({"football"}),
    "ყოველდღიური": frozenset({"everyday"}),
}


class SortOrder(str, Enum):
    RELEVANCE = "relevance"
    PRICE_LOW = "price-low"
    PRICE_HIGH = "price-high"
    NAME = "name"
    BRAND = "brand"


@dataclass(slots=True)
class ResultFilters:
    """Facet selection; empty criteria let everything through."""

    brands: list[str] = field(default_factory=list)
    genders: list[str] = field(default_factory=list)
    types: list[str] = field(default_factory=list)
    price_min: float | None = None
    price_max: float | None = None

    @property
    def is_empty(self) -> bool:
        return not (self.brands or self.genders or self.types) and self.price_min is None and self.price_max is None


def _facet_matches(value: str | None, selected: Iterable[str], aliases: dict[str, frozenset[str]]) -> bool:
    actual = (value or "").lower()
    for option in selected:
        wanted = option.lower()
        if actual == wanted or actual in aliases.get(wanted, frozenset()):
            return True
    return False


def _price(entry: CatalogEntry) -> float:
    return entry.price if entry.price is not None else 0.0


def matches_filters(entry: CatalogEntry, filters: ResultFilters) -> bool:
    if filters.brands and entry.brand not in filters.brands:
        return False
    if filters.genders and not _facet_matches(entry.gender, filters.genders, GENDER_ALIASES):
        return False
    if filters.types and not _facet_matches(entry.type, filters.types, TYPE_ALIASES):
        return False
    price = _price(entry)
    if filters.price_min is not None and price < filters.price_min:
        return False
    if filters.price_max is not None and price > filters.price_max:
        return False
    return True


def apply_filters(results: Sequence[ScoredEntry], filters: ResultFilters | None) -> list[ScoredEntry]:
    if filters is None or filters.is_empty:
        return list(results)
    return [result for result in results if matches_filters(result.entry, filters)]


def sort_results(results: Sequence[ScoredEntry], order: SortOrder | str = SortOrder.RELEVANCE) -> list[ScoredEntry]:
    """Reorder ranked results; relevance keeps the ranker's order."""
    order = SortOrder(order)
    items = list(results)
    if order is SortOrder.PRICE_LOW:
        items.sort(key=lambda result: _price(result.entry))
    elif order is SortOrder.PRICE_HIGH:
        items.sort(key=lambda result: _price(result.entry), reverse=True)
    elif order is SortOrder.NAME:
        items.sort(key=lambda result: result.entry.name.casefold())
    elif order is SortOrder.BRAND:
        items.sort(key=lambda result: (result.entry.brand or "").casefold())
    return items


def filter_options(catalog: Iterable[CatalogEntry]) -> dict[str, dict[str, int]]:
    """Count how many entries carry each brand, gender and type."""
    brands: Counter[str] = Counter()
    genders: Counter[str] = Counter()
    types: Counter[str] = Counter()
    for entry in catalog:
        if entry.brand:
            brands[entry.brand] += 1
        if entry.gender:
            genders[entry.gender] += 1
        if entry.type:
            types[entry.type] += 1
    return {"brands": dict(brands), "genders": dict(genders), "types": dict(types)}


__all__ = [
    "GENDER_ALIASES",
    "ResultFilters",
    "SortOrder",
    "TYPE_ALIASES",
    "apply_filters",
    "filter_options",
    "matches_filters",
    "sort_results",
]
