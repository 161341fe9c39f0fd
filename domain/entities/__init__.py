"""Domain entities for the StoreSearch system."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping


class SearchField(str, Enum):
    """Catalog fields that take part in relevance scoring."""

    NAME = "name"
    BRAND = "brand"
    CATEGORY = "category"
    DESCRIPTION = "description"


class MatchTier(str, Enum):
    """Strongest scoring rung that fired for the whole query phrase."""

    EXACT = "exact"
    PREFIX = "prefix"
    WORD = "word"
    SUBSTRING = "substring"
    FUZZY = "fuzzy"
    PARTIAL = "partial"


def _optional_text(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value)
    return text if text.strip() else None


def _optional_price(value: Any) -> float | None:
    if value is None or value == "":
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


@dataclass(frozen=True, slots=True)
class CatalogEntry:
    """A product as seen by search. Owned by the catalog loader, never mutated."""

    id: str
    name: str
    brand: str | None = None
    category: str | None = None
    description: str | None = None
    price: float | None = None
    available: bool = True
    gender: str | None = None
    type: str | None = None

    def field_text(self, search_field: SearchField) -> str:
        """Return the raw text of a searchable field, empty when missing."""
        return getattr(self, search_field.value) or ""

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "CatalogEntry":
        """Build an entry from a data-service row."""
        available = record.get("available", record.get("in_stock", True))
        return cls(
            id=str(record.get("id", "")),
            name=str(record.get("name") or ""),
            brand=_optional_text(record.get("brand")),
            category=_optional_text(record.get("category")),
            description=_optional_text(record.get("description")),
            price=_optional_price(record.get("price")),
            available=bool(available) if available is not None else True,
            gender=_optional_text(record.get("gender")),
            type=_optional_text(record.get("type")),
        )


@dataclass(slots=True)
class Query:
    """A user query issued to the search engine."""

    text: str
    normalized: str = ""
    words: list[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.normalized


@dataclass(slots=True)
class ScoredEntry:
    """Ranked search result pairing a catalog entry with its relevance score."""

    entry: CatalogEntry
    score: float
    matched_field: SearchField | None = None
    tier: MatchTier | None = None


__all__ = [
    "CatalogEntry",
    "MatchTier",
    "Query",
    "ScoredEntry",
    "SearchField",
]
