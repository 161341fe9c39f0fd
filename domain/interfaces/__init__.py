"""Abstract interfaces for the StoreSearch system."""
from __future__ import annotations

from abc import ABC, abstractmethod

from domain.entities import CatalogEntry


class TextNormalizer(ABC):
    """Turns raw text into its canonical comparable forms."""

    @abstractmethod
    def normalize(self, text: str | None) -> str:
        """Return the canonical Latin skeleton of the text."""

    @abstractmethod
    def variants(self, text: str | None) -> tuple[str, ...]:
        """Return every script variant the text should be compared in."""

    @abstractmethod
    def tokenize(self, text: str) -> list[str]:
        """Split normalized text into words."""


class FuzzyMatcher(ABC):
    """Scores near-matches (typos, partial words) of a query against a candidate."""

    name: str

    @abstractmethod
    def bonus(self, query: str, candidate: str) -> float:
        """Return the fuzzy contribution, 0.0 when the signal is below threshold."""


class CatalogLoadError(RuntimeError):
    """Raised when the catalog could not be fetched or parsed."""


class CatalogSource(ABC):
    """Supplies catalog rows from an external collaborator."""

    @abstractmethod
    def load(self) -> list[CatalogEntry]:
        """Return the full catalog."""


__all__ = [
    "CatalogLoadError",
    "CatalogSource",
    "FuzzyMatcher",
    "TextNormalizer",
]
