"""Catalog source serving a fixed list, for demos and tests."""
from __future__ import annotations

from typing import Iterable

from domain.entities import CatalogEntry
from domain.interfaces import CatalogSource


class InMemoryCatalogSource(CatalogSource):
    def __init__(self, entries: Iterable[CatalogEntry] = ()) -> None:
        self._entries = list(entries)

    def load(self) -> list[CatalogEntry]:
        return list(self._entries)


__all__ = ["InMemoryCatalogSource"]
