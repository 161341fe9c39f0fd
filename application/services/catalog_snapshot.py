"""Holds the catalog snapshot that search reads from."""
from __future__ import annotations

import logging
import threading
from typing import Iterable

from domain.entities import CatalogEntry
from domain.interfaces import CatalogLoadError, CatalogSource

logger = logging.getLogger(__name__)


class CatalogSnapshot:
    """Immutable catalog view, replaced by swapping the reference.

    Readers call :meth:`current` once per query and keep the returned tuple,
    so a refresh running in parallel never changes what a query sees.
    """

    def __init__(self, entries: Iterable[CatalogEntry] = ()) -> None:
        self._entries: tuple[CatalogEntry, ...] = tuple(entries)
        self._version = 0
        self._lock = threading.Lock()

    def current(self) -> tuple[CatalogEntry, ...]:
        return self._entries

    @property
    def version(self) -> int:
        return self._version

    def replace(self, entries: Iterable[CatalogEntry]) -> tuple[CatalogEntry, ...]:
        snapshot = tuple(entries)
        with self._lock:
            self._entries = snapshot
            self._version += 1
        return snapshot

    def refresh(self, source: CatalogSource) -> tuple[CatalogEntry, ...]:
        """Load a new catalog from ``source``; the old one stays on failure."""
        try:
            entries = source.load()
        except CatalogLoadError:
            logger.exception("Catalog refresh failed, keeping %d entries.", len(self._entries))
            raise
        snapshot = self.replace(entries)
        logger.info("Catalog refreshed: %d entries (version %d).", len(snapshot), self._version)
        return snapshot


__all__ = ["CatalogLoadError", "CatalogSnapshot"]
