"""Use case for swapping in a freshly loaded catalog."""
from __future__ import annotations

from application.services.catalog_snapshot import CatalogSnapshot
from domain.entities import CatalogEntry
from domain.interfaces import CatalogSource


def refresh_catalog(snapshot: CatalogSnapshot, source: CatalogSource) -> tuple[CatalogEntry, ...]:
    """Load the catalog from ``source`` and publish it as the new snapshot."""

    return snapshot.refresh(source)


__all__ = ["refresh_catalog"]
