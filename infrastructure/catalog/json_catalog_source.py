"""Catalog source reading product rows from a JSON file."""
from __future__ import annotations

import json
import logging
from pathlib import Path

from domain.entities import CatalogEntry
from domain.interfaces import CatalogLoadError, CatalogSource

logger = logging.getLogger(__name__)


class JsonFileCatalogSource(CatalogSource):
    """Load a list of product records (or ``{"data": [...]}``) from disk."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load(self) -> list[CatalogEntry]:
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise CatalogLoadError(f"Cannot read catalog from {self.path}") from exc
        entries = parse_records(payload)
        logger.info("Loaded %d catalog entries from %s.", len(entries), self.path)
        return entries


def parse_records(payload: object) -> list[CatalogEntry]:
    """Turn a decoded data-service payload into catalog entries."""
    if isinstance(payload, dict):
        payload = payload.get("data", payload.get("products"))
    if not isinstance(payload, list):
        raise CatalogLoadError("Catalog payload must be a list of product records.")
    return [CatalogEntry.from_record(record) for record in payload if isinstance(record, dict)]


__all__ = ["JsonFileCatalogSource", "parse_records"]
