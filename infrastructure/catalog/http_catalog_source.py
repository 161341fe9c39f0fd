"""Catalog source fetching products from the storefront REST API."""
from __future__ import annotations

import logging
from dataclasses import dataclass

import requests

from domain.entities import CatalogEntry
from domain.interfaces import CatalogLoadError, CatalogSource
from infrastructure.catalog.json_catalog_source import parse_records

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class HttpCatalogConfig:
    base_url: str = "http://localhost:5000"
    products_path: str = "/api/products"
    timeout: float = 10.0


class HttpCatalogSource(CatalogSource):
    """GET the full product list from the data service."""

    def __init__(self, config: HttpCatalogConfig, session: requests.Session | None = None) -> None:
        self._config = config
        self._session = session or requests.Session()

    @property
    def url(self) -> str:
        return f"{self._config.base_url.rstrip('/')}{self._config.products_path}"

    def load(self) -> list[CatalogEntry]:
        try:
            response = self._session.get(self.url, timeout=self._config.timeout)
            response.raise_for_status()
            payload = response.json()
        except (requests.RequestException, ValueError) as exc:
            raise CatalogLoadError(f"Cannot fetch catalog from {self.url}") from exc
        entries = parse_records(payload)
        logger.info("Fetched %d catalog entries from %s.", len(entries), self.url)
        return entries


__all__ = ["HttpCatalogConfig", "HttpCatalogSource"]
