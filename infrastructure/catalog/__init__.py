from infrastructure.catalog.http_catalog_source import HttpCatalogConfig, HttpCatalogSource
from infrastructure.catalog.in_memory_catalog_source import InMemoryCatalogSource
from infrastructure.catalog.json_catalog_source import JsonFileCatalogSource, parse_records

__all__ = [
    "HttpCatalogConfig",
    "HttpCatalogSource",
    "InMemoryCatalogSource",
    "JsonFileCatalogSource",
    "parse_records",
]
