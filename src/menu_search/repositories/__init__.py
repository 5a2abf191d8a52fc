"""Repository layer for catalog access.

The catalog itself is owned by an external system (the ordering backend).
Repositories adapt its exports to the CatalogProvider protocol so the
search session never depends on where products come from.
"""

from menu_search.protocols import CatalogProvider

from .json_catalog_provider import JsonCatalogProvider
from .memory_catalog_provider import InMemoryCatalogProvider

__all__ = [
    "CatalogProvider",
    "InMemoryCatalogProvider",
    "JsonCatalogProvider",
]
