"""In-memory implementation of CatalogProvider."""

from collections.abc import Iterable, Mapping
from typing import Any

from menu_search.entities import CatalogEntry


class InMemoryCatalogProvider:
    """Serves a fixed list of products.

    Accepts CatalogEntry objects or plain product mappings.
    """

    def __init__(self, items: Iterable[CatalogEntry | Mapping[str, Any]] = ()) -> None:
        self._entries = [
            item if isinstance(item, CatalogEntry) else CatalogEntry.from_mapping(item)
            for item in items
        ]

    def load(self) -> list[CatalogEntry]:
        """Return a copy of the stored entries."""
        return list(self._entries)
