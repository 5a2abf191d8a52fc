"""Catalog provider protocol.

Defines the interface for anything that supplies the product catalog the
search runs against.

Implementations can include:
- an in-memory list (default, tests)
- a JSON file export
- a backend database or HTTP API
"""

from typing import Protocol, runtime_checkable

from menu_search.entities import CatalogEntry


@runtime_checkable
class CatalogProvider(Protocol):
    """Protocol for catalog sources.

    Example:
        ```python
        provider: CatalogProvider = JsonCatalogProvider("menu.json")
        session.replace_catalog(provider.load())
        ```
    """

    def load(self) -> list[CatalogEntry]:
        """Load the current catalog.

        Returns:
            All catalog entries, in display order
        """
        ...
