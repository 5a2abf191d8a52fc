"""JSON file implementation of CatalogProvider.

Reads a catalog export: a JSON array of product objects shaped like
``{"$id": "1", "name": "Nasi Goreng", "price": 15000, "stock": 10}``.
"""

import json
import logging
from pathlib import Path

from menu_search.config import settings
from menu_search.entities import CatalogEntry

logger = logging.getLogger(__name__)


class JsonCatalogProvider:
    """Loads the catalog from a JSON file.

    This class satisfies the CatalogProvider protocol through structural
    typing - no explicit inheritance needed.
    """

    def __init__(self, path: str | Path) -> None:
        """Initialize the provider.

        Args:
            path: Path to the JSON catalog file.
        """
        self._path = Path(path)

    @classmethod
    def create(cls, path: str | Path | None = None) -> "JsonCatalogProvider":
        """Factory method to create JsonCatalogProvider with defaults.

        Args:
            path: Catalog file. If None, uses settings.catalog_path.

        Returns:
            Configured JsonCatalogProvider

        Raises:
            ValueError: If no path is given and CATALOG_PATH is not set
        """
        path = path or settings.catalog_path
        if not path:
            raise ValueError("No catalog path given and CATALOG_PATH is not set")
        return cls(path)

    @property
    def path(self) -> Path:
        """Get the catalog file path."""
        return self._path

    def load(self) -> list[CatalogEntry]:
        """Read and decode the catalog file.

        Returns:
            Catalog entries in file order

        Raises:
            OSError: If the file cannot be read
            ValueError: If the file is not a JSON array of objects
        """
        data = json.loads(self._path.read_text(encoding="utf-8"))
        if not isinstance(data, list):
            raise ValueError(f"Catalog file {self._path} must contain a JSON array")

        entries = []
        for index, item in enumerate(data):
            if not isinstance(item, dict):
                raise ValueError(f"Catalog item {index} in {self._path} is not an object")
            entries.append(CatalogEntry.from_mapping(item))

        logger.info("Loaded %d catalog entries from %s", len(entries), self._path)
        return entries
