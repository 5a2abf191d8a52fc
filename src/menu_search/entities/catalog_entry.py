"""Catalog entry domain entity."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CatalogEntry:
    """A product as supplied by the catalog provider.

    The search core only reads entries; it never mutates them.

    Attributes:
        id: Opaque product identifier
        name: Product name, None when the provider sent no usable name
        price: Non-negative price
        stock: Remaining stock, None when unlimited or unknown
    """

    id: Any
    name: str | None
    price: float = 0
    stock: int | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "CatalogEntry":
        """Build an entry from a loosely shaped product record.

        Accepts either ``id`` or ``$id`` as the identifier. A missing or
        non-text ``name`` is kept as None so the engine can skip the entry
        instead of failing the whole search.

        Args:
            data: Product record, e.g. a row decoded from JSON

        Returns:
            CatalogEntry
        """
        name = data.get("name")
        return cls(
            id=data.get("id", data.get("$id")),
            name=name if isinstance(name, str) else None,
            price=data.get("price") or 0,
            stock=data.get("stock"),
        )
