"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract.
They are used for request/response validation and serialization.

Internal domain logic should use entities from the entities package.
"""

from .requests import CatalogItem, ReplaceCatalogRequest, SearchRequest
from .responses import (
    CacheStatsResponse,
    CatalogResponse,
    HealthCheckResponse,
    SearchResponse,
    SearchResultItem,
)

__all__ = [
    "SearchRequest",
    "CatalogItem",
    "ReplaceCatalogRequest",
    "SearchResultItem",
    "SearchResponse",
    "CatalogResponse",
    "CacheStatsResponse",
    "HealthCheckResponse",
]
