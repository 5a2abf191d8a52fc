"""Response DTOs for API endpoints."""

from pydantic import BaseModel, Field


class SearchResultItem(BaseModel):
    """Single ranked match (in results array)."""

    id: str = Field(..., description="Product identifier")
    name: str = Field(..., description="Product name")
    price: float = Field(..., description="Product price as stored in the catalog")
    stock: int | None = Field(None, description="Remaining stock, null when unlimited")
    distance: int = Field(..., description="Levenshtein distance to the query", ge=0)
    max_distance: int = Field(..., description="Largest distance accepted for this name", ge=0)
    similarity: float = Field(
        ...,
        description="1 - distance / longest length (1 = identical)",
        ge=0.0,
        le=1.0,
    )


class SearchResponse(BaseModel):
    """Response DTO for a search."""

    query: str = Field(..., description="The query as sent")
    status: str = Field(..., description="Session state: 'idle' or 'displaying'")
    from_cache: bool = Field(..., description="Whether results came from the query cache")
    results: list[SearchResultItem] = Field(
        default_factory=list,
        description="Up to 5 matches, closest first",
    )
    lookup_time_ms: float = Field(..., description="Time taken for the search in milliseconds")


class CatalogResponse(BaseModel):
    """Response DTO for a catalog replacement."""

    success: bool = Field(..., description="Whether the operation succeeded")
    total_entries: int = Field(..., description="Entries in the new snapshot", ge=0)
    cleared_queries: int = Field(..., description="Cached queries discarded", ge=0)


class CacheStatsResponse(BaseModel):
    """Response DTO for cache statistics."""

    size: int = Field(..., description="Number of cached queries", ge=0)
    hits: int = Field(..., description="Cache hits since the last clear", ge=0)
    misses: int = Field(..., description="Cache misses since the last clear", ge=0)
    hit_rate: float = Field(..., description="hits / lookups", ge=0.0, le=1.0)
    catalog_entries: int = Field(..., description="Entries in the current snapshot", ge=0)
    threshold_percent: float = Field(..., description="Engine tolerance fraction", ge=0.0, le=1.0)
    max_results: int = Field(..., description="Result cap per query", ge=1)


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    catalog_loaded: bool = Field(..., description="Whether the catalog snapshot has entries")
