from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from menu_search.api.dependencies import HandlerDep, lifespan
from menu_search.config import settings
from menu_search.dto import (
    CacheStatsResponse,
    CatalogResponse,
    HealthCheckResponse,
    ReplaceCatalogRequest,
    SearchRequest,
    SearchResponse,
)

app = FastAPI(
    title="Menu Search API",
    description="Typo-tolerant menu search using Levenshtein distance",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,  # type: ignore[arg-type]
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
async def root() -> dict[str, Any]:
    """Root endpoint with API information."""
    return {
        "name": "Menu Search API",
        "version": "0.1.0",
        "description": "Typo-tolerant menu search using Levenshtein distance",
        "endpoints": {
            "search": "/search",
            "catalog": "/catalog",
            "stats": "/cache/stats",
            "health": "/health",
            "docs": "/docs",
        },
    }


@app.get("/health", response_model=HealthCheckResponse)
async def health(handler: HandlerDep) -> dict:
    """Health check endpoint."""
    return await handler.health_check()


@app.post("/search", response_model=SearchResponse)
async def search(request: SearchRequest, handler: HandlerDep) -> SearchResponse:
    """
    Search the catalog for products matching the query.

    Args:
        request: Search request with the typed query.

    Returns:
        Up to 5 ranked matches and whether they came from cache.
    """
    return await handler.search(request)


@app.put("/catalog", response_model=CatalogResponse)
async def replace_catalog(request: ReplaceCatalogRequest, handler: HandlerDep) -> CatalogResponse:
    """
    Replace the catalog snapshot. Cached queries are discarded.

    Args:
        request: The complete new catalog.

    Returns:
        Size of the new snapshot and number of cached queries dropped.
    """
    return await handler.replace_catalog(request)


@app.get("/cache/stats", response_model=CacheStatsResponse)
async def get_stats(handler: HandlerDep) -> CacheStatsResponse:
    """Get query cache statistics."""
    return await handler.get_stats()


@app.delete("/cache", response_model=dict[str, Any])
async def clear_cache(handler: HandlerDep) -> dict[str, Any]:
    """Clear all cached queries."""
    return await handler.clear_cache()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "menu_search.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
