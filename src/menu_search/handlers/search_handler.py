"""HTTP handlers for search operations.

Handlers convert between DTOs (API contracts) and session calls.
They handle HTTP concerns like status codes, validation, and error handling.
"""

from fastapi import HTTPException, status

from menu_search.config import settings
from menu_search.dto import (
    CacheStatsResponse,
    CatalogResponse,
    ReplaceCatalogRequest,
    SearchRequest,
    SearchResponse,
    SearchResultItem,
)
from menu_search.entities import CatalogEntry
from menu_search.services import SearchSession


class SearchHandler:
    """HTTP handlers for search operations.

    This handler delegates business logic to SearchSession
    and handles HTTP-specific concerns like:
    - Converting entities to DTOs
    - Setting appropriate status codes
    - Error handling and responses

    Example:
        ```python
        handler = SearchHandler(session=session)

        @app.post("/search", response_model=SearchResponse)
        async def search(request: SearchRequest):
            return await handler.search(request)
        ```
    """

    def __init__(self, session: SearchSession) -> None:
        """Initialize the search handler.

        Args:
            session: The search session for business logic (required).
        """
        self._session = session

    async def search(self, request: SearchRequest) -> SearchResponse:
        """Handle POST /search requests.

        Args:
            request: The search request DTO

        Returns:
            SearchResponse with ranked matches

        Raises:
            HTTPException: If an error occurs during the search
        """
        try:
            view = self._session.confirm(request.query)

            results = [
                SearchResultItem(
                    id=str(candidate.entry.id),
                    name=candidate.entry.name or "",
                    price=candidate.entry.price,
                    stock=candidate.entry.stock,
                    distance=candidate.distance,
                    max_distance=candidate.max_distance,
                    similarity=candidate.similarity,
                )
                for candidate in view.results
            ]

            return SearchResponse(
                query=request.query,
                status=view.status.value,
                from_cache=view.from_cache,
                results=results,
                lookup_time_ms=view.elapsed_ms,
            )

        except Exception as e:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to search: {e}",
            ) from e

    async def replace_catalog(self, request: ReplaceCatalogRequest) -> CatalogResponse:
        """Handle PUT /catalog requests.

        Args:
            request: The catalog replacement DTO

        Returns:
            CatalogResponse with the new snapshot size

        Raises:
            HTTPException: If the catalog cannot be replaced
        """
        try:
            entries = [
                CatalogEntry(id=item.id, name=item.name, price=item.price, stock=item.stock)
                for item in request.items
            ]
            cleared = self._session.replace_catalog(entries)

            return CatalogResponse(
                success=True,
                total_entries=len(self._session.catalog),
                cleared_queries=cleared,
            )

        except Exception as e:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to replace catalog: {e}",
            ) from e

    async def get_stats(self) -> CacheStatsResponse:
        """Handle GET /cache/stats requests.

        Returns:
            CacheStatsResponse with cache statistics
        """
        stats = self._session.cache.stats()

        return CacheStatsResponse(
            size=stats.size,
            hits=stats.hits,
            misses=stats.misses,
            hit_rate=stats.hit_rate,
            catalog_entries=len(self._session.catalog),
            threshold_percent=self._session.engine.threshold_percent,
            max_results=settings.max_results,
        )

    async def clear_cache(self) -> dict:
        """Handle DELETE /cache requests.

        Returns:
            Dict with clear operation result
        """
        count = self._session.cache.clear()

        return {
            "success": True,
            "deleted_count": count,
            "message": "Cache cleared successfully",
        }

    async def health_check(self) -> dict:
        """Handle GET /health requests.

        Returns:
            Dict with health status
        """
        return {
            "status": "healthy",
            "catalog_loaded": len(self._session.catalog) > 0,
        }
