"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Services stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - Clean separation, no global mutable state
"""

from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from menu_search.config import configure_logging, settings
from menu_search.handlers import SearchHandler
from menu_search.repositories import JsonCatalogProvider
from menu_search.scheduling import AsyncioScheduler
from menu_search.services import SearchSession


def get_search_session(request: Request) -> SearchSession:
    """Dependency injection for SearchSession from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The SearchSession instance from app.state

    Raises:
        RuntimeError: If session is not initialized
    """
    session = getattr(request.app.state, "search_session", None)
    if session is None:
        raise RuntimeError("SearchSession not initialized. Check lifespan setup.")
    return session


def get_handler(request: Request) -> SearchHandler:
    """Dependency injection for SearchHandler from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The SearchHandler instance from app.state

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "search_handler", None)
    if handler is None:
        raise RuntimeError("SearchHandler not initialized. Check lifespan setup.")
    return handler


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Initializes all layers and stores in app.state:
    1. Session (business logic) - stored in app.state.search_session
    2. Handler (HTTP endpoints) - stored in app.state.search_handler
    3. Catalog - loaded from CATALOG_PATH when set, otherwise empty
       until PUT /catalog

    Args:
        app: The FastAPI application instance

    Yields:
        None

    Cleanup:
        Removes all services from app.state on shutdown
    """
    configure_logging()

    # POST /search confirms queries, so no debounce timer is scheduled here
    search_session = SearchSession.create(scheduler=AsyncioScheduler())

    if settings.catalog_path:
        provider = JsonCatalogProvider.create()
        search_session.load_catalog(provider)

    search_handler = SearchHandler(session=search_session)

    app.state.search_session = search_session
    app.state.search_handler = search_handler

    print("✓ Search session initialized")
    print(f"✓ Catalog entries: {len(search_session.catalog)}")
    print(f"✓ Threshold: {search_session.engine.threshold_percent}")

    yield

    del app.state.search_handler
    del app.state.search_session
    print("✓ Search session shut down")


# Type aliases for cleaner dependency injection
HandlerDep = Annotated[SearchHandler, Depends(get_handler)]
SessionDep = Annotated[SearchSession, Depends(get_search_session)]
