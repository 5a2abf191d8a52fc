"""Service layer for business logic.

Services depend on protocols (interfaces), not concrete implementations,
making them testable without a UI or an event loop.

Architecture:
    Handler -> Service -> Engine / Cache / Repository
    (HTTP)  -> (Session) -> (Matching, memo, catalog)

Usage:
    ```python
    from menu_search.scheduling import AsyncioScheduler
    from menu_search.services import SearchSession

    session = SearchSession.create(scheduler=AsyncioScheduler(), catalog=entries)
    ```
"""

from .search_session import SearchSession, SearchView, SessionStatus

__all__ = [
    "SearchSession",
    "SearchView",
    "SessionStatus",
]
