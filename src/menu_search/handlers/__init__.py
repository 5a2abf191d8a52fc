"""Handler layer for HTTP endpoints.

This layer contains the HTTP request/response handlers.
Handlers depend on services (business logic), not directly on repositories.

Architecture:
    Handler -> Service -> Engine / Cache / Repository
    (HTTP)  -> (Session) -> (Matching, memo, catalog)
"""

from .search_handler import SearchHandler

__all__ = [
    "SearchHandler",
]
