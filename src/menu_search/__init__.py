"""Menu Search - typo-tolerant product search for an ordering interface.

This package provides a layered architecture for fuzzy menu search:

Layers:
    - levenshtein: Edit distance and similarity
    - engine: Scoring, thresholding and ranking of a catalog snapshot
    - cache: Per-session memo of search results
    - services: The debounced search session
    - protocols: Interface contracts (Scheduler, CatalogProvider)
    - repositories: Catalog provider implementations
    - handlers / dto / api: Optional HTTP surface
    - entities: Domain models (internal)

Usage:
    ```python
    from menu_search import ManualScheduler, SearchSession

    session = SearchSession.create(scheduler=ManualScheduler(), catalog=entries)
    view = session.confirm("nasi goren")
    ```

For HTTP API:
    ```python
    from menu_search.api.app import app
    ```
"""

from menu_search.cache import QueryCache
from menu_search.config import MAX_RESULTS, settings
from menu_search.engine import MatchEngine, normalize
from menu_search.entities import CacheRecord, CatalogEntry, ScoredCandidate
from menu_search.levenshtein import levenshtein_distance, similarity
from menu_search.protocols import CatalogProvider, ScheduledHandle, Scheduler
from menu_search.repositories import InMemoryCatalogProvider, JsonCatalogProvider
from menu_search.scheduling import AsyncioScheduler, ManualScheduler
from menu_search.services import SearchSession, SearchView, SessionStatus

__all__ = [
    # Configuration
    "settings",
    "MAX_RESULTS",
    # Algorithm
    "levenshtein_distance",
    "similarity",
    "normalize",
    "MatchEngine",
    # Cache
    "QueryCache",
    # Protocols (interfaces)
    "Scheduler",
    "ScheduledHandle",
    "CatalogProvider",
    # Implementations
    "AsyncioScheduler",
    "ManualScheduler",
    "InMemoryCatalogProvider",
    "JsonCatalogProvider",
    # Services
    "SearchSession",
    "SearchView",
    "SessionStatus",
    # Entities (domain models)
    "CatalogEntry",
    "ScoredCandidate",
    "CacheRecord",
]
