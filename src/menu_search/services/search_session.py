"""Search session: the interactive controller behind a search box.

This service orchestrates one user's searches by coordinating the
scheduler (debounce), the query cache and the match engine against the
current catalog snapshot.

States:
    IDLE -> DEBOUNCING -> SEARCHING -> DISPLAYING
    (back to IDLE on clear, on short input, or on blur with nothing pending)
"""

import logging
import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum

from menu_search.cache import QueryCache
from menu_search.config import settings
from menu_search.engine import MatchEngine, normalize
from menu_search.entities import CatalogEntry, ScoredCandidate
from menu_search.models import PerformanceMetrics
from menu_search.protocols import CatalogProvider, ScheduledHandle, Scheduler

logger = logging.getLogger(__name__)


class SessionStatus(str, Enum):
    """Lifecycle state of a search session."""

    IDLE = "idle"
    DEBOUNCING = "debouncing"
    SEARCHING = "searching"
    DISPLAYING = "displaying"


@dataclass(frozen=True)
class SearchView:
    """What the presentation layer should show.

    Attributes:
        status: Session state when the view was published
        query: The query the view belongs to (as typed)
        results: Ranked matches, empty unless status is DISPLAYING
        from_cache: Whether results were served from the query cache
        elapsed_ms: Time spent producing the results
    """

    status: SessionStatus
    query: str = ""
    results: tuple[ScoredCandidate, ...] = ()
    from_cache: bool = False
    elapsed_ms: float = 0.0

    @property
    def is_hidden(self) -> bool:
        """Results should not be shown at all."""
        return self.status is SessionStatus.IDLE

    @property
    def is_loading(self) -> bool:
        """A search is pending or running."""
        return self.status in (SessionStatus.DEBOUNCING, SessionStatus.SEARCHING)

    @property
    def is_empty(self) -> bool:
        """A search finished without matches ("no results")."""
        return self.status is SessionStatus.DISPLAYING and not self.results


class SearchSession:
    """Debounced, cached search over one catalog snapshot.

    One instance per UI session; pass it to the event handlers instead of
    keeping module-level state.

    Example:
        ```python
        session = SearchSession.create(
            scheduler=AsyncioScheduler(),
            catalog=provider.load(),
            on_publish=render,
        )

        session.on_input("na")      # loading view, search scheduled
        session.on_input("nasi g")  # previous search cancelled, rescheduled
        session.confirm("nasi g")   # Enter: search right now
        ```
    """

    def __init__(
        self,
        scheduler: Scheduler,
        engine: MatchEngine | None = None,
        cache: QueryCache | None = None,
        catalog: Iterable[CatalogEntry] = (),
        on_publish: Callable[[SearchView], None] | None = None,
        debounce_ms: int | None = None,
        min_query_length: int | None = None,
    ) -> None:
        """Initialize the session.

        Args:
            scheduler: Runs the debounced search later (required).
            engine: Match engine. Defaults to MatchEngine().
            cache: Query cache. Defaults to a fresh QueryCache.
            catalog: Initial catalog snapshot.
            on_publish: Called with every published SearchView.
            debounce_ms: Quiet period before an automatic search. Defaults to settings.
            min_query_length: Shorter queries never search. Defaults to settings.
        """
        if debounce_ms is None:
            debounce_ms = settings.debounce_ms
        if min_query_length is None:
            min_query_length = settings.min_query_length
        if debounce_ms < 0:
            raise ValueError("debounce_ms must be >= 0")
        if min_query_length < 1:
            raise ValueError("min_query_length must be >= 1")

        self._scheduler = scheduler
        self._engine = engine or MatchEngine()
        self._cache = cache if cache is not None else QueryCache()
        self._catalog: tuple[CatalogEntry, ...] = tuple(catalog)
        self._on_publish = on_publish
        self._debounce_ms = debounce_ms
        self._min_query_length = min_query_length

        self._status = SessionStatus.IDLE
        self._pending: ScheduledHandle | None = None
        self._last_issued_query = ""
        self._last_view = SearchView(status=SessionStatus.IDLE)
        self._metrics = PerformanceMetrics()

    @classmethod
    def create(
        cls,
        scheduler: Scheduler,
        catalog: Iterable[CatalogEntry] = (),
        on_publish: Callable[[SearchView], None] | None = None,
        threshold_percent: float | None = None,
    ) -> "SearchSession":
        """Factory method to create a SearchSession with default collaborators.

        Args:
            scheduler: Scheduler for the debounce timer (required).
            catalog: Initial catalog snapshot.
            on_publish: Listener for published views.
            threshold_percent: Engine tolerance. If None, uses settings.

        Returns:
            Configured SearchSession
        """
        return cls(
            scheduler=scheduler,
            engine=MatchEngine(threshold_percent=threshold_percent),
            cache=QueryCache(),
            catalog=catalog,
            on_publish=on_publish,
        )

    # Catalog

    def replace_catalog(self, entries: Iterable[CatalogEntry]) -> int:
        """Swap in a new catalog snapshot and invalidate the cache.

        Cached results were computed against the old snapshot, so the cache
        is always cleared, even when the new catalog looks identical.
        Searches already running finish against the snapshot they started
        with.

        Args:
            entries: The new catalog

        Returns:
            Number of cache records discarded
        """
        self._catalog = tuple(entries)
        cleared = self._cache.clear()
        logger.info(
            "Catalog replaced: %d entries, %d cached queries discarded",
            len(self._catalog),
            cleared,
        )
        return cleared

    def load_catalog(self, provider: CatalogProvider) -> int:
        """Load a snapshot from a provider and make it current.

        Returns:
            Number of entries loaded
        """
        self.replace_catalog(provider.load())
        return len(self._catalog)

    # Input events

    def on_input(self, text: str) -> SearchView:
        """Handle a change of the search box text.

        Any pending search is cancelled. Short queries hide the results;
        otherwise a single search is scheduled after the quiet period and a
        loading view is published.

        Args:
            text: Current value of the search box

        Returns:
            The published view
        """
        self._cancel_pending()

        if len(normalize(text)) < self._min_query_length:
            self._status = SessionStatus.IDLE
            return self._publish(SearchView(status=SessionStatus.IDLE, query=text))

        self._status = SessionStatus.DEBOUNCING
        self._pending = self._scheduler.call_later(
            self._debounce_ms / 1000,
            lambda: self._fire(text),
        )
        return self._publish(SearchView(status=SessionStatus.DEBOUNCING, query=text))

    def confirm(self, text: str) -> SearchView:
        """Handle an explicit confirm (Enter): search now, skipping the debounce.

        Args:
            text: Current value of the search box

        Returns:
            The published view
        """
        self._cancel_pending()

        if len(normalize(text)) < self._min_query_length:
            self._status = SessionStatus.IDLE
            return self._publish(SearchView(status=SessionStatus.IDLE, query=text))

        return self.search(text)

    def on_focus(self, text: str) -> SearchView | None:
        """Re-show results when the search box regains focus.

        Returns:
            The published view, or None when the text is too short
        """
        if len(normalize(text)) < self._min_query_length:
            return None
        self._cancel_pending()
        return self.search(text)

    def blur(self) -> SearchView | None:
        """Handle loss of focus: go idle unless a search is still pending.

        Returns:
            The published hidden view, or None while a search is pending
        """
        if self._pending is not None:
            return None
        self._status = SessionStatus.IDLE
        return self._publish(SearchView(status=SessionStatus.IDLE, query=self._last_view.query))

    def clear(self) -> SearchView:
        """Reset the search box: cancel any pending search and hide results."""
        self._cancel_pending()
        self._status = SessionStatus.IDLE
        return self._publish(SearchView(status=SessionStatus.IDLE))

    # Search

    def search(self, query: str) -> SearchView:
        """Run a search now, serving from cache when possible.

        Business logic:
        1. Look the normalized query up in the cache
        2. On a hit, publish the cached results unchanged
        3. On a miss, run the engine against the current snapshot,
           cache the outcome and publish it

        Args:
            query: Query text as typed

        Returns:
            The published DISPLAYING view
        """
        self._status = SessionStatus.SEARCHING
        self._last_issued_query = query
        start_time = time.perf_counter()

        record = self._cache.get(query)
        if record is not None:
            elapsed_ms = (time.perf_counter() - start_time) * 1000
            self._metrics.record_hit(elapsed_ms)
            logger.debug("Search %r: %.2fms (from cache)", query, elapsed_ms)
            return self._display(query, record.results, from_cache=True, elapsed_ms=elapsed_ms)

        results = self._engine.search(query, self._catalog)
        record = self._cache.set(query, results)
        elapsed_ms = (time.perf_counter() - start_time) * 1000
        self._metrics.record_miss(elapsed_ms)
        logger.debug("Search %r: %d matches in %.2fms", query, len(results), elapsed_ms)
        return self._display(query, record.results, from_cache=False, elapsed_ms=elapsed_ms)

    def _display(
        self,
        query: str,
        results: tuple[ScoredCandidate, ...],
        from_cache: bool,
        elapsed_ms: float,
    ) -> SearchView:
        self._status = SessionStatus.DISPLAYING
        return self._publish(
            SearchView(
                status=SessionStatus.DISPLAYING,
                query=query,
                results=results,
                from_cache=from_cache,
                elapsed_ms=elapsed_ms,
            )
        )

    def _fire(self, text: str) -> None:
        self._pending = None
        self.search(text)

    def _cancel_pending(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    def _publish(self, view: SearchView) -> SearchView:
        self._last_view = view
        if self._on_publish is not None:
            self._on_publish(view)
        return view

    # Introspection

    @property
    def status(self) -> SessionStatus:
        """Get the current session state."""
        return self._status

    @property
    def has_pending_search(self) -> bool:
        """Whether a debounced search is scheduled and not yet fired."""
        return self._pending is not None

    @property
    def last_issued_query(self) -> str:
        """Get the text of the most recent search actually executed."""
        return self._last_issued_query

    @property
    def last_view(self) -> SearchView:
        """Get the most recently published view."""
        return self._last_view

    @property
    def catalog(self) -> tuple[CatalogEntry, ...]:
        """Get the current catalog snapshot."""
        return self._catalog

    @property
    def cache(self) -> QueryCache:
        """Get the underlying query cache (for testing)."""
        return self._cache

    @property
    def engine(self) -> MatchEngine:
        """Get the underlying match engine."""
        return self._engine

    @property
    def metrics(self) -> PerformanceMetrics:
        """Get search timing metrics."""
        return self._metrics

    @property
    def debounce_ms(self) -> int:
        """Get the debounce quiet period in milliseconds."""
        return self._debounce_ms

    @property
    def min_query_length(self) -> int:
        """Get the minimum query length that triggers a search."""
        return self._min_query_length
