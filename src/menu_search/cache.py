import logging
import time
from collections.abc import Iterable

from menu_search.engine import normalize
from menu_search.entities import CacheRecord, ScoredCandidate
from menu_search.models import CacheStats

logger = logging.getLogger(__name__)


class QueryCache:
    """In-memory memo of search results keyed by normalized query.

    Records never expire and nothing is evicted; the cache lives for one
    browsing session and grows with the number of distinct queries typed.
    Long-lived or multi-user hosts would need a bounded eviction policy
    (e.g. LRU on ``access_count`` / ``created_at``).

    Cached distances are only valid for the catalog snapshot they were
    computed from, so the owner must call ``clear()`` whenever the snapshot
    is replaced.
    """

    def __init__(self) -> None:
        """Initialize an empty cache."""
        self._records: dict[str, CacheRecord] = {}
        self._hits = 0
        self._misses = 0

    def get(self, key: str) -> CacheRecord | None:
        """
        Look up cached results for a query.

        Args:
            key: Raw query text; normalized before lookup.

        Returns:
            The CacheRecord on hit, None on miss.
        """
        cache_key = normalize(key)
        record = self._records.get(cache_key)

        if record is None:
            self._misses += 1
            logger.debug("Cache MISS %r (%.1f%% hit rate)", cache_key, self.hit_rate * 100)
            return None

        self._hits += 1
        record.access_count += 1
        logger.debug("Cache HIT %r (%.1f%% hit rate)", cache_key, self.hit_rate * 100)
        return record

    def set(self, key: str, results: Iterable[ScoredCandidate]) -> CacheRecord:
        """
        Store results for a query, replacing any previous record.

        Args:
            key: Raw query text; normalized before storing.
            results: Ranked matches to memoize.

        Returns:
            The stored CacheRecord.
        """
        cache_key = normalize(key)
        record = CacheRecord(
            key=cache_key,
            results=tuple(results),
            created_at=time.time(),
        )
        self._records[cache_key] = record
        logger.debug("Cached %r (%d items in cache)", cache_key, len(self._records))
        return record

    def clear(self) -> int:
        """
        Remove all records and reset the counters.

        Returns:
            Number of records removed.
        """
        count = len(self._records)
        self._records = {}
        self._hits = 0
        self._misses = 0
        logger.debug("Cache cleared (%d records removed)", count)
        return count

    @property
    def hits(self) -> int:
        """Get the number of lookups that found a record."""
        return self._hits

    @property
    def misses(self) -> int:
        """Get the number of lookups that found nothing."""
        return self._misses

    @property
    def hit_rate(self) -> float:
        """Hits over total lookups, 0.0 before the first lookup."""
        total = self._hits + self._misses
        if total == 0:
            return 0.0
        return self._hits / total

    def stats(self) -> CacheStats:
        """Get a snapshot of the cache counters."""
        return CacheStats(size=len(self._records), hits=self._hits, misses=self._misses)

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, key: object) -> bool:
        # Inspection only: does not count as a lookup
        return isinstance(key, str) and normalize(key) in self._records
