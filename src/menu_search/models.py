from dataclasses import dataclass


@dataclass(frozen=True)
class CacheStats:
    """Snapshot of query cache counters."""

    size: int
    hits: int
    misses: int

    @property
    def total_lookups(self) -> int:
        """Number of get() calls since the last clear."""
        return self.hits + self.misses

    @property
    def hit_rate(self) -> float:
        """Calculate cache hit rate."""
        if self.total_lookups == 0:
            return 0.0
        return self.hits / self.total_lookups

    def to_dict(self) -> dict[str, float | int]:
        """Convert to dictionary."""
        return {
            "size": self.size,
            "hits": self.hits,
            "misses": self.misses,
            "total_lookups": self.total_lookups,
            "hit_rate": self.hit_rate,
        }


@dataclass
class PerformanceMetrics:
    """Track timings for searches executed by a session."""

    total_searches: int = 0
    cache_hits: int = 0
    cache_misses: int = 0
    total_search_time_ms: float = 0.0

    @property
    def hit_rate(self) -> float:
        """Calculate the share of searches served from cache."""
        if self.total_searches == 0:
            return 0.0
        return self.cache_hits / self.total_searches

    @property
    def avg_search_time_ms(self) -> float:
        """Calculate average search time."""
        if self.total_searches == 0:
            return 0.0
        return self.total_search_time_ms / self.total_searches

    def record_hit(self, search_time_ms: float) -> None:
        """Record a search answered from cache."""
        self.total_searches += 1
        self.cache_hits += 1
        self.total_search_time_ms += search_time_ms

    def record_miss(self, search_time_ms: float) -> None:
        """Record a search computed by the engine."""
        self.total_searches += 1
        self.cache_misses += 1
        self.total_search_time_ms += search_time_ms

    def to_dict(self) -> dict[str, float | int]:
        """Convert metrics to dictionary."""
        return {
            "total_searches": self.total_searches,
            "cache_hits": self.cache_hits,
            "cache_misses": self.cache_misses,
            "hit_rate": self.hit_rate,
            "avg_search_time_ms": self.avg_search_time_ms,
        }
