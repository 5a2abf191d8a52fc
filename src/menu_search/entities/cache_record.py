"""Cache record domain entity."""

from dataclasses import dataclass

from .scored_candidate import ScoredCandidate


@dataclass
class CacheRecord:
    """Memoized search results for one normalized query.

    Owned by QueryCache. Not frozen: ``access_count`` grows on every hit.

    Attributes:
        key: Normalized query (lower-cased, trimmed)
        results: Ranked matches as returned by the engine
        created_at: Unix timestamp of the write
        access_count: 1 on write, incremented on each cache hit
    """

    key: str
    results: tuple[ScoredCandidate, ...]
    created_at: float
    access_count: int = 1
