"""Domain entities for internal representation.

These are pure dataclasses used by the engine, the cache and the
session. They are NOT used for API contracts - use DTOs from the dto
package for that.
"""

from .cache_record import CacheRecord
from .catalog_entry import CatalogEntry
from .scored_candidate import ScoredCandidate

__all__ = ["CatalogEntry", "ScoredCandidate", "CacheRecord"]
