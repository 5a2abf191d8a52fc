"""Typo-tolerant ranking of catalog entries against a query.

Every entry is rescanned per query; catalogs are expected to hold tens to
low hundreds of products.
"""

import logging
import math
from collections.abc import Iterable

from menu_search.config import MAX_RESULTS, settings
from menu_search.entities import CatalogEntry, ScoredCandidate
from menu_search.levenshtein import levenshtein_distance

logger = logging.getLogger(__name__)


def normalize(text: str) -> str:
    """Lower-case and trim a query or product name."""
    return text.lower().strip()


class MatchEngine:
    """Scores a catalog snapshot against a query with Levenshtein distance.

    Each entry gets its own tolerance, ``floor(len(name) * threshold_percent)``,
    so longer names accept proportionally more edits and short names are not
    over-matched. The tolerance is derived from the catalog name, not from
    the query.

    Example:
        ```python
        engine = MatchEngine()
        matches = engine.search("nasi goren", catalog)
        matches[0].entry.name  # "Nasi Goreng"
        matches[0].distance  # 1
        ```
    """

    def __init__(self, threshold_percent: float | None = None) -> None:
        """Initialize the engine.

        Args:
            threshold_percent: Fraction of the name length tolerated as edit
                distance (0-1). Defaults to settings.
        """
        if threshold_percent is None:
            threshold_percent = settings.threshold_percent
        self._check_threshold(threshold_percent)
        self._threshold_percent = threshold_percent

    @staticmethod
    def _check_threshold(threshold_percent: float) -> None:
        if not 0 <= threshold_percent <= 1:
            raise ValueError("threshold_percent must be between 0 and 1")

    @property
    def threshold_percent(self) -> float:
        """Get the default tolerance fraction."""
        return self._threshold_percent

    def score(
        self,
        query: str,
        entry: CatalogEntry,
        threshold_percent: float | None = None,
    ) -> ScoredCandidate:
        """Score one entry against a query, match or not.

        Args:
            query: Raw query text
            entry: Catalog entry with a text name
            threshold_percent: Override the default tolerance

        Returns:
            ScoredCandidate for this entry
        """
        if threshold_percent is None:
            threshold_percent = self._threshold_percent

        normalized_query = normalize(query)
        normalized_name = normalize(entry.name or "")

        distance = levenshtein_distance(normalized_query, normalized_name)
        max_distance = math.floor(len(normalized_name) * threshold_percent)
        longest = max(len(normalized_query), len(normalized_name))
        score = 1.0 if longest == 0 else 1.0 - distance / longest

        return ScoredCandidate(
            entry=entry,
            distance=distance,
            max_distance=max_distance,
            similarity=score,
            is_match=distance <= max_distance,
            normalized_name=normalized_name,
        )

    def search(
        self,
        query: str,
        catalog: Iterable[CatalogEntry] | None,
        threshold_percent: float | None = None,
    ) -> list[ScoredCandidate]:
        """Return the best matching entries for a query.

        Business logic:
        1. Normalize the query; an empty query has no matches
        2. Score every entry with a text name, skipping malformed ones
        3. Keep entries within their own distance threshold
        4. Sort by distance, then by similarity (higher first)
        5. Cap the list at MAX_RESULTS

        Args:
            query: Raw query text
            catalog: Snapshot of catalog entries (None is treated as empty)
            threshold_percent: Override the default tolerance

        Returns:
            At most MAX_RESULTS matches, closest first
        """
        if threshold_percent is None:
            threshold_percent = self._threshold_percent
        else:
            self._check_threshold(threshold_percent)

        normalized_query = normalize(query)
        if not normalized_query or catalog is None:
            return []

        matches = []
        for entry in catalog:
            if not isinstance(entry.name, str):
                logger.warning("Skipping catalog entry %r without a name", entry.id)
                continue

            candidate = self.score(normalized_query, entry, threshold_percent)
            if candidate.is_match:
                matches.append(candidate)

        # Stable sort: complete ties keep catalog order
        matches.sort(key=lambda c: (c.distance, -c.similarity))

        logger.debug("Query %r matched %d entries", normalized_query, len(matches))
        return matches[:MAX_RESULTS]
