"""Scored candidate domain entity."""

from dataclasses import dataclass

from .catalog_entry import CatalogEntry


@dataclass(frozen=True)
class ScoredCandidate:
    """A catalog entry scored against one query.

    Created fresh for every query and entry; never persisted.

    Attributes:
        entry: The scored catalog entry
        distance: Levenshtein distance between normalized query and name
        max_distance: Largest distance accepted for this entry's name length
        similarity: 1 - distance / longest length, in [0, 1]
        is_match: Whether distance <= max_distance
        normalized_name: The name as compared (lower-cased, trimmed)
    """

    entry: CatalogEntry
    distance: int
    max_distance: int
    similarity: float
    is_match: bool
    normalized_name: str = ""
