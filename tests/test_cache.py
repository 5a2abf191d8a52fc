"""
Tests for the per-session query cache.
"""

import pytest

from menu_search.cache import QueryCache
from menu_search.engine import MatchEngine


@pytest.fixture
def cache():
    return QueryCache()


@pytest.fixture
def results(catalog):
    return MatchEngine(threshold_percent=0.40).search("nasi goren", catalog)


def test_miss_on_empty_cache(cache):
    """Test a lookup in an empty cache."""
    assert cache.hit_rate == 0.0
    assert cache.get("nasi goreng") is None
    assert cache.misses == 1
    assert cache.hits == 0
    assert cache.hit_rate == 0.0


def test_set_then_get(cache, results):
    """Test a stored query is found under its normalized key."""
    stored = cache.set("Nasi Goren", results)

    record = cache.get("  NASI GOREN ")

    assert record is stored
    assert record.key == "nasi goren"
    assert record.results == tuple(results)
    assert record.created_at > 0
    assert cache.hits == 1
    assert cache.hit_rate == 1.0


def test_access_count(cache, results):
    """Test access_count grows with every hit."""
    cache.set("nasi goren", results)
    cache.get("nasi goren")
    cache.get("nasi goren")

    assert cache.get("nasi goren").access_count == 4


def test_last_write_wins(cache, results):
    """Test there is one record per normalized key."""
    cache.set("nasi goren", results)
    cache.set("NASI GOREN", [])

    assert len(cache) == 1
    assert cache.get("nasi goren").results == ()


def test_no_eviction(cache, results):
    """Test storing a query keeps the others."""
    for query in ["na", "nas", "nasi", "nasi g"]:
        cache.set(query, results)

    assert len(cache) == 4


def test_hit_rate(cache, results):
    """Test hits over total lookups."""
    cache.set("nasi goren", results)
    cache.get("nasi goren")
    cache.get("ayam")
    cache.get("nasi goren")
    cache.get("es teh")

    stats = cache.stats()
    assert stats.hits == 2
    assert stats.misses == 2
    assert stats.total_lookups == 4
    assert stats.hit_rate == 0.5
    assert stats.to_dict()["size"] == 1


def test_clear(cache, results):
    """Test clear drops records and counters."""
    cache.set("nasi goren", results)
    cache.set("ayam", [])
    cache.get("nasi goren")

    assert cache.clear() == 2

    assert len(cache) == 0
    assert cache.hits == 0
    assert cache.misses == 0
    assert cache.get("nasi goren") is None


def test_contains_does_not_count(cache, results):
    """Test membership checks are not lookups."""
    cache.set("nasi goren", results)

    assert "Nasi Goren " in cache
    assert "ayam" not in cache
    assert cache.stats().total_lookups == 0
