"""
Tests for the debounced search session.
"""

import asyncio

import pytest

from menu_search.engine import MatchEngine
from menu_search.entities import CatalogEntry
from menu_search.repositories import InMemoryCatalogProvider
from menu_search.scheduling import AsyncioScheduler
from menu_search.services import SearchSession, SessionStatus


class CountingEngine(MatchEngine):
    """MatchEngine that records every query it computes."""

    def __init__(self) -> None:
        super().__init__(threshold_percent=0.40)
        self.queries: list[str] = []

    def search(self, query, catalog, threshold_percent=None):
        self.queries.append(query)
        return super().search(query, catalog, threshold_percent)


@pytest.fixture
def engine():
    return CountingEngine()


@pytest.fixture
def published():
    return []


@pytest.fixture
def session(scheduler, engine, catalog, published):
    return SearchSession(
        scheduler=scheduler,
        engine=engine,
        catalog=catalog,
        on_publish=published.append,
        debounce_ms=280,
        min_query_length=2,
    )


def test_debounce_runs_one_search_with_last_text(session, scheduler, engine):
    """Test a burst of keystrokes 50ms apart triggers a single search."""
    session.on_input("na")
    scheduler.advance(0.05)
    session.on_input("nasi")
    scheduler.advance(0.05)
    session.on_input("nasi goren")

    assert scheduler.pending == 1
    assert session.status is SessionStatus.DEBOUNCING

    scheduler.advance(0.27)
    assert engine.queries == []

    scheduler.advance(0.02)
    assert engine.queries == ["nasi goren"]
    assert session.status is SessionStatus.DISPLAYING
    assert session.last_issued_query == "nasi goren"
    assert session.last_view.results[0].entry.name == "Nasi Goreng"

    scheduler.advance(1.0)
    assert engine.queries == ["nasi goren"]


def test_loading_view_then_results(session, scheduler, published):
    """Test the views published during a debounced search."""
    session.on_input("ayam bkar")
    scheduler.advance(0.28)

    assert [v.status for v in published] == [SessionStatus.DEBOUNCING, SessionStatus.DISPLAYING]
    assert published[0].is_loading
    assert published[1].results[0].entry.name == "Ayam Bakar"


def test_short_query_hides_results(session, scheduler, engine, published):
    """Test queries under the minimum length never search."""
    session.on_input("nasi")
    view = session.on_input(" n ")

    assert view.is_hidden
    assert session.status is SessionStatus.IDLE
    assert scheduler.pending == 0
    assert not session.has_pending_search

    scheduler.advance(1.0)
    assert engine.queries == []


def test_confirm_bypasses_debounce(session, scheduler, engine):
    """Test Enter searches at once and cancels the pending timer."""
    session.on_input("nasi goren")

    view = session.confirm("nasi goren")

    assert view.status is SessionStatus.DISPLAYING
    assert view.results[0].distance == 1
    assert scheduler.pending == 0

    scheduler.advance(1.0)
    assert engine.queries == ["nasi goren"]


def test_confirm_short_query(session, engine):
    """Test Enter on a too-short query does nothing but hide."""
    view = session.confirm("a")

    assert view.is_hidden
    assert engine.queries == []


def test_second_search_served_from_cache(session, engine):
    """Test identical queries are computed once and answered identically."""
    first = session.confirm("Nasi Goreng")
    second = session.confirm("  nasi goreng")

    assert engine.queries == ["Nasi Goreng"]
    assert not first.from_cache
    assert second.from_cache
    assert second.results == first.results
    assert session.metrics.cache_hits == 1
    assert session.metrics.cache_misses == 1


def test_empty_result_view(session):
    """Test a search without matches shows the empty state."""
    view = session.confirm("pizza")

    assert view.is_empty
    assert not view.is_loading


def test_replace_catalog_invalidates_cache(session, engine):
    """Test cached results never outlive their catalog snapshot."""
    session.confirm("ayam bakar")
    assert "ayam bakar" in session.cache

    cleared = session.replace_catalog([CatalogEntry(id="6", name="Ayam Bakar Madu", price=22000)])

    assert cleared == 1
    assert "ayam bakar" not in session.cache

    view = session.confirm("ayam bakar")
    assert not view.from_cache
    assert [r.entry.name for r in view.results] == ["Ayam Bakar Madu"]
    assert engine.queries == ["ayam bakar", "ayam bakar"]


def test_replace_catalog_keeps_snapshot_immutable(session, catalog):
    """Test the session holds its own snapshot."""
    catalog.append(CatalogEntry(id="99", name="Es Jeruk"))

    assert len(session.catalog) == 3
    assert isinstance(session.catalog, tuple)


def test_load_catalog(session):
    """Test loading a snapshot from a provider."""
    provider = InMemoryCatalogProvider([{"$id": "9", "name": "Es Jeruk", "price": 7000}])

    assert session.load_catalog(provider) == 1
    assert session.confirm("es jeruk").results[0].entry.id == "9"


def test_clear_cancels_pending(session, scheduler, engine):
    """Test clearing the search box drops the scheduled search."""
    session.on_input("nasi goren")

    view = session.clear()

    assert view.is_hidden
    assert scheduler.pending == 0
    scheduler.advance(1.0)
    assert engine.queries == []


def test_blur(session, scheduler, published):
    """Test blur only goes idle when nothing is pending."""
    session.on_input("nasi goren")
    assert session.blur() is None
    assert session.status is SessionStatus.DEBOUNCING

    scheduler.advance(0.3)
    view = session.blur()

    assert session.status is SessionStatus.IDLE
    assert view.is_hidden
    assert view.query == "nasi goren"
    assert published[-1] is view
    assert [v.status for v in published] == [
        SessionStatus.DEBOUNCING,
        SessionStatus.DISPLAYING,
        SessionStatus.IDLE,
    ]


def test_focus_reshows_results(session, engine):
    """Test focusing a filled search box shows its results again."""
    session.confirm("nasi goren")

    view = session.on_focus("nasi goren")

    assert view.from_cache
    assert session.on_focus("n") is None
    assert engine.queries == ["nasi goren"]


def test_invalid_options(scheduler):
    """Test constructor validation."""
    with pytest.raises(ValueError):
        SearchSession(scheduler=scheduler, debounce_ms=-1)
    with pytest.raises(ValueError):
        SearchSession(scheduler=scheduler, min_query_length=0)


def test_asyncio_scheduler_debounce(catalog):
    """Test debouncing on a real event loop."""
    engine = CountingEngine()

    async def scenario():
        session = SearchSession(
            scheduler=AsyncioScheduler(),
            engine=engine,
            catalog=catalog,
            debounce_ms=20,
        )
        session.on_input("ay")
        session.on_input("ayam")
        session.on_input("ayam bkar")
        await asyncio.sleep(0.1)
        return session

    session = asyncio.run(scenario())

    assert engine.queries == ["ayam bkar"]
    assert session.last_view.results[0].entry.name == "Ayam Bakar"
