"""
Tests for catalog providers and settings.
"""

import json

import pytest

from menu_search.config import Settings
from menu_search.entities import CatalogEntry
from menu_search.protocols import CatalogProvider, Scheduler
from menu_search.repositories import InMemoryCatalogProvider, JsonCatalogProvider
from menu_search.scheduling import AsyncioScheduler, ManualScheduler


def test_json_provider(tmp_path):
    """Test loading a catalog export."""
    path = tmp_path / "menu.json"
    path.write_text(
        json.dumps(
            [
                {"$id": "1", "name": "Nasi Goreng", "price": 15000, "stock": 10},
                {"$id": "2", "price": 0},
            ]
        ),
        encoding="utf-8",
    )

    entries = JsonCatalogProvider(path).load()

    assert entries[0] == CatalogEntry(id="1", name="Nasi Goreng", price=15000, stock=10)
    assert entries[1].name is None


def test_json_provider_rejects_non_array(tmp_path):
    """Test a file that is not a JSON array."""
    path = tmp_path / "menu.json"
    path.write_text(json.dumps({"name": "Nasi Goreng"}), encoding="utf-8")

    with pytest.raises(ValueError):
        JsonCatalogProvider(path).load()


def test_json_provider_create_requires_path(monkeypatch):
    """Test the factory needs a path from somewhere."""
    from menu_search.repositories import json_catalog_provider

    monkeypatch.setattr(json_catalog_provider, "settings", Settings(catalog_path=None))

    with pytest.raises(ValueError):
        JsonCatalogProvider.create(path="")


def test_in_memory_provider_returns_copies():
    """Test the provider hands out fresh lists."""
    provider = InMemoryCatalogProvider([CatalogEntry(id="1", name="Kopi Susu", price=8000)])

    first = provider.load()
    first.clear()

    assert len(provider.load()) == 1


def test_protocols_satisfied():
    """Test implementations satisfy the protocols structurally."""
    assert isinstance(InMemoryCatalogProvider(), CatalogProvider)
    assert isinstance(JsonCatalogProvider("menu.json"), CatalogProvider)
    assert isinstance(ManualScheduler(), Scheduler)
    assert isinstance(AsyncioScheduler(), Scheduler)


def test_manual_scheduler_order():
    """Test callbacks fire in due order and cancelled ones never fire."""
    scheduler = ManualScheduler()
    fired = []

    late = scheduler.call_later(0.2, lambda: fired.append("late"))
    scheduler.call_later(0.1, lambda: fired.append("early"))
    handle = scheduler.call_later(0.15, lambda: fired.append("cancelled"))
    handle.cancel()

    assert scheduler.advance(0.15) == 1
    assert not late.fired
    assert scheduler.advance(0.15) == 1
    assert fired == ["early", "late"]
    assert late.fired
    assert handle.cancelled
    assert not handle.fired
    assert scheduler.now == pytest.approx(0.3)


def test_settings_validation():
    """Test invalid settings are rejected."""
    with pytest.raises(ValueError):
        Settings(threshold_percent=1.5)
    with pytest.raises(ValueError):
        Settings(debounce_ms=-5)
    with pytest.raises(ValueError):
        Settings(min_query_length=0)

    assert Settings(threshold_percent=0.4).max_results == 5
