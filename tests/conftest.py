"""
Shared fixtures for the menu search tests.
"""

import pytest

from menu_search.entities import CatalogEntry
from menu_search.scheduling import ManualScheduler

SAMPLE_MENU = [
    ("1", "Nasi Goreng", 15000),
    ("2", "Nasi Goreng Spesial", 20000),
    ("3", "Nasi Uduk", 12000),
    ("4", "Ayam Goreng", 18000),
    ("5", "Ayam Bakar", 20000),
    ("6", "Mie Goreng", 13000),
    ("7", "Es Teh Manis", 5000),
    ("8", "Es Teh Tawar", 3000),
    ("9", "Es Jeruk", 7000),
    ("10", "Kopi Susu", 8000),
]


@pytest.fixture
def catalog():
    """The three-item catalog used by the search scenarios."""
    return [
        CatalogEntry(id="1", name="Nasi Goreng", price=15000),
        CatalogEntry(id="2", name="Nasi Goreng Spesial", price=20000),
        CatalogEntry(id="5", name="Ayam Bakar", price=20000),
    ]


@pytest.fixture
def menu():
    """A ten-item canteen menu."""
    return [CatalogEntry(id=i, name=name, price=price) for i, name, price in SAMPLE_MENU]


@pytest.fixture
def scheduler():
    """A virtual-clock scheduler starting at t=0."""
    return ManualScheduler()
