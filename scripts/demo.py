#!/usr/bin/env python3
"""
Demo script for menu search.

This script demonstrates typo-tolerant search over a small canteen menu:
ranking, the edit-distance table, debouncing and threshold tuning.
"""

from menu_search import CatalogEntry, ManualScheduler, SearchSession
from menu_search.evaluator import LabelledQuery, SearchEvaluator
from menu_search.levenshtein import format_matrix

MENU = [
    CatalogEntry(id="1", name="Nasi Goreng", price=15000, stock=12),
    CatalogEntry(id="2", name="Nasi Goreng Spesial", price=20000, stock=4),
    CatalogEntry(id="3", name="Nasi Uduk", price=12000),
    CatalogEntry(id="4", name="Ayam Goreng", price=18000),
    CatalogEntry(id="5", name="Ayam Bakar", price=20000, stock=0),
    CatalogEntry(id="6", name="Mie Goreng", price=13000),
    CatalogEntry(id="7", name="Es Teh Manis", price=5000),
    CatalogEntry(id="8", name="Es Teh Tawar", price=3000),
    CatalogEntry(id="9", name="Es Jeruk", price=7000),
    CatalogEntry(id="10", name="Kopi Susu", price=8000),
]


def print_section(title: str) -> None:
    """Print a section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


def demo_search() -> None:
    """Demonstrate ranked typo-tolerant search."""
    print_section("Typo-Tolerant Search")

    session = SearchSession.create(scheduler=ManualScheduler(), catalog=MENU)

    queries = ["nasi goren", "nsi grng", "ayam bkar", "es teh", "pizza"]

    for query in queries:
        view = session.confirm(query)
        print(f"\n  Query: '{query}'")
        if view.is_empty:
            print("  ✗ No results")
            continue
        for candidate in view.results:
            print(
                f"  ✓ {candidate.entry.name:<22} "
                f"distance={candidate.distance} (max {candidate.max_distance}) "
                f"similarity={candidate.similarity:.2%}"
            )

    print("\n🔁 Repeating a query:")
    view = session.confirm("Nasi Goren")
    print(f"  from_cache={view.from_cache}, lookup={view.elapsed_ms:.3f}ms")
    print(f"  Cache stats: {session.cache.stats().to_dict()}")


def demo_matrix() -> None:
    """Show the edit-distance table for one pair."""
    print_section("Edit Distance Table")

    print()
    print(format_matrix("nasi goren", "nasi goreng"))


def demo_debounce() -> None:
    """Demonstrate debouncing on a virtual clock."""
    print_section("Debounced Typing")

    scheduler = ManualScheduler()
    session = SearchSession(
        scheduler=scheduler,
        catalog=MENU,
        on_publish=lambda view: print(
            f"  t={scheduler.now * 1000:>4.0f}ms  {view.status.value:<10} "
            f"'{view.query}' ({len(view.results)} results)"
        ),
        debounce_ms=280,
    )

    print("\n⌨️  Typing 'ayam bkar', one keystroke every 60ms:")
    text = ""
    for char in "ayam bkar":
        text += char
        session.on_input(text)
        scheduler.advance(0.06)

    scheduler.advance(0.3)
    print(f"\n  Searches executed: {session.metrics.total_searches}")
    print(f"  Last query: '{session.last_issued_query}'")


def demo_threshold_tuning() -> None:
    """Demonstrate threshold tuning."""
    print_section("Threshold Tuning")

    queries = [
        LabelledQuery("nasi goren", "Nasi Goreng"),
        LabelledQuery("nsi grng", "Nasi Goreng"),
        LabelledQuery("ayam bkar", "Ayam Bakar"),
        LabelledQuery("kopi susu", "Kopi Susu"),
        LabelledQuery("es jruk", "Es Jeruk"),
        LabelledQuery("pizza", None),
        LabelledQuery("burger", None),
    ]

    print(f"\n📋 Labelled queries: {len(queries)}")

    evaluator = SearchEvaluator(MENU)
    evaluator.sweep_thresholds(queries, min_threshold=0.10, max_threshold=0.60, steps=6)
    evaluator.print_summary()

    threshold, best = evaluator.find_optimal_threshold("f1_score")
    print(f"\n🎯 Best threshold by F1: {threshold:.2f} (F1={best.f1_score:.2%})")


def main() -> None:
    """Run all demos."""
    print("\n🚀 Menu Search Demo")
    print("=" * 70)
    print("Typo-tolerant product search with Levenshtein distance")

    try:
        demo_search()
        demo_matrix()
        demo_debounce()
        demo_threshold_tuning()

        print("\n" + "=" * 70)
        print("✅ Demo completed successfully!")
        print("=" * 70)

    except ValueError as e:
        print(f"\n❌ Error: {e}")


if __name__ == "__main__":
    main()
