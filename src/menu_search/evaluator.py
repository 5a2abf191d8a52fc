"""
Evaluation utilities for the menu search.

This module measures how well the fuzzy search finds the intended product
for labelled queries, and sweeps the tolerance threshold to tune it.
"""

import time
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from menu_search.engine import MatchEngine, normalize
from menu_search.entities import CatalogEntry


@dataclass
class EvalResult:
    """Result of an evaluation run at one threshold."""

    threshold: float
    total_queries: int = 0
    correct_top1: int = 0
    true_positives: int = 0
    false_positives: int = 0
    true_negatives: int = 0
    false_negatives: int = 0
    avg_search_time_ms: float = 0.0

    @property
    def accuracy(self) -> float:
        """Share of queries whose top result (or lack of one) was right."""
        if self.total_queries == 0:
            return 0.0
        return (self.correct_top1 + self.true_negatives) / self.total_queries

    @property
    def precision(self) -> float:
        """Calculate precision (TP / (TP + FP))."""
        denominator = self.true_positives + self.false_positives
        if denominator == 0:
            return 0.0
        return self.true_positives / denominator

    @property
    def recall(self) -> float:
        """Calculate recall (TP / (TP + FN))."""
        denominator = self.true_positives + self.false_negatives
        if denominator == 0:
            return 0.0
        return self.true_positives / denominator

    @property
    def f1_score(self) -> float:
        """Calculate F1 score (2 * precision * recall / (precision + recall))."""
        p = self.precision
        r = self.recall
        if p + r == 0:
            return 0.0
        return 2 * p * r / (p + r)

    def to_dict(self) -> dict[str, float]:
        """Convert to dictionary."""
        return {
            "threshold": self.threshold,
            "accuracy": self.accuracy,
            "precision": self.precision,
            "recall": self.recall,
            "f1_score": self.f1_score,
            "total_queries": self.total_queries,
            "correct_top1": self.correct_top1,
            "avg_search_time_ms": self.avg_search_time_ms,
        }


@dataclass
class LabelledQuery:
    """A query with the product it should find."""

    query: str
    expected_name: str | None  # None if nothing should match


class SearchEvaluator:
    """Evaluator for fuzzy search quality against a fixed catalog."""

    def __init__(self, catalog: Sequence[CatalogEntry]) -> None:
        """
        Initialize the evaluator.

        Args:
            catalog: The catalog every query is searched against.
        """
        self.catalog = list(catalog)
        self.results: list[EvalResult] = []

    def evaluate_threshold(
        self,
        threshold: float,
        queries: list[LabelledQuery],
    ) -> EvalResult:
        """
        Evaluate search quality at a specific threshold.

        A returned match counts as a true positive when the expected product
        appears anywhere in the results, and as a false positive otherwise.

        Args:
            threshold: The tolerance fraction to test (0-1).
            queries: Labelled queries to run.

        Returns:
            EvalResult with metrics for this threshold.
        """
        engine = MatchEngine(threshold_percent=threshold)
        result = EvalResult(threshold=threshold)
        total_search_time = 0.0

        for labelled in queries:
            start_time = time.perf_counter()
            matches = engine.search(labelled.query, self.catalog)
            total_search_time += (time.perf_counter() - start_time) * 1000

            result.total_queries += 1
            expected = normalize(labelled.expected_name) if labelled.expected_name else None
            names = [m.normalized_name for m in matches]

            if expected is None:
                if names:
                    result.false_positives += 1
                else:
                    result.true_negatives += 1
                continue

            if expected in names:
                result.true_positives += 1
                if names[0] == expected:
                    result.correct_top1 += 1
            else:
                result.false_negatives += 1
                if names:
                    result.false_positives += 1

        if result.total_queries > 0:
            result.avg_search_time_ms = total_search_time / result.total_queries

        self.results.append(result)
        return result

    def sweep_thresholds(
        self,
        queries: list[LabelledQuery],
        min_threshold: float = 0.10,
        max_threshold: float = 0.60,
        steps: int = 6,
    ) -> list[EvalResult]:
        """
        Sweep across threshold values to find the best tolerance.

        Args:
            queries: Labelled queries to run.
            min_threshold: Minimum threshold to test.
            max_threshold: Maximum threshold to test.
            steps: Number of threshold steps to test.

        Returns:
            List of EvalResult for each threshold tested.
        """
        self.results = []

        for threshold in np.linspace(min_threshold, max_threshold, steps):
            self.evaluate_threshold(round(float(threshold), 4), queries)

        return self.results

    def find_optimal_threshold(
        self,
        metric: str = "f1_score",
    ) -> tuple[float, EvalResult]:
        """
        Find the optimal threshold based on a metric.

        Args:
            metric: Metric to optimize ('f1_score', 'precision', 'recall', 'accuracy').

        Returns:
            Tuple of (threshold, result) for the optimal threshold.
        """
        if not self.results:
            raise ValueError("No evaluation results available. Run sweep_thresholds first.")

        best_result = max(self.results, key=lambda r: getattr(r, metric))
        return best_result.threshold, best_result

    def print_summary(self) -> None:
        """Print a summary of all evaluation results."""
        if not self.results:
            print("No evaluation results available.")
            return

        print("\n" + "=" * 72)
        print("Search Evaluation Summary")
        print("=" * 72)
        print(f"{'Threshold':<12} {'Accuracy':<12} {'Precision':<12} {'Recall':<12} {'F1 Score':<12}")
        print("-" * 72)

        for result in self.results:
            print(
                f"{result.threshold:<12.2f} "
                f"{result.accuracy:<12.2%} "
                f"{result.precision:<12.2%} "
                f"{result.recall:<12.2%} "
                f"{result.f1_score:<12.2%}"
            )

        print("=" * 72)

        for metric in ["f1_score", "precision", "recall", "accuracy"]:
            threshold, result = self.find_optimal_threshold(metric)
            print(f"Best {metric}: {threshold:.2f} ({getattr(result, metric):.2%})")
