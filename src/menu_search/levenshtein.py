"""Levenshtein edit distance and similarity.

The distance is the minimum number of single-character insertions,
deletions or substitutions needed to turn ``source`` into ``target``.
It is computed with the classic dynamic-programming table:

    t[i][0] = i
    t[0][j] = j
    t[i][j] = t[i-1][j-1]                                 if source[i-1] == target[j-1]
            = 1 + min(t[i-1][j], t[i][j-1], t[i-1][j-1])   otherwise

Time and space are O(len(source) * len(target)).
"""

from typing import Any

import numpy as np


def distance_matrix(source: str, target: str) -> np.ndarray:
    """Build the full dynamic-programming table for two strings.

    Args:
        source: Source string (the user's query)
        target: Target string (a product name)

    Returns:
        Integer array of shape (len(source) + 1, len(target) + 1) where
        cell [i, j] is the distance between source[:i] and target[:j]
    """
    m = len(source)
    n = len(target)

    table = np.zeros((m + 1, n + 1), dtype=np.int64)
    table[0, :] = np.arange(n + 1)
    table[:, 0] = np.arange(m + 1)

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            if source[i - 1] == target[j - 1]:
                table[i, j] = table[i - 1, j - 1]
            else:
                table[i, j] = 1 + min(
                    table[i - 1, j],  # deletion
                    table[i, j - 1],  # insertion
                    table[i - 1, j - 1],  # substitution
                )

    return table


def levenshtein_distance(source: str, target: str) -> int:
    """Compute the Levenshtein distance between two strings.

    Args:
        source: Source string
        target: Target string

    Returns:
        Edit distance (0 = identical)

    Example:
        ```python
        levenshtein_distance("ayam bkar", "ayam bakar")  # 1
        levenshtein_distance("", "teh")  # 3
        ```
    """
    if not source:
        return len(target)
    if not target:
        return len(source)

    return int(distance_matrix(source, target)[-1, -1])


def similarity(source: str, target: str) -> float:
    """Normalized similarity in [0, 1] (1 = identical).

    Defined as ``1 - distance / max(len(source), len(target))``, and 1.0 when
    both strings are empty.
    """
    longest = max(len(source), len(target))
    if longest == 0:
        return 1.0
    return 1.0 - levenshtein_distance(source, target) / longest


def debug_levenshtein(source: str, target: str) -> dict[str, Any]:
    """Return the distance together with the table that produced it.

    The matrix is None when either string is empty.
    """
    if not source or not target:
        return {
            "source": source,
            "target": target,
            "distance": max(len(source), len(target)),
            "similarity": similarity(source, target),
            "matrix": None,
        }

    matrix = distance_matrix(source, target)
    distance = int(matrix[-1, -1])
    return {
        "source": source,
        "target": target,
        "distance": distance,
        "similarity": 1.0 - distance / max(len(source), len(target)),
        "matrix": matrix,
    }


def format_matrix(source: str, target: str) -> str:
    """Render the distance table as aligned text, one row per source prefix."""
    info = debug_levenshtein(source, target)
    matrix = info["matrix"]
    if matrix is None:
        return f"One of the strings is empty. Distance: {info['distance']}"

    lines = [
        f'Source: "{source}"',
        f'Target: "{target}"',
        f"Distance: {info['distance']}",
        f"Similarity: {info['similarity']:.1%}",
        "",
        "   " + f"{'ε':>3}" + "".join(f"{ch:>3}" for ch in target),
    ]
    for i in range(len(source) + 1):
        label = "ε" if i == 0 else source[i - 1]
        lines.append(f"{label:>2} " + "".join(f"{int(v):>3}" for v in matrix[i]))
    return "\n".join(lines)
