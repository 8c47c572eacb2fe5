"""Ranking helpers shared by every score map accessor.

Order: score descending, keyword ascending on ties. The tie-break makes the
ranking deterministic whatever the insertion order of the map.
"""

from __future__ import annotations

from collections.abc import Mapping


def sort_ranked_map(scores: Mapping[str, float]) -> list[tuple[str, float]]:
    """Sort a keyword -> score map into ranked (keyword, score) pairs."""
    return sorted(scores.items(), key=lambda item: (-item[1], item[0]))


def get_ranked_scores(scores: Mapping[str, float], n: int) -> list[tuple[str, float]]:
    """Top-n (keyword, score) pairs. n larger than the map returns everything."""
    if n <= 0:
        return []
    return sort_ranked_map(scores)[:n]


def get_ranked_strings(scores: Mapping[str, float], n: int) -> list[str]:
    """Top-n keywords without scores."""
    return [keyword for keyword, _ in get_ranked_scores(scores, n)]
