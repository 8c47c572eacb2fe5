"""Grapheme-aware Levenshtein distance and similarity ratio.

Distances are counted over extended grapheme clusters, not code points, so
that a base letter with a combining accent counts as one edit unit. The
edit-distance kernel is rapidfuzz's Levenshtein, which accepts any sequence
of hashables (here: lists of grapheme strings).

    ratio(a, b) = 1 - distance(a, b) / max(len(a), len(b))

with ratio = 0.0 when both strings are empty.
"""

from __future__ import annotations

from collections.abc import Sequence

from rapidfuzz.distance import Levenshtein as RapidLevenshtein

from keyword_extraction.nlp.tokenizer import graphemes


def grapheme_distance(first: Sequence[str], second: Sequence[str]) -> int:
    """Edit distance between two grapheme sequences."""
    if list(first) == list(second):
        return 0
    return int(RapidLevenshtein.distance(list(first), list(second)))


def grapheme_ratio(first: Sequence[str], second: Sequence[str]) -> float:
    """Similarity ratio between two grapheme sequences."""
    max_len = max(len(first), len(second))
    if max_len == 0:
        return 0.0
    return 1.0 - grapheme_distance(first, second) / max_len


class Levenshtein:
    """Levenshtein comparison of two strings.

    Example:
        >>> Levenshtein("data store", "data stores").ratio()
        0.9090909090909091
    """

    def __init__(self, first: str, second: str) -> None:
        self.first = first
        self.second = second
        self._first_graphemes = graphemes(first)
        self._second_graphemes = graphemes(second)
        self.distance = grapheme_distance(self._first_graphemes, self._second_graphemes)

    def ratio(self) -> float:
        max_len = max(len(self._first_graphemes), len(self._second_graphemes))
        if max_len == 0:
            return 0.0
        return 1.0 - self.distance / max_len
