"""Feature extraction: per-term statistics combined into one weight H.

For every term with at least one occurrence:

- tf: occurrence count
- casing: max(tf_upper, tf_capitalized) / (1 + ln(tf)), counting only
  occurrences that do not start their sentence
- frequency: tf / (mean_tf + std_tf + eps)
- position: ln(ln(3 + median(sentence indices)))
- relatedness: 1 + (wl + wr) * tf / tf_max, where wl and wr are the
  distinct/total ratios of the left and right neighbor multisets
- dispersion: distinct sentences of the term / sentence count

    H = (relatedness * position) / (casing + frequency / relatedness
                                     + dispersion / relatedness)

A lower H marks a more important term. mean_tf, std_tf and tf_max are
computed once over all terms; after that every term is scored independently.

Reference: Campos et al. (2020), YAKE! Keyword extraction from single
documents using multiple local features. Information Sciences 509, 257-289.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Final

import numpy as np

from keyword_extraction.nlp.tokenizer import grapheme_count
from keyword_extraction.yake.context_builder import (
    DocumentContext,
    NeighborContext,
    Occurrence,
)

EPSILON: Final[float] = float(np.finfo(np.float64).eps)

_EMPTY_CONTEXT: Final[NeighborContext] = NeighborContext()


@dataclass(frozen=True)
class FeaturedTerm:
    """Feature values of one term and their combined weight."""

    tf: int
    tf_upper: int
    tf_capitalized: int
    casing: float
    frequency: float
    position: float
    relatedness: float
    dispersion: float
    weight: float


@dataclass(frozen=True)
class DocumentStatistics:
    """Aggregates shared by every term of a document."""

    mean_tf: float
    std_tf: float
    max_tf: float
    sentence_count: int

    @classmethod
    def from_occurrences(
        cls,
        occurrences: Mapping[str, Sequence[Occurrence]],
        sentence_count: int,
    ) -> DocumentStatistics:
        tfs = np.fromiter(
            (len(items) for items in occurrences.values()),
            dtype=np.float64,
            count=len(occurrences),
        )
        if tfs.size == 0:
            return cls(mean_tf=0.0, std_tf=0.0, max_tf=0.0, sentence_count=sentence_count)
        return cls(
            mean_tf=float(np.mean(tfs)),
            std_tf=float(np.std(tfs)),
            max_tf=float(np.max(tfs)),
            sentence_count=sentence_count,
        )


def is_upper(word: str) -> bool:
    """All upper-case and longer than one grapheme (acronyms)."""
    return word.isupper() and grapheme_count(word) > 1


def is_capitalized(word: str) -> bool:
    """Upper-case initial followed only by lower-case letters, longer than one grapheme."""
    return (
        grapheme_count(word) > 1
        and word[:1].isupper()
        and all(char.islower() for char in word[1:])
    )


def count_casing(occurrences: Sequence[Occurrence]) -> tuple[int, int]:
    """Count (upper, capitalized) occurrences, skipping sentence-initial words."""
    tf_upper = 0
    tf_capitalized = 0
    for occurrence in occurrences:
        if occurrence.position == 0:
            continue
        if is_upper(occurrence.word):
            tf_upper += 1
        elif is_capitalized(occurrence.word):
            tf_capitalized += 1
    return tf_upper, tf_capitalized


def uniqueness_ratio(neighbors: Sequence[str]) -> float:
    """Distinct / total size of a neighbor multiset; 0.0 when empty."""
    if not neighbors:
        return 0.0
    return len(set(neighbors)) / (len(neighbors) + EPSILON)


def score_term(
    occurrences: Sequence[Occurrence],
    context: NeighborContext,
    stats: DocumentStatistics,
) -> FeaturedTerm:
    """Compute the features and the weight H of one term."""
    tf = len(occurrences)
    tf_upper, tf_capitalized = count_casing(occurrences)
    casing = max(tf_upper, tf_capitalized) / (1.0 + math.log(tf))

    frequency = tf / (stats.mean_tf + stats.std_tf + EPSILON)

    # Occurrences arrive in document order, so sentence indices are sorted
    sentence_indices = [occurrence.sentence_index for occurrence in occurrences]
    median_sentence = float(np.median(sentence_indices))
    position = math.log(math.log(3.0 + median_sentence))

    wl = uniqueness_ratio(context.left)
    wr = uniqueness_ratio(context.right)
    # max_tf >= tf >= 1 for any term that reaches this point
    relatedness = 1.0 + (wl + wr) * (tf / stats.max_tf)

    dispersion = len(set(sentence_indices)) / (stats.sentence_count + EPSILON)

    weight = (relatedness * position) / (
        casing + frequency / relatedness + dispersion / relatedness
    )

    return FeaturedTerm(
        tf=tf,
        tf_upper=tf_upper,
        tf_capitalized=tf_capitalized,
        casing=casing,
        frequency=frequency,
        position=position,
        relatedness=relatedness,
        dispersion=dispersion,
        weight=weight,
    )


class FeatureExtraction:
    """Scores every term of a document context."""

    def __init__(self, context: DocumentContext) -> None:
        self.context = context
        self.stats = DocumentStatistics.from_occurrences(
            context.occurrences, context.sentence_count
        )

    def extract(self) -> dict[str, FeaturedTerm]:
        """Features of every term that has at least one occurrence."""
        return {
            term: score_term(
                occurrences,
                self.context.contexts.get(term, _EMPTY_CONTEXT),
                self.stats,
            )
            for term, occurrences in self.context.occurrences.items()
            if occurrences
        }

    def weights(self) -> dict[str, float]:
        """Term -> H map."""
        return {term: featured.weight for term, featured in self.extract().items()}
