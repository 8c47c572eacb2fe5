"""Candidate scoring, near-duplicate suppression and score normalization.

Raw candidate score, lower = more relevant:

    S(kw) = prod(H) / (tf(kw) * (1 + sum(H)))

The product is seeded with the deduplication boost of the candidate key when
that key is a term that appears inside multi-word candidates, which penalizes
single words that act as hubs for many phrases.

Public score: raw scores of the surviving candidates are divided by their
maximum and inverted, so 1.0 is the most relevant candidate and 0.0 the least.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Final

from keyword_extraction.nlp.tokenizer import graphemes
from keyword_extraction.yake.candidate_selection import Candidate
from keyword_extraction.yake.feature_extraction import EPSILON
from keyword_extraction.yake.levenshtein import grapheme_ratio

# Degenerate H sum that would zero the denominator
_DEGENERATE_SUM: Final[float] = -1.0


def score_candidate(
    candidate: Candidate,
    weights: Mapping[str, float],
    dedup_map: Mapping[str, float],
) -> float:
    """Raw score of one candidate (lower = more relevant)."""
    product = float(dedup_map.get(candidate.key, 1.0)) or 1.0
    total = 0.0
    for term in candidate.lexical_form:
        weight = weights.get(term, EPSILON)
        product *= weight
        total += weight

    if total == _DEGENERATE_SUM:
        total = 1.0 - EPSILON

    return product / ((candidate.tf or EPSILON) * (1.0 + total))


def score_candidates(
    candidates: Mapping[str, Candidate],
    weights: Mapping[str, float],
    dedup_map: Mapping[str, float],
) -> dict[str, float]:
    """Raw scores of every candidate, in candidate order."""
    return {
        key: score_candidate(candidate, weights, dedup_map)
        for key, candidate in candidates.items()
    }


def filter_similar(keys: list[str], threshold: float) -> list[str]:
    """Drop keys that are near-duplicates of an earlier surviving key.

    Keys are visited in order; a key survives when its similarity ratio to
    every earlier survivor is below ``threshold``.
    """
    survivors: list[tuple[str, list[str]]] = []
    for key in keys:
        key_graphemes = graphemes(key)
        key_len = len(key_graphemes)
        duplicate = False
        for _, kept_graphemes in survivors:
            kept_len = len(kept_graphemes)
            longest = max(key_len, kept_len)
            # distance >= length difference bounds the ratio from above
            if longest and 1.0 - abs(key_len - kept_len) / longest < threshold:
                continue
            if grapheme_ratio(key_graphemes, kept_graphemes) >= threshold:
                duplicate = True
                break
        if not duplicate:
            survivors.append((key, key_graphemes))
    return [key for key, _ in survivors]


def normalize_scores(raw_scores: Mapping[str, float]) -> dict[str, float]:
    """Map raw scores to [0, 1] with 1.0 = most relevant."""
    if not raw_scores:
        return {}
    max_raw = max(raw_scores.values())
    if max_raw <= 0.0:
        return {key: 1.0 for key in raw_scores}
    return {key: 1.0 - raw / max_raw for key, raw in raw_scores.items()}
