"""YAKE pipeline and public facade.

Stages, each consuming the previous stage's output and producing a new map:

    sentences -> candidates + context -> term weights -> raw candidate scores
              -> near-duplicate suppression -> normalized, ranked scores

Usage:
    >>> yake = Yake(YakeParams.with_defaults(text, stop_words))
    >>> yake.get_ranked_keywords(10)
    >>> yake.get_ranked_keyword_scores(10)
    >>> yake.get_score("rust developer")

Scores are in [0, 1], higher = more relevant. A keyword that is not in the
result scores 0.0, like the least relevant keyword that is.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from keyword_extraction.core.logging import get_logger
from keyword_extraction.nlp.ranking import get_ranked_scores, get_ranked_strings
from keyword_extraction.nlp.tokenizer import build_sentences
from keyword_extraction.yake.candidate_selection import (
    Candidate,
    CandidateSelection,
    build_dedup_map,
)
from keyword_extraction.yake.context_builder import ContextBuilder
from keyword_extraction.yake.feature_extraction import FeatureExtraction, FeaturedTerm
from keyword_extraction.yake.params import YakeParams
from keyword_extraction.yake.scoring import (
    filter_similar,
    normalize_scores,
    score_candidates,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class YakeResult:
    """Output of one pipeline run."""

    scores: dict[str, float] = field(default_factory=dict)
    candidates: dict[str, Candidate] = field(default_factory=dict)
    features: dict[str, FeaturedTerm] = field(default_factory=dict)


def build_yake(params: YakeParams) -> YakeResult:
    """Run the whole pipeline on one document.

    Never raises for any text: empty input gives an empty result.
    """
    punctuation = params.effective_punctuation

    sentences = build_sentences(params.text)
    logger.debug("yake_sentences_built", sentences=len(sentences))

    candidates = CandidateSelection(
        ngram=params.ngram,
        stop_words=params.stop_words,
        punctuation=punctuation,
    ).select(sentences)
    dedup_map = build_dedup_map(candidates)
    logger.debug(
        "yake_candidates_selected",
        candidates=len(candidates),
        hub_terms=len(dedup_map),
    )

    context = ContextBuilder(
        window_size=params.window_size,
        punctuation=punctuation,
    ).build(sentences)
    features = FeatureExtraction(context).extract()
    weights = {term: featured.weight for term, featured in features.items()}
    logger.debug("yake_features_computed", terms=len(features))

    raw_scores = score_candidates(candidates, weights, dedup_map)
    survivors = filter_similar(list(raw_scores), params.threshold)
    logger.debug(
        "yake_candidates_deduplicated",
        before=len(raw_scores),
        after=len(survivors),
    )

    scores = normalize_scores({key: raw_scores[key] for key in survivors})
    logger.info(
        "yake_extraction_complete",
        sentences=len(sentences),
        candidates=len(candidates),
        keywords=len(scores),
    )
    return YakeResult(
        scores=scores,
        candidates={key: candidates[key] for key in survivors},
        features=features,
    )


class Yake:
    """Keyword extractor for a single document.

    The whole pipeline runs in the constructor; every accessor afterwards
    reads the same immutable result.
    """

    def __init__(self, params: YakeParams) -> None:
        self.params = params
        self._result = build_yake(params)

    @classmethod
    def from_text(
        cls,
        text: str,
        stop_words: Iterable[str],
        **kwargs: Any,
    ) -> Yake:
        """Shortcut for Yake(YakeParams.build(text, stop_words, ...))."""
        return cls(YakeParams.build(text, stop_words, **kwargs))

    def get_score(self, keyword: str) -> float:
        """Score of a keyword, 0.0 when it is not in the result.

        The least relevant kept keyword also scores exactly 0.0; use
        ``keyword in get_keyword_scores_map()`` to tell the two apart.
        """
        return self._result.scores.get(keyword, 0.0)

    def get_ranked_keywords(self, n: int) -> list[str]:
        """Up to n keywords, most relevant first."""
        return get_ranked_strings(self._result.scores, n)

    def get_ranked_keyword_scores(self, n: int) -> list[tuple[str, float]]:
        """Up to n (keyword, score) pairs, most relevant first."""
        return get_ranked_scores(self._result.scores, n)

    def get_keyword_scores_map(self) -> Mapping[str, float]:
        """Read-only view of every keyword score."""
        return MappingProxyType(self._result.scores)

    def get_candidates(self) -> list[Candidate]:
        """Surviving candidates in order of first occurrence."""
        return list(self._result.candidates.values())

    def get_term_features(self) -> Mapping[str, FeaturedTerm]:
        """Read-only view of the per-term features."""
        return MappingProxyType(self._result.features)

    def __len__(self) -> int:
        return len(self._result.scores)
