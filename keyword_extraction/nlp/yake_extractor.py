"""YAKE Keyword Extractor - service-level wrapper.

Wraps the YAKE pipeline behind a config dataclass and a single extract()
call, the shape used by the HTTP API and the command line tool.

- extract() returns list[tuple[str, float]] sorted by relevance
- Respects top_n, n_gram_size, dedup_threshold and window_size config
- Stopword table resolved once per extractor and reused

Anti-Patterns Avoided:
- S1192: Constants extracted to module level
- S3776: Low cognitive complexity
- #12: Stopword table cached instead of rebuilt per call
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Final

from keyword_extraction.nlp.stopwords import load_stopwords, resolve_stopwords
from keyword_extraction.yake.extractor import Yake
from keyword_extraction.yake.params import (
    DEFAULT_NGRAM,
    DEFAULT_THRESHOLD,
    DEFAULT_WINDOW_SIZE,
    YakeParams,
)

# =============================================================================
# Module Constants (S1192 compliance)
# =============================================================================

DEFAULT_TOP_N: Final[int] = 20


# =============================================================================
# Configuration Dataclass
# =============================================================================


@dataclass
class YAKEConfig:
    """Configuration for the YAKE keyword extractor.

    Attributes:
        top_n: Maximum number of keywords to extract.
        n_gram_size: Maximum n-gram size (1=single words, 3=up to trigrams).
        dedup_threshold: Similarity ratio at which near-duplicates are dropped.
        window_size: Window size for neighbor context.
        stopwords_path: Optional JSON file of extra stopwords.
        merge_stopwords: Merge the file with the English table (True) or
            use it alone (False).
        punctuation: Optional punctuation table; None selects the default.
    """

    top_n: int = DEFAULT_TOP_N
    n_gram_size: int = DEFAULT_NGRAM
    dedup_threshold: float = DEFAULT_THRESHOLD
    window_size: int = DEFAULT_WINDOW_SIZE
    stopwords_path: str | None = None
    merge_stopwords: bool = True
    punctuation: frozenset[str] | None = None


# =============================================================================
# YAKEExtractor Class
# =============================================================================


class YAKEExtractor:
    """YAKE keyword extractor wrapper.

    Extracts keywords using YAKE's statistical approach:
    - Position of terms in the document
    - Word frequency, casing and dispersion over sentences
    - Word relatedness to context

    Scores: Higher is better (1.0 = most relevant).
    """

    def __init__(
        self,
        config: YAKEConfig | None = None,
        stop_words: Iterable[str] | None = None,
    ) -> None:
        """Initialize extractor with optional configuration.

        Args:
            config: Extraction configuration. Defaults to YAKEConfig().
            stop_words: Explicit stopword table. When given, it is used as is
                and config.stopwords_path is ignored.

        Raises:
            FileNotFoundError: If config.stopwords_path does not exist.
            ConfigurationError: If n_gram_size, window_size or
                dedup_threshold is out of range.
        """
        self.config = config or YAKEConfig()
        if stop_words is not None:
            self._stop_words = frozenset(word.lower() for word in stop_words)
        elif self.config.stopwords_path is not None:
            self._stop_words = resolve_stopwords(
                load_stopwords(self.config.stopwords_path),
                merge=self.config.merge_stopwords,
            )
        else:
            self._stop_words = resolve_stopwords()

        # Reject a bad config here rather than on the first extract() call
        self._params("")

    @property
    def stop_words(self) -> frozenset[str]:
        return self._stop_words

    def _params(self, text: str) -> YakeParams:
        return YakeParams.build(
            text,
            self._stop_words,
            punctuation=self.config.punctuation,
            threshold=self.config.dedup_threshold,
            ngram=self.config.n_gram_size,
            window_size=self.config.window_size,
        )

    def build(self, text: str) -> Yake:
        """Run the pipeline on text and return the full Yake result."""
        return Yake(self._params(text))

    def extract(self, text: str) -> list[tuple[str, float]]:
        """Extract keywords from text using YAKE.

        Args:
            text: Input text to extract keywords from.

        Returns:
            List of (keyword, score) tuples sorted by score descending.
            Higher scores indicate more relevant keywords.
        """
        # Handle empty or whitespace-only text
        if not text or not text.strip():
            return []

        return self.build(text).get_ranked_keyword_scores(self.config.top_n)
