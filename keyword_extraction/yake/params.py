"""YAKE extraction parameters.

Two ways to build parameters, matching the two usual call sites:
- YakeParams.with_defaults(text, stop_words): punctuation table, threshold,
  n-gram size and window size take their defaults
- YakeParams.build(text, stop_words, punctuation, threshold, ngram, window_size)

Invalid values are rejected here, at construction time, with a
ConfigurationError. The pipeline never sees a zero window or n-gram size.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Final

from keyword_extraction.core.exceptions import ConfigurationError
from keyword_extraction.nlp.tokenizer import DEFAULT_PUNCTUATION

# =============================================================================
# Module Constants (S1192 compliance)
# =============================================================================

DEFAULT_THRESHOLD: Final[float] = 0.85
DEFAULT_NGRAM: Final[int] = 3
DEFAULT_WINDOW_SIZE: Final[int] = 2


def _string_set(values: Iterable[str], name: str) -> frozenset[str]:
    if isinstance(values, str):
        msg = f"{name} must be a collection of strings, not a single string"
        raise ConfigurationError(msg)
    items = frozenset(values)
    if not all(isinstance(item, str) for item in items):
        msg = f"{name} must only contain strings"
        raise ConfigurationError(msg)
    return items


@dataclass(frozen=True)
class YakeParams:
    """Parameters for one YAKE extraction.

    Attributes:
        text: The document to analyze.
        stop_words: Stopwords, compared against lower-cased words.
        punctuation: Punctuation symbols; None selects DEFAULT_PUNCTUATION.
        threshold: Similarity ratio in (0, 1] at or above which a candidate
            is dropped as a near-duplicate of an earlier one.
        ngram: Maximum number of words in a candidate (>= 1).
        window_size: Number of preceding words linked as neighbors (>= 1).
    """

    text: str
    stop_words: frozenset[str] = field(default_factory=frozenset)
    punctuation: frozenset[str] | None = None
    threshold: float = DEFAULT_THRESHOLD
    ngram: int = DEFAULT_NGRAM
    window_size: int = DEFAULT_WINDOW_SIZE

    def __post_init__(self) -> None:
        if not isinstance(self.text, str):
            msg = f"text must be a string, got {type(self.text).__name__}"
            raise ConfigurationError(msg)

        # Frozen dataclass: normalize collections through object.__setattr__
        object.__setattr__(
            self, "stop_words", _string_set(self.stop_words, "stop_words")
        )
        if self.punctuation is not None:
            object.__setattr__(
                self, "punctuation", _string_set(self.punctuation, "punctuation")
            )

        if isinstance(self.ngram, bool) or not isinstance(self.ngram, int) or self.ngram < 1:
            msg = f"ngram must be an integer >= 1, got {self.ngram!r}"
            raise ConfigurationError(msg)
        if (
            isinstance(self.window_size, bool)
            or not isinstance(self.window_size, int)
            or self.window_size < 1
        ):
            msg = f"window_size must be an integer >= 1, got {self.window_size!r}"
            raise ConfigurationError(msg)
        if (
            isinstance(self.threshold, bool)
            or not isinstance(self.threshold, (int, float))
            or not 0.0 < self.threshold <= 1.0
        ):
            msg = f"threshold must be in (0, 1], got {self.threshold!r}"
            raise ConfigurationError(msg)

    @property
    def effective_punctuation(self) -> frozenset[str]:
        """Punctuation table actually used by the pipeline."""
        return DEFAULT_PUNCTUATION if self.punctuation is None else self.punctuation

    @classmethod
    def with_defaults(cls, text: str, stop_words: Iterable[str]) -> YakeParams:
        """Parameters with default punctuation, threshold, ngram and window."""
        return cls(text=text, stop_words=stop_words)  # type: ignore[arg-type]

    @classmethod
    def build(
        cls,
        text: str,
        stop_words: Iterable[str],
        punctuation: Iterable[str] | None = None,
        threshold: float = DEFAULT_THRESHOLD,
        ngram: int = DEFAULT_NGRAM,
        window_size: int = DEFAULT_WINDOW_SIZE,
    ) -> YakeParams:
        """Parameters with every value given explicitly."""
        return cls(
            text=text,
            stop_words=stop_words,  # type: ignore[arg-type]
            punctuation=punctuation,  # type: ignore[arg-type]
            threshold=threshold,
            ngram=ngram,
            window_size=window_size,
        )
