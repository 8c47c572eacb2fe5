"""
YAKE Keywords API Endpoint

POST /api/v1/yake - Extract ranked keywords with scores from one document
POST /api/v1/yake/batch - Same extraction for a list of documents

Patterns Applied:
- FastAPI router pattern
- Pydantic request/response models with validation
- Processing time tracking in metadata

Anti-Patterns Avoided:
- S1192: Constants for duplicated strings
- #2.2: Full type annotations
- #12: Default extractor built once and reused across requests
"""

from __future__ import annotations

import time

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, Field

from keyword_extraction.core.config import get_settings
from keyword_extraction.core.exceptions import ConfigurationError
from keyword_extraction.core.logging import extraction_context, get_logger
from keyword_extraction.nlp.stopwords import resolve_stopwords
from keyword_extraction.nlp.yake_extractor import YAKEConfig, YAKEExtractor

logger = get_logger(__name__)

# =============================================================================
# Module Constants (S1192 compliance)
# =============================================================================

API_TAG: str = "yake"
MIN_TOP_N: int = 0
MAX_TOP_N: int = 100
MAX_NGRAM: int = 10
MAX_WINDOW_SIZE: int = 10
MAX_BATCH_SIZE: int = 100


# =============================================================================
# Request/Response Models
# =============================================================================


class ExtractionOptions(BaseModel):
    """Per-request overrides; unset fields fall back to service settings."""

    top_n: int | None = Field(default=None, ge=MIN_TOP_N, le=MAX_TOP_N)
    ngram: int | None = Field(default=None, ge=1, le=MAX_NGRAM)
    window_size: int | None = Field(default=None, ge=1, le=MAX_WINDOW_SIZE)
    threshold: float | None = Field(default=None, gt=0.0, le=1.0)
    stop_words: list[str] | None = Field(
        default=None,
        description="Stopwords for this request",
    )
    merge_stopwords: bool = Field(
        default=True,
        description="Merge stop_words with the English table instead of replacing it",
    )
    punctuation: list[str] | None = Field(
        default=None,
        description="Punctuation symbols; defaults to ASCII and Latin typographic marks",
    )

    def has_overrides(self) -> bool:
        return any(
            value is not None
            for value in (
                self.top_n,
                self.ngram,
                self.window_size,
                self.threshold,
                self.stop_words,
                self.punctuation,
            )
        )


class YakeRequest(ExtractionOptions):
    """Request body for single-document extraction."""

    text: str = Field(..., description="Document to extract keywords from")


class YakeBatchRequest(ExtractionOptions):
    """Request body for multi-document extraction."""

    texts: list[str] = Field(
        ...,
        description="Documents to extract keywords from",
        max_length=MAX_BATCH_SIZE,
    )


class KeywordWithScore(BaseModel):
    """A single keyword with its YAKE score (1.0 = most relevant).

    Scores are relative to the document: the least relevant returned keyword
    scores 0.0, which does not mean "not found".
    """

    keyword: str
    score: float = Field(
        ge=0.0,
        le=1.0,
        description="Relative relevance; 0.0 for the least relevant keyword of the document",
    )


class YakeResponse(BaseModel):
    """Response from single-document extraction."""

    keywords: list[KeywordWithScore]
    processing_time_ms: float = Field(..., ge=0)


class YakeBatchResponse(BaseModel):
    """Response from multi-document extraction, one keyword list per text."""

    keywords: list[list[KeywordWithScore]]
    processing_time_ms: float = Field(..., ge=0)


# =============================================================================
# Extractor Resolution
# =============================================================================

yake_router = APIRouter(prefix="/v1", tags=[API_TAG])

# Singleton extractor instance (Anti-Pattern #12: reuse instead of creating per request)
_extractor: YAKEExtractor | None = None


def get_default_extractor() -> YAKEExtractor:
    """Get or create the extractor configured from service settings."""
    global _extractor
    if _extractor is None:
        settings = get_settings()
        _extractor = YAKEExtractor(
            YAKEConfig(
                top_n=settings.yake_top_n,
                n_gram_size=settings.yake_ngram,
                dedup_threshold=settings.yake_threshold,
                window_size=settings.yake_window_size,
                stopwords_path=settings.stopwords_path,
                merge_stopwords=settings.merge_stopwords,
            )
        )
    return _extractor


def reset_default_extractor() -> None:
    """Drop the cached extractor (tests, settings reload)."""
    global _extractor
    _extractor = None


def _resolve_extractor(options: ExtractionOptions) -> YAKEExtractor:
    default = get_default_extractor()
    if not options.has_overrides():
        return default

    config = YAKEConfig(
        top_n=options.top_n if options.top_n is not None else default.config.top_n,
        n_gram_size=options.ngram or default.config.n_gram_size,
        dedup_threshold=options.threshold or default.config.dedup_threshold,
        window_size=options.window_size or default.config.window_size,
        punctuation=(
            frozenset(options.punctuation)
            if options.punctuation is not None
            else default.config.punctuation
        ),
    )
    stop_words = (
        resolve_stopwords(options.stop_words, merge=options.merge_stopwords)
        if options.stop_words is not None
        else default.stop_words
    )
    return YAKEExtractor(config, stop_words=stop_words)


def _to_models(pairs: list[tuple[str, float]]) -> list[KeywordWithScore]:
    return [KeywordWithScore(keyword=keyword, score=score) for keyword, score in pairs]


# =============================================================================
# Endpoints
# =============================================================================


@yake_router.post("/yake", response_model=YakeResponse)
def extract_keywords(request: YakeRequest) -> YakeResponse:
    """Extract ranked keywords from one document.

    Example:
        POST /api/v1/yake
        {"text": "Rust developers write Rust code.", "top_n": 3}

        Response:
        {
            "keywords": [{"keyword": "rust developers", "score": 1.0}, ...],
            "processing_time_ms": 3.1
        }
    """
    start_time = time.perf_counter()

    try:
        with extraction_context(endpoint="yake", documents=1):
            extractor = _resolve_extractor(request)
            pairs = extractor.extract(request.text)
    except ConfigurationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid extraction parameters: {e!s}",
        ) from e
    except Exception as e:
        logger.exception("yake_extraction_failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Keyword extraction failed: {e!s}",
        ) from e

    processing_time_ms = (time.perf_counter() - start_time) * 1000
    return YakeResponse(keywords=_to_models(pairs), processing_time_ms=processing_time_ms)


@yake_router.post("/yake/batch", response_model=YakeBatchResponse)
def extract_keywords_batch(request: YakeBatchRequest) -> YakeBatchResponse:
    """Extract ranked keywords from each document of a list.

    Documents are independent: each one is a separate YAKE run.
    """
    start_time = time.perf_counter()

    try:
        with extraction_context(endpoint="yake_batch", documents=len(request.texts)):
            extractor = _resolve_extractor(request)
            results = [_to_models(extractor.extract(text)) for text in request.texts]
    except ConfigurationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid extraction parameters: {e!s}",
        ) from e
    except Exception as e:
        logger.exception("yake_batch_extraction_failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Batch keyword extraction failed: {e!s}",
        ) from e

    processing_time_ms = (time.perf_counter() - start_time) * 1000
    return YakeBatchResponse(keywords=results, processing_time_ms=processing_time_ms)
