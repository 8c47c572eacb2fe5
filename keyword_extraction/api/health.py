"""
keyword-extraction-service - Health API Routes

- GET /health: liveness, always 200
- GET /ready: 200 with the default extraction parameters once the lifespan
  handler has built the default extractor, 503 before that and after shutdown

Patterns Applied:
- HealthService holding readiness state, shared through get_health_service()
- Pydantic response models

Anti-Patterns Avoided:
- Bare except clauses
- Missing response models
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from keyword_extraction import __version__
from keyword_extraction.core.logging import SERVICE_NAME, get_logger
from keyword_extraction.nlp.yake_extractor import YAKEExtractor

router = APIRouter(tags=["health"])

logger = get_logger(__name__)


# =============================================================================
# Response Models
# =============================================================================


class HealthResponse(BaseModel):
    """Liveness payload."""
    status: str
    version: str
    service: str


class ExtractorSummary(BaseModel):
    """Parameters of the extractor that serves requests without overrides."""
    top_n: int
    ngram: int
    window_size: int
    threshold: float
    stopwords: int


class ReadinessResponse(BaseModel):
    """Readiness payload."""
    status: str
    checks: dict[str, bool]
    extractor: ExtractorSummary | None = None


# =============================================================================
# Health Service
# =============================================================================


class HealthService:
    """Tracks whether the default extractor is available."""

    def __init__(self, version: str = __version__):
        self._version = version
        self._extractor: YAKEExtractor | None = None

    def check_health(self) -> dict[str, Any]:
        return {
            "status": "healthy",
            "version": self._version,
            "service": SERVICE_NAME,
        }

    def check_readiness(self) -> tuple[dict[str, Any], bool]:
        """Readiness payload and whether the service can take requests."""
        extractor = self._extractor
        checks = {"extractor_ready": extractor is not None}
        is_ready = all(checks.values())

        result: dict[str, Any] = {
            "status": "ready" if is_ready else "not_ready",
            "checks": checks,
        }
        if extractor is not None:
            result["extractor"] = {
                "top_n": extractor.config.top_n,
                "ngram": extractor.config.n_gram_size,
                "window_size": extractor.config.window_size,
                "threshold": extractor.config.dedup_threshold,
                "stopwords": len(extractor.stop_words),
            }
        return result, is_ready

    def mark_ready(self, extractor: YAKEExtractor) -> None:
        """Called by the lifespan handler once the default extractor is built."""
        self._extractor = extractor

    def mark_not_ready(self) -> None:
        self._extractor = None


_health_service = HealthService()


def get_health_service() -> HealthService:
    return _health_service


# =============================================================================
# Endpoints
# =============================================================================


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health Check",
    description="Liveness probe",
)
async def health_check() -> HealthResponse:
    data = get_health_service().check_health()
    logger.debug("health_check", status=data["status"])
    return HealthResponse(**data)


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    responses={
        200: {"description": "Default extractor built"},
        503: {"description": "Default extractor not built yet"},
    },
    summary="Readiness Check",
    description="Readiness probe reporting the default extraction parameters",
)
async def readiness_check() -> JSONResponse:
    """200 when ready, 503 otherwise."""
    data, is_ready = get_health_service().check_readiness()
    status_code = status.HTTP_200_OK if is_ready else status.HTTP_503_SERVICE_UNAVAILABLE

    logger.debug("readiness_check", status=data["status"], is_ready=is_ready)
    return JSONResponse(content=data, status_code=status_code)
