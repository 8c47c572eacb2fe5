"""
keyword-extraction-service - Application Entry Point

    uvicorn keyword_extraction.main:app
    keyword-extraction-service            (console script, see run())

Startup builds the default extractor from Settings (stopword file included),
so a bad KWX_* value or a missing stopwords file stops the process before it
reports ready instead of failing the first request.

Patterns Applied:
- Lifespan context manager
- One-time configure_logging() at import

Anti-Patterns Avoided:
- Deprecated @app.on_event - using modern lifespan pattern
- structlog.configure() per request - one-time at startup
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from keyword_extraction.api.health import get_health_service
from keyword_extraction.api.health import router as health_router
from keyword_extraction.api.yake import (
    get_default_extractor,
    reset_default_extractor,
    yake_router,
)
from keyword_extraction.core.config import get_settings
from keyword_extraction.core.logging import configure_logging, get_logger

settings = get_settings()

configure_logging(
    log_level=settings.log_level,
    json_output=settings.log_json,
)

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Build the default extractor on startup, drop it on shutdown."""
    logger.info(
        "startup",
        service=settings.service_name,
        version=settings.version,
        environment=settings.environment,
    )

    extractor = get_default_extractor()
    get_health_service().mark_ready(extractor)
    logger.info(
        "extractor_ready",
        stopwords=len(extractor.stop_words),
        ngram=extractor.config.n_gram_size,
        window_size=extractor.config.window_size,
        threshold=extractor.config.dedup_threshold,
    )
    app.state.environment = settings.environment

    yield

    logger.info("shutdown", service=settings.service_name)
    get_health_service().mark_not_ready()
    reset_default_extractor()


app = FastAPI(
    title=settings.service_name,
    description="Unsupervised YAKE keyword extraction from single documents",
    version=settings.version,
    docs_url="/docs" if settings.environment != "production" else None,
    redoc_url="/redoc" if settings.environment != "production" else None,
    lifespan=lifespan,
)

app.include_router(health_router)
app.include_router(yake_router, prefix="/api")


@app.get("/", include_in_schema=False)
async def root() -> dict[str, str]:
    return {
        "service": settings.service_name,
        "version": settings.version,
        "docs": "/docs",
    }


def run() -> None:
    """Serve the app with uvicorn on the configured host and port."""
    uvicorn.run(
        "keyword_extraction.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
