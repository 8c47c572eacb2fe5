"""
keyword-extraction-service - Structured Logging

Every module logs through structlog with snake_case event names and counts as
fields (``yake_extraction_complete``, ``sentences=3``). Document text never
reaches a log line: the ``redact_document_text`` processor strips it from any
event that carries it.

Patterns Applied:
- configure_logging() once per process (service lifespan module, CLI run)
- Request-scoped fields through structlog contextvars (extraction_context)

Anti-Patterns Avoided:
- #16: structlog.configure() called per get_logger() - PREVENTED via _configured flag
"""

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, Final

import structlog
from structlog.typing import EventDict, Processor

SERVICE_NAME: Final[str] = "keyword-extraction-service"

# Event fields that may hold a whole document
DOCUMENT_FIELDS: Final[frozenset[str]] = frozenset({"text", "texts", "document"})

_configured: bool = False


def add_service_info(
    logger: logging.Logger,  # noqa: ARG001 - Required by structlog interface
    method_name: str,  # noqa: ARG001 - Required by structlog interface
    event_dict: EventDict,
) -> EventDict:
    """Tag every entry with the service name."""
    event_dict["service"] = SERVICE_NAME
    return event_dict


def redact_document_text(
    logger: logging.Logger,  # noqa: ARG001 - Required by structlog interface
    method_name: str,  # noqa: ARG001 - Required by structlog interface
    event_dict: EventDict,
) -> EventDict:
    """Replace document fields with their length."""
    for name in sorted(event_dict.keys() & DOCUMENT_FIELDS):
        value = event_dict.pop(name)
        event_dict[f"{name}_length"] = len(value) if hasattr(value, "__len__") else None
    return event_dict


def _processors(json_output: bool) -> list[Processor]:
    renderer: Processor = (
        structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer()
    )
    return [
        structlog.contextvars.merge_contextvars,
        redact_document_text,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        add_service_info,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        renderer,
    ]


def configure_logging(
    log_level: str = "INFO",
    json_output: bool = True,
) -> None:
    """Configure structlog for the process.

    Log lines go to stderr so the CLI can keep stdout for its results. Later
    calls are no-ops until reset_logging().

    Args:
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL; unknown names mean INFO.
        json_output: JSON lines (service) or console rendering (CLI, local runs).
    """
    global _configured

    if _configured:
        return

    level = getattr(logging, log_level.upper(), logging.INFO)
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level)

    structlog.configure(
        processors=_processors(json_output),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    _configured = True


def get_logger(name: str) -> Any:
    """structlog logger for a module; never configures structlog itself."""
    return structlog.get_logger(name)


@contextmanager
def extraction_context(**fields: Any) -> Iterator[None]:
    """Bind fields to every log event emitted inside the block.

    Example:
        >>> with extraction_context(endpoint="yake", documents=1):
        ...     extractor.extract(text)
    """
    with structlog.contextvars.bound_contextvars(**fields):
        yield


def reset_logging() -> None:
    """Forget the configuration (tests)."""
    global _configured
    _configured = False
    structlog.contextvars.clear_contextvars()
    structlog.reset_defaults()
