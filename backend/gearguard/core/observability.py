"""
Logging and metrics.

Log lines are structlog events rendered as JSON (or readable console output
in development). Per-request identifiers are bound with structlog's
contextvars support, so every event logged while handling a request carries
its ``correlation_id`` and, once authenticated, its ``user_id``.
"""

import logging
import sys
import uuid

import structlog
from prometheus_client import Counter, Histogram

from .config import settings

# HTTP traffic, labelled by route template
REQUEST_COUNT = Counter(
    "gearguard_http_requests_total",
    "HTTP requests handled",
    ["method", "endpoint", "status"],
)
REQUEST_DURATION = Histogram(
    "gearguard_http_request_duration_seconds",
    "Time spent handling HTTP requests",
    ["method", "endpoint"],
)

# Maintenance workflow
REQUEST_STATUS_CHANGES = Counter(
    "gearguard_request_status_changes_total",
    "Maintenance request status changes by target status",
    ["status"],
)
REQUESTS_CREATED = Counter(
    "gearguard_requests_created_total",
    "Maintenance requests created",
    ["request_type"],
)


def _renderer():
    if settings.LOG_FORMAT == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=settings.ENVIRONMENT == "local")


def setup_structured_logging() -> None:
    """Configure structlog on top of the standard library logging module."""
    level = logging.getLevelName(settings.LOG_LEVEL.upper())
    if not isinstance(level, int):
        level = logging.INFO

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.format_exc_info,
            _renderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.LOG_SQL else logging.WARNING
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def set_correlation_id(correlation_id: str | None = None) -> str:
    """Start a fresh log context for one request and return its id."""
    correlation_id = correlation_id or str(uuid.uuid4())
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(correlation_id=correlation_id)
    return correlation_id


def set_user_id(user_id: str) -> None:
    structlog.contextvars.bind_contextvars(user_id=user_id)
