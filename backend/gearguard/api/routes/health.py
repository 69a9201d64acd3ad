"""
Health and metrics endpoints.

Both are unauthenticated so load balancers and scrapers can reach them.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Response
from fastapi.responses import JSONResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from gearguard.core.observability import get_logger
from gearguard.infrastructure.database.dependencies import SessionDep

logger = get_logger(__name__)
router = APIRouter(tags=["health"])


@router.get("/health", summary="Service and database health")
def get_health_status(session: SessionDep) -> JSONResponse:
    """Run ``SELECT 1`` against the database; 503 when it fails."""
    timestamp = datetime.now(timezone.utc).isoformat()
    try:
        session.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error("Health check failed", error=str(e))
        return JSONResponse(
            status_code=503,
            content={
                "status": "unhealthy",
                "database": "unreachable",
                "timestamp": timestamp,
            },
        )

    return JSONResponse(
        content={"status": "healthy", "database": "ok", "timestamp": timestamp}
    )


@router.get("/metrics", summary="Prometheus metrics", include_in_schema=False)
def metrics() -> Response:
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
