"""
GearGuard ASGI application.

Run with ``uvicorn gearguard.main:app``.
"""

import time
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import sentry_sdk
from fastapi import FastAPI, Request, Response
from fastapi.routing import APIRoute
from sqlmodel import Session
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.middleware.cors import CORSMiddleware

from gearguard.api.errors import register_exception_handlers
from gearguard.api.main import api_router
from gearguard.core.config import settings
from gearguard.core.db import create_tables, engine, init_db
from gearguard.core.observability import (
    REQUEST_COUNT,
    REQUEST_DURATION,
    get_logger,
    set_correlation_id,
    setup_structured_logging,
)

CORRELATION_HEADER = "X-Correlation-ID"

logger = get_logger(__name__)


class ObservabilityMiddleware(BaseHTTPMiddleware):
    """Tag each request with a correlation id, log it and record its metrics."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        correlation_id = set_correlation_id(request.headers.get(CORRELATION_HEADER))
        started = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
        except Exception:
            logger.exception("Unhandled error", method=request.method, path=request.url.path)
            raise
        finally:
            elapsed = time.perf_counter() - started
            # Label by route template so ids do not blow up the series count
            route = request.scope.get("route")
            endpoint = getattr(route, "path", request.url.path)
            REQUEST_COUNT.labels(
                method=request.method, endpoint=endpoint, status=str(status_code)
            ).inc()
            REQUEST_DURATION.labels(method=request.method, endpoint=endpoint).observe(
                elapsed
            )

        response.headers[CORRELATION_HEADER] = correlation_id
        logger.info(
            "Request handled",
            method=request.method,
            path=request.url.path,
            status_code=status_code,
            duration_ms=round(elapsed * 1000, 2),
        )
        return response


def custom_generate_unique_id(route: APIRoute) -> str:
    return f"{route.tags[0]}-{route.name}"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    setup_structured_logging()
    if settings.CREATE_TABLES_ON_STARTUP:
        create_tables()
    with Session(engine) as session:
        init_db(session)
    logger.info(
        "GearGuard started",
        environment=settings.ENVIRONMENT,
        api_prefix=settings.API_STR,
    )
    yield
    logger.info("GearGuard stopped")


if settings.SENTRY_DSN and settings.ENVIRONMENT != "local":
    sentry_sdk.init(
        dsn=str(settings.SENTRY_DSN),
        environment=settings.ENVIRONMENT,
        traces_sample_rate=0.1,
    )

app = FastAPI(
    title=settings.PROJECT_NAME,
    summary="Maintenance requests, equipment and teams.",
    version="1.0.0",
    openapi_url=f"{settings.API_STR}/openapi.json",
    generate_unique_id_function=custom_generate_unique_id,
    lifespan=lifespan,
)

register_exception_handlers(app)
app.add_middleware(ObservabilityMiddleware)

if settings.all_cors_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.all_cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[CORRELATION_HEADER],
    )

app.include_router(api_router, prefix=settings.API_STR)
