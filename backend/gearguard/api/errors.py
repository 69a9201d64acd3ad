"""
Exception handlers mapping domain errors to HTTP responses.

Nothing is retried; every error surfaces to the caller directly.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response

from gearguard.core.observability import get_logger
from gearguard.domain.shared.exceptions import (
    AuthError,
    DatabaseError,
    EntityAlreadyExistsError,
    EntityNotFoundError,
    ErrorType,
    ValidationError,
)

logger = get_logger(__name__)


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    logger.info("Validation failed", path=request.url.path, field=exc.field_name)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=exc.to_dict())


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = [
        {
            "loc": [str(part) for part in error.get("loc", ())],
            "msg": error.get("msg"),
            "type": error.get("type"),
        }
        for error in exc.errors()
    ]
    logger.info("Malformed request", path=request.url.path, errors=len(errors))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "type": ErrorType.VALIDATION.value,
            "message": "Request payload is malformed",
            "details": errors,
        },
    )


async def not_found_handler(request: Request, exc: EntityNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=exc.to_dict())


async def conflict_handler(
    request: Request, exc: EntityAlreadyExistsError
) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_409_CONFLICT, content=exc.to_dict())


async def auth_error_handler(request: Request, exc: AuthError) -> Response:
    # Same empty answer for missing, malformed, expired and bad credentials
    logger.info("Unauthorized", path=request.url.path, reason=exc.message)
    return Response(status_code=status.HTTP_401_UNAUTHORIZED)


async def database_error_handler(request: Request, exc: DatabaseError) -> JSONResponse:
    logger.error("Storage failure", path=request.url.path, error=exc.message)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"type": ErrorType.REPOSITORY.value, "message": "Storage failure"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(EntityNotFoundError, not_found_handler)
    app.add_exception_handler(EntityAlreadyExistsError, conflict_handler)
    app.add_exception_handler(AuthError, auth_error_handler)
    app.add_exception_handler(DatabaseError, database_error_handler)
