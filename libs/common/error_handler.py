"""Global exception handlers for consistent error responses.

Usage:
    from libs.common.error_handler import add_exception_handlers

    app = FastAPI()
    add_exception_handlers(app)
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from libs.common.errors import (
    NotFoundError,
    PermissionDenied,
    StudioError,
    TransientUnavailable,
    ValidationFailure,
    VersionConflict,
)
from libs.common.logging import get_logger

logger = get_logger(__name__)

# Seconds a client should wait before retrying a transient failure.
RETRY_AFTER_SECONDS = 5

_STATUS_BY_ERROR = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ValidationFailure: status.HTTP_422_UNPROCESSABLE_ENTITY,
    PermissionDenied: status.HTTP_403_FORBIDDEN,
    VersionConflict: status.HTTP_409_CONFLICT,
    TransientUnavailable: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def status_for(exc: StudioError) -> int:
    for error_cls, status_code in _STATUS_BY_ERROR.items():
        if isinstance(exc, error_cls):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def studio_error_handler(request: Request, exc: StudioError) -> JSONResponse:
    status_code = status_for(exc)
    body = {"detail": exc.message, "code": exc.code}
    headers = None

    if isinstance(exc, ValidationFailure) and exc.details is not None:
        body["errors"] = exc.details

    if isinstance(exc, TransientUnavailable):
        headers = {"Retry-After": str(RETRY_AFTER_SECONDS)}
        logger.error("Storage unavailable on %s %s", request.method, request.url.path)
    else:
        logger.warning(
            "%s on %s %s: %s",
            type(exc).__name__,
            request.method,
            request.url.path,
            exc.message,
        )

    return JSONResponse(status_code=status_code, content=body, headers=headers)


def add_exception_handlers(app: FastAPI) -> None:
    """Register handlers that turn data-layer errors into JSON responses."""
    app.add_exception_handler(StudioError, studio_error_handler)
