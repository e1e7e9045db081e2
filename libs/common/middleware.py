"""Request tracing for the studio API.

Every request gets an ``X-Request-ID`` (propagated when the client sent one)
and one completion line naming the studio resource it touched and the caller
it ran as. The caller is bound by the auth dependency once the token has been
resolved, so anonymous and rejected requests log ``caller=None``.

Usage:
    from libs.common.middleware import add_observability_middleware

    app = FastAPI()
    add_observability_middleware(app)
"""
import time
from typing import Callable, Optional

from fastapi import FastAPI, Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from libs.common.logging import (
    clear_request_context,
    configure_logging,
    get_logger,
    set_request_context,
)

logger = get_logger(__name__)

API_PREFIX = "/api/v1/"
QUIET_PATHS = frozenset({"/health", "/docs", "/openapi.json"})
MAX_REQUEST_ID_LENGTH = 128


def resource_for(path: str) -> Optional[str]:
    """``/api/v1/clients/abc`` -> ``clients``. None outside the API."""
    if not path.startswith(API_PREFIX):
        return None
    resource = path[len(API_PREFIX):].split("/", 1)[0]
    return resource or None


def incoming_request_id(request: Request) -> Optional[str]:
    """Reuse the client's request id unless it is empty or oversized."""
    value = request.headers.get("X-Request-ID", "").strip()
    if value and len(value) <= MAX_REQUEST_ID_LENGTH:
        return value
    return None


class RequestContextMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = set_request_context(
            request_id=incoming_request_id(request),
            path=request.url.path,
            method=request.method,
        )
        quiet = request.url.path in QUIET_PATHS
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                "Request failed",
                extra={"extra_fields": self._fields(request, started)},
            )
            clear_request_context()
            raise

        if not quiet:
            fields = self._fields(request, started)
            fields["status_code"] = response.status_code
            if response.status_code >= 500:
                logger.error("Request completed", extra={"extra_fields": fields})
            elif response.status_code >= 400:
                logger.warning("Request completed", extra={"extra_fields": fields})
            else:
                logger.info("Request completed", extra={"extra_fields": fields})

        response.headers["X-Request-ID"] = request_id
        clear_request_context()
        return response

    @staticmethod
    def _fields(request: Request, started: float) -> dict:
        # caller_id is set on request.state by the caller dependency; the
        # endpoint runs in another task, so the context var does not reach us.
        return {
            "resource": resource_for(request.url.path),
            "mutation": request.method not in ("GET", "HEAD", "OPTIONS"),
            "caller": getattr(request.state, "caller_id", None),
            "duration_ms": round((time.perf_counter() - started) * 1000, 2),
        }


def add_observability_middleware(app: FastAPI) -> None:
    """
    Configure logging and install request tracing on a FastAPI app.
    """
    configure_logging()
    app.add_middleware(RequestContextMiddleware)
