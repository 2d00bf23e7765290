"""
Request middleware: correlation id and per-request access logging.
"""

import time
from typing import Callable

import structlog
from asgi_correlation_id import CorrelationIdMiddleware
from fastapi import FastAPI, Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = structlog.get_logger(__name__)

# Liveness probes hit these every few seconds
QUIET_PATHS = frozenset({"/health"})


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """One log line per finished request, plus a failure line with traceback."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if request.url.path in QUIET_PATHS:
            return await call_next(request)

        started = time.perf_counter()
        bound = logger.bind(
            method=request.method,
            path=request.url.path,
            query=str(request.url.query) or None,
            client_ip=request.client.host if request.client else "unknown",
        )

        try:
            response = await call_next(request)
        except Exception:
            bound.exception("Request failed", process_time_ms=_elapsed_ms(started))
            raise

        log = bound.warning if response.status_code >= 500 else bound.info
        log("Request handled", status_code=response.status_code, process_time_ms=_elapsed_ms(started))
        return response


def setup_middleware(app: FastAPI) -> None:
    # Added last runs first: the request id must exist before the access log line
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CorrelationIdMiddleware,
        header_name="X-Request-ID",
        update_request_header=True,
    )
