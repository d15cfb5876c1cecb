"""
FastAPI middleware for observability.

CorrelationMiddleware binds an X-Correlation-ID to each request (reusing the
caller's when sent) and RequestLoggingMiddleware writes one record when a
request starts and one when it ends.

Dependencies: starlette, ragdemo.observability
System role: Request/response observability injection
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from ragdemo.observability.correlation import clear_correlation_id, set_correlation_id
from ragdemo.observability.log_utils import log_exception_with_context, log_with_context

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path, status and duration of every request."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        started = time.perf_counter()
        label = f"{request.method} {request.url.path}"
        log_with_context(
            logger, logging.INFO, label,
            query_string=request.url.query or None,
            client_host=request.client.host if request.client else None,
        )

        try:
            response = await call_next(request)
        except Exception as e:
            log_exception_with_context(
                logger, f"{label} - unhandled", e,
                process_time_ms=_elapsed_ms(started),
            )
            raise

        log_with_context(
            logger, logging.INFO, f"{label} - {response.status_code}",
            status_code=response.status_code,
            process_time_ms=_elapsed_ms(started),
        )
        return response


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Bind a correlation ID for the duration of the request and echo it back."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        correlation_id = set_correlation_id(request.headers.get(CORRELATION_HEADER))
        try:
            response = await call_next(request)
        finally:
            clear_correlation_id()
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
