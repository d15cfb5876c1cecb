"""
Exception handlers.

Maps the application exception hierarchy onto HTTP status codes so that
routes can let errors propagate unmodified.

Dependencies: fastapi, ragdemo.core.exceptions
System role: Error response boundary
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from ragdemo.core.exceptions import (
    DocumentFetchError,
    DocumentProcessingError,
    GenerationError,
    MalformedLocatorError,
    RagDemoException,
    ResourceNotFoundError,
    StoreUnreachableError,
    ValidationError,
    VectorStoreError,
)
from ragdemo.models.common import ErrorResponse
from ragdemo.observability.log_utils import log_exception_with_context, log_with_context

logger = logging.getLogger(__name__)

# Most specific first
STATUS_BY_EXCEPTION: list[tuple[type[RagDemoException], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (MalformedLocatorError, status.HTTP_400_BAD_REQUEST),
    (ResourceNotFoundError, status.HTTP_404_NOT_FOUND),
    (DocumentProcessingError, 422),
    (StoreUnreachableError, status.HTTP_503_SERVICE_UNAVAILABLE),
    (VectorStoreError, status.HTTP_502_BAD_GATEWAY),
    (GenerationError, status.HTTP_502_BAD_GATEWAY),
    (DocumentFetchError, status.HTTP_502_BAD_GATEWAY),
]


def status_for(exc: RagDemoException) -> int:
    """HTTP status for an application exception (500 when unmapped)."""
    for exc_type, status_code in STATUS_BY_EXCEPTION:
        if isinstance(exc, exc_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def rag_demo_exception_handler(request: Request, exc: RagDemoException) -> JSONResponse:
    """Render an application exception as an ErrorResponse."""
    status_code = status_for(exc)
    if status_code >= 500:
        log_exception_with_context(
            logger, f"{request.method} {request.url.path} failed", exc,
            path=request.url.path, status_code=status_code,
        )
    else:
        log_with_context(
            logger, logging.WARNING, f"{request.method} {request.url.path} rejected: {exc.message}",
            path=request.url.path, status_code=status_code, error_type=type(exc).__name__,
        )

    body = ErrorResponse(error=exc.message, details=exc.details or None)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers on an app."""
    app.add_exception_handler(RagDemoException, rag_demo_exception_handler)
