"""
Request correlation IDs.

The ID lives in a ContextVar so it follows the request into threadpool
handlers and is stamped on log records by CorrelationIdFilter.

Dependencies: contextvars, uuid
System role: Request tracing
"""

from contextvars import ContextVar
import uuid

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def set_correlation_id(correlation_id: str | None = None) -> str:
    """Bind correlation_id, or a fresh UUID4 when none is given, and return it."""
    value = correlation_id or str(uuid.uuid4())
    _correlation_id.set(value)
    return value


def get_correlation_id() -> str:
    return _correlation_id.get()


def clear_correlation_id() -> None:
    _correlation_id.set("")
