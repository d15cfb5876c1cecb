"""
Logging utilities for safe structured logging.

Model output and document text are multi-line and arbitrarily long; these
helpers flatten and truncate values before they reach a log record.

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import logging
from typing import Any

# LogRecord attributes that may not be overwritten through `extra`
_RESERVED_KEYS = frozenset(logging.makeLogRecord({}).__dict__) | {"message", "asctime"}


def _summarize(value: Any) -> str:
    if value is None:
        return "None"
    if isinstance(value, str):
        return " ".join(value.split())
    if isinstance(value, (list, tuple)):
        return f"{type(value).__name__}({len(value)} items)"
    if isinstance(value, dict):
        return f"dict({len(value)} keys)"
    return str(value)


def safe_log_value(value: Any, max_length: int = 300) -> str:
    """
    Convert a value to a single-line string for logging.

    Strings have their whitespace collapsed, containers are reduced to their
    size, and anything longer than max_length is cut with a note of the
    full length. Never raises.
    """
    try:
        text = _summarize(value)
    except Exception as e:
        return f"<unable to log: {type(e).__name__}>"
    if len(text) > max_length:
        return f"{text[:max_length]}... (truncated, {len(text)} total)"
    return text


def _safe_extra(context: dict[str, Any]) -> dict[str, str]:
    return {
        (f"ctx_{key}" if key in _RESERVED_KEYS else key): safe_log_value(val)
        for key, val in context.items()
    }


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **context,
) -> None:
    """
    Log message with each context value attached to the record.

    Keys that collide with LogRecord attributes are prefixed with `ctx_`.
    """
    logger.log(level, message, extra=_safe_extra(context))


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: Exception,
    **context,
) -> None:
    """Log at ERROR with exc's type, flattened message and traceback."""
    extra = _safe_extra(context)
    extra["error_type"] = type(exc).__name__
    extra["error_msg"] = safe_log_value(str(exc))
    logger.error(message, extra=extra, exc_info=exc)
