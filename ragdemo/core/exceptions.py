"""
Exception hierarchy for the RAG demo application.

Boundary adapters translate third-party failures into these types; the API
layer maps each type onto an HTTP status (see ragdemo.api.errors).

Dependencies: None (pure domain layer)
System role: Error taxonomy shared by core, boundary and API layers
"""

from typing import Any


def _merge(details: dict[str, Any] | None, **context: Any) -> dict[str, Any]:
    """Copy details and add every context value that is set."""
    merged = dict(details or {})
    merged.update({key: value for key, value in context.items() if value is not None})
    return merged


class RagDemoException(Exception):
    """Base exception for all RAG demo application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Args:
            message: Human-readable error message, returned to HTTP clients
            details: Structured context, returned alongside the message
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(RagDemoException):
    """Request value outside its allowed range."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, _merge(details, field=field))


class ResourceNotFoundError(RagDemoException):
    """A document or image locator does not resolve to readable content."""

    def __init__(self, locator: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(f"Resource not found: {locator}", _merge(details, locator=locator))


class DocumentFetchError(RagDemoException):
    """Remote origin answered with an error status other than 404/410."""

    def __init__(
        self,
        locator: str,
        status_code: int,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            f"Fetching {locator} failed with HTTP {status_code}",
            _merge(details, locator=locator, status_code=status_code),
        )


class MalformedLocatorError(RagDemoException):
    """A locator that looks like a URL but cannot be parsed as one."""

    def __init__(
        self,
        locator: str,
        reason: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        message = f"Malformed locator: {locator}"
        if reason:
            message += f" ({reason})"
        super().__init__(message, _merge(details, locator=locator))


class DocumentProcessingError(RagDemoException):
    """Base for failures while turning a file into documents."""

    def __init__(
        self,
        message: str,
        locator: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, _merge(details, locator=locator))


class ParsingError(DocumentProcessingError):
    """
    Document could not be parsed.

    Covers unsupported formats, corrupt files and files with no
    extractable text.
    """

    def __init__(
        self,
        message: str,
        locator: str | None = None,
        file_type: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, locator, _merge(details, file_type=file_type))


class VectorStoreError(RagDemoException):
    """Base for vector store failures; operation is add, search or list_collections."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, _merge(details, operation=operation))


class StoreWriteError(VectorStoreError):
    """Chunks could not be embedded or written."""


class StoreQueryError(VectorStoreError):
    """Similarity search or admin query failed."""


class StoreUnreachableError(VectorStoreError):
    """Vector store server cannot be reached."""


class GenerationError(RagDemoException):
    """Chat model call failed, including rejected multimodal input."""

    def __init__(
        self,
        message: str,
        model: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, _merge(details, model=model))
