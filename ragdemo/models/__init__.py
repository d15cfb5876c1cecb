"""Domain models and API schemas."""

from ragdemo.models.common import ErrorResponse, HealthResponse
from ragdemo.models.prompt import MediaAttachment, Prompt

__all__ = ["ErrorResponse", "HealthResponse", "MediaAttachment", "Prompt"]
