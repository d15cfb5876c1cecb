"""
Prompt domain models.

A Prompt is everything the chat client needs for one model call: an optional
system instruction, the user turn, retrieved context and an optional image.

Dependencies: pydantic, langchain_core
System role: Contract between the orchestrator and the chat client
"""

from langchain_core.documents import Document
from pydantic import BaseModel, ConfigDict, Field

IMAGE_PNG = "image/png"
IMAGE_JPEG = "image/jpeg"


class MediaAttachment(BaseModel):
    """Image attached to a user turn."""

    model_config = ConfigDict(frozen=True)

    mime_type: str = Field(description="Media type, image/png or image/jpeg")
    locator: str = Field(description="Image URL or local filesystem path")

    @property
    def is_remote(self) -> bool:
        """Whether the locator is fetched over HTTP rather than read from disk."""
        return self.locator.startswith("http")


class Prompt(BaseModel):
    """Single model invocation."""

    model_config = ConfigDict(frozen=True)

    system_instruction: str | None = Field(default=None, description="System message")
    user_text: str = Field(description="User turn")
    context: tuple[Document, ...] = Field(
        default=(),
        description="Retrieved documents, most similar first",
    )
    retrieval_augmented: bool = Field(
        default=False,
        description="Render the user turn with the RAG template even if context is empty",
    )
    attached_media: MediaAttachment | None = Field(default=None, description="Attached image")
