"""
Chat client adapter.

Turns a Prompt into LangChain messages and invokes a chat model. Handles the
RAG user template, optional system instruction and image attachments (URLs
passed through, local files inlined as base64 data URLs).

Dependencies: langchain_core, langchain_google_genai
System role: Chat model capability for plain, multimodal and RAG generation
"""

import base64
import logging

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage

from ragdemo.configs.llm import LLMSettings
from ragdemo.core.exceptions import GenerationError, RagDemoException, ResourceNotFoundError
from ragdemo.core.prompts import render_rag_user_text
from ragdemo.models.prompt import MediaAttachment, Prompt

logger = logging.getLogger(__name__)


def image_url_for(media: MediaAttachment) -> str:
    """
    URL the model fetches the image from.

    Raises:
        ResourceNotFoundError: If a local image cannot be read
    """
    if media.is_remote:
        return media.locator

    try:
        with open(media.locator, "rb") as f:
            data = f.read()
    except OSError as e:
        raise ResourceNotFoundError(media.locator, details={"reason": str(e)}) from e

    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{media.mime_type};base64,{encoded}"


def build_messages(prompt: Prompt) -> list[BaseMessage]:
    """
    Convert a Prompt to chat messages.

    Args:
        prompt: Prompt to render

    Returns:
        list[BaseMessage]: Optional system message followed by one user message
    """
    messages: list[BaseMessage] = []
    if prompt.system_instruction:
        messages.append(SystemMessage(content=prompt.system_instruction))

    if prompt.context or prompt.retrieval_augmented:
        text = render_rag_user_text(prompt.user_text, prompt.context)
    else:
        text = prompt.user_text

    if prompt.attached_media is None:
        messages.append(HumanMessage(content=text))
    else:
        messages.append(
            HumanMessage(
                content=[
                    {"type": "text", "text": text},
                    {
                        "type": "image_url",
                        "image_url": {"url": image_url_for(prompt.attached_media)},
                    },
                ]
            )
        )
    return messages


def content_to_text(content: str | list) -> str:
    """Flatten string or list-shaped message content to plain text."""
    if isinstance(content, str):
        return content
    return "".join(
        item if isinstance(item, str) else (item.get("text", "") if isinstance(item, dict) else str(item))
        for item in content
    )


class LangChainChatClient:
    """
    Chat client backed by a LangChain chat model.

    Any object with generate(prompt: Prompt) -> str can stand in for this class.
    """

    def __init__(self, model: BaseChatModel, model_name: str | None = None) -> None:
        """
        Args:
            model: Chat model (Gemini in production, fakes in tests)
            model_name: Name reported in errors
        """
        self._model = model
        self._model_name = model_name or type(model).__name__

    def generate(self, prompt: Prompt) -> str:
        """
        Invoke the model with a prompt.

        Args:
            prompt: Prompt to send

        Returns:
            str: Generated text

        Raises:
            ResourceNotFoundError: Attached local image missing
            GenerationError: Model call failed
        """
        messages = build_messages(prompt)

        try:
            result = self._model.invoke(messages)
        except RagDemoException:
            raise
        except Exception as e:
            logger.error(f"{__name__}:generate - Model call failed - {type(e).__name__}: {e}")
            raise GenerationError(
                message=f"Chat model call failed: {e}",
                model=self._model_name,
            ) from e

        return content_to_text(result.content)


def get_chat_client(settings: LLMSettings) -> LangChainChatClient:
    """Build the Gemini-backed chat client."""
    from langchain_google_genai import ChatGoogleGenerativeAI

    model = ChatGoogleGenerativeAI(
        model=settings.model_id,
        temperature=settings.temperature,
    )
    return LangChainChatClient(model, model_name=settings.model_id)
