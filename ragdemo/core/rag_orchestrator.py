"""
RAG orchestrator.

Composes the document ingestor, embedding store and chat client into the
request flows the HTTP API exposes: plain query, populate, retrieval-augmented
query, image caption, image-grounded RAG and the demo search.

Dependencies: langchain_core, ragdemo.core, ragdemo.observability
System role: Request flow orchestration
"""

from langchain_core.documents import Document

from ragdemo.core.document_processing import DocumentIngestor
from ragdemo.core.exceptions import ValidationError
from ragdemo.core.media import resolve_image
from ragdemo.core.prompts import IMAGE_SYSTEM_INSTRUCTION
from ragdemo.models.prompt import Prompt
from ragdemo.observability.observer import RagObserver

DEFAULT_TOP_K = 5

DEMO_DOCUMENTS = (
    ("Spring AI 최고다!! " * 5).strip(),
    "세상은 크고 구원은 코너 뒤에 숨어있다.",
    "당신은 과거를 향해 걸어가고 미래를 향해 뒤돌아본다.",
)
DEMO_METADATA = ({"meta1": "meta1"}, {}, {"meta2": "meta2"})


def demo_documents() -> list[Document]:
    """Fresh copies of the three fixed /ragtest documents."""
    return [
        Document(page_content=content, metadata=dict(metadata))
        for content, metadata in zip(DEMO_DOCUMENTS, DEMO_METADATA)
    ]


def format_metadata(metadata: dict) -> str:
    """Render metadata as {key=value, ...}."""
    return "{" + ", ".join(f"{key}={value}" for key, value in metadata.items()) + "}"


class RagOrchestrator:
    """
    Request flows over an embedding store and a chat client.

    Collaborators are duck-typed:
      - embedding_store: add(chunks) -> list[str], search(query, top_k) -> list[Document]
      - chat_client: generate(prompt: Prompt) -> str
      - ingestor: ingest(locator) -> int
    """

    def __init__(
        self,
        embedding_store,
        chat_client,
        ingestor: DocumentIngestor | None = None,
        observer: RagObserver | None = None,
        default_top_k: int = DEFAULT_TOP_K,
    ) -> None:
        self._store = embedding_store
        self._chat = chat_client
        self._observer = observer or RagObserver()
        self._ingestor = ingestor or DocumentIngestor(embedding_store, observer=self._observer)
        self._default_top_k = default_top_k

    @property
    def default_top_k(self) -> int:
        return self._default_top_k

    def plain_query(self, message: str) -> str:
        """Send message as the only user turn, no retrieval."""
        answer = self._chat.generate(Prompt(user_text=message))
        self._observer.generation_completed("query", len(message), len(answer))
        return answer

    def populate(self, locator: str) -> str:
        """Index the document at locator and confirm."""
        self._ingestor.ingest(locator)
        return f"Populated vector store with {locator}"

    def rag_query(self, message: str, top_k: int | None = None) -> str:
        """
        Retrieval-augmented generation.

        Args:
            message: Question, also used as the search query
            top_k: Documents to retrieve (default_top_k if None)

        Returns:
            str: Generated answer

        Raises:
            ValidationError: top_k below 1
        """
        k = self._default_top_k if top_k is None else top_k
        if k < 1:
            raise ValidationError(f"top_k must be at least 1, got {k}", field="top_k")

        results = self._store.search(message, k)
        self._observer.retrieval_completed(message, k, len(results))

        prompt = Prompt(
            user_text=message,
            context=tuple(results[:k]),
            retrieval_augmented=True,
        )
        answer = self._chat.generate(prompt)
        self._observer.generation_completed("rag", len(message), len(answer))
        return answer

    def describe_image(self, image_locator: str, message: str) -> str:
        """
        Caption an image with the multimodal model.

        Raises:
            MalformedLocatorError: Bad image URL
            ResourceNotFoundError: Missing local image
            GenerationError: Model call failed
        """
        media = resolve_image(image_locator)
        prompt = Prompt(
            system_instruction=IMAGE_SYSTEM_INSTRUCTION,
            user_text=message,
            attached_media=media,
        )
        caption = self._chat.generate(prompt)
        self._observer.caption_generated(image_locator, media.mime_type, caption)
        return caption

    def image_rag_query(self, image_locator: str, message: str) -> str:
        """
        Caption the image, then run RAG with the caption as the query.

        The caller's message only steers the caption; retrieval sees the
        caption alone.
        """
        caption = self.describe_image(image_locator, message)
        return self.rag_query(caption, self._default_top_k)

    def rag_test(self, query: str) -> str:
        """
        Seed the three demo documents and list what a search for query returns.

        The demo documents are added on every call.
        """
        self._store.add(demo_documents())
        results = self._store.search(query, DEFAULT_TOP_K)
        self._observer.retrieval_completed(query, DEFAULT_TOP_K, len(results))

        lines = []
        for doc in results:
            lines.append(f"문서 내용: {doc.page_content}\n")
            if doc.metadata is not None:
                lines.append(f"메타데이터: {format_metadata(doc.metadata)}\n")
            lines.append("\n")
        return "".join(lines)
