"""
Shared test fixtures and configuration for entire test suite.

Provides: deterministic embeddings, in-memory embedding store, stub chat
client, recording observer, temp document files.
Dependencies: pytest, langchain_core
System role: Test infrastructure and fixture management
"""

import re
import shutil
import tempfile
import zipfile
from pathlib import Path

import pytest
from langchain_core.documents import Document
from langchain_core.embeddings import Embeddings
from langchain_core.vectorstores import InMemoryVectorStore

from ragdemo.boundary.vdb.embedding_store import LangChainEmbeddingStore
from ragdemo.models.prompt import Prompt
from ragdemo.observability.observer import RagObserver


class KeywordEmbeddings(Embeddings):
    """
    Bag-of-words embeddings with a growing vocabulary.

    Dimension 0 is a constant bias so no vector has zero norm. Texts sharing
    words with the query score higher than texts that share none.
    """

    def __init__(self, dimension: int = 512) -> None:
        self.dimension = dimension
        self.vocabulary: dict[str, int] = {}

    def _embed(self, text: str) -> list[float]:
        vector = [0.0] * self.dimension
        vector[0] = 1.0
        for token in re.findall(r"\w+", text.lower()):
            if token not in self.vocabulary:
                self.vocabulary[token] = len(self.vocabulary) + 1
            vector[self.vocabulary[token] % self.dimension] += 1.0
        return vector

    def embed_documents(self, texts: list[str]) -> list[list[float]]:
        return [self._embed(text) for text in texts]

    def embed_query(self, text: str) -> list[float]:
        return self._embed(text)


class StubChatClient:
    """Chat client that records prompts and answers from a callable."""

    def __init__(self, respond=None) -> None:
        self.prompts: list[Prompt] = []
        self._respond = respond or (lambda prompt: f"answer to: {prompt.user_text}")

    def generate(self, prompt: Prompt) -> str:
        self.prompts.append(prompt)
        return self._respond(prompt)


class RecordingStore:
    """Embedding store stub recording every call."""

    def __init__(self, results: list[Document] | None = None) -> None:
        self.results = results or []
        self.added: list[list[Document]] = []
        self.searches: list[tuple[str, int]] = []

    def add(self, chunks: list[Document]) -> list[str]:
        self.added.append(list(chunks))
        return [str(i) for i in range(len(chunks))]

    def search(self, query: str, top_k: int) -> list[Document]:
        self.searches.append((query, top_k))
        return self.results[:top_k]

    @property
    def call_count(self) -> int:
        return len(self.added) + len(self.searches)


class RecordingObserver(RagObserver):
    """Observer collecting (event, args) pairs."""

    def __init__(self) -> None:
        self.events: list[tuple] = []

    def ingestion_started(self, locator):
        self.events.append(("ingestion_started", locator))

    def ingestion_completed(self, locator, chunk_count):
        self.events.append(("ingestion_completed", locator, chunk_count))

    def retrieval_completed(self, query, top_k, result_count):
        self.events.append(("retrieval_completed", query, top_k, result_count))

    def generation_completed(self, flow, prompt_length, answer_length):
        self.events.append(("generation_completed", flow))

    def caption_generated(self, image_locator, mime_type, caption):
        self.events.append(("caption_generated", image_locator, mime_type, caption))

    def collections_fetched(self, url, body):
        self.events.append(("collections_fetched", url, body))


def store_size(store: LangChainEmbeddingStore) -> int:
    """Number of entries in an InMemoryVectorStore-backed store."""
    return len(store.vector_store.store)


@pytest.fixture
def embeddings() -> KeywordEmbeddings:
    """Deterministic keyword embeddings."""
    return KeywordEmbeddings()


@pytest.fixture
def memory_store(embeddings: KeywordEmbeddings) -> LangChainEmbeddingStore:
    """Embedding store over a fresh InMemoryVectorStore."""
    return LangChainEmbeddingStore(InMemoryVectorStore(embedding=embeddings))


@pytest.fixture
def store_size_of():
    """Callable returning the entry count of an in-memory store."""
    return store_size


@pytest.fixture
def recording_store() -> RecordingStore:
    """Embedding store stub with no results."""
    return RecordingStore()


@pytest.fixture
def recording_store_factory():
    """Build a RecordingStore preloaded with search results."""
    return RecordingStore


@pytest.fixture
def stub_chat() -> StubChatClient:
    """Chat client echoing the user text."""
    return StubChatClient()


@pytest.fixture
def stub_chat_factory():
    """Build a StubChatClient with a custom responder."""
    return StubChatClient


@pytest.fixture
def observer() -> RecordingObserver:
    """Observer recording events."""
    return RecordingObserver()


@pytest.fixture
def temp_dir():
    """
    Create a temporary directory for test files.

    Yields:
        Path: Path to temporary directory
    """
    temp_path = Path(tempfile.mkdtemp(prefix="ragdemo_test_"))
    yield temp_path

    if temp_path.exists():
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def text_document(temp_dir: Path) -> Path:
    """Plain-text document long enough to produce several chunks."""
    paragraphs = [
        f"Paragraph {i}. Airspeeds are measured in knots. "
        f"Indicated airspeed differs from true airspeed at altitude. " * 4
        for i in range(12)
    ]
    path = temp_dir / "airspeeds.txt"
    path.write_text("\n\n".join(paragraphs), encoding="utf-8")
    return path


@pytest.fixture
def png_image(temp_dir: Path) -> Path:
    """Tiny file with a .png suffix."""
    path = temp_dir / "photo.png"
    path.write_bytes(b"\x89PNG\r\n\x1a\nfake")
    return path


@pytest.fixture
def jpg_image(temp_dir: Path) -> Path:
    """Tiny file with a .jpg suffix."""
    path = temp_dir / "photo.jpg"
    path.write_bytes(b"\xff\xd8\xff\xe0fake")
    return path


DOCX_CONTENT_TYPES = (
    '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
    '<Types xmlns="http://schemas.openxmlformats.org/package/2006/content-types">'
    '<Default Extension="xml" ContentType="application/xml"/>'
    '<Override PartName="/word/document.xml" ContentType="application/'
    'vnd.openxmlformats-officedocument.wordprocessingml.document.main+xml"/>'
    "</Types>"
)


def write_docx(path: Path, paragraphs: list[str]) -> Path:
    """Write a minimal Word document containing one run per paragraph."""
    body = "".join(f"<w:p><w:r><w:t>{text}</w:t></w:r></w:p>" for text in paragraphs)
    document = (
        '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
        '<w:document xmlns:w="http://schemas.openxmlformats.org/wordprocessingml/2006/main">'
        f"<w:body>{body}</w:body></w:document>"
    )
    with zipfile.ZipFile(path, "w") as archive:
        archive.writestr("[Content_Types].xml", DOCX_CONTENT_TYPES)
        archive.writestr("word/document.xml", document)
    return path


@pytest.fixture
def docx_document(temp_dir: Path) -> Path:
    """Word document with two paragraphs."""
    return write_docx(
        temp_dir / "report.docx",
        ["Maneuvering speed limits control deflection.", "Vne is the never exceed speed."],
    )
