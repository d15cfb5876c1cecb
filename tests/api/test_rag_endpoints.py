"""
Test suite for the RAG HTTP endpoints.

Runs the full app with the orchestrator dependency overridden by one wired
to an in-memory store and a stub chat client.

Dependencies: pytest, fastapi
System role: Verification of the RAG HTTP API
"""

from pathlib import Path

import httpx
import pytest
from fastapi.testclient import TestClient

from ragdemo.api.deps import get_orchestrator, get_settings_dependency
from ragdemo.api.routers.rag import (
    DEFAULT_IMAGE_RAG_MESSAGE,
    DEFAULT_MM_MESSAGE,
    DEFAULT_RAG_MESSAGE,
)
from ragdemo.configs import Settings
from ragdemo.core.document_processing import DocumentIngestor
from ragdemo.core.document_processing.tasks import UrlDownloadTask
from ragdemo.core.exceptions import GenerationError
from ragdemo.core.rag_orchestrator import RagOrchestrator
from ragdemo.main import create_app


@pytest.fixture
def orchestrator(memory_store, stub_chat) -> RagOrchestrator:
    """Orchestrator over the in-memory store and stub chat client."""
    return RagOrchestrator(memory_store, stub_chat)


@pytest.fixture
def client(orchestrator: RagOrchestrator, jpg_image: Path) -> TestClient:
    """TestClient with orchestrator and settings overridden."""
    app = create_app()
    app.dependency_overrides[get_orchestrator] = lambda: orchestrator
    app.dependency_overrides[get_settings_dependency] = lambda: Settings(
        default_image_path=str(jpg_image)
    )
    return TestClient(app)


class TestDescribe:
    def test_root_should_return_usage_text(self, client: TestClient) -> None:
        response = client.get("/")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert "/populate?filepath=<path or URL>" in response.text
        assert "/rag?message=<your query>" in response.text


class TestQuery:
    def test_query_should_return_generated_text(self, client: TestClient, stub_chat) -> None:
        response = client.get("/query", params={"message": "hello"})

        assert response.status_code == 200
        assert response.text == "answer to: hello"
        assert stub_chat.prompts[0].context == ()

    def test_query_should_require_message(self, client: TestClient) -> None:
        assert client.get("/query").status_code == 422

    def test_query_should_map_generation_error_to_502(self, memory_store, stub_chat_factory) -> None:
        def fail(prompt):
            raise GenerationError("model unavailable", model="gemini")

        app = create_app()
        app.dependency_overrides[get_orchestrator] = lambda: RagOrchestrator(
            memory_store, stub_chat_factory(fail)
        )

        response = TestClient(app).get("/query", params={"message": "hello"})

        assert response.status_code == 502
        assert response.json() == {
            "success": False,
            "error": "model unavailable",
            "details": {"model": "gemini"},
        }


class TestPopulate:
    def test_populate_should_confirm_and_index(
        self, client: TestClient, memory_store, text_document: Path, store_size_of
    ) -> None:
        response = client.get("/populate", params={"filepath": str(text_document)})

        assert response.status_code == 200
        assert response.text == f"Populated vector store with {text_document}"
        assert store_size_of(memory_store) > 0

    def test_populate_should_return_404_for_missing_file(
        self, client: TestClient, memory_store, store_size_of
    ) -> None:
        response = client.get("/populate", params={"filepath": "/no/such/doc.pdf"})

        assert response.status_code == 404
        assert response.json()["error"] == "Resource not found: /no/such/doc.pdf"
        assert store_size_of(memory_store) == 0

    def test_populate_should_return_422_for_unsupported_format(
        self, client: TestClient, temp_dir: Path
    ) -> None:
        path = temp_dir / "deck.pptx"
        path.write_bytes(b"binary")

        response = client.get("/populate", params={"filepath": str(path)})

        assert response.status_code == 422
        assert response.json()["details"]["file_type"] == ".pptx"

    def test_populate_should_return_400_for_malformed_url(self, client: TestClient) -> None:
        response = client.get("/populate", params={"filepath": "httpnotaurl"})

        assert response.status_code == 400

    def test_populate_should_index_docx(
        self, client: TestClient, memory_store, docx_document: Path, store_size_of
    ) -> None:
        response = client.get("/populate", params={"filepath": str(docx_document)})

        assert response.status_code == 200
        assert store_size_of(memory_store) == 1

    def test_populate_should_return_502_when_origin_fails(self, memory_store, stub_chat) -> None:
        download_task = UrlDownloadTask(
            client=httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(503)))
        )
        orchestrator = RagOrchestrator(
            memory_store, stub_chat, ingestor=DocumentIngestor(memory_store, download_task=download_task)
        )
        app = create_app()
        app.dependency_overrides[get_orchestrator] = lambda: orchestrator

        response = TestClient(app).get("/populate", params={"filepath": "https://example.com/manual.pdf"})

        assert response.status_code == 502
        assert response.json()["details"]["status_code"] == 503

    def test_populate_should_require_filepath(self, client: TestClient) -> None:
        assert client.get("/populate").status_code == 422


class TestRag:
    def test_rag_should_default_message(self, client: TestClient, stub_chat) -> None:
        response = client.get("/rag")

        assert response.status_code == 200
        assert stub_chat.prompts[0].user_text == DEFAULT_RAG_MESSAGE

    def test_rag_should_include_retrieved_context(
        self, client: TestClient, stub_chat, text_document: Path
    ) -> None:
        client.get("/populate", params={"filepath": str(text_document)})

        response = client.get("/rag", params={"message": "indicated airspeed"})

        assert response.status_code == 200
        prompt = stub_chat.prompts[-1]
        assert prompt.user_text == "indicated airspeed"
        assert 0 < len(prompt.context) <= 5


class TestMultimodal:
    def test_mm_should_use_default_image_and_message(
        self, client: TestClient, stub_chat, jpg_image: Path
    ) -> None:
        response = client.get("/mm")

        assert response.status_code == 200
        prompt = stub_chat.prompts[0]
        assert prompt.user_text == DEFAULT_MM_MESSAGE
        assert prompt.attached_media.locator == str(jpg_image)
        assert prompt.attached_media.mime_type == "image/jpeg"

    def test_mm_should_accept_image_path_param(self, client: TestClient, stub_chat, png_image: Path) -> None:
        response = client.get("/mm", params={"imagePath": str(png_image), "message": "what?"})

        assert response.status_code == 200
        assert stub_chat.prompts[0].attached_media.mime_type == "image/png"
        assert stub_chat.prompts[0].user_text == "what?"

    def test_mm_should_return_404_for_missing_image(self, client: TestClient) -> None:
        response = client.get("/mm", params={"imagePath": "/no/such/image.png"})

        assert response.status_code == 404


class TestImageRag:
    def test_imagerag_should_query_with_caption(
        self, memory_store, stub_chat_factory, jpg_image: Path
    ) -> None:
        chat = stub_chat_factory(lambda prompt: "C" if prompt.attached_media else "rag answer")
        searches = []

        class SpyStore:
            def add(self, chunks):
                return memory_store.add(chunks)

            def search(self, query, top_k):
                searches.append(query)
                return memory_store.search(query, top_k)

        app = create_app()
        app.dependency_overrides[get_orchestrator] = lambda: RagOrchestrator(SpyStore(), chat)

        response = TestClient(app).get("/imagerag", params={"imagePath": str(jpg_image)})

        assert response.status_code == 200
        assert response.text == "rag answer"
        assert searches == ["C"]
        assert chat.prompts[0].user_text == DEFAULT_IMAGE_RAG_MESSAGE


class TestRagTest:
    def test_ragtest_should_rank_spring_ai_first(self, client: TestClient) -> None:
        response = client.get("/ragtest", params={"query": "Spring AI"})

        assert response.status_code == 200
        first_entry = response.text.split("\n\n")[0]
        assert first_entry.startswith("문서 내용: Spring AI 최고다!!")
        assert "meta1=meta1" in first_entry

    def test_ragtest_should_require_query(self, client: TestClient) -> None:
        assert client.get("/ragtest").status_code == 422


def test_correlation_id_should_be_echoed(client: TestClient) -> None:
    response = client.get("/", headers={"X-Correlation-ID": "abc-123"})

    assert response.headers["X-Correlation-ID"] == "abc-123"


def test_correlation_id_should_be_generated_when_missing(client: TestClient) -> None:
    response = client.get("/")

    assert response.headers["X-Correlation-ID"]
