"""
RAG API endpoints.

Routes:
- GET /           - Usage text
- GET /query      - Plain chat, no retrieval
- GET /populate   - Index a document from a path or URL
- GET /rag        - Retrieval-augmented answer
- GET /mm         - Describe an image
- GET /imagerag   - Describe an image, then answer with retrieval on the description
- GET /ragtest    - Seed demo documents and list search hits

Every route answers with plain text. Handlers are sync; FastAPI runs them in
its threadpool since every collaborator call blocks.

Dependencies: ragdemo.core.rag_orchestrator, ragdemo.api.deps
System role: RAG HTTP API
"""

from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse

from ragdemo.api.deps import get_orchestrator, get_settings_dependency
from ragdemo.configs import Settings
from ragdemo.core.rag_orchestrator import RagOrchestrator

DEFAULT_RAG_MESSAGE = "Airspeeds"
DEFAULT_MM_MESSAGE = "이 이미지에 무엇이 있나요?"
DEFAULT_IMAGE_RAG_MESSAGE = "이 이미지에 대해 모든 것을 알려주세요"

USAGE_TEXT = """
This is an application to populate and query a vector store, effectively turning loose
an AI on your data. This is a potentially powerful, focused tool, so as always, *verify your results*.

To populate the vector store with embeddings for a supplied document, simply provide a
file path or URL that resolves to the document to be processed:

/populate?filepath=<path or URL>

To query the vector store for documents/data that matches your query, use the following endpoint:

/rag?message=<your query>

DISCLAIMER: No warranty is provided or implied. Use at your own risk. :)
"""

router = APIRouter(tags=["rag"], default_response_class=PlainTextResponse)


@router.get("/")
def describe() -> str:
    """Usage text."""
    return USAGE_TEXT


@router.get("/query")
def query(
    message: str,
    orchestrator: RagOrchestrator = Depends(get_orchestrator),
) -> str:
    """Baseline, non-RAG query."""
    return orchestrator.plain_query(message)


@router.get("/populate")
def populate(
    filepath: str,
    orchestrator: RagOrchestrator = Depends(get_orchestrator),
) -> str:
    """
    Index a document.

    Example: /populate?filepath=/data/manual.pdf

    Raises:
        ResourceNotFoundError (404), MalformedLocatorError (400),
        ParsingError (422), StoreWriteError (502)
    """
    return orchestrator.populate(filepath)


@router.get("/rag")
def rag(
    message: str = DEFAULT_RAG_MESSAGE,
    orchestrator: RagOrchestrator = Depends(get_orchestrator),
) -> str:
    """Retrieval-augmented answer to message."""
    return orchestrator.rag_query(message)


@router.get("/mm")
def multimodal(
    image_path: str | None = Query(default=None, alias="imagePath"),
    message: str = DEFAULT_MM_MESSAGE,
    orchestrator: RagOrchestrator = Depends(get_orchestrator),
    settings: Settings = Depends(get_settings_dependency),
) -> str:
    """Describe the image at imagePath."""
    return orchestrator.describe_image(image_path or settings.default_image_path, message)


@router.get("/imagerag")
def image_rag(
    image_path: str | None = Query(default=None, alias="imagePath"),
    message: str = DEFAULT_IMAGE_RAG_MESSAGE,
    orchestrator: RagOrchestrator = Depends(get_orchestrator),
    settings: Settings = Depends(get_settings_dependency),
) -> str:
    """Analyze the image first, then search domain documents with what the model saw."""
    return orchestrator.image_rag_query(image_path or settings.default_image_path, message)


@router.get("/ragtest")
def rag_test(
    query: str,
    orchestrator: RagOrchestrator = Depends(get_orchestrator),
) -> str:
    """Seed the demo documents and list the hits for query."""
    return orchestrator.rag_test(query)
