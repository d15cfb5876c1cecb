"""
Vector store factory for selecting between Chroma (server) and in-memory.

Depends on VECTOR_STORE_TYPE environment variable.
Provides consistent interface regardless of underlying implementation.

Dependencies: chromadb, langchain_chroma, langchain_core, langchain_google_genai
System role: Vector store instantiation and selection
"""

import logging

from langchain_core.embeddings import Embeddings
from langchain_core.vectorstores import InMemoryVectorStore, VectorStore
from langchain_google_genai import GoogleGenerativeAIEmbeddings

from ragdemo.boundary.vdb.embedding_store import LangChainEmbeddingStore
from ragdemo.configs.vector_store import VectorStoreSettings
from ragdemo.core.exceptions import StoreUnreachableError

logger = logging.getLogger(__name__)


def get_embeddings(settings: VectorStoreSettings) -> Embeddings:
    """Embedding model used to index and query chunks."""
    return GoogleGenerativeAIEmbeddings(model=settings.embedding_model)


def _create_chroma_store(settings: VectorStoreSettings, embeddings: Embeddings) -> VectorStore:
    import chromadb
    from langchain_chroma import Chroma

    try:
        client = chromadb.HttpClient(host=settings.chroma_host, port=settings.chroma_port)
    except Exception as e:
        raise StoreUnreachableError(
            message=f"Could not connect to Chroma at {settings.chroma_url}: {e}",
            operation="connect",
        ) from e

    return Chroma(
        collection_name=settings.collection_name,
        embedding_function=embeddings,
        client=client,
    )


def get_vector_store(
    settings: VectorStoreSettings,
    embeddings: Embeddings | None = None,
) -> LangChainEmbeddingStore:
    """
    Factory function to get vector store based on environment configuration.

    Args:
        settings: Vector store settings
        embeddings: Embedding model override (defaults to Gemini embeddings)

    Returns:
        LangChainEmbeddingStore: Store wrapping the selected backend

    Raises:
        ValueError: If VECTOR_STORE_TYPE is invalid
        StoreUnreachableError: If the Chroma server cannot be reached
    """
    store_type = settings.store_type.lower()

    if store_type not in ("chroma", "memory"):
        raise ValueError(
            f"Invalid VECTOR_STORE_TYPE: {store_type}. "
            f"Must be 'chroma' (server) or 'memory' (in-process)."
        )

    if embeddings is None:
        embeddings = get_embeddings(settings)

    if store_type == "chroma":
        logger.info(
            f"{__name__}:get_vector_store - Creating Chroma vector store "
            f"({settings.chroma_url}, collection={settings.collection_name})"
        )
        return LangChainEmbeddingStore(_create_chroma_store(settings, embeddings))

    logger.info(f"{__name__}:get_vector_store - Creating in-memory vector store")
    return LangChainEmbeddingStore(InMemoryVectorStore(embedding=embeddings))
