"""
Embedding store adapter.

Wraps any LangChain VectorStore behind the two operations the service
needs: add chunks and search by text. Third-party errors are translated
into the vector store exceptions.

Dependencies: langchain_core
System role: Embedding store capability used by ingestion and RAG
"""

import logging

from langchain_core.documents import Document
from langchain_core.vectorstores import VectorStore

from ragdemo.core.exceptions import StoreQueryError, StoreWriteError

logger = logging.getLogger(__name__)


class LangChainEmbeddingStore:
    """
    Embedding store backed by a LangChain vector store.

    Any object exposing the same two methods can stand in for this class:
      - add(chunks: list[Document]) -> list[str]
      - search(query: str, top_k: int) -> list[Document]
    """

    def __init__(self, vector_store: VectorStore) -> None:
        """
        Args:
            vector_store: Chroma, InMemoryVectorStore or any LangChain VectorStore
        """
        self._vector_store = vector_store

    @property
    def vector_store(self) -> VectorStore:
        return self._vector_store

    def add(self, chunks: list[Document]) -> list[str]:
        """
        Embed and index chunks.

        Args:
            chunks: Documents to index; duplicates are stored again

        Returns:
            list[str]: IDs assigned by the store

        Raises:
            StoreWriteError: If the store rejects the write
        """
        if not chunks:
            return []

        try:
            ids = self._vector_store.add_documents(list(chunks))
        except Exception as e:
            raise StoreWriteError(
                message=f"Failed to add documents to vector store: {e}",
                operation="add",
                details={"chunk_count": len(chunks)},
            ) from e

        logger.debug(f"{__name__}:add - Indexed {len(ids)} chunks")
        return ids

    def search(self, query: str, top_k: int) -> list[Document]:
        """
        Similarity search.

        Args:
            query: Search text
            top_k: Maximum number of documents to return

        Returns:
            list[Document]: Matches, most similar first

        Raises:
            StoreQueryError: If the search fails
        """
        try:
            return self._vector_store.similarity_search(query, k=top_k)
        except Exception as e:
            raise StoreQueryError(
                message=f"Similarity search failed: {e}",
                operation="search",
                details={"top_k": top_k},
            ) from e
