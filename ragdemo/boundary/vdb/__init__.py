"""
Vector database boundary layer.

- LangChainEmbeddingStore: add/search adapter over a LangChain vector store
- get_vector_store: Chroma (server) or in-memory backend selection
- CollectionInspector: pass-through to the Chroma admin API

Dependencies: langchain_core, langchain_chroma, chromadb, httpx
System role: Vector store adapter for ingestion and retrieval
"""

from ragdemo.boundary.vdb.collection_inspector import CollectionInspector
from ragdemo.boundary.vdb.embedding_store import LangChainEmbeddingStore

__all__ = ["CollectionInspector", "LangChainEmbeddingStore"]
