"""
Dependency injection container.

Builds the service graph once per process and hands it to routes through
FastAPI dependencies.

Dependencies: ragdemo.configs, ragdemo.core, ragdemo.boundary
System role: DI container for service injection
"""

from functools import lru_cache

from ragdemo.configs import Settings, get_settings
from ragdemo.core.document_processing import DocumentIngestor
from ragdemo.core.document_processing.tasks import ChunkingTask, ParsingTask, UrlDownloadTask
from ragdemo.core.rag_orchestrator import RagOrchestrator
from ragdemo.observability.observer import LoggingRagObserver, RagObserver


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self, settings: Settings | None = None):
        self._settings = settings
        self._observer = None
        self._embedding_store = None
        self._chat_client = None
        self._ingestor = None
        self._orchestrator = None
        self._collection_inspector = None

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def observer(self) -> RagObserver:
        if self._observer is None:
            self._observer = LoggingRagObserver()
        return self._observer

    @property
    def embedding_store(self):
        """Get cached embedding store."""
        if self._embedding_store is None:
            from ragdemo.boundary.vdb.vector_store_factory import get_vector_store
            self._embedding_store = get_vector_store(self.settings.vector_store)
        return self._embedding_store

    @property
    def chat_client(self):
        """Get cached chat client."""
        if self._chat_client is None:
            from ragdemo.boundary.llm.chat_client import get_chat_client
            self._chat_client = get_chat_client(self.settings.llm)
        return self._chat_client

    @property
    def ingestor(self) -> DocumentIngestor:
        """Get cached document ingestor."""
        if self._ingestor is None:
            pipeline = self.settings.document_pipeline
            self._ingestor = DocumentIngestor(
                self.embedding_store,
                parsing_task=ParsingTask(),
                chunking_task=ChunkingTask(
                    chunk_size=pipeline.chunk_size,
                    chunk_overlap=pipeline.chunk_overlap,
                ),
                download_task=UrlDownloadTask(),
                observer=self.observer,
            )
        return self._ingestor

    @property
    def orchestrator(self) -> RagOrchestrator:
        """Get cached RAG orchestrator."""
        if self._orchestrator is None:
            self._orchestrator = RagOrchestrator(
                self.embedding_store,
                self.chat_client,
                ingestor=self.ingestor,
                observer=self.observer,
                default_top_k=self.settings.vector_store.top_k,
            )
        return self._orchestrator

    @property
    def collection_inspector(self):
        """Get cached Chroma collection inspector."""
        if self._collection_inspector is None:
            from ragdemo.boundary.vdb.collection_inspector import CollectionInspector
            self._collection_inspector = CollectionInspector(
                base_url=self.settings.vector_store.chroma_url,
                collections_path=self.settings.vector_store.collections_path,
                observer=self.observer,
            )
        return self._collection_inspector

    def clear(self) -> None:
        """Clear all cached instances."""
        if self._collection_inspector is not None:
            self._collection_inspector.close()
        if self._ingestor is not None:
            self._ingestor.close()
        self._observer = None
        self._embedding_store = None
        self._chat_client = None
        self._ingestor = None
        self._orchestrator = None
        self._collection_inspector = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_orchestrator() -> RagOrchestrator:
    """
    Get RAG orchestrator.

    Returns:
        RagOrchestrator: Orchestrator wired to the cached store and chat client
    """
    return get_service_cache().orchestrator


def get_collection_inspector():
    """
    Get Chroma collection inspector.

    Returns:
        CollectionInspector: Admin API client
    """
    return get_service_cache().collection_inspector
