"""
Document ingestor.

Resolves a path or URL, parses and chunks it, then indexes the chunks.
Nothing is deduplicated: ingesting the same locator twice stores its
chunks twice.

Dependencies: ragdemo.core.document_processing.tasks, ragdemo.boundary.vdb
System role: Populate flow behind /populate
"""

import shutil
from pathlib import Path

from ragdemo.core.document_processing.tasks import ChunkingTask, ParsingTask, UrlDownloadTask
from ragdemo.core.media import is_url, require_local_file
from ragdemo.observability.observer import RagObserver


class DocumentIngestor:
    """
    Ingestion pipeline.

    Pipeline stages:
    1. Resolve locator (download URL to temp file, or check local path)
    2. Parse (LangChain document loaders)
    3. Chunk (RecursiveCharacterTextSplitter)
    4. Store (embedding store add)
    """

    def __init__(
        self,
        embedding_store,
        parsing_task: ParsingTask | None = None,
        chunking_task: ChunkingTask | None = None,
        download_task: UrlDownloadTask | None = None,
        observer: RagObserver | None = None,
    ) -> None:
        """
        Args:
            embedding_store: Object with add(chunks) -> list[str]
            parsing_task: Document parser
            chunking_task: Splitter
            download_task: URL fetcher
            observer: Receives start/complete events
        """
        self._store = embedding_store
        self._parsing_task = parsing_task or ParsingTask()
        self._chunking_task = chunking_task or ChunkingTask()
        self._download_task = download_task or UrlDownloadTask()
        self._observer = observer or RagObserver()

    def ingest(self, locator: str) -> int:
        """
        Ingest one document.

        Args:
            locator: Local path, or URL starting with "http"

        Returns:
            int: Number of chunks stored

        Raises:
            MalformedLocatorError: Unparseable URL
            ResourceNotFoundError: Locator does not resolve
            ParsingError: Unsupported or corrupt content
            StoreWriteError: Store rejected the chunks
        """
        self._observer.ingestion_started(locator)

        if is_url(locator):
            local_path = self._download_task.download(locator)
            try:
                documents = self._parsing_task.parse(local_path, source=locator)
            finally:
                shutil.rmtree(Path(local_path).parent, ignore_errors=True)
        else:
            path = require_local_file(locator)
            documents = self._parsing_task.parse(str(path), source=locator)

        chunks = self._chunking_task.chunk(documents)
        self._store.add(chunks)

        self._observer.ingestion_completed(locator, len(chunks))
        return len(chunks)

    def close(self) -> None:
        """Release the download task's HTTP client."""
        self._download_task.close()
