"""
Observer for orchestration events.

The orchestrator, ingestor and collection inspector report what they did
through an injected RagObserver instead of logging inline. The base class
ignores every event; LoggingRagObserver writes them as structured log records.

Dependencies: logging (stdlib), ragdemo.observability.log_utils
System role: Observability collaborator for the RAG flows
"""

import logging

from ragdemo.observability.log_utils import log_with_context


class RagObserver:
    """No-op observer. Subclass and override the events you care about."""

    def ingestion_started(self, locator: str) -> None:
        pass

    def ingestion_completed(self, locator: str, chunk_count: int) -> None:
        pass

    def retrieval_completed(self, query: str, top_k: int, result_count: int) -> None:
        pass

    def generation_completed(self, flow: str, prompt_length: int, answer_length: int) -> None:
        pass

    def caption_generated(self, image_locator: str, mime_type: str, caption: str) -> None:
        pass

    def collections_fetched(self, url: str, body: str) -> None:
        pass


class LoggingRagObserver(RagObserver):
    """Observer that logs each event at INFO."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger("ragdemo.events")

    def ingestion_started(self, locator: str) -> None:
        log_with_context(
            self._logger, logging.INFO,
            f"Populating vector store with {locator}",
            locator=locator,
        )

    def ingestion_completed(self, locator: str, chunk_count: int) -> None:
        log_with_context(
            self._logger, logging.INFO,
            "Vector store population complete!",
            locator=locator,
            chunk_count=chunk_count,
        )

    def retrieval_completed(self, query: str, top_k: int, result_count: int) -> None:
        log_with_context(
            self._logger, logging.INFO,
            f"Retrieved {result_count} documents (top_k={top_k})",
            query=query,
            top_k=top_k,
            result_count=result_count,
        )

    def generation_completed(self, flow: str, prompt_length: int, answer_length: int) -> None:
        log_with_context(
            self._logger, logging.INFO,
            f"Generation complete for {flow}",
            flow=flow,
            prompt_length=prompt_length,
            answer_length=answer_length,
        )

    def caption_generated(self, image_locator: str, mime_type: str, caption: str) -> None:
        log_with_context(
            self._logger, logging.INFO,
            "Image caption generated",
            image_locator=image_locator,
            mime_type=mime_type,
            caption=caption,
        )

    def collections_fetched(self, url: str, body: str) -> None:
        log_with_context(
            self._logger, logging.INFO,
            f"Chroma Collections Response: {body}",
            url=url,
        )
