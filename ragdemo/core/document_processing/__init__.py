"""
Document processing pipeline for ingestion.

Resolves a path or URL, parses it into LangChain Documents, splits them into
chunks and hands the chunks to the embedding store.

Dependencies: httpx, langchain_community, langchain_text_splitters
System role: Document ingestion pipeline entrypoint
"""

from .document_ingestor import DocumentIngestor

__all__ = ["DocumentIngestor"]
