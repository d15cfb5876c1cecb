"""
Document parsing task using LangChain document loaders.

Picks a loader by file suffix: PDF via PyPDFLoader, Word via Docx2txtLoader,
HTML via BSHTMLLoader, plain-text formats via TextLoader.

Dependencies: langchain_community.document_loaders
System role: Extraction stage of document ingestion pipeline
"""

from pathlib import Path

from langchain_community.document_loaders import (
    BSHTMLLoader,
    Docx2txtLoader,
    PyPDFLoader,
    TextLoader,
)
from langchain_core.document_loaders import BaseLoader
from langchain_core.documents import Document

from ragdemo.core.exceptions import ParsingError

TEXT_SUFFIXES = frozenset({"", ".txt", ".md", ".csv", ".json", ".xml", ".rst", ".log"})
HTML_SUFFIXES = frozenset({".html", ".htm"})
SUPPORTED_SUFFIXES = TEXT_SUFFIXES | HTML_SUFFIXES | {".pdf", ".docx"}


class ParsingTask:
    """Parse local documents into LangChain Documents."""

    def __init__(self, encoding: str = "utf-8") -> None:
        """
        Args:
            encoding: Encoding for text and HTML files
        """
        self._encoding = encoding

    def supports(self, file_path: str) -> bool:
        return Path(file_path).suffix.lower() in SUPPORTED_SUFFIXES

    def _loader_for(self, file_path: str) -> BaseLoader:
        suffix = Path(file_path).suffix.lower()
        if suffix == ".pdf":
            return PyPDFLoader(file_path)
        if suffix == ".docx":
            return Docx2txtLoader(file_path)
        if suffix in HTML_SUFFIXES:
            return BSHTMLLoader(
                file_path,
                open_encoding=self._encoding,
                bs_kwargs={"features": "html.parser"},
            )
        return TextLoader(file_path, encoding=self._encoding)

    def parse(self, file_path: str, source: str | None = None) -> list[Document]:
        """
        Parse document into LangChain Documents.

        Args:
            file_path: Path to a local document
            source: Requested locator recorded as "source" metadata (defaults to file_path)

        Returns:
            list[Document]: Parsed documents with content and metadata

        Raises:
            ParsingError: Unsupported format, unreadable content or no text
        """
        source = source or file_path
        suffix = Path(file_path).suffix.lower()

        if not self.supports(file_path):
            raise ParsingError(
                f"Unsupported file format: {suffix}",
                locator=source,
                file_type=suffix,
            )

        try:
            documents = self._loader_for(file_path).load()
        except Exception as e:
            raise ParsingError(
                f"Failed to parse document: {e}",
                locator=source,
                file_type=suffix or "text",
            ) from e

        documents = [doc for doc in documents if doc.page_content.strip()]
        if not documents:
            raise ParsingError(
                "Document contains no extractable text",
                locator=source,
                file_type=suffix or "text",
            )

        for doc in documents:
            doc.metadata["source"] = source
        return documents
