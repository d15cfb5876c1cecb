"""
Text chunking task using RecursiveCharacterTextSplitter.

Splits documents into retrievable chunks while preserving metadata.

Dependencies: langchain_text_splitters
System role: Splitting stage of document ingestion pipeline
"""

from langchain_core.documents import Document
from langchain_text_splitters import RecursiveCharacterTextSplitter


class ChunkingTask:
    """Split documents into chunks of bounded size."""

    def __init__(
        self,
        chunk_size: int = 1000,
        chunk_overlap: int = 100,
    ) -> None:
        """
        Initialize chunking task with splitter configuration.

        Args:
            chunk_size: Maximum chunk size in characters
            chunk_overlap: Overlap between consecutive chunks
        """
        self.chunk_size = chunk_size
        self.chunk_overlap = chunk_overlap
        self._splitter = RecursiveCharacterTextSplitter(
            chunk_size=chunk_size,
            chunk_overlap=chunk_overlap,
            length_function=len,
        )

    def chunk(self, documents: list[Document]) -> list[Document]:
        """
        Split documents into chunks.

        Args:
            documents: LangChain Documents to split

        Returns:
            list[Document]: Chunks carrying their parent's metadata
        """
        if not documents:
            return []
        return self._splitter.split_documents(documents)
