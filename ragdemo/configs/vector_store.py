"""
Vector store configuration settings.

Manages Chroma connection parameters, the embedding model used to index
chunks, and retrieval defaults.

Dependencies: pydantic, pydantic_settings
System role: Vector database configuration for RAG retrieval
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class VectorStoreSettings(BaseSettings):
    """Vector store configuration (Chroma server, or in-memory for local runs)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="VECTOR_STORE_",
        case_sensitive=False,
        extra="ignore",
    )

    store_type: str = Field(
        default="chroma",
        description="Vector store type: 'chroma' for a Chroma server, 'memory' for in-process",
    )
    chroma_host: str = Field(default="localhost", description="Chroma server host")
    chroma_port: int = Field(default=8000, description="Chroma server port")
    collection_name: str = Field(
        default="SpringAiCollection",
        description="Chroma collection holding document chunks",
    )
    collections_path: str = Field(
        default="/api/v1/collections",
        description="Chroma admin endpoint listing collections",
    )

    embedding_model: str = Field(
        default="models/text-embedding-004",
        description="Google Gemini embedding model ID",
    )

    top_k: int = Field(default=5, description="Number of top results to retrieve", ge=1)

    @property
    def chroma_url(self) -> str:
        """
        Construct Chroma server base URL.

        Returns:
            str: Base URL without trailing slash
        """
        return f"http://{self.chroma_host}:{self.chroma_port}"
