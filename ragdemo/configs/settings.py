"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from dotenv import load_dotenv
from pydantic import Field

from ragdemo.configs.base import BaseSettings
from ragdemo.configs.document_pipeline import DocumentPipelineSettings
from ragdemo.configs.llm import LLMSettings
from ragdemo.configs.server import ServerSettings
from ragdemo.configs.vector_store import VectorStoreSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    default_image_path: str = Field(
        default="/Users/markheckler/files/testimage.jpg",
        description="Image used by /mm and /imagerag when imagePath is omitted",
    )

    # Aggregated settings
    vector_store: VectorStoreSettings = Field(default_factory=VectorStoreSettings)
    llm: LLMSettings = Field(default_factory=LLMSettings)
    document_pipeline: DocumentPipelineSettings = Field(
        default_factory=DocumentPipelineSettings
    )
    server: ServerSettings = Field(default_factory=ServerSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from ragdemo.configs import get_settings
        settings = get_settings()
    """
    # Export .env to os.environ so GOOGLE_API_KEY reaches the Gemini clients
    load_dotenv()
    return Settings()
