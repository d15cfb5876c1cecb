"""
Configuration settings for document ingestion.

Dependencies: pydantic, pydantic_settings
System role: Chunking configuration for the ingestion pipeline
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DocumentPipelineSettings(BaseSettings):
    """Settings for document ingestion pipeline."""

    model_config = SettingsConfigDict(
        env_prefix="DOC_PIPELINE_",
        case_sensitive=False,
        extra="ignore",
    )

    chunk_size: int = Field(
        default=1000,
        description="Maximum chunk size in characters",
    )
    chunk_overlap: int = Field(
        default=100,
        description="Overlap between consecutive chunks",
    )
