"""
Chat model configuration settings.

Dependencies: pydantic, pydantic_settings
System role: LLM configuration for plain, multimodal and RAG generation
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LLMSettings(BaseSettings):
    """Google Gemini chat model configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="LLM_",
        case_sensitive=False,
        extra="ignore",
    )

    model_id: str = Field(
        default="gemini-2.0-flash",
        description="Gemini model ID (must accept image input for /mm and /imagerag)",
    )
    temperature: float = Field(
        default=0.0,
        description="Model temperature (0.0 for deterministic)",
    )
