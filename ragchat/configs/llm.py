"""
Model provider configuration settings.

Embedding and answer-generation model identifiers, credentials and limits.

Dependencies: pydantic, pydantic_settings
System role: External model configuration for ingestion, retrieval and generation
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EmbeddingSettings(BaseSettings):
    """Embedding provider configuration."""

    model_config = SettingsConfigDict(
        env_prefix="EMBEDDING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    provider: str = Field(default="google", description="Embedding provider ('google')")
    model: str = Field(
        default="models/gemini-embedding-001",
        description="Google Gemini embedding model ID (gemini-embedding-001 supports 1024-dim)",
    )
    dimension: int = Field(
        default=1024,
        ge=1,
        description="Embedding vector dimension; every vector must match it exactly",
    )
    timeout_seconds: float = Field(default=60.0, gt=0, description="Upper bound per embed call")
    google_api_key: str | None = Field(
        default=None,
        validation_alias="GOOGLE_API_KEY",
        description="Google API key for Gemini embeddings",
    )


class LLMSettings(BaseSettings):
    """Answer generator configuration."""

    model_config = SettingsConfigDict(
        env_prefix="LLM_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    provider: str = Field(default="google", description="Chat model provider ('google')")
    model: str = Field(default="gemini-2.5-flash", description="Chat model identifier")
    temperature: float = Field(default=0.7, ge=0.0, le=2.0)
    max_tokens: int = Field(default=1000, ge=1, description="Maximum output tokens")
    timeout_seconds: float = Field(default=60.0, gt=0, description="Upper bound per generation")
    max_retries: int = Field(
        default=2,
        ge=0,
        description="Retries performed by the provider client for transient errors",
    )
    google_api_key: str | None = Field(
        default=None,
        validation_alias="GOOGLE_API_KEY",
        description="Google API key for Gemini chat models",
    )
