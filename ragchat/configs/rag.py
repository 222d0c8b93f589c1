"""
RAG flow configuration settings.

Retrieval depth, chunking, chat history window and upload limits.

Dependencies: pydantic, pydantic_settings
System role: Tuning knobs for ingestion and the chat orchestrator
"""

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class RAGSettings(BaseSettings):
    """Ingestion and chat orchestration configuration."""

    model_config = SettingsConfigDict(
        env_prefix="RAG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    top_k: int = Field(default=3, ge=1, le=100, description="Chunks retrieved per chat query")
    chunk_size: int = Field(
        default=4000,
        ge=1,
        description="Maximum chunk size in characters before a page is split",
    )
    chunk_overlap: int = Field(default=0, ge=0, description="Overlap between split windows")
    history_window: int = Field(
        default=0,
        ge=0,
        description="Prior chat turns forwarded to the model (0 = current question only)",
    )
    inline_pasted_text: bool = Field(
        default=False,
        description="Keep pasted text as a prompt section instead of indexing it",
    )
    max_upload_mb: int = Field(default=25, ge=1, description="Maximum PDF upload size")

    @model_validator(mode="after")
    def _check_overlap(self) -> "RAGSettings":
        if self.chunk_overlap >= self.chunk_size:
            raise ValueError("chunk_overlap must be smaller than chunk_size")
        return self

    @property
    def max_upload_bytes(self) -> int:
        return self.max_upload_mb * 1024 * 1024
