"""
Vector store configuration settings.

Selects the vector index backend (local FAISS or remote Qdrant) and the
collection every ingestion appends to.

Dependencies: pydantic, pydantic_settings
System role: Vector database configuration for RAG retrieval
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class VectorStoreSettings(BaseSettings):
    """Vector store configuration (FAISS for local runs, Qdrant for deployments)."""

    model_config = SettingsConfigDict(
        env_prefix="VECTOR_STORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    store_type: str = Field(
        default="faiss",
        description="Vector store type: 'faiss' for in-process, 'qdrant' for a Qdrant server",
    )
    collection_name: str = Field(
        default="rag-chat",
        description="Collection (Qdrant) or index name (FAISS) all uploads append to",
    )
    url: str = Field(default="http://localhost:6333", description="Qdrant endpoint URL")
    api_key: str | None = Field(default=None, description="Qdrant API key")
    persist_directory: str | None = Field(
        default=None,
        description="Directory for FAISS persistence; in-memory only when unset",
    )
    upsert_batch_size: int = Field(
        default=64,
        ge=1,
        description="Points per Qdrant upsert request",
    )
