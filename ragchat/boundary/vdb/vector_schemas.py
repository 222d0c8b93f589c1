"""
Vector database schemas.

Pydantic models for vector operations (entries, metadata, results).
Used for type-safe vector store interactions.

Dependencies: pydantic
System role: Type definitions for vector operations
"""

from typing import Any

from pydantic import BaseModel, Field


class VectorMetadata(BaseModel):
    """
    Metadata attached to each vector.

    embedding_model is validated at retrieval time so vectors produced by a
    different model are never compared with the query vector.
    """

    embedding_model: str = Field(description="Embedding model that produced the vector")
    ingestion_id: str = Field(description="Ingestion that wrote the entry")
    source: str = Field(default="", description="Original filename or text label")
    page: int | None = Field(default=None, description="Page number in source document")
    chunk_index: int = Field(default=0, description="Chunk position within its ingestion")
    seq: int = Field(default=0, description="Insertion sequence number within the index")

    def to_payload(self, text: str) -> dict[str, Any]:
        """Flatten metadata plus text into a store payload."""
        return {"text": text, **self.model_dump()}


class IndexEntry(BaseModel):
    """Vector plus text payload written into the index."""

    vector: list[float] = Field(description="Embedding vector")
    text: str = Field(description="Chunk text payload")
    metadata: VectorMetadata


class VectorSearchResult(BaseModel):
    """Single result from vector search."""

    content: str = Field(description="Chunk text content")
    metadata: VectorMetadata = Field(description="Chunk metadata")
    similarity_score: float = Field(description="Cosine similarity (higher is closer)")
