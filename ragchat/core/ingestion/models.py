"""
Models for the document ingestion pipeline.

Represents a document chunk before vectorization and the outcome of a
completed ingestion.

Dependencies: pydantic
System role: Data structures for document ingestion
"""

from pydantic import BaseModel, ConfigDict, Field


class DocumentChunk(BaseModel):
    """Contiguous span of source text with positional metadata."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(description="Chunk text content")
    source: str = Field(description="Original filename or text label")
    page: int | None = Field(default=None, description="1-based page number for PDF chunks")
    offset: int | None = Field(default=None, description="Character offset within the page or text")
    chunk_index: int = Field(description="Position of the chunk within its ingestion")


class IngestionResult(BaseModel):
    """Result of a successful ingestion."""

    ingestion_id: str = Field(description="Identifier recorded on every written entry")
    source: str = Field(description="Original filename or text label")
    page_count: int = Field(description="Pages parsed (1 for text)")
    chunk_count: int = Field(description="Chunks embedded and written")
    char_count: int = Field(description="Characters of source text")
    processing_time_ms: float = Field(default=0.0, description="Total processing time in milliseconds")
