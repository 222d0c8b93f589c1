"""
Document request/response schemas.

Dependencies: pydantic
System role: Document API contracts
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class UploadPdfResponse(BaseModel):
    """Response schema for a processed PDF upload."""

    message: str
    pages: int = Field(description="Pages extracted from the PDF")
    filename: str
    chunks: int = Field(description="Chunks written to the index")


class ProcessTextRequest(BaseModel):
    """Request schema for pasted text."""

    text: str = Field(default="", description="Raw text to add to the corpus")


class ProcessTextResponse(BaseModel):
    """Response schema for pasted text."""

    message: str
    length: int


class CorpusStatusResponse(BaseModel):
    """Summary of the active corpus."""

    model_config = ConfigDict(populate_by_name=True)

    has_content: bool = Field(alias="hasContent")
    documents: int
    chunks: int
    has_pasted_text: bool = Field(alias="hasPastedText")
    updated_at: datetime | None = Field(default=None, alias="updatedAt")
