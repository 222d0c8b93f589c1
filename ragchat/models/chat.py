"""
Chat request/response schemas.

Field names follow the browser client's JSON contract (camelCase on the wire).

Dependencies: pydantic
System role: Chat API contracts
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ChatHistoryMessage(BaseModel):
    """Prior message sent along with a chat request."""

    role: Literal["user", "assistant"] = Field(description="Message role: 'user' or 'assistant'")
    content: str = Field(description="Message content")
    timestamp: datetime | None = None


class ChatRequest(BaseModel):
    """Request schema for chat messages."""

    message: str = Field(default="", description="User question or message")
    history: list[ChatHistoryMessage] = Field(
        default_factory=list,
        description="Prior turns, oldest first",
    )


class SourceResponse(BaseModel):
    """Chunk an answer was grounded on."""

    model_config = ConfigDict(populate_by_name=True)

    source: str
    page: int | None = None
    chunk_index: int = Field(alias="chunkIndex")
    score: float


class ChatResponse(BaseModel):
    """Response schema for chat messages."""

    model_config = ConfigDict(populate_by_name=True)

    response: str
    has_context: bool = Field(alias="hasContext")
    sources: list[SourceResponse] = Field(default_factory=list)
