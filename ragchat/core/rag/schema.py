"""
Chat domain models.

Dependencies: pydantic
System role: Types exchanged between the chat orchestrator and the API layer
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


class ChatTurn(BaseModel):
    """One prior message in the conversation."""

    role: Literal["user", "assistant"]
    content: str
    timestamp: datetime | None = None


class Source(BaseModel):
    """Chunk that contributed to an answer."""

    source: str
    page: int | None = None
    chunk_index: int = 0
    score: float


class ChatAnswer(BaseModel):
    """Generated answer plus whether it was grounded in any context."""

    content: str
    used_context: bool = True
    sources: list[Source] = Field(default_factory=list)
