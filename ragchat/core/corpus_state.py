"""
Active corpus state.

Tracks whether any document or pasted text has been loaded. The application
is single-tenant: one CorpusState lives in the service cache and every
request reads the same instance. Ingestions are serialized through its lock,
so concurrent uploads cannot interleave their state updates.

Dependencies: asyncio
System role: Shared corpus bookkeeping for ingestion and chat
"""

import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ragchat.core.ingestion.models import IngestionResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CorpusSnapshot:
    """Point-in-time view of the corpus state."""

    has_indexed_content: bool
    pasted_text: str
    document_count: int
    chunk_count: int
    updated_at: datetime | None

    @property
    def is_empty(self) -> bool:
        return not self.has_indexed_content and not self.pasted_text.strip()


class CorpusState:
    """Mutex-guarded corpus bookkeeping."""

    def __init__(self) -> None:
        self._lock = asyncio.Lock()
        self._has_indexed_content = False
        self._pasted_text = ""
        self._document_count = 0
        self._chunk_count = 0
        self._updated_at: datetime | None = None

    @property
    def lock(self) -> asyncio.Lock:
        """Lock held for the whole duration of an ingestion."""
        return self._lock

    def snapshot(self) -> CorpusSnapshot:
        return CorpusSnapshot(
            has_indexed_content=self._has_indexed_content,
            pasted_text=self._pasted_text,
            document_count=self._document_count,
            chunk_count=self._chunk_count,
            updated_at=self._updated_at,
        )

    def record_ingestion(self, result: "IngestionResult") -> None:
        """Mark indexed content as available after a successful ingestion."""
        self._has_indexed_content = True
        self._document_count += 1
        self._chunk_count += result.chunk_count
        self._updated_at = datetime.now(timezone.utc)
        logger.info(
            f"{__name__}:record_ingestion - Corpus updated",
            extra={
                "ingestion_id": result.ingestion_id,
                "documents": self._document_count,
                "chunks": self._chunk_count,
            },
        )

    def set_pasted_text(self, text: str) -> None:
        """Replace the supplementary pasted text."""
        self._pasted_text = text
        self._updated_at = datetime.now(timezone.utc)
        logger.info(f"{__name__}:set_pasted_text - Pasted text replaced (len={len(text)})")
