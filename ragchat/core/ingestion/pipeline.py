"""
Document ingestion pipeline.

Pipeline stages:
1. Parse (PDF only, off the event loop)
2. Chunk (RecursiveCharacterTextSplitter)
3. Embed every chunk
4. Append entries to the vector index
5. Record the ingestion in the corpus state

Stages 3-5 run under the corpus lock. All vectors are computed before the
first write, so an embedding failure never leaves entries behind and never
changes the corpus state. A failed write is rolled back by ingestion id.

Dependencies: ragchat.boundary, ragchat.core.ingestion
System role: Document Ingestion component
"""

import logging
import time
import uuid

from fastapi.concurrency import run_in_threadpool
from langchain_core.documents import Document

from ragchat.boundary.embeddings import EmbeddingProvider
from ragchat.boundary.vdb import IndexEntry, VectorIndex, VectorMetadata
from ragchat.core.corpus_state import CorpusState
from ragchat.core.exceptions import (
    EmbeddingError,
    EmptyDocumentError,
    IngestionError,
    ValidationError,
    VectorStoreError,
)
from ragchat.core.ingestion.chunking_task import ChunkingTask
from ragchat.core.ingestion.models import DocumentChunk, IngestionResult
from ragchat.core.ingestion.parsing_task import ParsingTask
from ragchat.observability.log_utils import log_latency

logger = logging.getLogger(__name__)

PASTED_TEXT_SOURCE = "pasted-text"


class IngestionPipeline:
    """Parse, chunk, embed and index documents into the shared corpus."""

    def __init__(
        self,
        embedding_provider: EmbeddingProvider,
        vector_index: VectorIndex,
        corpus_state: CorpusState,
        chunk_size: int = 4000,
        chunk_overlap: int = 0,
        parsing_task: ParsingTask | None = None,
    ) -> None:
        self._embedder = embedding_provider
        self._index = vector_index
        self._corpus = corpus_state
        self._parsing_task = parsing_task or ParsingTask()
        self._chunking_task = ChunkingTask(chunk_size=chunk_size, chunk_overlap=chunk_overlap)

    @log_latency("ingestion.pdf")
    async def ingest_pdf(self, file_path: str, filename: str) -> IngestionResult:
        """
        Ingest a PDF saved on disk.

        Args:
            file_path: Path of the saved upload
            filename: Original filename recorded as the source

        Returns:
            IngestionResult: Page, chunk and character counts

        Raises:
            ParsingError: PDF could not be read
            EmptyDocumentError: No extractable text
            IngestionError: Embedding or index write failed
        """
        logger.info(f"{__name__}:ingest_pdf - START filename={filename}")
        pages = await run_in_threadpool(self._parsing_task.parse, file_path, filename)
        char_count = sum(len(page.page_content) for page in pages)
        return await self._ingest_documents(pages, source=filename, page_count=len(pages), char_count=char_count)

    @log_latency("ingestion.text")
    async def ingest_text(self, text: str, source: str = PASTED_TEXT_SOURCE) -> IngestionResult:
        """
        Ingest raw text as a single document.

        Raises:
            ValidationError: Text is empty
            EmptyDocumentError: Text is whitespace only
            IngestionError: Embedding or index write failed
        """
        if not text:
            raise ValidationError("No text provided", field="text")

        logger.info(f"{__name__}:ingest_text - START source={source}, length={len(text)}")
        document = Document(page_content=text, metadata={"source": source})
        return await self._ingest_documents([document], source=source, page_count=1, char_count=len(text))

    async def _ingest_documents(
        self,
        documents: list[Document],
        source: str,
        page_count: int,
        char_count: int,
    ) -> IngestionResult:
        start_time = time.perf_counter()

        chunks = self._chunking_task.chunk(documents)
        if not chunks:
            raise EmptyDocumentError("Document contains no extractable text", source=source)
        logger.info(f"{__name__}:_ingest_documents - Chunked into {len(chunks)} chunks", extra={"source": source})

        ingestion_id = str(uuid.uuid4())

        async with self._corpus.lock:
            vectors = await self._embed(chunks, source)
            entries = self._build_entries(chunks, vectors, ingestion_id)
            await self._write(entries, source, ingestion_id)

            result = IngestionResult(
                ingestion_id=ingestion_id,
                source=source,
                page_count=page_count,
                chunk_count=len(chunks),
                char_count=char_count,
                processing_time_ms=(time.perf_counter() - start_time) * 1000,
            )
            self._corpus.record_ingestion(result)

        logger.info(
            f"{__name__}:_ingest_documents - SUCCESS",
            extra={"source": source, "ingestion_id": ingestion_id, "chunks": len(chunks)},
        )
        return result

    async def _embed(self, chunks: list[DocumentChunk], source: str) -> list[list[float]]:
        try:
            return await self._embedder.embed_documents([chunk.text for chunk in chunks])
        except EmbeddingError as e:
            raise IngestionError(
                f"Failed to embed document: {e.message}",
                source=source,
                details=dict(e.details),
            ) from e

    def _build_entries(
        self,
        chunks: list[DocumentChunk],
        vectors: list[list[float]],
        ingestion_id: str,
    ) -> list[IndexEntry]:
        return [
            IndexEntry(
                vector=vector,
                text=chunk.text,
                metadata=VectorMetadata(
                    embedding_model=self._embedder.model_id,
                    ingestion_id=ingestion_id,
                    source=chunk.source,
                    page=chunk.page,
                    chunk_index=chunk.chunk_index,
                ),
            )
            for chunk, vector in zip(chunks, vectors)
        ]

    async def _write(self, entries: list[IndexEntry], source: str, ingestion_id: str) -> None:
        try:
            await self._index.add(entries)
        except VectorStoreError as e:
            logger.error(
                f"{__name__}:_write - Index write failed, rolling back partial write",
                extra={"source": source, "ingestion_id": ingestion_id, "details": e.details},
            )
            await self._rollback(ingestion_id, source)
            raise IngestionError(
                f"Failed to write document to the vector index: {e.message}",
                source=source,
                details={"ingestion_id": ingestion_id, **e.details},
            ) from e

    async def _rollback(self, ingestion_id: str, source: str) -> None:
        try:
            await self._index.delete_ingestion(ingestion_id)
        except VectorStoreError as e:
            # The write error is the one reported to the caller.
            logger.error(
                f"{__name__}:_rollback - FAILED, entries of ingestion {ingestion_id} may remain",
                extra={"source": source, "ingestion_id": ingestion_id, "details": e.details},
            )
