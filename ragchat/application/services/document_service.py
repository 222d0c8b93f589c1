"""
Document service for PDF uploads and pasted text.

Validates uploads, hands them to the ingestion pipeline and reports the
state of the active corpus.

Dependencies: ragchat.core.ingestion, ragchat.core.corpus_state
System role: Document ingestion orchestration layer
"""

import logging
from pathlib import Path

from ragchat.core.corpus_state import CorpusSnapshot, CorpusState
from ragchat.core.exceptions import PayloadTooLargeError, ValidationError
from ragchat.core.ingestion import IngestionPipeline, IngestionResult, ensure_pdf

logger = logging.getLogger(__name__)

DEFAULT_PDF_NAME = "document.pdf"


class DocumentService:
    """
    Document service for corpus ingestion.

    Text handling depends on ``inline_pasted_text``: when set, pasted text is
    kept verbatim as a prompt section (replacing any previous text); otherwise
    it is chunked and indexed like a document.
    """

    def __init__(
        self,
        pipeline: IngestionPipeline,
        corpus_state: CorpusState,
        max_upload_bytes: int = 25 * 1024 * 1024,
        inline_pasted_text: bool = False,
    ) -> None:
        """
        Initialize document service.

        Args:
            pipeline: Ingestion pipeline
            corpus_state: Shared corpus state
            max_upload_bytes: Largest accepted PDF upload
            inline_pasted_text: Keep pasted text out of the index
        """
        self.pipeline = pipeline
        self.corpus_state = corpus_state
        self.max_upload_bytes = max_upload_bytes
        self.inline_pasted_text = inline_pasted_text

    def validate_pdf_upload(self, content: bytes, content_type: str | None) -> None:
        """
        Reject uploads that are empty, too large or not PDFs.

        Raises:
            ValidationError: Empty upload
            PayloadTooLargeError: Upload above the configured limit
            UnsupportedFormatError: Not a PDF
        """
        if not content:
            raise ValidationError("No PDF file provided", field="pdf")

        if len(content) > self.max_upload_bytes:
            raise PayloadTooLargeError(
                f"File too large. Maximum size is {self.max_upload_bytes // (1024 * 1024)}MB",
                details={"size": len(content), "limit": self.max_upload_bytes},
            )

        ensure_pdf(content_type, content[:5])

    async def ingest_pdf(self, file_path: str, filename: str | None) -> IngestionResult:
        """
        Ingest a validated PDF saved at file_path.

        Args:
            file_path: Temporary path of the upload
            filename: Client-supplied filename

        Returns:
            IngestionResult: Page and chunk counts
        """
        document_name = Path(filename).name if filename else DEFAULT_PDF_NAME
        logger.info(f"{__name__}:ingest_pdf - START", extra={"filename": document_name})
        return await self.pipeline.ingest_pdf(file_path, document_name)

    async def process_text(self, text: str) -> int:
        """
        Add pasted text to the corpus.

        Returns:
            int: Length of the accepted text

        Raises:
            ValidationError: Empty text
            IngestionError: Indexing failed
        """
        if not text or not text.strip():
            raise ValidationError("No text provided", field="text")

        if self.inline_pasted_text:
            async with self.corpus_state.lock:
                self.corpus_state.set_pasted_text(text)
        else:
            await self.pipeline.ingest_text(text)

        logger.info(
            f"{__name__}:process_text - SUCCESS",
            extra={"length": len(text), "inline": self.inline_pasted_text},
        )
        return len(text)

    def corpus_status(self) -> CorpusSnapshot:
        """Current view of the active corpus."""
        return self.corpus_state.snapshot()
