"""
Document API endpoints.

Routes: POST /upload-pdf, POST /process-text, GET /corpus

Dependencies: ragchat.application.services.document_service, ragchat.models
System role: Document HTTP API
"""

import logging

from fastapi import APIRouter, Depends, File, UploadFile

from ragchat.api.deps import get_document_service
from ragchat.api.routers.router_utils import temporary_upload
from ragchat.application.services.document_service import DocumentService
from ragchat.core.exceptions import ValidationError
from ragchat.models.document import (
    CorpusStatusResponse,
    ProcessTextRequest,
    ProcessTextResponse,
    UploadPdfResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["documents"])


@router.post("/upload-pdf", response_model=UploadPdfResponse)
async def upload_pdf(
    pdf: UploadFile | None = File(default=None),
    document_service: DocumentService = Depends(get_document_service),
) -> UploadPdfResponse:
    """
    Upload a PDF and index it into the active corpus.

    The upload is validated before it touches disk; the temporary copy is
    removed whether or not ingestion succeeds.

    Raises:
        ValidationError (400): No file
        PayloadTooLargeError (413): File above the size limit
        UnsupportedFormatError (415): Not a PDF
        IngestionError (500): Parsing, embedding or indexing failed
    """
    if pdf is None:
        raise ValidationError("No PDF file provided", field="pdf")

    content = await pdf.read()
    document_service.validate_pdf_upload(content, pdf.content_type)

    with temporary_upload(content, pdf.filename) as file_path:
        result = await document_service.ingest_pdf(file_path, pdf.filename)

    return UploadPdfResponse(
        message="PDF uploaded and processed successfully",
        pages=result.page_count,
        filename=result.source,
        chunks=result.chunk_count,
    )


@router.post("/process-text", response_model=ProcessTextResponse)
async def process_text(
    request: ProcessTextRequest,
    document_service: DocumentService = Depends(get_document_service),
) -> ProcessTextResponse:
    """Add pasted text to the active corpus."""
    length = await document_service.process_text(request.text)
    return ProcessTextResponse(message="Text processed successfully", length=length)


@router.get("/corpus", response_model=CorpusStatusResponse)
async def corpus_status(
    document_service: DocumentService = Depends(get_document_service),
) -> CorpusStatusResponse:
    """Report what the active corpus currently holds."""
    snapshot = document_service.corpus_status()
    return CorpusStatusResponse(
        has_content=not snapshot.is_empty,
        documents=snapshot.document_count,
        chunks=snapshot.chunk_count,
        has_pasted_text=bool(snapshot.pasted_text),
        updated_at=snapshot.updated_at,
    )
