"""
Document ingestion.

Exports: IngestionPipeline, IngestionResult, DocumentChunk, ensure_pdf
"""

from ragchat.core.ingestion.models import DocumentChunk, IngestionResult
from ragchat.core.ingestion.parsing_task import ensure_pdf
from ragchat.core.ingestion.pipeline import IngestionPipeline

__all__ = ["DocumentChunk", "IngestionPipeline", "IngestionResult", "ensure_pdf"]
