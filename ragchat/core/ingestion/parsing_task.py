"""
Document parsing task using LangChain PyPDFLoader.

Validates that an upload really is a PDF and converts it into one LangChain
Document per page.

Dependencies: langchain_community.document_loaders
System role: First stage of document ingestion pipeline
"""

from pathlib import Path

from langchain_community.document_loaders import PyPDFLoader
from langchain_core.documents import Document

from ragchat.core.exceptions import ParsingError, UnsupportedFormatError

PDF_CONTENT_TYPE = "application/pdf"
PDF_MAGIC = b"%PDF-"


def ensure_pdf(content_type: str | None, head: bytes) -> None:
    """
    Reject non-PDF uploads before anything is parsed, embedded or indexed.

    Args:
        content_type: Declared MIME type of the upload
        head: Leading bytes of the upload

    Raises:
        UnsupportedFormatError: Content type or file signature is not PDF
    """
    if (content_type or "").split(";")[0].strip().lower() != PDF_CONTENT_TYPE:
        raise UnsupportedFormatError("Only PDF files are allowed!", content_type=content_type)
    if not head.startswith(PDF_MAGIC):
        raise UnsupportedFormatError(
            "Uploaded file is not a valid PDF document",
            content_type=content_type,
        )


class ParsingTask:
    """Parse PDF documents into LangChain Documents."""

    def parse(self, file_path: str, source: str | None = None) -> list[Document]:
        """
        Parse PDF document into LangChain Documents, one per page.

        Args:
            file_path: Path to PDF document
            source: Display name recorded as the document source

        Returns:
            list[Document]: Page documents with content and metadata

        Raises:
            ParsingError: When document parsing fails
        """
        path = Path(file_path)
        name = source or path.name
        if not path.exists():
            raise ParsingError(f"File not found: {file_path}", source=name)

        try:
            loader = PyPDFLoader(str(path))
            documents = loader.load()
        except Exception as e:
            raise ParsingError(f"Failed to parse PDF: {e}", source=name) from e

        if not documents:
            raise ParsingError("PDF document contains no pages", source=name)

        for doc in documents:
            doc.metadata["source"] = name
        return documents
