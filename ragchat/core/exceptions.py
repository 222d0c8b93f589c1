"""
Exception hierarchy for the RAG chat application.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class RAGChatException(Exception):
    """Base exception for all RAG chat application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging

        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(RAGChatException):
    """Raised when input validation fails (no file, empty text, empty message)."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class UnsupportedFormatError(RAGChatException):
    """Raised when an upload is not a PDF."""

    def __init__(
        self,
        message: str,
        content_type: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if content_type:
            details["content_type"] = content_type
        super().__init__(message, details)


class PayloadTooLargeError(RAGChatException):
    """Raised when an upload exceeds the configured size limit."""

    pass


class IngestionError(RAGChatException):
    """Base exception for document ingestion errors."""

    def __init__(
        self,
        message: str,
        source: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize ingestion error.

        Args:
            message: Error message
            source: Name of the document or text source that failed
            details: Additional context
        """
        details = details or {}
        if source:
            details["source"] = source
        super().__init__(message, details)


class ParsingError(IngestionError):
    """Raised when PDF parsing fails."""

    pass


class EmptyDocumentError(IngestionError):
    """Raised when a document yields no text to index."""

    pass


class EmbeddingError(RAGChatException):
    """Raised when embedding generation fails or returns a wrong-sized vector."""

    pass


class VectorStoreError(RAGChatException):
    """Raised when vector store operations fail."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize vector store error.

        Args:
            message: Error message
            operation: Operation that failed (add, search, count)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class RetrievalError(RAGChatException):
    """Raised when context retrieval fails."""

    pass


class NoContextAvailableError(RAGChatException):
    """Raised when a chat arrives before any document or text was loaded."""

    def __init__(
        self,
        message: str = "No document or text content available. Please upload a PDF or enter text first.",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)


class GenerationError(RAGChatException):
    """Raised when the answer generator call fails or times out."""

    pass
