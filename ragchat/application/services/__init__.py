"""Application services."""

from ragchat.application.services.chat_service import ChatService
from ragchat.application.services.document_service import DocumentService

__all__ = ["ChatService", "DocumentService"]
