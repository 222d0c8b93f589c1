"""
Embedding boundary layer.

Dependencies: langchain_core, langchain_google_genai
System role: Text-to-vector adapter for ingestion and retrieval
"""

from ragchat.boundary.embeddings.embedding_provider import (
    EmbeddingProvider,
    create_embedding_provider,
)

__all__ = ["EmbeddingProvider", "create_embedding_provider"]
