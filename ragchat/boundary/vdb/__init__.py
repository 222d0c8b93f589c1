"""
Vector database boundary layer.

Provides vector index implementations for storage and retrieval operations.
- FAISSVectorsStore: in-process index (LangChain FAISS)
- QdrantVectorsStore: Qdrant server or embedded client

Dependencies: faiss-cpu, qdrant_client, langchain_community
System role: Vector store adapter for RAG retrieval
"""

from ragchat.boundary.vdb.base import VectorIndex
from ragchat.boundary.vdb.vector_schemas import IndexEntry, VectorMetadata, VectorSearchResult
from ragchat.boundary.vdb.vector_store_factory import get_vector_store

__all__ = [
    "IndexEntry",
    "VectorIndex",
    "VectorMetadata",
    "VectorSearchResult",
    "get_vector_store",
]
