"""
Vector index interface.

Common async contract implemented by every vector store backend so ingestion
and retrieval never depend on a concrete database.

Dependencies: backend-agnostic
System role: Vector store abstraction
"""

from abc import ABC, abstractmethod

from ragchat.boundary.vdb.vector_schemas import IndexEntry, VectorSearchResult


class VectorIndex(ABC):
    """Append-only vector index with cosine nearest-neighbour search and per-ingestion rollback."""

    @property
    @abstractmethod
    def dimension(self) -> int:
        """Vector dimension the index was created with."""

    @abstractmethod
    async def add(self, entries: list[IndexEntry]) -> int:
        """
        Append entries to the index.

        Entries receive consecutive ``seq`` numbers in the given order.

        Returns:
            int: Number of entries written

        Raises:
            VectorStoreError: Write failed or dimension mismatch
        """

    @abstractmethod
    async def search(self, vector: list[float], k: int) -> list[VectorSearchResult]:
        """
        Return up to k nearest entries by cosine similarity.

        Raises:
            VectorStoreError: Query failed or dimension mismatch
        """

    @abstractmethod
    async def delete_ingestion(self, ingestion_id: str) -> None:
        """
        Remove every entry written by one ingestion.

        Used to roll back a failed write.

        Raises:
            VectorStoreError: Delete failed
        """

    @abstractmethod
    async def count(self) -> int:
        """Number of entries currently stored."""

    async def close(self) -> None:
        """Release client resources."""
        return None
