"""
Test suite for ContextRetriever.

Covers result limits, ordering, determinism, empty-corpus behaviour and
embedding model consistency checks.

System role: Verification of the retrieval step
"""

from unittest.mock import AsyncMock

import pytest

from ragchat.boundary.vdb import IndexEntry, VectorMetadata
from ragchat.core.exceptions import RetrievalError, ValidationError, VectorStoreError
from ragchat.core.retriever import ContextRetriever

SENTENCES = [
    "The capital of France is Paris.",
    "Berlin is the capital of Germany.",
    "Madrid is the capital of Spain.",
    "Rome is the capital of Italy.",
    "Lisbon is the capital of Portugal.",
]


class TestContextRetriever:
    """Test suite for ContextRetriever.retrieve."""

    @pytest.mark.asyncio
    async def test_retrieve_should_return_empty_list_when_nothing_indexed(self, retriever) -> None:
        """Test retrieval over an empty corpus returns no chunks."""
        # Act
        results = await retriever.retrieve("anything", k=3)

        # Assert
        assert results == []

    @pytest.mark.asyncio
    async def test_retrieve_should_return_at_most_k_results(self, pipeline, retriever) -> None:
        """Test retrieval never returns more than k chunks."""
        # Arrange
        for sentence in SENTENCES:
            await pipeline.ingest_text(sentence)

        # Act
        results = await retriever.retrieve("Which city is the capital of France?", k=3)

        # Assert
        assert len(results) == 3

    @pytest.mark.asyncio
    async def test_retrieve_should_order_by_non_increasing_score(self, pipeline, retriever) -> None:
        """Test results are sorted by descending similarity."""
        # Arrange
        for sentence in SENTENCES:
            await pipeline.ingest_text(sentence)

        # Act
        results = await retriever.retrieve("capital cities", k=5)

        # Assert
        scores = [r.similarity_score for r in results]
        assert scores == sorted(scores, reverse=True)

    @pytest.mark.asyncio
    async def test_retrieve_should_be_deterministic(self, pipeline, retriever) -> None:
        """Test two consecutive retrievals return identical ordered payloads."""
        # Arrange
        for sentence in SENTENCES:
            await pipeline.ingest_text(sentence)

        # Act
        first = await retriever.retrieve("capital of Spain", k=3)
        second = await retriever.retrieve("capital of Spain", k=3)

        # Assert
        assert [r.content for r in first] == [r.content for r in second]

    @pytest.mark.asyncio
    async def test_retrieve_should_return_exact_match_first(self, pipeline, retriever) -> None:
        """Test a query identical to an indexed chunk ranks it first."""
        # Arrange
        for sentence in SENTENCES:
            await pipeline.ingest_text(sentence)

        # Act
        results = await retriever.retrieve("Rome is the capital of Italy.", k=3)

        # Assert
        assert results[0].content == "Rome is the capital of Italy."
        assert results[0].similarity_score == pytest.approx(1.0, abs=1e-4)

    @pytest.mark.asyncio
    async def test_retrieve_should_break_ties_by_insertion_order(
        self, embedding_provider, corpus_state, faiss_store
    ) -> None:
        """Test equal scores keep insertion order."""
        # Arrange
        vector = [1.0] + [0.0] * (embedding_provider.dimension - 1)
        entries = [
            IndexEntry(
                vector=vector,
                text=f"chunk {i}",
                metadata=VectorMetadata(
                    embedding_model=embedding_provider.model_id,
                    ingestion_id="ing-1",
                    source="dup.txt",
                    chunk_index=i,
                ),
            )
            for i in range(4)
        ]
        await faiss_store.add(entries)
        corpus_state._has_indexed_content = True
        embedding_provider.embed_query = AsyncMock(return_value=vector)
        retriever = ContextRetriever(embedding_provider, faiss_store, corpus_state)

        # Act
        results = await retriever.retrieve("dup", k=4)

        # Assert
        assert [r.metadata.seq for r in results] == [0, 1, 2, 3]

    @pytest.mark.asyncio
    async def test_retrieve_should_reject_k_below_one(self, retriever) -> None:
        """Test k < 1 is rejected."""
        # Act & Assert
        with pytest.raises(ValidationError):
            await retriever.retrieve("query", k=0)

    @pytest.mark.asyncio
    async def test_retrieve_should_fail_on_embedding_model_mismatch(
        self, pipeline, embedding_provider, faiss_store, corpus_state
    ) -> None:
        """Test vectors from another embedding model are never compared."""
        # Arrange
        await pipeline.ingest_text("The capital of France is Paris.")
        embedding_provider._model_id = "other-model"
        retriever = ContextRetriever(embedding_provider, faiss_store, corpus_state)

        # Act & Assert
        with pytest.raises(RetrievalError, match="different embedding model"):
            await retriever.retrieve("capital", k=3)

    @pytest.mark.asyncio
    async def test_retrieve_should_wrap_vector_store_errors(
        self, embedding_provider, corpus_state
    ) -> None:
        """Test search failures surface as RetrievalError."""
        # Arrange
        index = AsyncMock()
        index.count = AsyncMock(return_value=1)
        index.search = AsyncMock(side_effect=VectorStoreError("boom", operation="search"))
        corpus_state._has_indexed_content = True
        retriever = ContextRetriever(embedding_provider, index, corpus_state)

        # Act & Assert
        with pytest.raises(RetrievalError, match="Vector search failed"):
            await retriever.retrieve("capital", k=3)
