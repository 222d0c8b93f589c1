"""
Context retriever.

Embeds a chat query with the ingestion model and returns the closest chunks
from the shared index, ordered by similarity with insertion order as the
tie-break so repeated queries over an unchanged index return the same list.

Dependencies: ragchat.boundary
System role: Retrieval step of the RAG flow
"""

import logging

from ragchat.boundary.embeddings import EmbeddingProvider
from ragchat.boundary.vdb import VectorIndex, VectorSearchResult
from ragchat.core.corpus_state import CorpusState
from ragchat.core.exceptions import (
    EmbeddingError,
    RetrievalError,
    ValidationError,
    VectorStoreError,
)
from ragchat.observability.log_utils import log_latency

logger = logging.getLogger(__name__)


class ContextRetriever:
    """Top-k cosine retrieval over the active corpus."""

    def __init__(
        self,
        embedding_provider: EmbeddingProvider,
        vector_index: VectorIndex,
        corpus_state: CorpusState,
    ) -> None:
        self._embedder = embedding_provider
        self._index = vector_index
        self._corpus = corpus_state

    @log_latency("retrieval")
    async def retrieve(self, query: str, k: int) -> list[VectorSearchResult]:
        """
        Retrieve up to k chunks most similar to the query.

        Args:
            query: User question
            k: Maximum number of chunks (must be >= 1)

        Returns:
            list[VectorSearchResult]: Descending similarity, ties by insertion order.
            Empty when nothing has been indexed.

        Raises:
            ValidationError: k < 1
            RetrievalError: Embedding, search or model consistency failure
        """
        if k < 1:
            raise ValidationError("k must be at least 1", field="k", details={"k": k})

        if not self._corpus.snapshot().has_indexed_content:
            logger.info(f"{__name__}:retrieve - Corpus has no indexed content, skipping search")
            return []

        try:
            if await self._index.count() == 0:
                return []
            query_vector = await self._embedder.embed_query(query)
            results = await self._index.search(query_vector, k)
        except EmbeddingError as e:
            raise RetrievalError(f"Failed to embed query: {e.message}", details=dict(e.details)) from e
        except VectorStoreError as e:
            raise RetrievalError(f"Vector search failed: {e.message}", details=dict(e.details)) from e

        for result in results:
            if result.metadata.embedding_model != self._embedder.model_id:
                raise RetrievalError(
                    "Indexed vectors were produced by a different embedding model",
                    details={
                        "query_model": self._embedder.model_id,
                        "index_model": result.metadata.embedding_model,
                    },
                )

        ordered = sorted(results, key=lambda r: (-r.similarity_score, r.metadata.seq))[:k]
        logger.info(
            f"{__name__}:retrieve - Retrieved {len(ordered)} chunks",
            extra={"k": k, "top_score": ordered[0].similarity_score if ordered else None},
        )
        return ordered
