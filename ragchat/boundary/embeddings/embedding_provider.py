"""
Embedding provider.

Wraps a LangChain Embeddings implementation with the invariants the index
relies on: a single model identifier and an exact vector dimension. Calls are
moved off the event loop and bounded by a timeout.

Dependencies: langchain_core, langchain_google_genai, fastapi.concurrency
System role: Embedding boundary shared by ingestion and retrieval
"""

import asyncio
import logging

from fastapi.concurrency import run_in_threadpool
from langchain_core.embeddings import Embeddings
from langchain_google_genai import GoogleGenerativeAIEmbeddings

from ragchat.configs.llm import EmbeddingSettings
from ragchat.core.exceptions import EmbeddingError

logger = logging.getLogger(__name__)


class GeminiEmbeddings(Embeddings):
    """
    Gemini embeddings pinned to one output dimension.

    The Google client only honours output_dimensionality per call, so it is
    passed on every request. Documents and queries use the matching retrieval
    task types.
    """

    def __init__(self, client: GoogleGenerativeAIEmbeddings, dimension: int) -> None:
        self._client = client
        self._dimension = dimension

    def embed_documents(self, texts: list[str]) -> list[list[float]]:
        return self._client.embed_documents(
            texts,
            task_type="RETRIEVAL_DOCUMENT",
            output_dimensionality=self._dimension,
        )

    def embed_query(self, text: str) -> list[float]:
        return self._client.embed_query(
            text,
            task_type="RETRIEVAL_QUERY",
            output_dimensionality=self._dimension,
        )


class EmbeddingProvider:
    """Dimension-checked, timeout-bounded embedding calls for one model."""

    def __init__(
        self,
        embeddings: Embeddings,
        model_id: str,
        dimension: int,
        timeout_seconds: float = 60.0,
    ) -> None:
        """
        Initialize embedding provider.

        Args:
            embeddings: LangChain embeddings implementation
            model_id: Identifier recorded on every index entry
            dimension: Required vector length
            timeout_seconds: Upper bound for a single embed call
        """
        self._embeddings = embeddings
        self._model_id = model_id
        self._dimension = dimension
        self._timeout = timeout_seconds

    @property
    def embeddings(self) -> Embeddings:
        """Underlying LangChain embeddings (handed to vector stores that keep one)."""
        return self._embeddings

    @property
    def model_id(self) -> str:
        return self._model_id

    @property
    def dimension(self) -> int:
        return self._dimension

    async def embed_documents(self, texts: list[str]) -> list[list[float]]:
        """
        Embed chunk texts.

        Raises:
            EmbeddingError: Provider failure, timeout, count or dimension mismatch
        """
        if not texts:
            return []

        vectors = await self._call(self._embeddings.embed_documents, texts, operation="embed_documents")
        if len(vectors) != len(texts):
            raise EmbeddingError(
                "Embedding provider returned a different number of vectors than texts",
                details={"expected": len(texts), "received": len(vectors)},
            )
        for vector in vectors:
            self._check_dimension(vector)
        return [list(v) for v in vectors]

    async def embed_query(self, text: str) -> list[float]:
        """
        Embed a query string with the same model used at ingestion.

        Raises:
            EmbeddingError: Provider failure, timeout or dimension mismatch
        """
        vector = await self._call(self._embeddings.embed_query, text, operation="embed_query")
        self._check_dimension(vector)
        return list(vector)

    async def _call(self, func, payload, operation: str):
        try:
            return await asyncio.wait_for(run_in_threadpool(func, payload), timeout=self._timeout)
        except asyncio.TimeoutError as e:
            logger.error(f"{__name__}:{operation} - TIMEOUT after {self._timeout}s")
            raise EmbeddingError(
                f"Embedding call timed out after {self._timeout}s",
                details={"model": self._model_id, "operation": operation},
            ) from e
        except EmbeddingError:
            raise
        except Exception as e:
            logger.error(f"{__name__}:{operation} - FAILED: {type(e).__name__}: {e}")
            raise EmbeddingError(
                f"Embedding provider failed: {e}",
                details={"model": self._model_id, "operation": operation},
            ) from e

    def _check_dimension(self, vector) -> None:
        if len(vector) != self._dimension:
            raise EmbeddingError(
                "Embedding dimension does not match the configured index dimension",
                details={
                    "model": self._model_id,
                    "expected": self._dimension,
                    "received": len(vector),
                },
            )


def create_embedding_provider(settings: EmbeddingSettings) -> EmbeddingProvider:
    """
    Build the embedding provider selected by configuration.

    Raises:
        ValueError: Unknown provider or missing credentials
    """
    provider = settings.provider.lower()
    if provider != "google":
        raise ValueError(f"Invalid EMBEDDING_PROVIDER: {provider}. Must be 'google'.")

    if not settings.google_api_key:
        raise ValueError("GOOGLE_API_KEY environment variable is required")

    client = GoogleGenerativeAIEmbeddings(model=settings.model, google_api_key=settings.google_api_key)
    embeddings = GeminiEmbeddings(client, dimension=settings.dimension)
    logger.info(
        f"{__name__}:create_embedding_provider - model={settings.model}, dimension={settings.dimension}"
    )
    return EmbeddingProvider(
        embeddings=embeddings,
        model_id=settings.model,
        dimension=settings.dimension,
        timeout_seconds=settings.timeout_seconds,
    )
