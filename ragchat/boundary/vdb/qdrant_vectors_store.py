"""
Qdrant vector store.

Stores index entries as Qdrant points in one collection using cosine
distance. The collection is created on first use and its vector size is
checked against the configured embedding dimension.

Dependencies: qdrant_client, tenacity
System role: Remote vector store for deployments
"""

import logging
import uuid

from qdrant_client import AsyncQdrantClient
from qdrant_client.http.exceptions import ResponseHandlingException
from qdrant_client.models import (
    Distance,
    FieldCondition,
    Filter,
    FilterSelector,
    MatchValue,
    PointStruct,
    VectorParams,
)
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential_jitter,
)

from ragchat.boundary.vdb.base import VectorIndex
from ragchat.boundary.vdb.vector_schemas import (
    IndexEntry,
    VectorMetadata,
    VectorSearchResult,
)
from ragchat.core.exceptions import VectorStoreError

logger = logging.getLogger(__name__)

NAMESPACE_RAGCHAT = uuid.UUID("6ba7b810-9dad-11d1-80b4-00c04fd430c8")


def generate_point_id(ingestion_id: str, chunk_index: int) -> str:
    """Deterministic point ID so a retried upsert overwrites instead of duplicating."""
    return str(uuid.uuid5(NAMESPACE_RAGCHAT, f"{ingestion_id}:{chunk_index}"))


class QdrantVectorsStore(VectorIndex):
    """Qdrant-backed vector index."""

    def __init__(
        self,
        collection_name: str,
        dimension: int,
        url: str | None = None,
        api_key: str | None = None,
        upsert_batch_size: int = 64,
        client: AsyncQdrantClient | None = None,
    ) -> None:
        """
        Initialize Qdrant store.

        Args:
            collection_name: Collection every ingestion appends to
            dimension: Vector size of the collection
            url: Qdrant endpoint URL
            api_key: Qdrant API key
            upsert_batch_size: Points per upsert request
            client: Pre-built client (tests use location=":memory:")
        """
        self._collection = collection_name
        self._dimension = dimension
        self._batch_size = upsert_batch_size
        self._client = client or AsyncQdrantClient(url=url, api_key=api_key)
        self._ready = False

    @property
    def dimension(self) -> int:
        return self._dimension

    async def _ensure_collection(self) -> None:
        if self._ready:
            return

        if not await self._client.collection_exists(self._collection):
            await self._client.create_collection(
                collection_name=self._collection,
                vectors_config=VectorParams(size=self._dimension, distance=Distance.COSINE),
            )
            logger.info(f"{__name__}:_ensure_collection - Created collection '{self._collection}'")
        else:
            info = await self._client.get_collection(self._collection)
            vectors = info.config.params.vectors
            size = getattr(vectors, "size", None)
            if size is not None and size != self._dimension:
                raise VectorStoreError(
                    "Qdrant collection dimension does not match configuration",
                    operation="ensure_collection",
                    details={"collection": self._collection, "expected": self._dimension, "found": size},
                )
        self._ready = True

    @retry(
        retry=retry_if_exception_type(ResponseHandlingException),
        stop=stop_after_attempt(3),
        wait=wait_exponential_jitter(initial=0.5, max=5, jitter=1),
        before_sleep=lambda retry_state: logger.warning(
            f"{__name__}:_upsert_batch - Retry {retry_state.attempt_number}/3 after transport error"
        ),
        reraise=True,
    )
    async def _upsert_batch(self, batch: list[PointStruct]) -> None:
        # Point IDs are deterministic, so a retried batch overwrites instead of duplicating.
        await self._client.upsert(collection_name=self._collection, points=batch, wait=True)

    async def add(self, entries: list[IndexEntry]) -> int:
        if not entries:
            return 0

        for entry in entries:
            if len(entry.vector) != self._dimension:
                raise VectorStoreError(
                    "Vector dimension does not match index dimension",
                    operation="add",
                    details={"expected": self._dimension, "received": len(entry.vector)},
                )

        written = 0
        try:
            await self._ensure_collection()
            start_seq = await self.count()

            points = []
            for offset, entry in enumerate(entries):
                metadata = entry.metadata.model_copy(update={"seq": start_seq + offset})
                points.append(
                    PointStruct(
                        id=generate_point_id(metadata.ingestion_id, metadata.chunk_index),
                        vector=entry.vector,
                        payload=metadata.to_payload(entry.text),
                    )
                )

            for i in range(0, len(points), self._batch_size):
                batch = points[i : i + self._batch_size]
                await self._upsert_batch(batch)
                written += len(batch)
                logger.info(f"{__name__}:add - Upserted {written} / {len(points)} points")

        except VectorStoreError:
            raise
        except Exception as e:
            logger.error(
                f"{__name__}:add - FAILED after {written} points: {type(e).__name__}: {e}",
                extra={"collection": self._collection, "written": written},
            )
            raise VectorStoreError(
                f"Qdrant write failed: {e}",
                operation="add",
                details={"written": written},
            ) from e

        return written

    async def search(self, vector: list[float], k: int) -> list[VectorSearchResult]:
        if len(vector) != self._dimension:
            raise VectorStoreError(
                "Vector dimension does not match index dimension",
                operation="search",
                details={"expected": self._dimension, "received": len(vector)},
            )
        try:
            await self._ensure_collection()
            response = await self._client.query_points(
                collection_name=self._collection,
                query=vector,
                limit=k,
                with_payload=True,
            )
        except VectorStoreError:
            raise
        except Exception as e:
            logger.error(f"{__name__}:search - FAILED: {type(e).__name__}: {e}")
            raise VectorStoreError(f"Qdrant search failed: {e}", operation="search") from e

        results = []
        for point in response.points:
            payload = dict(point.payload or {})
            text = payload.pop("text", None)
            if not text:
                logger.warning(f"{__name__}:search - Skipping point without text payload: {point.id}")
                continue
            results.append(
                VectorSearchResult(
                    content=text,
                    metadata=VectorMetadata(**payload),
                    similarity_score=float(point.score),
                )
            )
        return results

    async def delete_ingestion(self, ingestion_id: str) -> None:
        try:
            await self._ensure_collection()
            await self._client.delete(
                collection_name=self._collection,
                points_selector=FilterSelector(
                    filter=Filter(
                        must=[FieldCondition(key="ingestion_id", match=MatchValue(value=ingestion_id))]
                    )
                ),
                wait=True,
            )
        except VectorStoreError:
            raise
        except Exception as e:
            logger.error(f"{__name__}:delete_ingestion - FAILED: {type(e).__name__}: {e}")
            raise VectorStoreError(
                f"Qdrant delete failed: {e}",
                operation="delete",
                details={"ingestion_id": ingestion_id},
            ) from e
        logger.info(f"{__name__}:delete_ingestion - Removed points of ingestion {ingestion_id}")

    async def count(self) -> int:
        try:
            await self._ensure_collection()
            result = await self._client.count(collection_name=self._collection, exact=True)
        except VectorStoreError:
            raise
        except Exception as e:
            raise VectorStoreError(f"Qdrant count failed: {e}", operation="count") from e
        return int(result.count)

    async def close(self) -> None:
        await self._client.close()
