"""
FAISS vector store for in-process indexing.

Wraps LangChain FAISS with an inner-product index over L2-normalized vectors,
which yields cosine similarity scores. Persists to disk when a directory is
configured, otherwise lives only for the lifetime of the process.

Dependencies: faiss-cpu, numpy, langchain_community.vectorstores
System role: Local vector store for development and single-node deployments
"""

import logging
import threading
import uuid
from pathlib import Path

import faiss
import numpy as np
from fastapi.concurrency import run_in_threadpool
from langchain_community.docstore.in_memory import InMemoryDocstore
from langchain_community.vectorstores import FAISS
from langchain_community.vectorstores.utils import DistanceStrategy
from langchain_core.documents import Document
from langchain_core.embeddings import Embeddings

from ragchat.boundary.vdb.base import VectorIndex
from ragchat.boundary.vdb.vector_schemas import (
    IndexEntry,
    VectorMetadata,
    VectorSearchResult,
)
from ragchat.core.exceptions import VectorStoreError

logger = logging.getLogger(__name__)


def _normalize(vector: list[float]) -> list[float]:
    arr = np.asarray(vector, dtype=np.float32)
    norm = float(np.linalg.norm(arr))
    if norm == 0.0:
        return arr.tolist()
    return (arr / norm).tolist()


class FAISSVectorsStore(VectorIndex):
    """
    FAISS vector store with cosine similarity.

    Search and writes share a lock because flat FAISS indexes are not safe for
    concurrent add and search.
    """

    def __init__(
        self,
        embeddings: Embeddings,
        dimension: int,
        index_name: str = "rag-chat",
        persist_directory: str | None = None,
    ) -> None:
        """
        Initialize FAISS vector store.

        Args:
            embeddings: Embedding function stored with the LangChain wrapper
            dimension: Vector dimension of the index
            index_name: File stem used when persisting
            persist_directory: Directory for persistence (None = memory only)
        """
        self._embeddings = embeddings
        self._dimension = dimension
        self._index_name = index_name
        self._persist_dir = Path(persist_directory) if persist_directory else None
        self._lock = threading.Lock()
        self._vector_store = self._load_or_create_index()

    @property
    def dimension(self) -> int:
        return self._dimension

    def _load_or_create_index(self) -> FAISS:
        """Load existing FAISS index or create an empty one."""
        if self._persist_dir is not None:
            self._persist_dir.mkdir(parents=True, exist_ok=True)
            if (self._persist_dir / f"{self._index_name}.faiss").exists():
                logger.info(f"{__name__}:_load_or_create_index - Loading index from {self._persist_dir}")
                store = FAISS.load_local(
                    str(self._persist_dir),
                    self._embeddings,
                    index_name=self._index_name,
                    allow_dangerous_deserialization=True,
                    distance_strategy=DistanceStrategy.MAX_INNER_PRODUCT,
                )
                if store.index.d != self._dimension:
                    raise VectorStoreError(
                        "Persisted FAISS index dimension does not match configuration",
                        operation="load",
                        details={"expected": self._dimension, "found": store.index.d},
                    )
                logger.info(f"{__name__}:_load_or_create_index - Loaded {store.index.ntotal} vectors")
                return store

        logger.info(f"{__name__}:_load_or_create_index - Creating FAISS IndexFlatIP dimension={self._dimension}")
        return FAISS(
            embedding_function=self._embeddings,
            index=faiss.IndexFlatIP(self._dimension),
            docstore=InMemoryDocstore(),
            index_to_docstore_id={},
            distance_strategy=DistanceStrategy.MAX_INNER_PRODUCT,
        )

    def _check_dimension(self, vector: list[float], operation: str) -> None:
        if len(vector) != self._dimension:
            raise VectorStoreError(
                "Vector dimension does not match index dimension",
                operation=operation,
                details={"expected": self._dimension, "received": len(vector)},
            )

    def _add_sync(self, entries: list[IndexEntry]) -> int:
        with self._lock:
            start_seq = self._vector_store.index.ntotal
            text_embeddings = []
            metadatas = []
            for offset, entry in enumerate(entries):
                self._check_dimension(entry.vector, "add")
                metadata = entry.metadata.model_copy(update={"seq": start_seq + offset})
                text_embeddings.append((entry.text, _normalize(entry.vector)))
                metadatas.append(metadata.model_dump())

            ids = [str(uuid.uuid4()) for _ in entries]
            self._vector_store.add_embeddings(
                text_embeddings=text_embeddings,
                metadatas=metadatas,
                ids=ids,
            )
            if self._persist_dir is not None:
                try:
                    self._vector_store.save_local(str(self._persist_dir), index_name=self._index_name)
                except Exception:
                    # In-memory index must match what is on disk.
                    self._vector_store.delete(ids)
                    raise
            return len(entries)

    def _delete_ingestion_sync(self, ingestion_id: str) -> int:
        with self._lock:
            ids = []
            for doc_id in self._vector_store.index_to_docstore_id.values():
                doc = self._vector_store.docstore.search(doc_id)
                if isinstance(doc, Document) and doc.metadata.get("ingestion_id") == ingestion_id:
                    ids.append(doc_id)
            if not ids:
                return 0

            self._vector_store.delete(ids)
            if self._persist_dir is not None:
                self._vector_store.save_local(str(self._persist_dir), index_name=self._index_name)
            return len(ids)

    def _search_sync(self, vector: list[float], k: int) -> list[VectorSearchResult]:
        with self._lock:
            if self._vector_store.index.ntotal == 0:
                return []
            results = self._vector_store.similarity_search_with_score_by_vector(
                _normalize(vector),
                k=k,
            )
        return [
            VectorSearchResult(
                content=doc.page_content,
                metadata=VectorMetadata(**(doc.metadata or {})),
                similarity_score=float(score),
            )
            for doc, score in results
        ]

    async def add(self, entries: list[IndexEntry]) -> int:
        if not entries:
            return 0
        try:
            written = await run_in_threadpool(self._add_sync, entries)
        except VectorStoreError:
            raise
        except Exception as e:
            logger.error(f"{__name__}:add - FAILED: {type(e).__name__}: {e}", exc_info=True)
            raise VectorStoreError(f"FAISS write failed: {e}", operation="add") from e
        logger.info(f"{__name__}:add - Wrote {written} vectors", extra={"index": self._index_name})
        return written

    async def search(self, vector: list[float], k: int) -> list[VectorSearchResult]:
        self._check_dimension(vector, "search")
        try:
            return await run_in_threadpool(self._search_sync, vector, k)
        except Exception as e:
            logger.error(f"{__name__}:search - FAILED: {type(e).__name__}: {e}", exc_info=True)
            raise VectorStoreError(f"FAISS search failed: {e}", operation="search") from e

    async def delete_ingestion(self, ingestion_id: str) -> None:
        try:
            removed = await run_in_threadpool(self._delete_ingestion_sync, ingestion_id)
        except Exception as e:
            logger.error(f"{__name__}:delete_ingestion - FAILED: {type(e).__name__}: {e}", exc_info=True)
            raise VectorStoreError(
                f"FAISS delete failed: {e}",
                operation="delete",
                details={"ingestion_id": ingestion_id},
            ) from e
        logger.info(f"{__name__}:delete_ingestion - Removed {removed} vectors of ingestion {ingestion_id}")

    async def count(self) -> int:
        return int(self._vector_store.index.ntotal)
