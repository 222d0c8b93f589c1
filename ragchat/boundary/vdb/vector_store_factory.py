"""
Vector store factory for selecting between FAISS (local) and Qdrant (remote).

Depends on VECTOR_STORE_STORE_TYPE environment variable.
Provides consistent interface regardless of underlying implementation.

Dependencies: ragchat.boundary.vdb, ragchat.configs
System role: Vector store instantiation and selection
"""

import logging

from langchain_core.embeddings import Embeddings

from ragchat.boundary.vdb.base import VectorIndex
from ragchat.configs.vector_store import VectorStoreSettings

logger = logging.getLogger(__name__)


def get_vector_store(
    settings: VectorStoreSettings,
    embeddings: Embeddings,
    dimension: int,
) -> VectorIndex:
    """
    Factory function to get vector store based on environment configuration.

    Args:
        settings: Vector store settings
        embeddings: LangChain embeddings (stored with the FAISS wrapper)
        dimension: Embedding dimension shared with the embedding provider

    Returns:
        VectorIndex: Configured vector store instance

    Raises:
        ValueError: If store_type is invalid
    """
    store_type = settings.store_type.lower()

    if store_type == "faiss":
        from ragchat.boundary.vdb.faiss_vectors_store import FAISSVectorsStore

        logger.info(f"{__name__}:get_vector_store - Creating FAISS vector store (in-process mode)")
        return FAISSVectorsStore(
            embeddings=embeddings,
            dimension=dimension,
            index_name=settings.collection_name,
            persist_directory=settings.persist_directory,
        )

    elif store_type == "qdrant":
        from ragchat.boundary.vdb.qdrant_vectors_store import QdrantVectorsStore

        logger.info(f"{__name__}:get_vector_store - Creating Qdrant vector store url={settings.url}")
        return QdrantVectorsStore(
            collection_name=settings.collection_name,
            dimension=dimension,
            url=settings.url,
            api_key=settings.api_key,
            upsert_batch_size=settings.upsert_batch_size,
        )

    else:
        raise ValueError(
            f"Invalid VECTOR_STORE_STORE_TYPE: {store_type}. "
            f"Must be 'faiss' or 'qdrant'."
        )
