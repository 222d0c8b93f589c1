"""
Dependency injection container.

Factory functions for FastAPI dependencies. Expensive resources (embedding
provider, vector store, chat model) are built lazily once and shared by all
requests; the lifespan pre-warms them so configuration errors surface at
startup.

Dependencies: ragchat.configs, ragchat.application, ragchat.boundary, ragchat.core
System role: DI container for service injection
"""

from fastapi import Depends

from ragchat.application.services import ChatService, DocumentService
from ragchat.configs import Settings, get_settings


class ServiceCache:
    """Container for cached service instances."""

    def __init__(
        self,
        settings: Settings | None = None,
        embedding_provider=None,
        vector_store=None,
        answer_generator=None,
    ):
        """
        Initialize the cache.

        Prebuilt components, when given, are used instead of the ones the
        configuration would build.
        """
        self._settings = settings
        self._embedding_provider = embedding_provider
        self._vector_store = vector_store
        self._answer_generator = answer_generator
        self._corpus_state = None
        self._ingestion_pipeline = None
        self._retriever = None
        self._orchestrator = None

    @property
    def settings(self) -> Settings:
        """Get settings used to build the services."""
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def embedding_provider(self):
        """Get cached embedding provider."""
        if self._embedding_provider is None:
            from ragchat.boundary.embeddings import create_embedding_provider

            self._embedding_provider = create_embedding_provider(self.settings.embedding)
        return self._embedding_provider

    @property
    def vector_store(self):
        """Get cached vector store."""
        if self._vector_store is None:
            from ragchat.boundary.vdb import get_vector_store

            self._vector_store = get_vector_store(
                self.settings.vector_store,
                embeddings=self.embedding_provider.embeddings,
                dimension=self.embedding_provider.dimension,
            )
        return self._vector_store

    @property
    def answer_generator(self):
        """Get cached answer generator."""
        if self._answer_generator is None:
            from ragchat.boundary.llm import create_answer_generator

            self._answer_generator = create_answer_generator(self.settings.llm)
        return self._answer_generator

    @property
    def corpus_state(self):
        """Get the process-wide corpus state."""
        if self._corpus_state is None:
            from ragchat.core.corpus_state import CorpusState

            self._corpus_state = CorpusState()
        return self._corpus_state

    @property
    def ingestion_pipeline(self):
        """Get cached ingestion pipeline."""
        if self._ingestion_pipeline is None:
            from ragchat.core.ingestion import IngestionPipeline

            self._ingestion_pipeline = IngestionPipeline(
                embedding_provider=self.embedding_provider,
                vector_index=self.vector_store,
                corpus_state=self.corpus_state,
                chunk_size=self.settings.rag.chunk_size,
                chunk_overlap=self.settings.rag.chunk_overlap,
            )
        return self._ingestion_pipeline

    @property
    def retriever(self):
        """Get cached context retriever."""
        if self._retriever is None:
            from ragchat.core.retriever import ContextRetriever

            self._retriever = ContextRetriever(
                embedding_provider=self.embedding_provider,
                vector_index=self.vector_store,
                corpus_state=self.corpus_state,
            )
        return self._retriever

    @property
    def orchestrator(self):
        """Get cached chat orchestrator."""
        if self._orchestrator is None:
            from ragchat.core.rag import ChatOrchestrator

            self._orchestrator = ChatOrchestrator(
                retriever=self.retriever,
                generator=self.answer_generator,
                corpus_state=self.corpus_state,
                top_k=self.settings.rag.top_k,
                history_window=self.settings.rag.history_window,
            )
        return self._orchestrator

    def warm_up(self) -> None:
        """Build every shared resource (raises on missing configuration)."""
        _ = self.ingestion_pipeline
        _ = self.orchestrator

    async def close(self) -> None:
        """Release client resources held by the vector store."""
        if self._vector_store is not None:
            await self._vector_store.close()

    def clear(self) -> None:
        """Clear all cached instances."""
        self._settings = None
        self._embedding_provider = None
        self._vector_store = None
        self._answer_generator = None
        self._corpus_state = None
        self._ingestion_pipeline = None
        self._retriever = None
        self._orchestrator = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_document_service(cache: ServiceCache = Depends(get_service_cache)) -> DocumentService:
    """
    Get document service instance.

    Returns:
        DocumentService: Document service bound to the shared pipeline and corpus
    """
    return DocumentService(
        pipeline=cache.ingestion_pipeline,
        corpus_state=cache.corpus_state,
        max_upload_bytes=cache.settings.rag.max_upload_bytes,
        inline_pasted_text=cache.settings.rag.inline_pasted_text,
    )


def get_chat_service(cache: ServiceCache = Depends(get_service_cache)) -> ChatService:
    """
    Get chat service instance.

    Returns:
        ChatService: Chat service with the shared orchestrator
    """
    return ChatService(orchestrator=cache.orchestrator)
