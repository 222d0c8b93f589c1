"""
Shared test fixtures and configuration for entire test suite.

Provides: deterministic fake embeddings, in-memory FAISS index, echo answer
generator, wired pipeline/retriever/orchestrator, service cache and temp files
Dependencies: pytest, langchain_core, fastapi
System role: Test infrastructure and fixture management
"""

import tempfile
from pathlib import Path

import pytest
from langchain_core.embeddings import DeterministicFakeEmbedding
from langchain_core.messages import AIMessage
from langchain_core.runnables import RunnableLambda

from ragchat.api.deps import ServiceCache
from ragchat.boundary.embeddings import EmbeddingProvider
from ragchat.boundary.llm import AnswerGenerator
from ragchat.boundary.vdb.faiss_vectors_store import FAISSVectorsStore
from ragchat.configs import Settings
from ragchat.core.corpus_state import CorpusState
from ragchat.core.ingestion import IngestionPipeline
from ragchat.core.rag import ChatOrchestrator
from ragchat.core.retriever import ContextRetriever

EMBEDDING_DIM = 64
EMBEDDING_MODEL = "fake-embedding"


class EchoChatModel:
    """Chat model stand-in that answers with the system prompt it received."""

    def __init__(self) -> None:
        self.calls: list[list] = []
        self.runnable = RunnableLambda(self._respond)

    def _respond(self, messages):
        self.calls.append(list(messages))
        return AIMessage(content=messages[0].content)

    @property
    def call_count(self) -> int:
        return len(self.calls)


def make_pdf(text: str) -> bytes:
    """Build a one-page PDF whose page shows text in Helvetica."""
    content = f"BT /F1 12 Tf 72 720 Td ({text}) Tj ET".encode("latin-1")
    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
        b"/Contents 4 0 R /Resources << /Font << /F1 5 0 R >> >> >>",
        b"<< /Length " + str(len(content)).encode() + b" >>\nstream\n" + content + b"\nendstream",
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]

    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += f"{number} 0 obj\n".encode() + body + b"\nendobj\n"

    xref_offset = len(out)
    out += f"xref\n0 {len(objects) + 1}\n".encode()
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += f"{offset:010d} 00000 n \n".encode()
    out += f"trailer\n<< /Size {len(objects) + 1} /Root 1 0 R >>\n".encode()
    out += f"startxref\n{xref_offset}\n%%EOF\n".encode()
    return bytes(out)


@pytest.fixture
def fake_embeddings() -> DeterministicFakeEmbedding:
    """Deterministic embeddings: same text, same vector."""
    return DeterministicFakeEmbedding(size=EMBEDDING_DIM)


@pytest.fixture
def embedding_provider(fake_embeddings: DeterministicFakeEmbedding) -> EmbeddingProvider:
    return EmbeddingProvider(
        embeddings=fake_embeddings,
        model_id=EMBEDDING_MODEL,
        dimension=EMBEDDING_DIM,
        timeout_seconds=5.0,
    )


@pytest.fixture
def faiss_store(fake_embeddings: DeterministicFakeEmbedding) -> FAISSVectorsStore:
    """In-memory FAISS index."""
    return FAISSVectorsStore(embeddings=fake_embeddings, dimension=EMBEDDING_DIM)


@pytest.fixture
def corpus_state() -> CorpusState:
    return CorpusState()


@pytest.fixture
def echo_model() -> EchoChatModel:
    return EchoChatModel()


@pytest.fixture
def answer_generator(echo_model: EchoChatModel) -> AnswerGenerator:
    return AnswerGenerator(model=echo_model.runnable, model_id="echo", timeout_seconds=5.0)


@pytest.fixture
def pipeline(
    embedding_provider: EmbeddingProvider,
    faiss_store: FAISSVectorsStore,
    corpus_state: CorpusState,
) -> IngestionPipeline:
    return IngestionPipeline(
        embedding_provider=embedding_provider,
        vector_index=faiss_store,
        corpus_state=corpus_state,
        chunk_size=200,
        chunk_overlap=0,
    )


@pytest.fixture
def retriever(
    embedding_provider: EmbeddingProvider,
    faiss_store: FAISSVectorsStore,
    corpus_state: CorpusState,
) -> ContextRetriever:
    return ContextRetriever(
        embedding_provider=embedding_provider,
        vector_index=faiss_store,
        corpus_state=corpus_state,
    )


@pytest.fixture
def orchestrator(
    retriever: ContextRetriever,
    answer_generator: AnswerGenerator,
    corpus_state: CorpusState,
) -> ChatOrchestrator:
    return ChatOrchestrator(
        retriever=retriever,
        generator=answer_generator,
        corpus_state=corpus_state,
        top_k=3,
    )


@pytest.fixture
def app_settings(monkeypatch) -> Settings:
    """Settings with test-sized dimension and no credentials."""
    monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
    monkeypatch.setenv("EMBEDDING_DIMENSION", str(EMBEDDING_DIM))
    monkeypatch.setenv("RAG_MAX_UPLOAD_MB", "1")
    return Settings()


@pytest.fixture
def service_cache(
    app_settings: Settings,
    embedding_provider: EmbeddingProvider,
    faiss_store: FAISSVectorsStore,
    answer_generator: AnswerGenerator,
) -> ServiceCache:
    """Service cache wired to the fake components."""
    return ServiceCache(
        settings=app_settings,
        embedding_provider=embedding_provider,
        vector_store=faiss_store,
        answer_generator=answer_generator,
    )


@pytest.fixture
def pdf_factory():
    """Callable building a one-page PDF from text."""
    return make_pdf


@pytest.fixture
def sample_pdf_bytes() -> bytes:
    return make_pdf("The capital of France is Paris.")


@pytest.fixture
def temp_file():
    """
    Create a temporary file for testing file uploads.

    Yields:
        Path: Path to temporary file
    """
    with tempfile.NamedTemporaryFile(suffix=".txt", delete=False) as f:
        temp_path = Path(f.name)
        f.write(b"test content")

    yield temp_path

    # Cleanup
    if temp_path.exists():
        temp_path.unlink()


@pytest.fixture
def temp_pdf_file(sample_pdf_bytes: bytes):
    """
    Create a temporary single-page PDF.

    Yields:
        Path: Path to temporary PDF file
    """
    with tempfile.NamedTemporaryFile(suffix=".pdf", delete=False) as f:
        temp_path = Path(f.name)
        f.write(sample_pdf_bytes)

    yield temp_path

    if temp_path.exists():
        temp_path.unlink()


@pytest.fixture
def temp_dir():
    """
    Create a temporary upload directory for test files.

    Yields:
        Path: Path to temporary directory
    """
    temp_path = Path(tempfile.mkdtemp(prefix="ragchat_test_"))
    yield temp_path

    # Cleanup
    import shutil
    if temp_path.exists():
        shutil.rmtree(temp_path, ignore_errors=True)
