"""
Chat orchestrator.

Flow:
1. Snapshot the corpus; refuse when nothing is loaded
2. Retrieve top-k chunks (only when something was indexed)
3. Assemble context: chunk texts, then pasted text under its own header
4. Render the prompt with the optional history window
5. Generate the answer

The generator is never called without context.

Dependencies: ragchat.core, ragchat.boundary.llm
System role: RAG chat orchestration
"""

import logging

from ragchat.boundary.llm import AnswerGenerator
from ragchat.boundary.vdb import VectorSearchResult
from ragchat.core.corpus_state import CorpusState
from ragchat.core.exceptions import NoContextAvailableError, ValidationError
from ragchat.core.rag.rag_prompt import PASTED_TEXT_HEADER, build_messages
from ragchat.core.rag.schema import ChatAnswer, ChatTurn, Source
from ragchat.core.retriever import ContextRetriever
from ragchat.observability.log_utils import log_latency

logger = logging.getLogger(__name__)


def assemble_context(results: list[VectorSearchResult], pasted_text: str = "") -> str:
    """Join retrieved chunk texts and the pasted text section."""
    parts = [r.content for r in results if r.content]
    if pasted_text.strip():
        parts.append(PASTED_TEXT_HEADER + pasted_text)
    return "\n\n".join(parts)


class ChatOrchestrator:
    """Answers chat questions from the active corpus."""

    def __init__(
        self,
        retriever: ContextRetriever,
        generator: AnswerGenerator,
        corpus_state: CorpusState,
        top_k: int = 3,
        history_window: int = 0,
    ) -> None:
        """
        Initialize chat orchestrator.

        Args:
            retriever: Context retriever
            generator: Answer generator
            corpus_state: Shared corpus state
            top_k: Chunks retrieved per question
            history_window: Prior turns forwarded to the model
        """
        self._retriever = retriever
        self._generator = generator
        self._corpus = corpus_state
        self._top_k = top_k
        self._history_window = history_window

    @log_latency("chat.answer")
    async def answer(self, query: str, history: list[ChatTurn] | None = None) -> ChatAnswer:
        """
        Answer a question using retrieved context.

        Raises:
            ValidationError: Empty question
            NoContextAvailableError: Nothing uploaded or pasted, or no usable context
            RetrievalError: Retrieval failed
            GenerationError: Generation failed
        """
        if not query or not query.strip():
            raise ValidationError("No message provided", field="message")

        snapshot = self._corpus.snapshot()
        if snapshot.is_empty:
            logger.info(f"{__name__}:answer - Rejected, corpus is empty")
            raise NoContextAvailableError()

        results: list[VectorSearchResult] = []
        if snapshot.has_indexed_content:
            results = await self._retriever.retrieve(query, self._top_k)

        context = assemble_context(results, snapshot.pasted_text)
        if not context.strip():
            logger.warning(f"{__name__}:answer - Retrieval produced no usable context")
            raise NoContextAvailableError()

        window = (history or [])[-self._history_window:] if self._history_window > 0 else []
        messages = build_messages(context=context, question=query, history=window)

        logger.info(
            f"{__name__}:answer - Generating",
            extra={"chunks": len(results), "context_len": len(context), "history": len(window)},
        )
        content = await self._generator.generate(messages)

        return ChatAnswer(
            content=content,
            used_context=True,
            sources=[
                Source(
                    source=r.metadata.source,
                    page=r.metadata.page,
                    chunk_index=r.metadata.chunk_index,
                    score=r.similarity_score,
                )
                for r in results
            ],
        )
