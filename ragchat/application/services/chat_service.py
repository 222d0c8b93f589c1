"""
Chat service for grounded Q&A over the active corpus.

Dependencies: ragchat.core.rag
System role: Chat service orchestration layer
"""

import logging

from ragchat.core.rag import ChatAnswer, ChatOrchestrator, ChatTurn

logger = logging.getLogger(__name__)


class ChatService:
    """Chat service delegating each question to the RAG orchestrator."""

    def __init__(self, orchestrator: ChatOrchestrator) -> None:
        self.orchestrator = orchestrator

    async def process_chat(
        self,
        message: str,
        history: list[ChatTurn] | None = None,
    ) -> ChatAnswer:
        """
        Answer one chat message.

        Args:
            message: User's message
            history: Prior turns supplied by the client

        Returns:
            ChatAnswer: Answer text and the sources it was grounded on

        Raises:
            ValidationError: Empty message
            NoContextAvailableError: Nothing uploaded or pasted yet
            RetrievalError, GenerationError: Downstream failures
        """
        logger.info(
            f"{__name__}:process_chat - START",
            extra={"message_len": len(message), "history": len(history or [])},
        )
        return await self.orchestrator.answer(message, history=history or [])
