"""
Test suite for ChatService.

System role: Verification of chat service orchestration layer
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from ragchat.application.services.chat_service import ChatService
from ragchat.core.rag import ChatAnswer, ChatTurn


@pytest.fixture
def mock_orchestrator() -> MagicMock:
    orchestrator = MagicMock()
    orchestrator.answer = AsyncMock(return_value=ChatAnswer(content="Paris."))
    return orchestrator


class TestChatService:
    """Test suite for ChatService.process_chat."""

    @pytest.mark.asyncio
    async def test_process_chat_should_delegate_to_orchestrator(self, mock_orchestrator: MagicMock) -> None:
        # Arrange
        service = ChatService(orchestrator=mock_orchestrator)
        history = [ChatTurn(role="user", content="hi")]

        # Act
        answer = await service.process_chat("Capital of France?", history=history)

        # Assert
        assert answer.content == "Paris."
        mock_orchestrator.answer.assert_awaited_once_with("Capital of France?", history=history)

    @pytest.mark.asyncio
    async def test_process_chat_should_default_to_empty_history(self, mock_orchestrator: MagicMock) -> None:
        service = ChatService(orchestrator=mock_orchestrator)

        await service.process_chat("question")

        mock_orchestrator.answer.assert_awaited_once_with("question", history=[])
