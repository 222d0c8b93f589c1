"""
Test suite for chat API endpoint.

Tests POST /api/chat with FastAPI TestClient and a mocked ChatService.
Covers response mapping, history forwarding and error translation.

System role: Verification of chat HTTP API endpoint
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from ragchat.api.deps import get_chat_service
from ragchat.api.error_handlers import register_exception_handlers
from ragchat.api.routers.chat import router
from ragchat.core.exceptions import GenerationError, NoContextAvailableError, RetrievalError
from ragchat.core.rag import ChatAnswer, ChatTurn, Source


@pytest.fixture
def mock_chat_service() -> MagicMock:
    service = MagicMock()
    service.process_chat = AsyncMock(
        return_value=ChatAnswer(
            content="The capital of France is Paris.",
            used_context=True,
            sources=[Source(source="geo.pdf", page=5, chunk_index=2, score=0.93)],
        )
    )
    return service


@pytest.fixture
def app(mock_chat_service: MagicMock) -> FastAPI:
    """Create FastAPI test application with chat router."""
    app = FastAPI()
    register_exception_handlers(app)
    app.include_router(router, prefix="/api")
    app.dependency_overrides[get_chat_service] = lambda: mock_chat_service
    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Provide TestClient for the FastAPI app."""
    return TestClient(app)


class TestChatEndpoint:
    """Test suite for POST /api/chat."""

    def test_chat_should_return_answer(self, client: TestClient, mock_chat_service: MagicMock) -> None:
        # Act
        response = client.post("/api/chat", json={"message": "What is the capital of France?"})

        # Assert
        assert response.status_code == 200
        assert response.json() == {
            "response": "The capital of France is Paris.",
            "hasContext": True,
            "sources": [{"source": "geo.pdf", "page": 5, "chunkIndex": 2, "score": 0.93}],
        }
        mock_chat_service.process_chat.assert_awaited_once_with(
            message="What is the capital of France?",
            history=[],
        )

    def test_chat_should_forward_history(self, client: TestClient, mock_chat_service: MagicMock) -> None:
        # Act
        client.post(
            "/api/chat",
            json={
                "message": "And Germany?",
                "history": [
                    {"role": "user", "content": "Capital of France?"},
                    {"role": "assistant", "content": "Paris."},
                ],
            },
        )

        # Assert
        history = mock_chat_service.process_chat.call_args.kwargs["history"]
        assert history == [
            ChatTurn(role="user", content="Capital of France?"),
            ChatTurn(role="assistant", content="Paris."),
        ]

    def test_chat_should_return_400_without_context(
        self, client: TestClient, mock_chat_service: MagicMock
    ) -> None:
        # Arrange
        mock_chat_service.process_chat.side_effect = NoContextAvailableError()

        # Act
        response = client.post("/api/chat", json={"message": "hello"})

        # Assert
        assert response.status_code == 400
        assert response.json() == {
            "error": "No document or text content available. Please upload a PDF or enter text first."
        }

    @pytest.mark.parametrize(
        "error",
        [GenerationError("Answer generation failed"), RetrievalError("Vector search failed")],
    )
    def test_chat_should_return_500_on_downstream_failure(
        self, client: TestClient, mock_chat_service: MagicMock, error: Exception
    ) -> None:
        # Arrange
        mock_chat_service.process_chat.side_effect = error

        # Act
        response = client.post("/api/chat", json={"message": "hello"})

        # Assert
        assert response.status_code == 500
        assert response.json() == {"error": error.message}

    def test_chat_should_return_400_for_invalid_history_role(self, client: TestClient) -> None:
        response = client.post(
            "/api/chat",
            json={"message": "hi", "history": [{"role": "system", "content": "x"}]},
        )

        assert response.status_code == 400
        assert "error" in response.json()
