"""Chat API endpoints.

Routes:
- POST /chat - Answer a question from the uploaded document or pasted text

Dependencies: ragchat.application.services.chat_service
System role: Chat messaging HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from ragchat.api.deps import get_chat_service
from ragchat.application.services.chat_service import ChatService
from ragchat.core.rag import ChatTurn
from ragchat.models.chat import ChatRequest, ChatResponse, SourceResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["chat"])


@router.post("/chat", response_model=ChatResponse)
async def chat(
    request: ChatRequest,
    chat_service: ChatService = Depends(get_chat_service),
) -> ChatResponse:
    """Send a chat message.

    Flow:
    1. Convert client history into chat turns
    2. Answer through ChatService (retrieval, prompt, generation)
    3. Map ChatAnswer to ChatResponse

    Raises:
        ValidationError (400): Empty message
        NoContextAvailableError (400): Nothing uploaded or pasted yet
        RetrievalError / GenerationError (500): Downstream failure
    """
    history = [
        ChatTurn(role=turn.role, content=turn.content, timestamp=turn.timestamp)
        for turn in request.history
    ]
    answer = await chat_service.process_chat(message=request.message, history=history)

    return ChatResponse(
        response=answer.content,
        has_context=answer.used_context,
        sources=[
            SourceResponse(
                source=s.source,
                page=s.page,
                chunk_index=s.chunk_index,
                score=s.score,
            )
            for s in answer.sources
        ],
    )
