"""
Prompt template for grounded answers.

The system message carries the assembled context; prior turns (when a
history window is configured) sit between it and the current question.

Dependencies: langchain_core.prompts
System role: Prompt assembly for the answer generator
"""

from langchain_core.messages import AIMessage, BaseMessage, HumanMessage
from langchain_core.prompts import ChatPromptTemplate, MessagesPlaceholder

from ragchat.core.rag.schema import ChatTurn

SYSTEM_PROMPT = (
    "You are an AI assistant who helps answer user queries based on the provided context. "
    "Only answer based on the available context from the uploaded document or text. "
    "If the answer cannot be found in the context, politely say so.\n\n"
    "Context:\n{context}"
)

PASTED_TEXT_HEADER = "Additional Text Content:\n"

RAG_PROMPT = ChatPromptTemplate.from_messages(
    [
        ("system", SYSTEM_PROMPT),
        MessagesPlaceholder("history", optional=True),
        ("human", "{question}"),
    ]
)


def history_to_messages(history: list[ChatTurn]) -> list[BaseMessage]:
    """Convert chat turns into LangChain messages."""
    messages: list[BaseMessage] = []
    for turn in history:
        if turn.role == "user":
            messages.append(HumanMessage(content=turn.content))
        else:
            messages.append(AIMessage(content=turn.content))
    return messages


def build_messages(context: str, question: str, history: list[ChatTurn] | None = None) -> list[BaseMessage]:
    """Render the grounded prompt into chat messages."""
    return RAG_PROMPT.format_messages(
        context=context,
        question=question,
        history=history_to_messages(history or []),
    )
