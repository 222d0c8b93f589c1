"""
RAG chat flow.

Exports: ChatOrchestrator, ChatAnswer, ChatTurn, Source
"""

from ragchat.core.rag.orchestrator import ChatOrchestrator
from ragchat.core.rag.schema import ChatAnswer, ChatTurn, Source

__all__ = ["ChatAnswer", "ChatOrchestrator", "ChatTurn", "Source"]
