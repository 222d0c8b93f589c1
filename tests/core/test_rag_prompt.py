"""
Test suite for the grounded answer prompt.

System role: Verification of RAG prompt template
"""

from langchain_core.messages import AIMessage, HumanMessage, SystemMessage

from ragchat.core.rag import ChatTurn
from ragchat.core.rag.rag_prompt import RAG_PROMPT, SYSTEM_PROMPT, build_messages


class TestRAGPromptTemplate:
    """Test suite for the RAG prompt template."""

    def test_prompt_should_expect_context_and_question(self) -> None:
        """Test template variables."""
        assert {"context", "question"} <= set(RAG_PROMPT.input_variables)

    def test_system_prompt_should_restrict_answers_to_context(self) -> None:
        """Test the system prompt keeps the model on the supplied context."""
        assert "Only answer based on the available context" in SYSTEM_PROMPT
        assert "politely say so" in SYSTEM_PROMPT
        assert "{context}" in SYSTEM_PROMPT

    def test_build_messages_should_render_context_into_system_message(self) -> None:
        """Test context lands in the system message and the question in the human one."""
        # Act
        messages = build_messages(context="Paris is in France.", question="Where is Paris?")

        # Assert
        assert len(messages) == 2
        assert isinstance(messages[0], SystemMessage)
        assert "Context:\nParis is in France." in messages[0].content
        assert isinstance(messages[1], HumanMessage)
        assert messages[1].content == "Where is Paris?"

    def test_build_messages_should_place_history_between_system_and_question(self) -> None:
        """Test prior turns are converted and kept in order."""
        # Arrange
        history = [
            ChatTurn(role="user", content="Hi"),
            ChatTurn(role="assistant", content="Hello!"),
        ]

        # Act
        messages = build_messages(context="ctx", question="Next?", history=history)

        # Assert
        assert [type(m) for m in messages] == [SystemMessage, HumanMessage, AIMessage, HumanMessage]
        assert messages[1].content == "Hi"
        assert messages[2].content == "Hello!"
