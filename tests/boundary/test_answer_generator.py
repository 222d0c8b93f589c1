"""
Test suite for AnswerGenerator.

System role: Verification of the generation boundary
"""

import asyncio

import pytest
from langchain_core.messages import AIMessage, HumanMessage, SystemMessage
from langchain_core.runnables import RunnableLambda

from ragchat.boundary.llm import AnswerGenerator, create_answer_generator
from ragchat.configs.llm import LLMSettings
from ragchat.core.exceptions import GenerationError

MESSAGES = [SystemMessage(content="Context: x"), HumanMessage(content="question")]


class TestAnswerGenerator:
    """Test suite for AnswerGenerator.generate."""

    @pytest.mark.asyncio
    async def test_generate_should_return_model_text(self) -> None:
        # Arrange
        generator = AnswerGenerator(RunnableLambda(lambda _: AIMessage(content="answer")), model_id="stub")

        # Act
        answer = await generator.generate(MESSAGES)

        # Assert
        assert answer == "answer"

    @pytest.mark.asyncio
    async def test_generate_should_wrap_model_errors(self) -> None:
        # Arrange
        def fail(_):
            raise RuntimeError("503 from provider")

        generator = AnswerGenerator(RunnableLambda(fail), model_id="stub")

        # Act & Assert
        with pytest.raises(GenerationError, match="503 from provider"):
            await generator.generate(MESSAGES)

    @pytest.mark.asyncio
    async def test_generate_should_time_out(self) -> None:
        # Arrange
        async def slow(_):
            await asyncio.sleep(1)
            return AIMessage(content="late")

        generator = AnswerGenerator(RunnableLambda(slow), model_id="stub", timeout_seconds=0.05)

        # Act & Assert
        with pytest.raises(GenerationError, match="timed out"):
            await generator.generate(MESSAGES)


class TestCreateAnswerGenerator:
    """Test suite for create_answer_generator."""

    def test_should_require_api_key(self, monkeypatch) -> None:
        monkeypatch.delenv("GOOGLE_API_KEY", raising=False)

        with pytest.raises(ValueError, match="GOOGLE_API_KEY"):
            create_answer_generator(LLMSettings())

    def test_should_build_gemini_model(self) -> None:
        generator = create_answer_generator(LLMSettings(GOOGLE_API_KEY="test-key"))

        assert generator.model_id == "gemini-2.5-flash"
