"""
Answer generator.

Thin async wrapper around a LangChain chat model that turns prompt messages
into answer text, bounded by a timeout and mapped onto GenerationError.

Dependencies: langchain_core, langchain_google_genai
System role: Generation boundary for the chat orchestrator
"""

import asyncio
import logging

from langchain_core.messages import BaseMessage
from langchain_core.output_parsers import StrOutputParser
from langchain_core.runnables import Runnable

from ragchat.configs.llm import LLMSettings
from ragchat.core.exceptions import GenerationError

logger = logging.getLogger(__name__)


class AnswerGenerator:
    """Chat-model call with a hard upper bound on latency."""

    def __init__(
        self,
        model: Runnable,
        model_id: str,
        timeout_seconds: float = 60.0,
    ) -> None:
        """
        Initialize answer generator.

        Args:
            model: LangChain chat model (or any runnable taking messages)
            model_id: Model identifier used in logs
            timeout_seconds: Upper bound for one generation
        """
        self._model_id = model_id
        self._timeout = timeout_seconds
        self._chain = model | StrOutputParser()

    @property
    def model_id(self) -> str:
        return self._model_id

    async def generate(self, messages: list[BaseMessage]) -> str:
        """
        Generate an answer for prepared prompt messages.

        Raises:
            GenerationError: Provider failure or timeout
        """
        logger.info(f"{__name__}:generate - START model={self._model_id}, messages={len(messages)}")
        try:
            answer = await asyncio.wait_for(self._chain.ainvoke(messages), timeout=self._timeout)
        except asyncio.TimeoutError as e:
            logger.error(f"{__name__}:generate - TIMEOUT after {self._timeout}s")
            raise GenerationError(
                f"Answer generation timed out after {self._timeout}s",
                details={"model": self._model_id},
            ) from e
        except Exception as e:
            logger.error(f"{__name__}:generate - FAILED: {type(e).__name__}: {e}")
            raise GenerationError(
                f"Answer generation failed: {e}",
                details={"model": self._model_id},
            ) from e

        logger.info(f"{__name__}:generate - SUCCESS answer_len={len(answer)}")
        return answer


def create_answer_generator(settings: LLMSettings) -> AnswerGenerator:
    """
    Build the answer generator selected by configuration.

    Raises:
        ValueError: Unknown provider or missing credentials
    """
    provider = settings.provider.lower()
    if provider != "google":
        raise ValueError(f"Invalid LLM_PROVIDER: {provider}. Must be 'google'.")

    if not settings.google_api_key:
        raise ValueError("GOOGLE_API_KEY environment variable is required")

    from langchain_google_genai import ChatGoogleGenerativeAI

    model = ChatGoogleGenerativeAI(
        model=settings.model,
        temperature=settings.temperature,
        max_output_tokens=settings.max_tokens,
        max_retries=settings.max_retries,
        google_api_key=settings.google_api_key,
    )
    return AnswerGenerator(
        model=model,
        model_id=settings.model,
        timeout_seconds=settings.timeout_seconds,
    )
