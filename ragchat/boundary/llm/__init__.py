"""Answer generation boundary layer."""

from ragchat.boundary.llm.answer_generator import AnswerGenerator, create_answer_generator

__all__ = ["AnswerGenerator", "create_answer_generator"]
