"""LLM providers"""

from commento.infrastructure.llm.base import LLMProvider
from commento.infrastructure.llm.gemini import GeminiProvider
from commento.infrastructure.llm.mock import MockLLMProvider
from commento.infrastructure.llm.openai import OpenAIProvider

__all__ = ["LLMProvider", "GeminiProvider", "MockLLMProvider", "OpenAIProvider"]
