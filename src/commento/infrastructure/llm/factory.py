"""Factory for creating LLM providers"""

import logging
from typing import Any, Dict

from commento.infrastructure.llm.base import LLMProvider
from commento.infrastructure.llm.gemini import GeminiProvider
from commento.infrastructure.llm.mock import MockLLMProvider
from commento.infrastructure.llm.openai import OpenAIProvider

logger = logging.getLogger(__name__)


class LLMProviderFactory:
    """Factory for creating LLM provider instances"""

    PROVIDERS = {
        "mock": MockLLMProvider,
        "gemini": GeminiProvider,
        "openai": OpenAIProvider,
    }

    @classmethod
    def create(cls, provider_type: str, config: Dict[str, Any] = None) -> LLMProvider:
        """Create LLM provider instance

        Args:
            provider_type: Type of provider (mock, gemini, openai)
            config: Provider configuration

        Returns:
            LLMProvider instance

        Raises:
            ValueError: If provider type is not supported or its configuration is invalid
        """
        if config is None:
            config = {}

        provider_type_lower = provider_type.lower()

        if provider_type_lower not in cls.PROVIDERS:
            available = ", ".join(cls.PROVIDERS.keys())
            raise ValueError(
                f"Unknown LLM provider: {provider_type}. "
                f"Available providers: {available}"
            )

        provider_class = cls.PROVIDERS[provider_type_lower]
        logger.info(f"Creating {provider_type_lower} provider")
        return provider_class(config)
