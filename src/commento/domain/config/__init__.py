"""Configuration models with Pydantic validation."""

from commento.domain.config.app import AppConfig
from commento.domain.config.comments import CommentsConfig
from commento.domain.config.llm import LLMConfig
from commento.domain.config.prompts import PromptsConfig
from commento.domain.config.retry import RetryConfig

__all__ = [
    "AppConfig",
    "LLMConfig",
    "CommentsConfig",
    "PromptsConfig",
    "RetryConfig",
]
