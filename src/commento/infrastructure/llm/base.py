"""Base LLM provider interface"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class LLMProvider(ABC):
    """Abstract base class for the models that write code comments

    A provider is built once when the extension activates and answers one
    prompt per command. Calls are blocking; the generation client runs them
    in a worker thread.
    """

    def __init__(self, config: Dict[str, Any]):
        """Initialize provider with configuration

        Args:
            config: Provider configuration dictionary

        Raises:
            ValueError: If configuration is invalid (e.g. missing API key)
        """
        self.config = config
        self._validate_config(config)

    def _validate_config(self, config: Dict[str, Any]) -> None:
        """Validate provider configuration

        Raises:
            ValueError: If configuration is invalid
        """
        pass

    @staticmethod
    def deadline(kwargs: Dict[str, Any]) -> Optional[float]:
        """Seconds the caller is willing to wait, from generate() kwargs

        Returns:
            Positive deadline in seconds, or None when the caller waits indefinitely
        """
        value = kwargs.get("timeout")
        if value is None:
            return None
        value = float(value)
        if value <= 0:
            raise ValueError("timeout must be positive")
        return value

    @abstractmethod
    def generate(self, prompt: str, **kwargs) -> str:
        """Return the model's raw answer to a comment prompt

        Args:
            prompt: Complete comment prompt
            **kwargs: Per-call overrides (model, temperature, max_tokens, top_p)
                and ``timeout``, the overall deadline in seconds. Implementations
                must return or raise within that deadline so the worker thread
                does not outlive the command.

        Returns:
            Generated text, possibly wrapped in code fences

        Raises:
            RuntimeError: If generation fails
        """
        pass

    def close(self) -> None:
        """Release resources held by the provider."""
        pass
