"""Mock LLM provider for testing and offline use"""

import time
from typing import Any, Dict

from commento.infrastructure.llm.base import LLMProvider


class MockLLMProvider(LLMProvider):
    """Mock LLM provider that returns predefined responses"""

    DEFAULT_RESPONSE = "// Mock comment describing what the selected code does."

    def __init__(self, config: Dict[str, Any] = None):
        """Initialize mock provider

        Args:
            config: Optional configuration with:
                - delay: Simulated API delay in seconds (default: 0.1)
                - responses: Dict mapping prompts to responses
                - response: Response returned for any other prompt
        """
        if config is None:
            config = {}
        super().__init__(config)
        self.delay = config.get("delay", 0.1)
        self.responses = config.get("responses", {})
        self.response = config.get("response", self.DEFAULT_RESPONSE)
        self.calls = 0

    def _validate_config(self, config: Dict[str, Any]) -> None:
        """Validate mock provider configuration"""
        if "delay" in config and not isinstance(config["delay"], (int, float)):
            raise ValueError("delay must be a number")
        if "delay" in config and config["delay"] < 0:
            raise ValueError("delay must be non-negative")

    def generate(self, prompt: str, **kwargs) -> str:
        """Generate mock response

        Args:
            prompt: Input prompt (used to lookup predefined response)
            **kwargs: Only ``timeout`` is used; a delay longer than it fails

        Returns:
            Mock response text
        """
        self.calls += 1
        deadline = self.deadline(kwargs)
        if deadline is not None and self.delay > deadline:
            time.sleep(deadline)
            raise RuntimeError(f"Mock provider timed out after {deadline}s")
        if self.delay:
            time.sleep(self.delay)

        if prompt in self.responses:
            return self.responses[prompt]
        return self.response
