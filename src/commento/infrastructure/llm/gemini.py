"""Google Gemini LLM provider (Generative Language REST API)"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

import requests

from commento.infrastructure.http_client import post_json_with_retries, retry_config_from_dict
from commento.infrastructure.llm.base import LLMProvider

logger = logging.getLogger(__name__)


class GeminiProvider(LLMProvider):
    """Gemini API provider"""

    API_URL = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"
    API_KEY_ENV = "GEMINI_API_KEY"
    DEFAULT_MODEL = "gemini-2.0-flash"

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """Initialize Gemini provider

        Args:
            config: Configuration dictionary with:
                - api_key: Gemini API key (or from GEMINI_API_KEY env)
                - model: Model name (default: "gemini-2.0-flash")
                - temperature: Temperature (default: 0.4)
                - max_tokens: Max output tokens (default: 1000)
                - top_p: Nucleus sampling (default: 0.9)
                - timeout: HTTP timeout in seconds (default: 60)
                - max_attempts / initial_delay / backoff_multiplier / jitter: retry settings
        """
        if config is None:
            config = {}
        super().__init__(config)

        self.api_key = self._resolve_api_key(config)
        self.model = config.get("model") or self.DEFAULT_MODEL
        self.temperature = config.get("temperature", 0.4)
        self.max_tokens = config.get("max_tokens", 1000)
        self.top_p = config.get("top_p", 0.9)
        self.timeout = float(config.get("timeout", 60))
        self.retry = retry_config_from_dict(config)

    def _resolve_api_key(self, config: Dict[str, Any]) -> Optional[str]:
        api_key = config.get("api_key") or os.getenv(self.API_KEY_ENV)
        return api_key.strip() if api_key else None

    def _validate_config(self, config: Dict[str, Any]) -> None:
        """Validate Gemini configuration"""
        if not self._resolve_api_key(config):
            raise ValueError(
                "Gemini API key is required. "
                f"Set {self.API_KEY_ENV} environment variable or provide api_key in config."
            )

        if config.get("model") is not None and not isinstance(config["model"], str):
            raise ValueError("model must be a string")

        if "temperature" in config:
            temp = config["temperature"]
            if not isinstance(temp, (int, float)) or not (0.0 <= temp <= 2.0):
                raise ValueError("temperature must be between 0.0 and 2.0")

        if "max_tokens" in config:
            max_tok = config["max_tokens"]
            if not isinstance(max_tok, int) or max_tok < 1:
                raise ValueError("max_tokens must be a positive integer")

    def generate(self, prompt: str, **kwargs) -> str:
        """Generate response from the Gemini generateContent endpoint

        Args:
            prompt: Input prompt
            **kwargs: Per-call overrides of config; ``timeout`` bounds all attempts

        Returns:
            Generated text response

        Raises:
            RuntimeError: If the request fails or the response carries no text
        """
        model = kwargs.get("model", self.model)
        payload = {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": {
                "temperature": kwargs.get("temperature", self.temperature),
                "maxOutputTokens": kwargs.get("max_tokens", self.max_tokens),
                "topP": kwargs.get("top_p", self.top_p),
            },
        }
        headers = {
            "Content-Type": "application/json",
            "x-goog-api-key": self.api_key,
        }

        try:
            response = post_json_with_retries(
                self.API_URL.format(model=model),
                payload=payload,
                headers=headers,
                timeout=self.timeout,
                retry=self.retry,
                deadline=self.deadline(kwargs),
            )
        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else None
            if status_code in (401, 403):
                raise RuntimeError(f"Gemini API authentication failed: {e}") from e
            raise RuntimeError(f"Gemini API request failed: {e}") from e
        except requests.exceptions.RequestException as e:
            raise RuntimeError(f"Gemini API network error: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise RuntimeError(f"Failed to parse Gemini response JSON: {e}") from e

        return self._extract_text(data)

    def _extract_text(self, data: Dict[str, Any]) -> str:
        block_reason = (data.get("promptFeedback") or {}).get("blockReason")
        if block_reason:
            raise RuntimeError(f"Gemini blocked the prompt: {block_reason}")

        candidates = data.get("candidates") or []
        if not candidates:
            raise RuntimeError("Gemini response contained no candidates")

        parts = (candidates[0].get("content") or {}).get("parts") or []
        text = "".join(part.get("text", "") for part in parts)
        logger.debug(f"Gemini API response received ({len(text)} chars)")
        return text
