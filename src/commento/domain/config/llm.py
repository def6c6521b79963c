"""LLM configuration model."""

from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator


class LLMConfig(BaseModel):
    """Configuration for LLM provider.

    Attributes:
        provider: LLM provider name
        model: Model identifier (None = provider default)
        api_key: API credential (None = from the provider's environment variable)
        temperature: Sampling temperature (0.0-2.0)
        max_tokens: Maximum tokens in response
        top_p: Nucleus sampling parameter (0.0-1.0)
        timeout: HTTP request timeout in seconds
    """

    provider: Literal["mock", "gemini", "openai"] = "gemini"
    model: Optional[str] = None
    api_key: Optional[str] = None
    temperature: float = Field(0.4, ge=0.0, le=2.0)
    max_tokens: int = Field(1000, gt=0, le=100000)
    top_p: float = Field(0.9, ge=0.0, le=1.0)
    timeout: float = Field(60.0, gt=0.0)

    @field_validator("api_key")
    @classmethod
    def _strip_api_key(cls, value: Optional[str]) -> Optional[str]:
        # Blank keys count as missing
        if value is None:
            return None
        value = value.strip()
        return value or None
