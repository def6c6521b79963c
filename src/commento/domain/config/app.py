"""Main application configuration model."""

from pydantic import BaseModel, ConfigDict, Field

from commento.domain.config.comments import CommentsConfig
from commento.domain.config.llm import LLMConfig
from commento.domain.config.prompts import PromptsConfig
from commento.domain.config.retry import RetryConfig


class AppConfig(BaseModel):
    """Main application configuration.

    This is the root configuration model that aggregates all configuration sections.
    Validation is performed at load time to fail fast on configuration errors.

    Attributes:
        llm: LLM provider configuration
        comments: Comment generation configuration
        prompts: Custom prompts configuration
        retry: Retry logic configuration
    """

    llm: LLMConfig = Field(default_factory=LLMConfig)
    comments: CommentsConfig = Field(default_factory=CommentsConfig)
    prompts: PromptsConfig = Field(default_factory=PromptsConfig)
    retry: RetryConfig = Field(default_factory=RetryConfig)

    model_config = ConfigDict(
        validate_assignment=True,  # Validate on attribute assignment
        extra="forbid",  # Reject unknown fields
        json_schema_extra={
            "example": {
                "llm": {
                    "provider": "gemini",
                    "model": "gemini-2.0-flash",
                    "api_key": None,
                    "temperature": 0.4,
                    "max_tokens": 1000,
                    "top_p": 0.9,
                    "timeout": 60,
                },
                "comments": {
                    "include_examples": False,
                    "timeout": 120,
                },
                "prompts": {
                    "comment": None,
                },
                "retry": {
                    "max_attempts": 1,
                    "initial_delay": 1.0,
                    "backoff_multiplier": 2.0,
                    "jitter": 0.1,
                },
            }
        },
    )
