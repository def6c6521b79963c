"""Prompts configuration model."""

from typing import Optional

from pydantic import BaseModel


class PromptsConfig(BaseModel):
    """Configuration for custom prompts.

    Attributes:
        comment: Custom comment prompt template (None = use default)
    """

    comment: Optional[str] = None
