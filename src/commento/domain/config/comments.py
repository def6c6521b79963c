"""Comments configuration model."""

from pydantic import BaseModel, Field


class CommentsConfig(BaseModel):
    """Configuration for comment generation.

    Attributes:
        include_examples: Whether generated comments should carry a usage example
        timeout: Seconds to wait for one generated comment before giving up
    """

    include_examples: bool = False
    timeout: float = Field(120.0, gt=0.0)
