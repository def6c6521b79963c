"""Generation client - one bounded round trip to the LLM provider"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from commento.domain.errors import (
    GenerationCancelledError,
    GenerationError,
    GenerationTimeoutError,
)
from commento.domain.models.fragment import DetailLevel
from commento.infrastructure.llm.base import LLMProvider

logger = logging.getLogger(__name__)


class CommentGenerator:
    """Sends a finished prompt to the provider and returns the raw answer.

    The blocking provider call runs in a worker thread so the caller's event
    loop stays responsive. The provider receives the same timeout so the
    thread finishes with the command. There is no retry at this level.
    """

    def __init__(self, llm_provider: LLMProvider, timeout: Optional[float] = 120.0):
        """Initialize generator

        Args:
            llm_provider: Provider built once at activation
            timeout: Seconds to wait for an answer (None waits indefinitely)
        """
        self.llm_provider = llm_provider
        self.timeout = timeout

    async def generate(self, prompt: str, detail_level: DetailLevel) -> str:
        """Generate raw comment text

        Raises:
            GenerationTimeoutError: If the provider does not answer in time
            GenerationCancelledError: If the task is cancelled
            GenerationError: If the provider call fails
        """
        detail_level = DetailLevel(detail_level)
        try:
            return await asyncio.wait_for(
                asyncio.to_thread(self._call_provider, prompt),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError as e:
            logger.error(f"Generation of {detail_level.value} comment timed out after {self.timeout}s")
            raise GenerationTimeoutError(detail_level, f"timed out after {self.timeout}s") from e
        except asyncio.CancelledError:
            logger.info(f"Generation of {detail_level.value} comment cancelled")
            raise GenerationCancelledError(detail_level, "cancelled") from None
        except Exception as e:
            # Content stays out of the log; only the failure kind is recorded
            logger.error(f"Generation error ({type(e).__name__}) for {detail_level.value} comment")
            raise GenerationError(detail_level, str(e)) from e

    def _call_provider(self, prompt: str) -> str:
        if self.timeout is None:
            return self.llm_provider.generate(prompt)
        return self.llm_provider.generate(prompt, timeout=self.timeout)
