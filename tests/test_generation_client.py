"""Tests for CommentGenerator"""

import asyncio
import threading

import pytest

from commento.application.generation_client import CommentGenerator
from commento.domain.errors import (
    CommentGenerationError,
    GenerationCancelledError,
    GenerationError,
    GenerationTimeoutError,
)
from commento.domain.models.fragment import DetailLevel
from commento.infrastructure.llm.base import LLMProvider
from commento.infrastructure.llm.mock import MockLLMProvider


class FailingProvider(LLMProvider):
    def __init__(self, error: Exception):
        super().__init__({})
        self.error = error

    def generate(self, prompt: str, **kwargs) -> str:
        raise self.error


class BlockingProvider(LLMProvider):
    """Blocks until released so timeouts and cancellation can be observed"""

    def __init__(self):
        super().__init__({})
        self.release = threading.Event()

    def generate(self, prompt: str, **kwargs) -> str:
        self.release.wait(timeout=5)
        return "// late answer"


def test_returns_raw_text():
    provider = MockLLMProvider({"delay": 0, "responses": {"p": "```\n// hi\n```"}})
    generator = CommentGenerator(provider)
    assert asyncio.run(generator.generate("p", DetailLevel.CONCISE)) == "```\n// hi\n```"
    assert provider.calls == 1


def test_provider_error_becomes_generation_error():
    generator = CommentGenerator(FailingProvider(RuntimeError("401 secret details")))

    with pytest.raises(GenerationError) as exc_info:
        asyncio.run(generator.generate("p", DetailLevel.DETAILED))

    error = exc_info.value
    assert error.detail_level == DetailLevel.DETAILED
    assert str(error) == "Failed to generate detailed comment"
    assert "401" in error.reason
    assert isinstance(error.__cause__, RuntimeError)


def test_single_attempt():
    calls = []

    class CountingProvider(LLMProvider):
        def __init__(self):
            super().__init__({})

        def generate(self, prompt: str, **kwargs) -> str:
            calls.append(prompt)
            raise RuntimeError("boom")

    with pytest.raises(GenerationError):
        asyncio.run(CommentGenerator(CountingProvider()).generate("p", DetailLevel.CONCISE))
    assert calls == ["p"]


def test_timeout():
    provider = BlockingProvider()
    generator = CommentGenerator(provider, timeout=0.05)

    async def scenario():
        try:
            await generator.generate("p", DetailLevel.CONCISE)
        finally:
            provider.release.set()

    with pytest.raises(GenerationTimeoutError) as exc_info:
        asyncio.run(scenario())

    assert isinstance(exc_info.value, CommentGenerationError)
    assert str(exc_info.value) == "Timed out generating concise comment"


def test_cancellation_is_reported_as_its_own_error():
    provider = BlockingProvider()
    generator = CommentGenerator(provider, timeout=None)

    async def scenario():
        task = asyncio.create_task(generator.generate("p", DetailLevel.DETAILED))
        await asyncio.sleep(0.05)
        task.cancel()
        try:
            with pytest.raises(GenerationCancelledError) as exc_info:
                await task
        finally:
            provider.release.set()
        return exc_info.value

    error = asyncio.run(scenario())

    assert error.detail_level == DetailLevel.DETAILED
    assert "cancelled" in str(error)


class KwargsProvider(LLMProvider):
    def __init__(self):
        super().__init__({})
        self.kwargs = []

    def generate(self, prompt: str, **kwargs) -> str:
        self.kwargs.append(kwargs)
        return "// ok"


def test_provider_receives_timeout():
    provider = KwargsProvider()
    asyncio.run(CommentGenerator(provider, timeout=7.5).generate("p", DetailLevel.CONCISE))
    assert provider.kwargs == [{"timeout": 7.5}]


def test_no_timeout_passes_no_deadline():
    provider = KwargsProvider()
    asyncio.run(CommentGenerator(provider, timeout=None).generate("p", DetailLevel.CONCISE))
    assert provider.kwargs == [{}]
