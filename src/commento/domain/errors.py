"""Errors raised while producing a comment"""

from commento.domain.models.fragment import DetailLevel


class CommentoError(Exception):
    """Base class for comment generation errors."""

    pass


class CommentGenerationError(CommentoError):
    """A comment could not be produced for the requested detail level.

    The message is safe to show to users; ``reason`` holds the internal cause.
    """

    def __init__(self, detail_level: DetailLevel, reason: str = ""):
        self.detail_level = DetailLevel(detail_level)
        self.reason = reason
        super().__init__(self._message())

    def _message(self) -> str:
        return f"Failed to generate {self.detail_level.value} comment"


class GenerationError(CommentGenerationError):
    """The remote model call failed (network, auth or provider error)."""

    pass


class GenerationTimeoutError(GenerationError):
    """The remote model did not answer in time."""

    def _message(self) -> str:
        return f"Timed out generating {self.detail_level.value} comment"


class GenerationCancelledError(CommentGenerationError):
    """Generation was cancelled before it completed."""

    def _message(self) -> str:
        return f"Generation of {self.detail_level.value} comment was cancelled"


class CommentRejectedError(CommentoError):
    """Generated text is not usable as a comment."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Generated comment failed validation: {reason}")
