"""Comment service - orchestrates comment generation for a selection"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from commento.application.generation_client import CommentGenerator
from commento.application.host import Editor, Notifier
from commento.domain.classifier import classify
from commento.domain.errors import CommentGenerationError, CommentRejectedError
from commento.domain.models.fragment import CodeFragment, DetailLevel, GenerationOptions
from commento.domain.prompts.comment_prompts import CommentPromptBuilder, CommentPromptOptions
from commento.domain.validators.comment_validator import CommentValidator

logger = logging.getLogger(__name__)


class CommentService:
    """Runs classify -> prompt -> generate -> validate and inserts the result"""

    def __init__(
        self,
        generator: CommentGenerator,
        notifier: Notifier,
        load_options: Optional[Callable[[], GenerationOptions]] = None,
        prompt_builder: Optional[CommentPromptBuilder] = None,
        validator: Optional[CommentValidator] = None,
    ):
        """Initialize comment service

        Args:
            generator: Generation client wrapping the LLM provider
            notifier: Host notifications (errors, progress)
            load_options: Reads generation options from configuration on each call
            prompt_builder: Prompt builder (default template if None)
            validator: Comment validator (new instance if None)
        """
        self.generator = generator
        self.notifier = notifier
        self.load_options = load_options or GenerationOptions
        self.prompt_builder = prompt_builder or CommentPromptBuilder()
        self.validator = validator or CommentValidator()

    async def run(self, editor: Optional[Editor], detail_level: DetailLevel) -> Optional[str]:
        """Generate a comment for the editor's selection and insert it above

        Args:
            editor: Active editor (None when there is no active editor)
            detail_level: Requested detail level

        Returns:
            The inserted comment, or None when nothing was inserted
        """
        detail_level = DetailLevel(detail_level)
        if editor is None:
            return None

        fragment = self._read_fragment(editor)
        if fragment.is_blank:
            logger.debug("Empty selection, nothing to comment")
            return None

        try:
            comment = await self.notifier.with_progress(
                f"Generating {detail_level.value} comment...",
                lambda: self.produce_comment(fragment, detail_level),
                cancellable=True,
            )
        except CommentGenerationError as e:
            self._report_failure(detail_level, str(e))
            return None
        except Exception as e:
            logger.error(f"Unexpected error generating {detail_level.value} comment: {e}", exc_info=True)
            self._report_failure(detail_level, f"Failed to generate {detail_level.value} comment")
            return None

        try:
            editor.insert(fragment.start, f"{comment}\n")
        except Exception as e:
            logger.error(f"Failed to insert {detail_level.value} comment: {e}", exc_info=True)
            self._report_failure(detail_level, f"Failed to insert {detail_level.value} comment")
            return None

        logger.info(f"Inserted {detail_level.value} comment ({len(comment)} chars)")
        return comment

    async def produce_comment(self, fragment: CodeFragment, detail_level: DetailLevel) -> str:
        """Build the prompt, call the model and return the validated comment

        Raises:
            CommentGenerationError: If generation fails or the output is rejected
        """
        category = classify(fragment.code)
        logger.debug(f"Classified selection as {category.value}")

        options = CommentPromptOptions(
            detail_level=detail_level,
            generation=self.load_options(),
            category=category,
        )
        prompt = self.prompt_builder.build(fragment, options=options)

        raw = await self.generator.generate(prompt, detail_level)

        try:
            return self.validator.sanitize(raw, fragment.code)
        except CommentRejectedError as e:
            raise CommentGenerationError(detail_level, e.reason) from e

    def _read_fragment(self, editor: Editor) -> CodeFragment:
        return CodeFragment(
            code=editor.get_selection_text(),
            language=editor.language_id,
            document_text=editor.get_document_text(),
            start=editor.get_selection_start(),
        )

    def _report_failure(self, detail_level: DetailLevel, message: str) -> None:
        self.notifier.show_error(f"{detail_level.value} comment failed: {message}")
