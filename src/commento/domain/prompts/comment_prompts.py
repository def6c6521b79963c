"""Comment prompt templates"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from commento.domain.classifier import classify
from commento.domain.models.fragment import (
    CodeCategory,
    CodeFragment,
    DetailLevel,
    GenerationOptions,
)

MAX_CONTEXT_CHARS = 500

FORMAT_DIRECTIVES: Dict[DetailLevel, str] = {
    DetailLevel.CONCISE: "1-2 lines maximum",
    DetailLevel.DETAILED: "3-5 lines",
}

EXAMPLES_DIRECTIVE = "Include relevant usage examples"
NO_EXAMPLES_DIRECTIVE = "No examples"

# (category, detail level) -> extra focus for the model
REFINEMENTS: Dict[Tuple[CodeCategory, DetailLevel], str] = {
    (CodeCategory.FUNCTION, DetailLevel.CONCISE): "One-line function purpose",
    (CodeCategory.FUNCTION, DetailLevel.DETAILED): "Parameters, returns, and key logic",
    (CodeCategory.CLASS, DetailLevel.CONCISE): "Class responsibility summary",
    (CodeCategory.CLASS, DetailLevel.DETAILED): "Key methods and properties",
}


@dataclass(frozen=True)
class CommentPromptOptions:
    """Options that affect prompt content."""

    detail_level: DetailLevel = DetailLevel.CONCISE
    generation: GenerationOptions = GenerationOptions()
    category: Optional[CodeCategory] = None  # classified from the fragment if None


class CommentPromptBuilder:
    """Builder for comment generation prompts"""

    DEFAULT_COMMENT_PROMPT = """Generate a {detail_level} code comment for the given {language} code snippet, targeting experienced developers. The comment should provide actionable insights and clear explanations.

**Specific Instructions:**
1. **Purpose:** Clearly explain the primary goal and functionality of the code.
2. **Implementation:** Describe key steps, logic, algorithms, and data structures used. Highlight any non-obvious or complex parts. Mention time/space complexity if applicable.
3. **Context:** Explain how this code interacts with other parts of the system and its dependencies.
4. **Alternatives/Trade-offs:** Mention alternative approaches and why the current one was chosen. Discuss trade-offs (e.g., performance vs. readability).
5. **Edge Cases/Error Handling:** Document handling of edge cases, invalid inputs, and potential errors.
6. **Assumptions:** State any assumptions about inputs, environment, or dependencies.
7. **Examples (if requested):** If examples are requested below, provide a brief usage example.
8. **Only return the comment**, do not rewrite the code.

**Formatting Requirements:**
- Use standard {language} comment syntax.
- {format_directive}
- {examples_directive}
- Follow {language} best practices for comments.

**Code Context:**
{context}

**Code:**
```{language}
{code}
```"""

    def __init__(self, custom_prompt: Optional[str] = None):
        """Initialize prompt builder

        Args:
            custom_prompt: Custom prompt template (uses default if None). It is
                formatted with detail_level, language, format_directive,
                examples_directive, context and code.
        """
        self.template = custom_prompt or self.DEFAULT_COMMENT_PROMPT

    def build(
        self, fragment: CodeFragment, options: Optional[CommentPromptOptions] = None
    ) -> str:
        """Build comment prompt for a code fragment

        Args:
            fragment: Selected code with its language and enclosing document
            options: Detail level, generation options and (optionally) a precomputed category

        Returns:
            Formatted prompt string
        """
        options = options or CommentPromptOptions()
        detail_level = DetailLevel(options.detail_level)
        category = options.category or classify(fragment.code)

        prompt = self.template.format(
            detail_level=detail_level.value,
            language=fragment.language,
            format_directive=FORMAT_DIRECTIVES[detail_level],
            examples_directive=self._examples_directive(options.generation),
            context=self._truncate_context(fragment.document_text),
            code=fragment.code,
        )

        refinement = REFINEMENTS.get((category, detail_level))
        if refinement:
            prompt += f"\n\n**Focus:** {refinement}"

        return prompt

    @staticmethod
    def _examples_directive(generation: GenerationOptions) -> str:
        return EXAMPLES_DIRECTIVE if generation.include_examples else NO_EXAMPLES_DIRECTIVE

    @staticmethod
    def _truncate_context(document_text: str) -> str:
        return document_text.strip()[:MAX_CONTEXT_CHARS]
