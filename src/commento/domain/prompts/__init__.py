"""Prompt templates for comment generation"""

from commento.domain.prompts.comment_prompts import CommentPromptBuilder, CommentPromptOptions

__all__ = ["CommentPromptBuilder", "CommentPromptOptions"]
