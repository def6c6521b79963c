"""Extension lifecycle - activation, command registration and teardown"""

from __future__ import annotations

import logging
from typing import Awaitable, Callable, Dict, Optional

from commento.application.comment_service import CommentService
from commento.application.generation_client import CommentGenerator
from commento.application.host import Editor, Notifier
from commento.domain.config import AppConfig
from commento.domain.models.fragment import DetailLevel, GenerationOptions
from commento.domain.prompts.comment_prompts import CommentPromptBuilder
from commento.infrastructure.config.config_manager import ConfigManager
from commento.infrastructure.llm.base import LLMProvider
from commento.infrastructure.llm.factory import LLMProviderFactory

logger = logging.getLogger(__name__)

COMMAND_GENERATE_CONCISE = "commento.generateConcise"
COMMAND_GENERATE_DETAILED = "commento.generateDetailed"

COMMANDS = {
    COMMAND_GENERATE_CONCISE: DetailLevel.CONCISE,
    COMMAND_GENERATE_DETAILED: DetailLevel.DETAILED,
}

Command = Callable[[Optional[Editor]], Awaitable[Optional[str]]]


def create_provider_config(config: AppConfig) -> dict:
    """Create provider configuration dictionary

    Args:
        config: Application configuration

    Returns:
        Provider configuration dictionary
    """
    llm_config = config.llm
    provider_config = {
        "temperature": llm_config.temperature,
        "max_tokens": llm_config.max_tokens,
        "top_p": llm_config.top_p,
        "timeout": llm_config.timeout,
    }
    # Unset values fall back to provider defaults / environment
    if llm_config.model:
        provider_config["model"] = llm_config.model
    if llm_config.api_key:
        provider_config["api_key"] = llm_config.api_key
    provider_config.update(config.retry.model_dump())
    return provider_config


class CommentoExtension:
    """Owns the LLM provider and the two comment commands.

    The provider is built once in activate() and released in deactivate();
    commands only exist between the two.
    """

    def __init__(self, config_manager: ConfigManager, notifier: Notifier):
        self.config_manager = config_manager
        self.notifier = notifier
        self.llm_provider: Optional[LLMProvider] = None
        self.service: Optional[CommentService] = None
        self.commands: Dict[str, Command] = {}

    @property
    def is_active(self) -> bool:
        return self.llm_provider is not None

    def activate(self) -> bool:
        """Build the provider and register commands

        Returns:
            True if commands were registered, False on a configuration error
        """
        config = self.config_manager.config
        try:
            self.llm_provider = LLMProviderFactory.create(
                config.llm.provider, create_provider_config(config)
            )
        except ValueError as e:
            logger.error(f"Activation failed: {e}")
            self.notifier.show_error(f"Commento is not configured: {e} Please check settings.")
            return False

        self.service = CommentService(
            CommentGenerator(self.llm_provider, timeout=config.comments.timeout),
            self.notifier,
            load_options=self.load_generation_options,
            prompt_builder=CommentPromptBuilder(config.prompts.comment),
        )
        for command_id, detail_level in COMMANDS.items():
            self.commands[command_id] = self._make_command(detail_level)

        logger.info(f"Commento activated with {config.llm.provider} provider")
        return True

    def deactivate(self) -> None:
        """Unregister commands and release the provider"""
        self.commands.clear()
        self.service = None
        if self.llm_provider is not None:
            self.llm_provider.close()
            self.llm_provider = None
        logger.debug("Commento deactivated")

    def load_generation_options(self) -> GenerationOptions:
        comments_config = self.config_manager.get_comments_config()
        return GenerationOptions(include_examples=comments_config.include_examples)

    async def execute(self, command_id: str, editor: Optional[Editor]) -> Optional[str]:
        """Run a registered command

        Raises:
            KeyError: If the command is not registered
        """
        if command_id not in self.commands:
            raise KeyError(f"Command not registered: {command_id}")
        return await self.commands[command_id](editor)

    def _make_command(self, detail_level: DetailLevel) -> Command:
        async def command(editor: Optional[Editor]) -> Optional[str]:
            return await self.service.run(editor, detail_level)

        return command

